"""Tests for package identity and manifest derivation."""

from __future__ import annotations

import pytest

from licensegen.identity import build_manifest, resolve_identity
from licensegen.models import AnswerRecord


def test_spdx_identity_uses_identifier_verbatim(mit_answers: AnswerRecord) -> None:
    identity = resolve_identity(mit_answers)

    assert identity.name == "MIT"
    assert identity.full_name == "@license-project/MIT"
    assert identity.keywords == ("license-project", "license", "spdx", "MIT")


def test_unlisted_identity_joins_short_name_and_version(blueoak_answers: AnswerRecord) -> None:
    identity = resolve_identity(blueoak_answers)

    assert identity.name == "BlueOak-1.0.0"
    assert identity.full_name == "@license-project/BlueOak-1.0.0"
    assert "spdx" not in identity.keywords
    assert identity.keywords == ("license-project", "license", "BlueOak-1.0.0")


def test_unlisted_identity_with_empty_version_keeps_separator() -> None:
    answers = AnswerRecord(
        is_spdx=False,
        short_name="ISC",
        version="",
        long_name="ISC License",
        author_name="C",
        author_email="c@x.com",
        license_accepted=True,
    )

    assert resolve_identity(answers).name == "ISC-"


@pytest.mark.parametrize("spdx_id", ["Apache-2.0", "GPL-3.0-or-later", "CC-BY-4.0", "0BSD"])
def test_spdx_names_always_equal_identifier(mit_answers: AnswerRecord, spdx_id: str) -> None:
    mit_answers.spdx_id = spdx_id

    identity = resolve_identity(mit_answers)

    assert identity.name == spdx_id
    assert "spdx" in identity.keywords


def test_manifest_fields_follow_identity(mit_answers: AnswerRecord) -> None:
    identity = resolve_identity(mit_answers)

    manifest = build_manifest(identity, mit_answers)
    data = manifest.to_dict()

    assert list(data) == [
        "name",
        "version",
        "description",
        "keywords",
        "license",
        "author",
        "esnext",
        "main",
        "repository",
    ]
    assert data["name"] == "@license-project/MIT"
    assert data["version"] == "1.0.0"
    assert data["description"] == "The MIT License"
    assert data["keywords"] == ["license-project", "license", "spdx", "MIT"]
    assert data["license"] == "CC0-1.0"
    assert data["author"] == {"name": "A", "email": "a@x.com"}
    assert data["esnext"] == "index.mjs"
    assert data["main"] == "index.js"
    assert data["repository"] == {"type": "git", "url": "https://github.com/license-project/MIT"}


def test_manifest_repository_url_uses_derived_name(blueoak_answers: AnswerRecord) -> None:
    identity = resolve_identity(blueoak_answers)

    manifest = build_manifest(identity, blueoak_answers)

    assert manifest.repository.url == "https://github.com/license-project/BlueOak-1.0.0"
