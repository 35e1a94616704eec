"""Derive the canonical package identity and manifest from interview answers."""

from __future__ import annotations

from .constants import (
    BASE_KEYWORDS,
    PACKAGE_VERSION,
    SCOPE,
    SPDX_KEYWORD,
    WAIVER_LICENSE_ID,
    repository_url,
)
from .models import AnswerRecord, Author, PackageIdentity, PackageManifest, Repository


def package_name(answers: AnswerRecord) -> str:
    """Return the SPDX id, or ``<short name>-<version>`` for unlisted licenses."""
    if answers.is_spdx:
        return answers.spdx_id or ""
    return f"{answers.short_name}-{answers.version}"


def resolve_identity(answers: AnswerRecord) -> PackageIdentity:
    name = package_name(answers)
    keywords = [
        *BASE_KEYWORDS,
        SPDX_KEYWORD if answers.is_spdx else None,
        name,
    ]
    return PackageIdentity(
        name=name,
        full_name=f"{SCOPE}/{name}",
        keywords=tuple(keyword for keyword in keywords if keyword is not None),
    )


def build_manifest(identity: PackageIdentity, answers: AnswerRecord) -> PackageManifest:
    """Build the ``package.json`` descriptor for ``identity``."""
    return PackageManifest(
        name=identity.full_name,
        version=PACKAGE_VERSION,
        description=answers.long_name,
        keywords=identity.keywords,
        license=WAIVER_LICENSE_ID,
        author=Author(name=answers.author_name, email=answers.author_email),
        repository=Repository(url=repository_url(identity.name)),
    )


__all__ = ["build_manifest", "package_name", "resolve_identity"]
