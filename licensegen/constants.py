"""Shared constants for generated License Project packages."""

from __future__ import annotations

NAMESPACE = "license-project"
SCOPE = f"@{NAMESPACE}"

PACKAGE_VERSION = "1.0.0"
WAIVER_LICENSE_ID = "CC0-1.0"
WAIVER_URL = "http://creativecommons.org/publicdomain/zero/1.0/"

BASE_KEYWORDS: tuple[str, ...] = (NAMESPACE, "license")
SPDX_KEYWORD = "spdx"

MANIFEST_FILENAME = "package.json"
SOURCE_MODULE_FILENAME = "index.mjs"
COMPILED_MODULE_FILENAME = "index.js"
LICENSE_FILENAME = "LICENSE"

# Order matters: files are written and staged in this sequence.
ARTIFACT_FILENAMES: tuple[str, ...] = (
    MANIFEST_FILENAME,
    SOURCE_MODULE_FILENAME,
    COMPILED_MODULE_FILENAME,
    LICENSE_FILENAME,
)

COMMIT_MESSAGE = f"Initial commit (by {SCOPE}/generator)"
REMOTE_NAME = "origin"


def repository_url(name: str) -> str:
    """Return the browsable repository URL recorded in the manifest."""
    return f"https://github.com/{NAMESPACE}/{name}"


def remote_url(name: str) -> str:
    """Return the SSH URL configured as the ``origin`` remote."""
    return f"git@github.com:{NAMESPACE}/{name}.git"


__all__ = [
    "ARTIFACT_FILENAMES",
    "BASE_KEYWORDS",
    "COMMIT_MESSAGE",
    "COMPILED_MODULE_FILENAME",
    "LICENSE_FILENAME",
    "MANIFEST_FILENAME",
    "NAMESPACE",
    "PACKAGE_VERSION",
    "REMOTE_NAME",
    "SCOPE",
    "SOURCE_MODULE_FILENAME",
    "SPDX_KEYWORD",
    "WAIVER_LICENSE_ID",
    "WAIVER_URL",
    "remote_url",
    "repository_url",
]
