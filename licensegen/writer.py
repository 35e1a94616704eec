"""Materializes a generated package as a directory of artifacts."""

from __future__ import annotations

import json
from pathlib import Path

from .constants import (
    COMPILED_MODULE_FILENAME,
    LICENSE_FILENAME,
    MANIFEST_FILENAME,
    SOURCE_MODULE_FILENAME,
)
from .logging import get_logger
from .models import ArtifactSet, GeneratedModule, PackageIdentity, PackageManifest


def render_manifest(manifest: PackageManifest) -> str:
    """Serialize ``manifest`` with 4-space indentation in its declared key order."""
    return json.dumps(manifest.to_dict(), indent=4, ensure_ascii=False)


class ArtifactWriter:
    """Creates ``<root>/<name>/`` and writes the four package files into it."""

    def __init__(self) -> None:
        self.logger = get_logger("writer")

    def write(
        self,
        root: Path,
        identity: PackageIdentity,
        manifest: PackageManifest,
        module: GeneratedModule,
        license_file_text: str,
    ) -> ArtifactSet:
        """Write the package; raises ``FileExistsError`` if the directory exists.

        Nothing is removed when a write fails part way through.
        """
        package_dir = Path(root) / identity.name
        package_dir.mkdir()
        self.logger.debug("Created %s", package_dir)

        contents = (
            (MANIFEST_FILENAME, render_manifest(manifest)),
            (SOURCE_MODULE_FILENAME, module.source_form),
            (COMPILED_MODULE_FILENAME, module.compiled_form),
            (LICENSE_FILENAME, license_file_text),
        )
        artifacts = ArtifactSet(root=package_dir)
        for filename, text in contents:
            path = package_dir / filename
            _write_text(path, text)
            artifacts.files[filename] = path
            self.logger.debug("Wrote %s (%d chars)", path, len(text))
        return artifacts


def _write_text(path: Path, text: str) -> None:
    # newline="" keeps the text byte-for-byte on every platform.
    with path.open("x", encoding="utf-8", newline="") as handle:
        handle.write(text)


__all__ = ["ArtifactWriter", "render_manifest"]
