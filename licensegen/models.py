"""Core data models shared across licensegen components."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from .constants import (
    COMPILED_MODULE_FILENAME,
    LICENSE_FILENAME,
    MANIFEST_FILENAME,
    SOURCE_MODULE_FILENAME,
)
from .spdx import is_spdx_id

_WHITESPACE = re.compile(r"\s")
_PATH_SEPARATOR = re.compile(r"[/\\]")


class InvalidAnswersError(ValueError):
    """Raised when an answer record violates the interview invariants."""


def name_part_problem(value: str, label: str) -> Optional[str]:
    """Return why ``value`` cannot be used in a package directory name, or ``None``."""
    if _WHITESPACE.search(value):
        return f"The {label} cannot contain whitespace"
    if _PATH_SEPARATOR.search(value):
        return f"The {label} cannot contain path separators"
    if value.startswith("."):
        return f"The {label} cannot start with '.'"
    return None


@dataclass
class AnswerRecord:
    """Validated result of the operator interview."""

    is_spdx: bool
    long_name: str
    author_name: str
    author_email: str
    license_accepted: bool
    spdx_id: Optional[str] = None
    short_name: Optional[str] = None
    version: Optional[str] = None

    def validate(self) -> None:
        """Raise :class:`InvalidAnswersError` if the record cannot feed the pipeline."""
        if self.is_spdx:
            if not self.spdx_id or not is_spdx_id(self.spdx_id):
                raise InvalidAnswersError(f"{self.spdx_id!r} is not a valid SPDX identifier")
        else:
            if not self.short_name:
                raise InvalidAnswersError("short name must be set")
            if self.version is None:
                raise InvalidAnswersError("version must be set")
            for value, label in ((self.short_name, "name"), (self.version, "version")):
                problem = name_part_problem(value, label)
                if problem:
                    raise InvalidAnswersError(problem)
        if not self.long_name:
            raise InvalidAnswersError("long name must not be empty")
        if not self.author_name or not self.author_email:
            raise InvalidAnswersError("author name and email must not be empty")
        if not self.license_accepted:
            raise InvalidAnswersError("the CC0 waiver must be accepted")


@dataclass(frozen=True)
class PackageIdentity:
    """Canonical name and derived metadata for one generated package."""

    name: str
    full_name: str
    keywords: Tuple[str, ...]


@dataclass(frozen=True)
class Author:
    name: str
    email: str


@dataclass(frozen=True)
class Repository:
    url: str
    type: str = "git"


@dataclass(frozen=True)
class PackageManifest:
    """The ``package.json`` descriptor of a generated package."""

    name: str
    version: str
    description: str
    keywords: Tuple[str, ...]
    license: str
    author: Author
    repository: Repository
    esnext: str = SOURCE_MODULE_FILENAME
    main: str = COMPILED_MODULE_FILENAME

    def to_dict(self) -> Dict[str, Any]:
        """Return the manifest as a mapping in its serialized key order."""
        return {
            "name": self.name,
            "version": self.version,
            "description": self.description,
            "keywords": list(self.keywords),
            "license": self.license,
            "author": {
                "name": self.author.name,
                "email": self.author.email,
            },
            "esnext": self.esnext,
            "main": self.main,
            "repository": {
                "type": self.repository.type,
                "url": self.repository.url,
            },
        }


@dataclass(frozen=True)
class GeneratedModule:
    """Source and compiled forms of the module exporting ``name`` and ``text``."""

    source_form: str
    compiled_form: str


@dataclass
class ArtifactSet:
    """Files materialized for a generated package."""

    root: Path
    files: Dict[str, Path] = field(default_factory=dict)

    @property
    def manifest(self) -> Path:
        return self.files[MANIFEST_FILENAME]

    @property
    def source_module(self) -> Path:
        return self.files[SOURCE_MODULE_FILENAME]

    @property
    def compiled_module(self) -> Path:
        return self.files[COMPILED_MODULE_FILENAME]

    @property
    def license(self) -> Path:
        return self.files[LICENSE_FILENAME]


@dataclass(frozen=True)
class RepositoryState:
    """Outcome of committing a package directory to a fresh repository."""

    path: Path
    commit: str
    tree: str
    remote_name: Optional[str] = None
    remote_url: Optional[str] = None
