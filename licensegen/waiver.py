"""Resolution of the CC0 waiver text that licenses every generated package."""

from __future__ import annotations

from functools import lru_cache
from importlib import metadata, resources
from typing import Iterable, Optional, Protocol

from .constants import WAIVER_LICENSE_ID
from .logging import get_logger

ENTRY_POINT_GROUP = "license_project.texts"

_logger = get_logger("waiver")


class WaiverTextProvider(Protocol):
    """Source of the waiver text; returns ``None`` when it has nothing to offer."""

    def load(self) -> Optional[str]:
        ...


class EntryPointWaiverProvider:
    """Reads ``text`` from an installed License Project package for the waiver."""

    def __init__(self, name: str = WAIVER_LICENSE_ID, group: str = ENTRY_POINT_GROUP) -> None:
        self.name = name
        self.group = group

    def load(self) -> Optional[str]:
        for entry_point in metadata.entry_points(group=self.group):
            if entry_point.name != self.name:
                continue
            try:
                target = entry_point.load()
            except ImportError as exc:
                _logger.debug("Entry point %s is not importable: %s", entry_point.value, exc)
                return None
            text = getattr(target, "text", None)
            return text if isinstance(text, str) else None
        return None


class BundledWaiverProvider:
    """Reads the copy of the waiver shipped inside this package."""

    def __init__(self, resource: str = "cc0.txt") -> None:
        self.resource = resource

    def load(self) -> Optional[str]:
        return (resources.files("licensegen") / "data" / self.resource).read_text(encoding="utf-8")


def resolve_waiver_text(providers: Iterable[WaiverTextProvider]) -> str:
    """Return the text of the first provider that yields one."""
    for provider in providers:
        text = provider.load()
        if text:
            _logger.debug("Waiver text loaded from %s", provider.__class__.__name__)
            return text
    raise LookupError(f"No provider supplied the {WAIVER_LICENSE_ID} text")


@lru_cache(maxsize=1)
def load_waiver_text() -> str:
    """Resolve the waiver text once per process."""
    return resolve_waiver_text((EntryPointWaiverProvider(), BundledWaiverProvider()))


__all__ = [
    "BundledWaiverProvider",
    "ENTRY_POINT_GROUP",
    "EntryPointWaiverProvider",
    "WaiverTextProvider",
    "load_waiver_text",
    "resolve_waiver_text",
]
