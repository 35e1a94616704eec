"""Lookup helpers over the SPDX license identifier list."""

from __future__ import annotations

from typing import FrozenSet, Optional

from ._spdx_data import licenses

SPDX_IDS: FrozenSet[str] = frozenset(entry["id"] for entry in licenses.values())


def is_spdx_id(identifier: str) -> bool:
    """Return True when ``identifier`` is a listed SPDX id, matched exactly."""
    return identifier in SPDX_IDS


def suggest_spdx_id(identifier: str) -> Optional[str]:
    """Return the canonical spelling of an id that only differs by case."""
    entry = licenses.get(identifier.strip().lower())
    if entry is None or entry["id"] == identifier:
        return None
    return entry["id"]


__all__ = ["SPDX_IDS", "is_spdx_id", "suggest_spdx_id"]
