"""Defaults for the interview read from the caller's git configuration."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

ConfigReader = Callable[[Sequence[str]], Optional[str]]


@dataclass(frozen=True)
class GitUser:
    name: Optional[str] = None
    email: Optional[str] = None


def read_git_config(args: Sequence[str]) -> Optional[str]:
    """Run ``git config --get`` and return the value, or None when it is unset."""
    try:
        completed = subprocess.run(
            list(args),
            check=True,
            capture_output=True,
            text=True,
        )
    except (subprocess.CalledProcessError, FileNotFoundError):
        return None
    value = completed.stdout.strip()
    return value or None


def read_git_user(reader: ConfigReader | None = None, *, git: str = "git") -> GitUser:
    read = reader or read_git_config
    return GitUser(
        name=read([git, "config", "--get", "user.name"]),
        email=read([git, "config", "--get", "user.email"]),
    )


__all__ = ["GitUser", "read_git_config", "read_git_user"]
