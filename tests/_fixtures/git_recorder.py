"""Test double standing in for the git subprocess runner."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Optional

from licensegen.git.committer import GitCommandError

TREE_ID = "4b825dc642cb6eb9a060e54bf8d69288fbee4904"
COMMIT_ID = "0123456789abcdef0123456789abcdef01234567"


class RecordingGitRunner:
    """Records git invocations and answers plumbing commands with fixed ids."""

    def __init__(self, fail_on: Optional[str] = None) -> None:
        self.calls: List[List[str]] = []
        self.cwds: List[Path] = []
        self.envs: List[Optional[Dict[str, str]]] = []
        self.fail_on = fail_on

    def __call__(
        self,
        args: Iterable[str],
        *,
        cwd: Path,
        env: Optional[Dict[str, str]] = None,
        capture_output: bool = False,
    ) -> str:
        command = list(args)
        self.calls.append(command)
        self.cwds.append(Path(cwd))
        self.envs.append(env)
        if self.fail_on is not None and command[1] == self.fail_on:
            raise GitCommandError(command, 128, f"fatal: {self.fail_on} failed")
        if command[1] == "write-tree":
            return f"{TREE_ID}\n"
        if command[1] == "commit-tree":
            return f"{COMMIT_ID}\n"
        return ""

    def subcommands(self) -> List[str]:
        return [call[1] for call in self.calls]


__all__ = ["COMMIT_ID", "RecordingGitRunner", "TREE_ID"]
