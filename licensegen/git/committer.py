"""Records a generated package as the root commit of a new git repository."""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, Iterable, Sequence

from ..constants import COMMIT_MESSAGE, REMOTE_NAME
from ..logging import get_logger
from ..models import RepositoryState


class GitCommandError(RuntimeError):
    """Raised when a git invocation fails."""

    def __init__(self, args: Sequence[str], returncode: int | None, stderr: str = "") -> None:
        self.args_list = list(args)
        self.returncode = returncode
        self.stderr = stderr.strip()
        command = " ".join(self.args_list)
        detail = f": {self.stderr}" if self.stderr else ""
        status = f"exit code {returncode}" if returncode is not None else "could not start"
        super().__init__(f"`{command}` failed ({status}){detail}")


@dataclass(frozen=True)
class Signature:
    """Identity and timestamp recorded on a commit."""

    name: str
    email: str
    when: datetime

    @classmethod
    def now(cls, name: str, email: str) -> "Signature":
        return cls(name=name, email=email, when=datetime.now().astimezone())

    def git_date(self) -> str:
        """Return the timestamp in git's internal ``<epoch> <+hhmm>`` format."""
        return f"{int(self.when.timestamp())} {self.when.strftime('%z') or '+0000'}"

    def environ(self) -> Dict[str, str]:
        """Environment that makes this signature both author and committer."""
        date = self.git_date()
        return {
            "GIT_AUTHOR_NAME": self.name,
            "GIT_AUTHOR_EMAIL": self.email,
            "GIT_AUTHOR_DATE": date,
            "GIT_COMMITTER_NAME": self.name,
            "GIT_COMMITTER_EMAIL": self.email,
            "GIT_COMMITTER_DATE": date,
        }


Runner = Callable[..., str]


class RepositoryCommitter:
    """Initializes a repository, creates its root commit and attaches a remote."""

    def __init__(self, runner: Runner | None = None, *, git: str = "git") -> None:
        self._runner = runner or self._default_runner
        self.git = git
        self.logger = get_logger("git")

    def commit(
        self,
        repo_path: Path | str,
        files: Sequence[Path | str],
        *,
        author_name: str,
        author_email: str,
        message: str = COMMIT_MESSAGE,
    ) -> RepositoryState:
        """Create ``repo_path``'s root commit containing exactly ``files``.

        Every step depends on the previous one; the first failing git command
        raises :class:`GitCommandError` and leaves the repository as it is.
        """
        repo = Path(repo_path)
        self._run(["init", "--quiet"], cwd=repo)
        self.logger.debug("Initialized repository at %s", repo)

        self._run(["update-index", "-q", "--refresh"], cwd=repo)
        for rel in (self._to_relative(repo, Path(file)) for file in files):
            self._run(["add", "--", rel], cwd=repo)
            self.logger.debug("Staged %s", rel)

        tree = self._run(["write-tree"], cwd=repo, capture_output=True).strip()

        signature = Signature.now(author_name, author_email)
        env = os.environ.copy()
        env.update(signature.environ())
        commit = self._run(
            ["commit-tree", tree, "-m", message],
            cwd=repo,
            env=env,
            capture_output=True,
        ).strip()
        # An empty old value requires HEAD's branch to be unborn.
        self._run(
            ["update-ref", "-m", f"commit (initial): {message}", "HEAD", commit, ""],
            cwd=repo,
        )
        self.logger.debug("Created root commit %s (tree %s)", commit, tree)
        return RepositoryState(path=repo, commit=commit, tree=tree)

    def attach_remote(self, repo_path: Path | str, url: str, *, name: str = REMOTE_NAME) -> None:
        """Configure a remote; nothing is fetched or pushed."""
        self._run(["remote", "add", name, url], cwd=Path(repo_path))
        self.logger.debug("Added remote %s -> %s", name, url)

    # ------------------------------------------------------------------
    # Helpers

    @staticmethod
    def _to_relative(repo: Path, file_path: Path) -> str:
        try:
            return file_path.relative_to(repo).as_posix()
        except ValueError:
            return file_path.as_posix()

    def _run(
        self,
        args: Iterable[str],
        *,
        cwd: Path,
        env: dict[str, str] | None = None,
        capture_output: bool = False,
    ) -> str:
        return self._runner([self.git, *args], cwd=cwd, env=env, capture_output=capture_output)

    @staticmethod
    def _default_runner(
        args: Iterable[str],
        *,
        cwd: Path,
        env: dict[str, str] | None = None,
        capture_output: bool = False,
    ) -> str:
        command = list(args)
        try:
            completed = subprocess.run(
                command,
                cwd=str(cwd),
                env=env,
                check=True,
                text=True,
                capture_output=True,
            )
        except FileNotFoundError as exc:
            raise GitCommandError(command, None, str(exc)) from exc
        except subprocess.CalledProcessError as exc:
            raise GitCommandError(command, exc.returncode, exc.stderr or "") from exc
        if capture_output:
            return completed.stdout
        return ""


__all__ = ["GitCommandError", "RepositoryCommitter", "Signature"]
