"""Git integration for generated packages."""

from .committer import GitCommandError, RepositoryCommitter, Signature
from .user import GitUser, read_git_user

__all__ = ["GitCommandError", "GitUser", "RepositoryCommitter", "Signature", "read_git_user"]
