"""Exceptions raised while locating a repository."""

from __future__ import annotations

from pathlib import Path


class GitError(Exception):
    """Base class for errors raised by gitwrapped."""


class GitIOError(GitError):
    """Raised when probing the filesystem fails during the upward walk.

    ``error`` is the underlying ``OSError``. A missing path and a search that
    ran out of parents both surface as ``FileNotFoundError``; other I/O
    failures while probing for the marker are indistinguishable from the
    marker being absent and never reach this error.
    """

    def __init__(self, error: OSError, path: Path) -> None:
        """Wrap ``error`` raised while probing ``path``."""
        super().__init__(f"{path}: {error.strerror or error}")
        self.error = error
        self.path = path
