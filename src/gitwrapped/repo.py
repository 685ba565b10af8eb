"""Handle on a git working tree."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import structlog

from gitwrapped.locator import find_repo_root

logger = structlog.getLogger("gitwrapped")


@dataclass(frozen=True, slots=True)
class Repo:
    """Immutable handle on the working directory of a git repository."""

    _workdir: Path

    def __repr__(self) -> str:
        """Show the working directory."""
        return f"Repo({str(self._workdir)!r})"

    @classmethod
    def at(cls, path: str | os.PathLike[str]) -> Repo:
        """Wrap ``path`` as a working directory without touching the disk."""
        return cls(Path(path))

    @classmethod
    def containing_file(cls, path: str | os.PathLike[str]) -> Repo:
        """Return the repository that contains ``path``.

        Unless ``path`` is the repository root itself, parents are probed
        until a directory holding a ``.git`` directory is found.

        Raises:
            GitIOError: when no such directory exists or probing fails.
        """
        root = find_repo_root(path)
        logger.debug("opened repository", path=str(path), workdir=str(root))
        return cls(root)

    def workdir(self) -> Path:
        """Return the working directory of the repository."""
        return self._workdir
