"""Find the working tree root that contains a given path."""

from __future__ import annotations

import errno
import os
import stat
from pathlib import Path

import structlog

from gitwrapped.consts import MARKER
from gitwrapped.errors import GitIOError

logger = structlog.getLogger("gitwrapped")


def _stat(path: Path) -> os.stat_result:
    return path.stat()


def _has_marker_dir(directory: Path, marker: str) -> bool:
    """Return True when ``directory/marker`` exists and is a directory.

    Any failure to stat the marker counts as absent. ENOENT cannot be told
    apart from a genuine I/O error here, so an unreadable marker in a real
    repository makes the walk continue upward.
    """
    candidate = directory / marker
    try:
        mode = _stat(candidate).st_mode
    except OSError as exc:
        logger.debug("marker probe failed", path=str(candidate), error=str(exc))
        return False
    if not stat.S_ISDIR(mode):
        logger.debug("marker is not a directory", path=str(candidate))
        return False
    return True


def find_repo_root(path: str | os.PathLike[str], *, marker: str = MARKER) -> Path:
    """Return the nearest ancestor of ``path`` (inclusive) holding a marker dir.

    The walk is lexical: parents are taken from ``path`` as given, without
    resolving symlinks or making it absolute, so a relative path is climbed
    no further than ``.``. The filesystem root is checked before giving up.

    Raises:
        GitIOError: ``path`` (or a parent reached during the walk) cannot be
            stat'ed, or no ancestor contains the marker directory.
    """
    start = Path(path)
    cursor = start
    while True:
        # Catches a bad starting path as well as directories removed
        # while we climb.
        try:
            _stat(cursor)
        except OSError as exc:
            logger.debug("cursor vanished", path=str(cursor), error=str(exc))
            raise GitIOError(exc, cursor) from exc

        if _has_marker_dir(cursor, marker):
            logger.debug("found repository root", start=str(start), root=str(cursor))
            return cursor

        parent = cursor.parent
        if parent == cursor:
            msg = f"no {marker} directory was found in any parent"
            exc = FileNotFoundError(errno.ENOENT, msg, str(start))
            logger.info("repository root not found", start=str(start))
            raise GitIOError(exc, start) from exc
        cursor = parent
