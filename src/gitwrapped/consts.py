"""Hold constants and enum values."""

from lazi.core import lazi

with lazi:  # type: ignore[attr-defined] # lazi has incorrectly typed code
    import importlib.metadata
    import logging
    from enum import IntEnum

DISTRIBUTION = "gitwrapped"

# Name of the directory whose presence marks a working tree root. Only a
# directory counts; worktrees and submodules use a plain ``.git`` file.
MARKER = ".git"


class LogLevels(IntEnum):
    """Log levels selectable from settings and the -v flags."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


def version() -> str:
    """Return the installed gitwrapped version, as printed by ``--version``."""
    return importlib.metadata.version(DISTRIBUTION)
