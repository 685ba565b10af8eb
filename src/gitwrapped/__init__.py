"""Locate the root of the git working tree that contains a path."""

# ruff: noqa: I001, E402
from beartype.claw import beartype_this_package

beartype_this_package()

import logging
import structlog

from .consts import LogLevels as LogLevels
from .consts import MARKER as MARKER
from .consts import version as version
from .errors import GitError as GitError
from .errors import GitIOError as GitIOError
from .locator import find_repo_root as find_repo_root
from .repo import Repo as Repo
from .settings_manager import log_level_setting

logger = structlog.getLogger("gitwrapped")


class SemanticSorter:
    """Structlog processor which lets you control key order."""

    def __init__(self, order: list[str]) -> None:
        """Initialize the processor order."""
        self._order = order

    def __call__(
        self,
        _logger: logging.Logger,
        _method_name: str,
        event_dict: structlog.types.EventDict,
    ) -> structlog.types.EventDict:
        """Sort the keys."""
        ordered_dict = {k: event_dict.pop(k) for k in self._order if k in event_dict}
        ordered_dict |= event_dict
        return ordered_dict


def setup_logger(loglevel: int, *, announce: bool = True) -> None:
    """Configure structlog to emit JSON lines at ``loglevel`` and above."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(loglevel),
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.dict_tracebacks,
            SemanticSorter(["timestamp", "level", "event", "logger", "message"]),
            structlog.processors.JSONRenderer(sort_keys=False),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    if not announce:
        return
    match loglevel:
        case LogLevels.DEBUG:
            logger.debug("Log level set to DEBUG")
        case LogLevels.INFO:
            logger.info("Log level set to INFO")
        case LogLevels.WARNING:
            logger.warning("Log level set to WARNING")
        case LogLevels.ERROR:
            logger.error("Log level set to ERROR")
        case LogLevels.CRITICAL:
            logger.critical("Log level set to CRITICAL")
        case _:
            logger.error("Log level set to UNKNOWN LEVEL")
    logger.debug("logger setup.")


# Leave the host application's structlog configuration alone. Settings are
# read under a quiet configuration so nothing reaches stdout.
if not structlog.is_configured():
    setup_logger(LogLevels.ERROR, announce=False)
    setup_logger(log_level_setting(), announce=False)
