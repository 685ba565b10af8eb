"""Print the git working tree root containing each given path."""

import argparse
import sys

from lazi.core import lazi
from rich.console import Console

from gitwrapped import setup_logger
from gitwrapped.consts import LogLevels
from gitwrapped.consts import version
from gitwrapped.errors import GitError
from gitwrapped.locator import find_repo_root
from gitwrapped.settings_manager import get_settings_snapshot
from gitwrapped.settings_manager import log_level_setting
from gitwrapped.settings_manager import marker_setting

# lazi imports only actually imported when used,
# helps to speed up loading and the use of optional imports.
with lazi:  # type: ignore[attr-defined] # lazi has incorrectly typed code
    import logging

    import structlog

OK = 0
ERROR = 1
logger = structlog.getLogger("gitwrapped")


def _setup_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="gitwrapped", description=__doc__)
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help="File or directory inside a working tree.",
    )
    parser.add_argument(
        "--marker",
        default=None,
        help="Name of the directory marking a repository root (default from settings).",
    )
    parser.add_argument(
        "--show-settings",
        action="store_true",
        help="Print the effective settings as JSON and exit.",
    )
    parser.add_argument("--version", action="store_true", help="Print version and exit.")
    loglevel_group = parser.add_mutually_exclusive_group()
    loglevel_group.add_argument(
        "--log-warning",
        "-v",
        help="Enable logging",
        action="store_const",
        const=LogLevels.WARNING,
        dest="loglevel",
    )
    loglevel_group.add_argument(
        "--log-info",
        "-vv",
        help="Enable verbose logging",
        action="store_const",
        const=LogLevels.INFO,
        dest="loglevel",
    )
    loglevel_group.add_argument(
        "--log-debug",
        "-vvv",
        help="Enable very verbose logging (all)",
        action="store_const",
        const=LogLevels.DEBUG,
        dest="loglevel",
    )

    ret = parser.parse_args(argv)
    if not (ret.paths or ret.version or ret.show_settings):
        parser.error("at least one PATH is required")
    if ret.loglevel is None:
        ret.loglevel = log_level_setting()
    return ret


def _locate_all(paths: list[str], marker: str, out: Console, err: Console) -> int:
    status = OK
    for path in paths:
        try:
            root = find_repo_root(path, marker=marker)
        except GitError as exc:
            logger.info("failed to locate repository", path=path, error=str(exc))
            err.print(f"gitwrapped: {exc}", markup=False, highlight=False, soft_wrap=True)
            status = ERROR
            continue
        out.print(str(root), markup=False, highlight=False, soft_wrap=True)
    return status


def main(argv: list[str] | None = None) -> int:
    """Entry point for the gitwrapped command."""
    args = _setup_arguments(argv)
    logging.basicConfig(level=args.loglevel, stream=sys.stderr, format="%(message)s")
    setup_logger(args.loglevel)
    logger.debug("finished parsing arguments", args=vars(args))
    out = Console()
    err = Console(stderr=True)
    if args.version:
        out.print(version(), markup=False, highlight=False, soft_wrap=True)
        return OK
    if args.show_settings:
        out.print_json(data=get_settings_snapshot())
        return OK
    try:
        marker = args.marker or marker_setting()
    except ValueError as exc:
        err.print(f"gitwrapped: {exc}", markup=False, highlight=False, soft_wrap=True)
        return ERROR
    return _locate_all(args.paths, marker, out, err)


if __name__ == "__main__":
    raise SystemExit(main())
