"""Load packaged defaults and user overrides for gitwrapped."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any
from typing import cast

from lazi.core import lazi

from gitwrapped.consts import MARKER
from gitwrapped.consts import LogLevels

with lazi:  # type: ignore[attr-defined]
    import copy
    import tomllib

    import structlog

logger = structlog.getLogger("gitwrapped")

DEFAULT_SETTINGS_PATH = Path(__file__).parent / "data" / "settings.toml"
SETTINGS_ENV_VAR = "GITWRAPPED_SETTINGS"


class _SettingsState:
    def __init__(self) -> None:
        self.cache: dict[str, Any] | None = None
        self.user_settings_path: Path | None = None


_STATE = _SettingsState()


def get_settings_snapshot() -> dict[str, Any]:
    """Return a deep copy of the effective settings."""
    return copy.deepcopy(_get_cache())


def reload_settings_from_disk() -> dict[str, Any]:
    """Drop the cache, re-read both files and return a deep copy."""
    cache = _load_settings_from_disk()
    _STATE.cache = cache
    return copy.deepcopy(cache)


def get_setting(group: str, key: str, fallback: Any = None) -> Any:
    """Retrieve a specific setting with an optional fallback."""
    grouped = _get_cache().get(group, {})
    return copy.deepcopy(grouped.get(key, fallback))


def marker_setting() -> str:
    """Return the configured marker directory name."""
    marker = str(get_setting("Locator", "marker", MARKER)).strip()
    if not marker or "/" in marker or marker in {".", ".."}:
        msg = f"invalid Locator.marker setting: {marker!r}"
        raise ValueError(msg)
    return marker


def log_level_setting() -> LogLevels:
    """Return the configured log level, falling back to ERROR."""
    name = str(get_setting("Logging", "level", "ERROR")).upper()
    try:
        return LogLevels[name]
    except KeyError:
        logger.warning("unknown log level in settings", level=name)
        return LogLevels.ERROR


def _get_cache() -> dict[str, Any]:
    cache = _STATE.cache
    if cache is None:
        cache = _load_settings_from_disk()
        _STATE.cache = cache
    return cache


def _load_settings_from_disk() -> dict[str, Any]:
    defaults = _read_settings_file(DEFAULT_SETTINGS_PATH, required=True)
    user_path = _user_settings_path()
    user_overrides = _read_settings_file(user_path)
    logger.debug("loading user settings", path=str(user_path), found=bool(user_overrides))
    if user_overrides:
        return _merge_dicts(defaults, user_overrides)
    return defaults


def _merge_dicts(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    for key, value in overrides.items():
        if isinstance(value, dict) and key in base and isinstance(base[key], dict):
            nested_base = cast(dict[str, Any], base[key])
            nested_override = cast(dict[str, Any], value)
            base[key] = _merge_dicts(nested_base, nested_override)
        else:
            base[key] = value
    return base


def _read_settings_file(path: Path, *, required: bool = False) -> dict[str, Any]:
    if not path.exists():
        if required:
            msg = f"required settings file missing: {path}"
            raise FileNotFoundError(msg)
        return {}
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        if required:
            msg = f"settings file contains invalid TOML: {path}"
            raise ValueError(msg) from exc
        logger.warning("ignoring invalid settings file", path=str(path))
        return {}
    except OSError as exc:
        if required:
            raise
        logger.warning("ignoring unreadable settings file", path=str(path), error=str(exc))
        return {}


def _user_settings_path() -> Path:
    if _STATE.user_settings_path is None:
        _STATE.user_settings_path = _resolve_user_settings_path()
    return _STATE.user_settings_path


def _resolve_user_settings_path() -> Path:
    override = os.environ.get(SETTINGS_ENV_VAR)
    if override:
        return Path(override).expanduser()
    home = Path.home()
    base_dir: Path
    if sys.platform.startswith("win"):
        base_dir = Path(os.environ.get("APPDATA", home))
    elif sys.platform == "darwin":
        base_dir = home / "Library" / "Application Support"
    else:
        base_dir = Path(os.environ.get("XDG_CONFIG_HOME", home / ".config"))
    return base_dir / ".gitwrapped" / "settings.toml"
