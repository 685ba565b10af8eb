"""Shared pytest fixtures for repository discovery tests."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from gitwrapped import settings_manager as sm  # noqa: E402


@pytest.fixture(autouse=True)
def user_settings_path(tmp_path: Path) -> Iterator[Path]:
    """Point the user settings file into tmp_path and clear the cache."""
    state = sm._STATE  # noqa: SLF001
    backup_cache = state.cache
    backup_user_path = state.user_settings_path
    user_path = tmp_path / "config" / "settings.toml"
    state.cache = None
    state.user_settings_path = user_path

    yield user_path

    state.cache = backup_cache
    state.user_settings_path = backup_user_path


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    """Build ``root/.git/`` and ``root/sub1/sub2/sub3/`` under tmp_path."""
    root = tmp_path / "root"
    (root / ".git").mkdir(parents=True)
    (root / "sub1" / "sub2" / "sub3").mkdir(parents=True)
    return root


@pytest.fixture
def bare_tree(tmp_path: Path) -> Path:
    """Return ``tmp/a/b/c`` with no marker; skip when tmp_path sits in a repo."""
    for ancestor in (tmp_path, *tmp_path.parents):
        if (ancestor / ".git").is_dir():
            pytest.skip(f"temporary directory is inside a git repository: {ancestor}")
    leaf = tmp_path / "a" / "b" / "c"
    leaf.mkdir(parents=True)
    return leaf
