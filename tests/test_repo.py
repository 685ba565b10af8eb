"""Unit tests for the Repo handle."""

# ruff: noqa: S101, SLF001

from __future__ import annotations

import copy
import dataclasses
import os
from pathlib import Path

import pytest
from beartype.roar import BeartypeCallHintParamViolation

from gitwrapped import GitIOError
from gitwrapped import Repo
from gitwrapped import locator


def _forbid_filesystem(path: Path, *_: object, **__: object) -> os.stat_result:
    msg = f"unexpected filesystem access: {path}"
    raise AssertionError(msg)


def test_at(monkeypatch: pytest.MonkeyPatch) -> None:
    """Repo.at wraps the path without stat'ing anything."""
    monkeypatch.setattr(Path, "stat", _forbid_filesystem)
    monkeypatch.setattr(Path, "lstat", _forbid_filesystem)
    monkeypatch.setattr(locator, "_stat", _forbid_filesystem)
    assert Repo.at(Path("/git/path")).workdir() == Path("/git/path")
    assert Repo.at("/git/path").workdir() == Path("/git/path")
    assert Repo.at("relative/does-not-exist").workdir() == Path("relative/does-not-exist")


def test_at_rejects_non_paths() -> None:
    """Arguments are type checked at runtime."""
    with pytest.raises(BeartypeCallHintParamViolation):
        Repo.at(42)  # type: ignore[arg-type]


def test_containing_file(repo_root: Path) -> None:
    """containing_file resolves the root from anywhere inside the tree."""

    def p(*parts: str) -> Path:
        return repo_root.joinpath(*parts)

    # The repo root itself.
    assert Repo.containing_file(p()).workdir() == repo_root
    # An existing sub directory.
    assert Repo.containing_file(p("sub1")).workdir() == repo_root
    # An existing sub-sub directory.
    assert Repo.containing_file(p("sub1", "sub2")).workdir() == repo_root
    # A non-existing directory.
    with pytest.raises(GitIOError):
        Repo.containing_file(p("sub1", "sub2", "non-existent"))


def test_containing_file_propagates_locator_error(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    """The locator's exception reaches the caller untouched."""
    sentinel = GitIOError(FileNotFoundError(2, "gone"), tmp_path)

    def failing_find(path: os.PathLike[str] | str) -> Path:
        raise sentinel

    monkeypatch.setattr("gitwrapped.repo.find_repo_root", failing_find)
    with pytest.raises(GitIOError) as excinfo:
        Repo.containing_file(tmp_path)
    assert excinfo.value is sentinel


def test_handle_is_immutable() -> None:
    """The working directory cannot be reassigned."""
    repo = Repo.at("/git/path")
    with pytest.raises(dataclasses.FrozenInstanceError):
        repo._workdir = Path("/elsewhere")  # type: ignore[misc]
    assert repo.workdir() == Path("/git/path")


def test_handles_have_value_semantics() -> None:
    """Equal paths give equal, hashable, copyable handles."""
    first = Repo.at("/git/path")
    second = Repo.at(Path("/git/path"))
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second, Repo.at("/other")}) == 2
    assert copy.copy(first) == first
    assert copy.deepcopy(first) == first


def test_repr_shows_workdir() -> None:
    """repr names the working directory."""
    assert repr(Repo.at("/git/path")) == f"Repo({str(Path('/git/path'))!r})"
