"""Shared pytest fixtures for dclock tests."""

from __future__ import annotations

import logging
import os
from calendar import timegm
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from dclock.domain.types import Instant
from dclock.infrastructure.clock import FrozenClock


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every test in an empty home and working directory.

    No ``~/.dclock``, no ``dclock.toml`` and no ``DCLOCK_*`` variables leak
    in from the machine running the tests, so the offset defaults to -6.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    for name in list(os.environ):
        if name.upper().startswith("DCLOCK_"):
            monkeypatch.delenv(name)
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return home


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() calls made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    dclock_logger = logging.getLogger("dclock")
    dclock_level = dclock_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    dclock_logger.setLevel(dclock_level)


def _epoch(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> int:
    return timegm((year, month, day, hour, minute, second, 0, 0, 0))


@pytest.fixture
def epoch() -> Callable[..., int]:
    """Epoch seconds for a UTC wall-clock time, computed by the stdlib."""
    return _epoch


@pytest.fixture
def frozen_at() -> Callable[..., FrozenClock]:
    """Build a FrozenClock at a UTC wall-clock time (plus optional nanoseconds)."""

    def build(*fields: int, nanoseconds: int = 0) -> FrozenClock:
        return FrozenClock(Instant(seconds=_epoch(*fields), nanoseconds=nanoseconds))

    return build
