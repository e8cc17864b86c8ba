"""Shared pytest fixtures and test helpers for dconv tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from datetime import timedelta, timezone

import pytest
from click.testing import CliRunner

from dconv.domain.clock import FixedClock
from dconv.domain.instant import Instant
from dconv.domain.types import EpochUnit

# 2025-06-24T20:18:00Z
REFERENCE_SECONDS = 1750796280
REFERENCE_MILLIS = 1750796280000
PLUS_TWO = timezone(timedelta(hours=2))


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def reference_instant() -> Instant:
    return Instant.from_epoch(REFERENCE_SECONDS, EpochUnit.SECONDS)


@pytest.fixture
def utc_clock(reference_instant: Instant) -> FixedClock:
    """Clock pinned to 2025-06-24T20:18:00Z with a UTC local offset."""
    return FixedClock(reference_instant)


@pytest.fixture
def plus_two_clock(reference_instant: Instant) -> FixedClock:
    """Clock pinned to 2025-06-24T20:18:00Z with a +02:00 local offset."""
    return FixedClock(reference_instant, PLUS_TWO)


@pytest.fixture(autouse=True)
def _restore_logging(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Restore root logger state after each test; ignore DCONV_* from the shell."""
    for name in ("JSON_OUTPUT", "QUIET", "VERBOSE", "LOG_JSON", "UTC_OFFSET"):
        monkeypatch.delenv(f"DCONV_{name}", raising=False)
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    dconv_logger = logging.getLogger("dconv")
    dconv_level = dconv_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    dconv_logger.setLevel(dconv_level)
