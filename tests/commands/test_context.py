"""Tests for AppContext result emission."""

from __future__ import annotations

import click
import pytest
from click.testing import CliRunner, Result

from dconv.commands._context import AppContext
from dconv.config.settings import DconvSettings
from dconv.domain.clock import FixedClock, SystemClock
from dconv.services.result import ServiceError, ServiceResult


def _run(settings: DconvSettings, result: ServiceResult) -> Result:
    @click.command()
    def probe() -> None:
        AppContext(settings, clock=SystemClock()).emit(result)

    return CliRunner().invoke(probe, [])


class TestClock:
    def test_injected_clock_is_used(self, utc_clock: FixedClock) -> None:
        app = AppContext(DconvSettings.from_cli(), clock=utc_clock)
        assert app.clock is utc_clock

    def test_default_clock_uses_configured_offset(self) -> None:
        app = AppContext(DconvSettings.from_cli(utc_offset="+02:00"))
        assert isinstance(app.clock, SystemClock)
        assert str(app.clock.snapshot().offset) == "UTC+02:00"


class TestEmit:
    def test_success_goes_to_stdout(self) -> None:
        result = _run(DconvSettings.from_cli(quiet=True), ServiceResult(ok=True, op="other"))
        assert result.exit_code == 0
        assert result.output == "OK: other\n"

    def test_warnings_go_to_stderr(self) -> None:
        result = _run(
            DconvSettings.from_cli(quiet=True),
            ServiceResult(ok=True, op="other", warnings=["careful"]),
        )
        assert result.exit_code == 0
        assert "WARNING: careful" in result.output

    @pytest.mark.parametrize("quiet", [True, False])
    def test_failure_exits_nonzero(self, quiet: bool) -> None:
        failed = ServiceResult(
            ok=False,
            op="convert",
            error=ServiceError(code="INVALID_OPERATION", message="Invalid operation +5"),
        )
        result = _run(DconvSettings.from_cli(quiet=quiet), failed)
        assert result.exit_code == 1
        assert "Invalid operation +5" in result.output
