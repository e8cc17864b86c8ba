"""AppContext — settings, clock, and result emission for the CLI.

Created once per invocation by the root command.  Centralizes result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dconv.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from dconv.config.settings import DconvSettings
    from dconv.domain.clock import Clock
    from dconv.services.result import ServiceResult


class AppContext:
    """Per-invocation context shared by the CLI.

    The clock defaults to the system clock, pinned to ``settings.offset``
    when a fixed UTC offset is configured.
    """

    def __init__(self, settings: DconvSettings, clock: Clock | None = None) -> None:
        self.settings = settings

        from dconv.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if clock is None:
            from dconv.domain.clock import SystemClock

            clock = SystemClock(offset=settings.offset)
        self.clock = clock

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
