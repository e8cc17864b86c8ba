"""Root CLI command for dconv: ``dconv DATE [OPERATION]``."""

from __future__ import annotations

import click
from pydantic import ValidationError

from dconv import __version__
from dconv.commands._base import DconvCommand
from dconv.commands._context import AppContext
from dconv.config.settings import DconvSettings
from dconv.domain.clock import parse_utc_offset
from dconv.domain.errors import InvalidUtcOffsetError


def _validate_utc_offset(
    _ctx: click.Context, _param: click.Parameter, value: str | None
) -> str | None:
    if value is None:
        return None
    try:
        parse_utc_offset(value)
    except InvalidUtcOffsetError as exc:
        raise click.BadParameter(exc.message) from exc
    return value


@click.command(
    cls=DconvCommand,
    examples="""\
  dconv now
  dconv 1750796280
  dconv 1750796280000 +10m
  dconv 2025-06-24T20:18:00Z -3h
  dconv --utc-offset +02:00 2025-06-24T20:18:00Z +2d
  dconv -q 1750796280123
  dconv --json now""",
)
@click.version_option(version=__version__, prog_name="dconv")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the converted value.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "--utc-offset",
    default=None,
    metavar="OFFSET",
    callback=_validate_utc_offset,
    help="Fixed local offset such as +02:00 (default: system offset).",
)
@click.argument("date")
@click.argument("operation", required=False)
def cli(
    date: str,
    operation: str | None,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    utc_offset: str | None,
) -> None:
    """Convert DATE between RFC3339 and Unix epoch timestamps.

    DATE is an RFC3339 date-time, an epoch timestamp in seconds,
    milliseconds, microseconds, or nanoseconds (10, 13, 16, or 19
    characters), or "now".

    OPERATION optionally shifts the result: +10m, -3h, +2d, -30s.
    """
    try:
        settings = DconvSettings.from_cli(
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
            utc_offset=utc_offset,
        )
    except ValidationError as exc:
        msg = f"Invalid DCONV_* environment setting: {exc.errors()[0]['msg']}"
        raise click.ClickException(msg) from exc

    app = AppContext(settings)

    from dconv.services.convert import ConvertService

    app.emit(ConvertService(app.clock).convert(date, operation))
