"""Unified settings — CLI flags and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``DCONV_*`` prefix
  3. Code defaults

dconv reads no configuration file.
"""

from __future__ import annotations

from datetime import timezone
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings

from dconv.domain.clock import parse_utc_offset
from dconv.domain.errors import InvalidUtcOffsetError


class DconvSettings(BaseSettings):
    """Unified settings for the dconv CLI.

    Stored on the :class:`~dconv.commands._context.AppContext` created by
    the root command.

    Attributes:
        utc_offset: Fixed local offset (``+02:00``, ``Z``) used instead of
            the system offset, or None to ask the OS.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "DCONV_",
    }

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    utc_offset: str | None = None

    @field_validator("utc_offset")
    @classmethod
    def _check_utc_offset(cls, value: str | None) -> str | None:
        if value is not None:
            try:
                parse_utc_offset(value)
            except InvalidUtcOffsetError as exc:
                raise ValueError(exc.message) from exc
        return value

    @property
    def offset(self) -> timezone | None:
        """The configured offset as a timezone, or None for the system offset."""
        if self.utc_offset is None:
            return None
        return parse_utc_offset(self.utc_offset)

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> DconvSettings:
        """Construct settings from a CLI invocation.

        Flags left at their unset value (False or None) are dropped so the
        matching ``DCONV_*`` variable, if any, still applies.
        """
        given = {key: value for key, value in cli_flags.items() if value not in (None, False)}
        return cls(**given)
