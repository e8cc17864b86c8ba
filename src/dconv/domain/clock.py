"""Clock abstraction for an injectable time source.

A conversion reads one :class:`ClockSnapshot` up front: the current
instant (for ``now``) and the local UTC offset (for the second output
line). The offset is a fixed value, never a timezone-database identity.
"""

from __future__ import annotations

import re
import time
from dataclasses import dataclass
from datetime import UTC, timedelta, timezone
from typing import Protocol

from dconv.domain.errors import InvalidUtcOffsetError
from dconv.domain.instant import Instant
from dconv.domain.types import EpochUnit

_OFFSET_RE = re.compile(r"([+-])([0-9]{2})(?::?([0-9]{2}))?")


@dataclass(frozen=True, slots=True)
class ClockSnapshot:
    """Current instant and local offset, captured together."""

    now: Instant
    offset: timezone


class Clock(Protocol):
    def snapshot(self) -> ClockSnapshot: ...


class SystemClock:
    """Default implementation: system wall clock and local offset.

    Pass *offset* to pin the local offset instead of asking the OS.
    """

    def __init__(self, offset: timezone | None = None) -> None:
        self._offset = offset

    def snapshot(self) -> ClockSnapshot:
        now = Instant.from_epoch(time.time_ns(), EpochUnit.NANOSECONDS)
        offset = self._offset
        if offset is None:
            local_offset = now.to_datetime().astimezone().utcoffset()
            offset = timezone(local_offset or timedelta(0))
        return ClockSnapshot(now=now, offset=offset)


class FixedClock:
    """Clock that always returns the same snapshot."""

    def __init__(self, now: Instant, offset: timezone = UTC) -> None:
        self._snapshot = ClockSnapshot(now=now, offset=offset)

    def snapshot(self) -> ClockSnapshot:
        return self._snapshot


def parse_utc_offset(raw: str) -> timezone:
    """Parse ``Z``, ``±HH``, ``±HHMM``, or ``±HH:MM`` into a fixed timezone.

    Examples:
        >>> parse_utc_offset("+02:00")
        datetime.timezone(datetime.timedelta(seconds=7200))
        >>> parse_utc_offset("Z")
        datetime.timezone.utc
    """
    if raw in ("Z", "z"):
        return UTC
    match = _OFFSET_RE.fullmatch(raw)
    if match is None:
        raise InvalidUtcOffsetError(raw)
    sign, hours, minutes = match.group(1), int(match.group(2)), int(match.group(3) or 0)
    if hours > 23 or minutes > 59:
        raise InvalidUtcOffsetError(raw)
    delta = timedelta(hours=hours, minutes=minutes)
    return timezone(-delta if sign == "-" else delta)
