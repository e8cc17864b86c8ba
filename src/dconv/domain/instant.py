"""Instant — an absolute point in time with nanosecond precision.

``datetime`` stops at microseconds, so an Instant pairs a UTC ``datetime``
with the sub-microsecond remainder (0-999 ns). Calendar arithmetic is
delegated to ``datetime`` + ``timedelta``; results outside the range
``datetime`` can represent raise :class:`OverflowError`.

INVARIANT: ``moment`` is always timezone-aware and in UTC.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, tzinfo

from dconv.domain.types import EpochUnit

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

_MICROSECOND = timedelta(microseconds=1)
_NANOS_PER_MICRO = 1_000
_NANOS_PER_MILLI = 1_000_000


@dataclass(frozen=True, slots=True)
class Instant:
    """Immutable UTC instant.

    Attributes:
        moment: UTC-aware datetime, microsecond resolution.
        nanosecond: Sub-microsecond remainder in ``0..999``.
    """

    moment: datetime
    nanosecond: int = 0

    def __post_init__(self) -> None:
        if self.moment.tzinfo is None or self.moment.utcoffset() != timedelta(0):
            msg = f"Instant requires a UTC datetime, got {self.moment!r}"
            raise ValueError(msg)
        if not 0 <= self.nanosecond < _NANOS_PER_MICRO:
            msg = f"nanosecond must be in 0..999, got {self.nanosecond}"
            raise ValueError(msg)

    # ── Constructors ─────────────────────────────────────────────────

    @classmethod
    def from_datetime(cls, value: datetime, nanosecond: int = 0) -> Instant:
        """Build an Instant from an aware datetime in any offset."""
        if value.tzinfo is None:
            msg = "naive datetimes have no absolute position in time"
            raise ValueError(msg)
        return cls(value.astimezone(UTC), nanosecond)

    @classmethod
    def from_epoch(cls, value: int, unit: EpochUnit) -> Instant:
        """Build an Instant from a count of *unit* since the Unix epoch.

        Raises:
            OverflowError: The value falls outside the datetime range.
        """
        micros, nanos = divmod(value * unit.nanos, _NANOS_PER_MICRO)
        return cls(EPOCH + timedelta(microseconds=micros), nanos)

    # ── Views ────────────────────────────────────────────────────────

    @property
    def epoch_nanos(self) -> int:
        """Nanoseconds since the Unix epoch."""
        micros = (self.moment - EPOCH) // _MICROSECOND
        return micros * _NANOS_PER_MICRO + self.nanosecond

    @property
    def timestamp_millis(self) -> int:
        """Milliseconds since the Unix epoch, floored toward negative infinity."""
        return self.epoch_nanos // _NANOS_PER_MILLI

    def to_datetime(self, tz: tzinfo = UTC) -> datetime:
        """The instant as an aware datetime in *tz* (sub-microsecond part dropped)."""
        return self.moment.astimezone(tz)

    def to_rfc3339(self, tz: tzinfo = UTC) -> str:
        """Render as RFC3339 in *tz*.

        Fractional seconds use 0, 3, 6, or 9 digits, whichever is the
        shortest exact form. UTC renders as ``+00:00``.
        """
        local = self.to_datetime(tz)
        stamp = (
            f"{local.year:04d}-{local.month:02d}-{local.day:02d}"
            f"T{local.hour:02d}:{local.minute:02d}:{local.second:02d}"
        )
        nanos = local.microsecond * _NANOS_PER_MICRO + self.nanosecond
        return stamp + _format_fraction(nanos) + _format_offset(local.utcoffset())

    # ── Arithmetic ───────────────────────────────────────────────────

    def __add__(self, other: object) -> Instant:
        if not isinstance(other, timedelta):
            return NotImplemented
        return Instant(self.moment + other, self.nanosecond)

    def __sub__(self, other: object) -> Instant:
        if not isinstance(other, timedelta):
            return NotImplemented
        return Instant(self.moment - other, self.nanosecond)


def _format_fraction(nanos: int) -> str:
    if nanos == 0:
        return ""
    if nanos % _NANOS_PER_MILLI == 0:
        return f".{nanos // _NANOS_PER_MILLI:03d}"
    if nanos % _NANOS_PER_MICRO == 0:
        return f".{nanos // _NANOS_PER_MICRO:06d}"
    return f".{nanos:09d}"


def _format_offset(offset: timedelta | None) -> str:
    total = int((offset or timedelta(0)).total_seconds())
    sign = "-" if total < 0 else "+"
    hours, remainder = divmod(abs(total), 3600)
    return f"{sign}{hours:02d}:{remainder // 60:02d}"
