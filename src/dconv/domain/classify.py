"""Input classification — turn the raw date argument into an Instant.

Three shapes are recognised, checked in this order:

1. The literal ``now``.
2. A base-10 signed 64-bit integer: an epoch timestamp whose unit is
   chosen by the character length of the raw string (sign included).
3. An RFC3339 date-time with an explicit offset.

INVARIANT: the check order above is part of the contract.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, timezone

from dconv.domain.errors import (
    TimestampOutOfRangeError,
    UnsupportedDateValueError,
    UnsupportedTimestampLengthError,
)
from dconv.domain.instant import Instant
from dconv.domain.types import EpochUnit, InputKind

NOW_TOKEN = "now"

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

TIMESTAMP_LENGTHS: dict[int, EpochUnit] = {
    10: EpochUnit.SECONDS,
    13: EpochUnit.MILLISECONDS,
    16: EpochUnit.MICROSECONDS,
    19: EpochUnit.NANOSECONDS,
}

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

_RFC3339_RE = re.compile(
    r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
    r"[Tt ](?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
    r"(?:\.(?P<fraction>[0-9]+))?"
    r"(?P<offset>[Zz]|[+-][0-9]{2}:[0-9]{2})"
)


@dataclass(frozen=True, slots=True)
class DateInput:
    """A classified date argument.

    All three kinds carry the resolved instant; ``kind`` records which
    shape the raw argument had.
    """

    kind: InputKind
    instant: Instant


def parse_int64(raw: str) -> int | None:
    """Parse *raw* as a strict signed 64-bit integer, or return None.

    Only ASCII digits with an optional leading sign are accepted, so
    whitespace and ``_`` separators that :func:`int` tolerates are rejected.
    """
    if _INTEGER_RE.fullmatch(raw) is None:
        return None
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value


def int64_failure_reason(raw: str) -> str:
    """Explain why :func:`parse_int64` rejects *raw*."""
    if not raw:
        return "empty value"
    if _INTEGER_RE.fullmatch(raw) is None:
        return "not an integer"
    return "outside the 64-bit integer range"


def parse_rfc3339(raw: str) -> Instant:
    """Parse a full RFC3339 date-time into a UTC Instant.

    Fractional digits past nanoseconds are truncated. A leap second
    (``23:59:60``) resolves to the following second.

    Raises:
        ValueError: Malformed text or an invalid calendar field.
    """
    match = _RFC3339_RE.fullmatch(raw)
    if match is None:
        msg = f"not an RFC3339 date-time: {raw!r}"
        raise ValueError(msg)

    fraction = (match["fraction"] or "")[:9].ljust(9, "0")
    micros, nanos = divmod(int(fraction), 1_000)
    second = int(match["second"])
    # datetime has no leap seconds; :60 counts as the first instant of the next second.
    leap = second == 60
    moment = datetime(
        int(match["year"]),
        int(match["month"]),
        int(match["day"]),
        int(match["hour"]),
        int(match["minute"]),
        59 if leap else second,
        micros,
        tzinfo=_parse_offset(match["offset"]),
    )
    try:
        if leap:
            moment += timedelta(seconds=1)
        return Instant.from_datetime(moment, nanos)
    except OverflowError as exc:
        raise ValueError(f"date-time out of range: {raw!r}") from exc


def _parse_offset(text: str) -> timezone:
    if text in ("Z", "z"):
        return UTC
    hours, minutes = int(text[1:3]), int(text[4:6])
    if hours > 23 or minutes > 59:
        msg = f"invalid UTC offset: {text!r}"
        raise ValueError(msg)
    delta = timedelta(hours=hours, minutes=minutes)
    return timezone(-delta if text[0] == "-" else delta)


def classify(raw: str, now: Instant) -> DateInput:
    """Classify the raw date argument and resolve it to an Instant.

    Args:
        raw: The date argument exactly as given on the command line.
        now: Current instant, used when *raw* is ``now``.

    Raises:
        UnsupportedTimestampLengthError: Integer input of an unsupported length.
        TimestampOutOfRangeError: Integer input outside the datetime range.
        UnsupportedDateValueError: Anything else that is not RFC3339.
    """
    if raw == NOW_TOKEN:
        return DateInput(InputKind.NOW, now)

    value = parse_int64(raw)
    if value is not None:
        unit = TIMESTAMP_LENGTHS.get(len(raw))
        if unit is None:
            raise UnsupportedTimestampLengthError(len(raw))
        try:
            instant = Instant.from_epoch(value, unit)
        except OverflowError as exc:
            raise TimestampOutOfRangeError(raw) from exc
        return DateInput(InputKind.TIMESTAMP, instant)

    try:
        instant = parse_rfc3339(raw)
    except ValueError as exc:
        raise UnsupportedDateValueError(raw) from exc
    return DateInput(InputKind.DATETIME, instant)
