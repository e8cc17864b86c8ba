"""Classification enums for date inputs, epoch units, and operations."""

from __future__ import annotations

from enum import StrEnum


class InputKind(StrEnum):
    """Shape of the raw date argument."""

    DATETIME = "datetime"
    TIMESTAMP = "timestamp"
    NOW = "now"


class EpochUnit(StrEnum):
    """Resolution of a numeric epoch timestamp."""

    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"
    MICROSECONDS = "microseconds"
    NANOSECONDS = "nanoseconds"

    @property
    def nanos(self) -> int:
        """Nanoseconds in one unit."""
        return _EPOCH_UNIT_NANOS[self]


_EPOCH_UNIT_NANOS: dict[EpochUnit, int] = {
    EpochUnit.SECONDS: 1_000_000_000,
    EpochUnit.MILLISECONDS: 1_000_000,
    EpochUnit.MICROSECONDS: 1_000,
    EpochUnit.NANOSECONDS: 1,
}


class Unit(StrEnum):
    """Duration unit codes accepted by the operation syntax."""

    SECONDS = "s"
    MINUTES = "m"
    HOURS = "h"
    DAYS = "d"

    @property
    def timedelta_field(self) -> str:
        """Keyword accepted by :class:`datetime.timedelta`."""
        return _UNIT_FIELDS[self]


_UNIT_FIELDS: dict[Unit, str] = {
    Unit.SECONDS: "seconds",
    Unit.MINUTES: "minutes",
    Unit.HOURS: "hours",
    Unit.DAYS: "days",
}


class OperationKind(StrEnum):
    """Direction of an operation, keyed by its leading symbol."""

    ADD = "+"
    SUBTRACT = "-"
