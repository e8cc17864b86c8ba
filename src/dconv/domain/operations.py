"""Operation mini-language: ``<+|-><integer><s|m|h|d>``.

The leading symbol picks the direction and the magnitude keeps its own
sign, so ``--5h`` subtracts minus five hours (a net shift of +5h).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from dconv.domain.classify import int64_failure_reason, parse_int64
from dconv.domain.errors import (
    InvalidOperationError,
    InvalidValueError,
    UnrecognizedSymbolError,
    UnsupportedUnitError,
)
from dconv.domain.instant import Instant
from dconv.domain.types import OperationKind, Unit

MIN_OPERATION_LENGTH = 3


@dataclass(frozen=True, slots=True)
class Duration:
    """A signed span expressed as ``magnitude`` of ``unit``."""

    unit: Unit
    magnitude: int

    def to_timedelta(self) -> timedelta:
        """Convert to a :class:`timedelta`.

        Raises:
            OverflowError: The span exceeds what timedelta can hold.
        """
        return timedelta(**{self.unit.timedelta_field: self.magnitude})

    def __str__(self) -> str:
        return f"{self.magnitude}{self.unit}"


@dataclass(frozen=True, slots=True)
class Operation:
    """An add or subtract shift of a :class:`Duration`."""

    kind: OperationKind
    duration: Duration

    def apply(self, instant: Instant) -> Instant:
        """Shift *instant* by the duration.

        Raises:
            OverflowError: The result falls outside the datetime range.
        """
        delta = self.duration.to_timedelta()
        if self.kind is OperationKind.ADD:
            return instant + delta
        return instant - delta

    def __str__(self) -> str:
        return f"{self.kind}{self.duration}"


def parse_operation(raw: str) -> Operation:
    """Parse an operation string such as ``+10m`` or ``-3h``.

    Checks run in order: length, symbol, value, unit.

    Raises:
        InvalidOperationError: Fewer than three characters.
        UnrecognizedSymbolError: First character is not ``+`` or ``-``.
        InvalidValueError: The middle is not a 64-bit integer.
        UnsupportedUnitError: Last character is not ``s``, ``m``, ``h``, or ``d``.
    """
    if len(raw) < MIN_OPERATION_LENGTH:
        raise InvalidOperationError(raw)

    symbol, value_text, unit_code = raw[0], raw[1:-1], raw[-1]
    try:
        kind = OperationKind(symbol)
    except ValueError:
        raise UnrecognizedSymbolError(symbol) from None

    magnitude = parse_int64(value_text)
    if magnitude is None:
        raise InvalidValueError(value_text, int64_failure_reason(value_text))

    try:
        unit = Unit(unit_code)
    except ValueError:
        raise UnsupportedUnitError(unit_code) from None
    return Operation(kind, Duration(unit, magnitude))
