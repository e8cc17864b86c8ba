"""Conversion pipeline: classify, shift, and render.

``resolve`` returns the intermediate :class:`Conversion` value used by the
service layer; ``convert`` renders it straight to the three output lines.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, timezone
from typing import TYPE_CHECKING

from dconv.domain.classify import DateInput, classify
from dconv.domain.errors import OperationOutOfRangeError, TimestampOutOfRangeError
from dconv.domain.operations import Operation, parse_operation

if TYPE_CHECKING:
    from dconv.domain.clock import Clock
    from dconv.domain.instant import Instant


@dataclass(frozen=True, slots=True)
class Conversion:
    """A resolved conversion with its rendered representations."""

    source: DateInput
    operation: Operation | None
    instant: Instant
    offset: timezone
    utc: str
    local: str

    @property
    def timestamp_millis(self) -> int:
        return self.instant.timestamp_millis

    def render(self) -> str:
        """UTC RFC3339, local RFC3339, and millisecond epoch, one per line."""
        return "\n".join((self.utc, self.local, str(self.timestamp_millis)))


def resolve(
    date_input: str,
    operation_input: str | None = None,
    *,
    clock: Clock,
) -> Conversion:
    """Resolve the date argument, apply the optional operation, and render.

    The clock snapshot is taken before anything else, even when the date
    argument does not need the current instant.

    Raises:
        ConversionError: Any classification, parsing, or range failure.
    """
    snapshot = clock.snapshot()
    source = classify(date_input, snapshot.now)

    operation: Operation | None = None
    instant = source.instant
    if operation_input is not None:
        operation = parse_operation(operation_input)
        try:
            instant = operation.apply(instant)
        except OverflowError as exc:
            raise OperationOutOfRangeError(operation_input) from exc

    try:
        utc = instant.to_rfc3339(UTC)
        local = instant.to_rfc3339(snapshot.offset)
    except OverflowError as exc:
        if operation_input is not None:
            raise OperationOutOfRangeError(operation_input) from exc
        raise TimestampOutOfRangeError(date_input) from exc

    return Conversion(
        source=source,
        operation=operation,
        instant=instant,
        offset=snapshot.offset,
        utc=utc,
        local=local,
    )


def convert(date_input: str, operation_input: str | None = None, *, clock: Clock) -> str:
    """Convert *date_input*, shifted by *operation_input*, to three output lines."""
    return resolve(date_input, operation_input, clock=clock).render()
