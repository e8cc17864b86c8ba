"""Exception hierarchy for date conversion.

Each error carries a stable ``code`` (surfaced as ``ServiceError.code``),
the ``stage`` of the pipeline that failed, and a ``detail`` mapping with
the offending input.
"""

from __future__ import annotations

from typing import Any, ClassVar


class ConversionError(Exception):
    """Base exception for every conversion failure."""

    code: ClassVar[str] = "CONVERSION_ERROR"
    stage: ClassVar[str] = "convert"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class ParseError(ConversionError):
    """Raised when a date or operation argument cannot be parsed."""

    code: ClassVar[str] = "PARSE_ERROR"


class UnsupportedTimestampLengthError(ParseError):
    """Numeric input whose length is not 10, 13, 16, or 19 characters."""

    code: ClassVar[str] = "UNSUPPORTED_TIMESTAMP_LENGTH"
    stage: ClassVar[str] = "date"

    def __init__(self, length: int) -> None:
        super().__init__(f"Timestamp of size {length} is not supported", length=length)
        self.length = length


class TimestampOutOfRangeError(ParseError):
    """Numeric input that resolves outside the representable date range."""

    code: ClassVar[str] = "TIMESTAMP_OUT_OF_RANGE"
    stage: ClassVar[str] = "date"

    def __init__(self, raw: str) -> None:
        super().__init__(f"Timestamp '{raw}' is out of range", raw=raw)
        self.raw = raw


class UnsupportedDateValueError(ParseError):
    """Input that is neither ``now``, an integer, nor valid RFC3339."""

    code: ClassVar[str] = "UNSUPPORTED_DATE_VALUE"
    stage: ClassVar[str] = "date"

    def __init__(self, raw: str) -> None:
        super().__init__(f"Unsupported date value '{raw}'", raw=raw)
        self.raw = raw


class InvalidOperationError(ParseError):
    """Operation shorter than ``<sign><digit><unit>``."""

    code: ClassVar[str] = "INVALID_OPERATION"
    stage: ClassVar[str] = "operation"

    def __init__(self, raw: str) -> None:
        super().__init__(f"Invalid operation {raw}", raw=raw)
        self.raw = raw


class UnrecognizedSymbolError(ParseError):
    """Operation that does not start with ``+`` or ``-``."""

    code: ClassVar[str] = "UNRECOGNIZED_SYMBOL"
    stage: ClassVar[str] = "operation"

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Unrecognized symbol {symbol}", symbol=symbol)
        self.symbol = symbol


class UnsupportedUnitError(ParseError):
    """Operation whose last character is not a known unit code."""

    code: ClassVar[str] = "UNSUPPORTED_UNIT"
    stage: ClassVar[str] = "operation"

    def __init__(self, unit: str) -> None:
        super().__init__(f"Unsupported unit {unit}", unit=unit)
        self.unit = unit


class InvalidValueError(ParseError):
    """Operation magnitude that is not a 64-bit integer."""

    code: ClassVar[str] = "INVALID_VALUE"
    stage: ClassVar[str] = "operation"

    def __init__(self, value: str, reason: str = "not a 64-bit integer") -> None:
        super().__init__(f"Invalid value '{value}': {reason}", value=value, reason=reason)
        self.value = value
        self.reason = reason


class OperationOutOfRangeError(ConversionError):
    """Applying an operation leaves the representable date range."""

    code: ClassVar[str] = "OPERATION_OUT_OF_RANGE"
    stage: ClassVar[str] = "apply"

    def __init__(self, raw: str) -> None:
        super().__init__(f"Operation '{raw}' moves the date out of range", raw=raw)
        self.raw = raw


class InvalidUtcOffsetError(ConversionError):
    """A configured UTC offset that is not ``Z`` or ``±HH:MM``."""

    code: ClassVar[str] = "INVALID_UTC_OFFSET"
    stage: ClassVar[str] = "config"

    def __init__(self, raw: str) -> None:
        super().__init__(f"Invalid UTC offset '{raw}'", raw=raw)
        self.raw = raw
