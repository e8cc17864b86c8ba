"""ConvertService — run a conversion and package it as a ServiceResult."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from dconv.domain.convert import resolve
from dconv.domain.errors import ConversionError
from dconv.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from dconv.domain.clock import Clock

log = structlog.get_logger(__name__)


class ConvertService:
    """Convert date arguments using an injected clock.

    The clock supplies the current instant for ``now`` and the local
    offset for the second output line, so tests can pin both.
    """

    def __init__(self, clock: Clock) -> None:
        self._clock = clock

    def convert(self, date_input: str, operation_input: str | None = None) -> ServiceResult:
        """Convert *date_input*, optionally shifted by *operation_input*.

        Failures are returned as ``ok=False`` results whose detail names the
        stage that failed (``date``, ``operation``, or ``apply``) and the
        argument it failed on.
        """
        op = "convert"
        try:
            conversion = resolve(date_input, operation_input, clock=self._clock)
        except ConversionError as exc:
            raw = date_input if exc.stage == "date" else operation_input
            log.debug("convert.failed", code=exc.code, stage=exc.stage, input=raw)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=exc.code,
                    message=exc.message,
                    detail={"stage": exc.stage, "input": raw, **exc.detail},
                ),
            )

        input_kind = str(conversion.source.kind)
        operation = str(conversion.operation) if conversion.operation else None
        log.debug(
            "convert.ok",
            input_kind=input_kind,
            operation=operation,
            timestamp_millis=conversion.timestamp_millis,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "utc": conversion.utc,
                "local": conversion.local,
                "timestamp_millis": conversion.timestamp_millis,
                "input_kind": input_kind,
                "operation": operation,
            },
        )
