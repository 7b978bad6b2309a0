"""UnhandledExceptionBehaviour: turns escaping exceptions into envelopes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..response import Response

if TYPE_CHECKING:
    from ...ports.behaviour import NextStage
    from ..exceptions.converter import IExceptionToErrorConverter
    from ..request import Request

logger = logging.getLogger("exemplum.pipeline")


class UnhandledExceptionBehaviour:
    """Catches any ``Exception`` raised downstream.

    The exception is logged with its traceback and converted into an
    :class:`~exemplum.application.response.ErrorEnvelope`; callers get a
    failed :class:`Response` instead of an exception. ``BaseException``
    subclasses such as ``asyncio.CancelledError`` are not caught.
    """

    def __init__(self, converter: IExceptionToErrorConverter) -> None:
        self._converter = converter

    async def __call__(
        self,
        request: Request[Any],
        next_stage: NextStage,
    ) -> Response[Any]:
        try:
            return await next_stage(request)
        except Exception as exc:
            logger.exception(
                "Unhandled exception for request %s (correlation_id=%s)",
                request.request_name(),
                request.correlation_id,
            )
            envelope = self._converter.convert(exc)
            return Response.fail(envelope, correlation_id=request.correlation_id)
