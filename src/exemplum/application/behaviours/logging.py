"""LoggingBehaviour: logs request dispatch and its outcome."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ...ports.behaviour import NextStage
    from ...ports.current_user import ICurrentUserService
    from ..request import Request
    from ..response import Response

logger = logging.getLogger("exemplum.pipeline")


class LoggingBehaviour:
    """Logs request name, correlation id, user and elapsed time.

    Logging must never fail the request: errors while resolving the user
    are logged at debug level and the request proceeds.
    """

    def __init__(self, current_user: ICurrentUserService | None = None) -> None:
        self._current_user = current_user

    def _resolve_user_id(self) -> str | None:
        if self._current_user is None:
            return None
        try:
            return self._current_user.user_id
        except Exception as e:  # noqa: BLE001
            logger.debug("Could not resolve current user for logging: %s", e)
            return None

    async def __call__(
        self,
        request: Request[Any],
        next_stage: NextStage,
    ) -> Response[Any]:
        name = request.request_name()
        logger.info(
            "Handling %s (correlation_id=%s, user_id=%s)",
            name,
            request.correlation_id,
            self._resolve_user_id(),
        )
        start = time.perf_counter()
        response = await next_stage(request)
        elapsed = (time.perf_counter() - start) * 1000
        if response.is_success:
            logger.info("%s completed in %.2fms", name, elapsed)
        else:
            kind = response.error.kind.value if response.error else "unknown"
            logger.warning("%s failed (%s) after %.2fms", name, kind, elapsed)
        return response
