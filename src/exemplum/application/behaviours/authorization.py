"""AuthorizationBehaviour: enforces the policies registered per request type."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..response import ErrorEnvelope, Response

if TYPE_CHECKING:
    from ...ports.behaviour import NextStage
    from ...ports.current_user import ICurrentUserService
    from ..registry import RequestRegistry
    from ..request import Request

logger = logging.getLogger("exemplum.pipeline")


class AuthorizationBehaviour:
    """Short-circuits with ``UNAUTHORIZED`` unless every requirement holds.

    Requests without registered policies pass straight through, with or
    without a principal.
    """

    def __init__(
        self, registry: RequestRegistry, current_user: ICurrentUserService
    ) -> None:
        self._registry = registry
        self._current_user = current_user

    async def __call__(
        self,
        request: Request[Any],
        next_stage: NextStage,
    ) -> Response[Any]:
        policies = self._registry.get_policies(type(request))
        if not policies:
            return await next_stage(request)

        principal = self._current_user.principal
        if principal is None:
            logger.info(
                "Rejected %s: no authenticated principal", request.request_name()
            )
            return Response.fail(
                ErrorEnvelope.unauthorized(), correlation_id=request.correlation_id
            )

        for requirement in policies:
            if not requirement.is_satisfied_by(principal):
                logger.info(
                    "Rejected %s: %s does not satisfy policy %s",
                    request.request_name(),
                    principal.user_id,
                    requirement.name,
                )
                return Response.fail(
                    ErrorEnvelope.unauthorized(),
                    correlation_id=request.correlation_id,
                )

        return await next_stage(request)
