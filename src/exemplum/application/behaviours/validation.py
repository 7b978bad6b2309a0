"""ValidationBehaviour: runs the validators registered for a request type."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ...validation.result import ValidationResult
from ..response import ErrorEnvelope, Response

if TYPE_CHECKING:
    from ...ports.behaviour import NextStage
    from ..registry import RequestRegistry
    from ..request import Request


class ValidationBehaviour:
    """Runs every registered validator and merges their errors.

    All validators run, in registration order; messages for the same field
    are concatenated in that order.

    If the merged result is invalid the handler does not run and a
    ``VALIDATION_FAILED`` envelope with ``{field: [messages]}`` is returned.
    """

    def __init__(self, registry: RequestRegistry) -> None:
        self._registry = registry

    async def __call__(
        self,
        request: Request[Any],
        next_stage: NextStage,
    ) -> Response[Any]:
        validators = self._registry.get_validators(type(request))
        if not validators:
            return await next_stage(request)

        result = ValidationResult.success()
        for validator in validators:
            result = result.merge(await validator.validate(request))
        if not result.is_valid:
            return Response.fail(
                ErrorEnvelope.validation_failed(result.errors),
                correlation_id=request.correlation_id,
            )
        return await next_stage(request)
