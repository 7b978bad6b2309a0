"""Mediator: the single entry point for sending requests."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar, cast

from ..correlation import generate_correlation_id
from ..primitives.exceptions import HandlerNotFoundError
from .behaviours import (
    AuthorizationBehaviour,
    CachingBehaviour,
    LoggingBehaviour,
    UnhandledExceptionBehaviour,
    ValidationBehaviour,
)
from .exceptions import ExceptionToErrorConverter, default_converters
from .pipeline import build_pipeline
from .response import Response

if TYPE_CHECKING:
    from ..ports.behaviour import IPipelineBehaviour, NextStage
    from ..ports.cache import ICacheService
    from ..ports.current_user import ICurrentUserService
    from .exceptions import IExceptionToErrorConverter
    from .registry import RequestRegistry
    from .request import Request

logger = logging.getLogger("exemplum.application")

TResult = TypeVar("TResult")


class Mediator:
    """Routes every request through the fixed stage chain to its handler.

    Stage order, outermost first::

        Logging → UnhandledException → Authorization → Validation
            → Caching → handler dispatch

    The chain is built once, at construction. Handlers are looked up in
    the :class:`~exemplum.application.registry.RequestRegistry` at dispatch
    time, so a missing handler surfaces as an ``INTERNAL_ERROR`` response
    like any other failure.

    Parameters
    ----------
    registry:
        Handlers, validators, policies and cache settings per request type.
    current_user:
        Source of the principal for the logging and authorization stages.
    cache:
        Store used by the caching stage.
    converter:
        Optional exception converter; defaults to the built-in converters.
    """

    def __init__(
        self,
        registry: RequestRegistry,
        current_user: ICurrentUserService,
        cache: ICacheService,
        *,
        converter: IExceptionToErrorConverter | None = None,
    ) -> None:
        self._registry = registry
        self._converter = converter or ExceptionToErrorConverter(default_converters())
        self._behaviours: list[IPipelineBehaviour] = [
            LoggingBehaviour(current_user),
            UnhandledExceptionBehaviour(self._converter),
            AuthorizationBehaviour(registry, current_user),
            ValidationBehaviour(registry),
            CachingBehaviour(registry, cache),
        ]
        self._pipeline: NextStage = build_pipeline(self._behaviours, self._dispatch)

    @property
    def behaviours(self) -> list[IPipelineBehaviour]:
        """The stages in chain order (outermost first)."""
        return list(self._behaviours)

    async def send(self, request: Request[TResult]) -> Response[TResult]:
        """Send *request* through the pipeline.

        Never raises for handler or stage failures: the outcome is either
        ``Response.ok(result)`` or ``Response.fail(envelope)``.
        """
        if not request.correlation_id:
            request = request.model_copy(
                update={"correlation_id": generate_correlation_id()}
            )
        response = await self._pipeline(request)
        return cast("Response[TResult]", response)

    async def _dispatch(self, request: Request[Any]) -> Response[Any]:
        handler = self._registry.get_handler(type(request))
        if handler is None:
            raise HandlerNotFoundError(
                f"No handler registered for request {request.request_name()}"
            )
        result = await handler.handle(request)
        return Response.ok(result, correlation_id=request.correlation_id)


__all__ = ["Mediator"]
