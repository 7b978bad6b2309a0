"""IPipelineBehaviour: one stage of the request pipeline."""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any,
    Protocol,
    runtime_checkable,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from ..application.request import Request
    from ..application.response import Response

    NextStage = Callable[[Request[Any]], Awaitable[Response[Any]]]


@runtime_checkable
class IPipelineBehaviour(Protocol):
    """Protocol for a stage wrapping request dispatch.

    A stage may inspect the request, short-circuit with its own
    :class:`~exemplum.application.response.Response`, or call
    ``next_stage`` to continue. Stages are chained so that the first one in
    the list is the outermost.
    """

    async def __call__(
        self,
        request: Request[Any],
        next_stage: NextStage,
    ) -> Response[Any]:
        """Run the stage and, to proceed, await ``next_stage(request)``."""
        ...
