"""build_pipeline: construct the stage chain."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..ports.behaviour import IPipelineBehaviour, NextStage
    from .request import Request
    from .response import Response


def build_pipeline(
    behaviours: list[IPipelineBehaviour],
    dispatch: NextStage,
) -> NextStage:
    """Build a LIFO stage chain ending at *dispatch*.

    The first behaviour in the list is the **outermost** wrapper.
    Each behaviour must implement: ``async def __call__(request, next_stage)``.
    """
    pipeline = dispatch

    for behaviour in reversed(behaviours):
        current_next = pipeline  # capture for closure

        async def _wrapper(
            request: Request[Any],
            _behaviour: IPipelineBehaviour = behaviour,
            _next: NextStage = current_next,
        ) -> Response[Any]:
            return await _behaviour(request, _next)

        pipeline = _wrapper

    return pipeline
