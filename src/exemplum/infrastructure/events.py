"""DomainEventPublisher: in-process delivery of domain events."""

from __future__ import annotations

import logging
from inspect import isawaitable
from typing import TYPE_CHECKING, Any, cast

from ..domain.events import DomainEvent

if TYPE_CHECKING:
    from ..ports.events import EventHandler

logger = logging.getLogger("exemplum.events")


class DomainEventPublisher:
    """Delivers each event to the handlers subscribed to its type.

    Handlers run one after another in subscription order; an event is also
    delivered to handlers subscribed to any of its base event types. A
    handler error is logged and propagated to the caller, so the remaining
    handlers for that event are not run.
    """

    def __init__(self) -> None:
        self._handlers: dict[type[DomainEvent], list[EventHandler[Any]]] = {}

    # ── Registration ─────────────────────────────────────────────

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler[Any],
    ) -> None:
        """Subscribe a handler (callable or object with ``handle``) to an event type."""
        handlers = self._handlers.setdefault(event_type, [])
        if handler not in handlers:
            handlers.append(handler)

    # ── Publishing ───────────────────────────────────────────────

    async def publish(self, event: DomainEvent) -> None:
        handlers = self._handlers_for(type(event))
        if not handlers:
            logger.debug("No handlers for %s", type(event).__name__)
            return
        for handler in handlers:
            await self._invoke(handler, event)

    def _handlers_for(self, event_type: type[DomainEvent]) -> list[EventHandler[Any]]:
        handlers: list[EventHandler[Any]] = []
        for cls in event_type.__mro__:
            for handler in self._handlers.get(cast("type[DomainEvent]", cls), []):
                if handler not in handlers:
                    handlers.append(handler)
        return handlers

    async def _invoke(self, handler: EventHandler[Any], event: DomainEvent) -> None:
        try:
            if hasattr(handler, "handle"):
                result = handler.handle(event)
            elif callable(handler):
                result = handler(event)
            else:
                raise TypeError("Handler must be a callable or have a handle() method")

            if isawaitable(result):
                await result
        except Exception:
            logger.exception(
                "Error executing handler %s for event %s",
                type(handler).__name__,
                type(event).__name__,
            )
            raise


__all__ = ["DomainEventPublisher"]
