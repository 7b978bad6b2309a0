"""Domain event publishing ports."""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any,
    Protocol,
    TypeAlias,
    TypeVar,
    runtime_checkable,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable

    from ..domain.events import DomainEvent

E = TypeVar("E", bound="DomainEvent")
E_contra = TypeVar("E_contra", bound="DomainEvent", contravariant=True)


class EventHandlerProtocol(Protocol[E_contra]):
    """Protocol for handler objects with a handle(event) method."""

    def handle(self, event: E_contra) -> Awaitable[None] | None: ...


class EventHandlerCallable(Protocol[E_contra]):
    def __call__(self, event: E_contra) -> Awaitable[None] | None: ...


EventHandler: TypeAlias = "EventHandlerCallable[E] | EventHandlerProtocol[E]"


@runtime_checkable
class IPublishDomainEvents(Protocol):
    """Delivers a domain event to every subscriber registered for its type."""

    async def publish(self, event: DomainEvent) -> None: ...


@runtime_checkable
class ISubscribeDomainEvents(Protocol):
    """Registers handlers for a domain event type."""

    def subscribe(
        self, event_type: type[DomainEvent], handler: EventHandler[Any]
    ) -> None: ...
