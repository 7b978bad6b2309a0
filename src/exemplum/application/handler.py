"""Handler base classes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from .request import Request

TResult = TypeVar("TResult")  # Result type
E = TypeVar("E")  # Event type


class RequestHandler(ABC, Generic[TResult]):
    """Base class for request handlers.

    A handler implements exactly one request type and is registered for it
    with :meth:`~exemplum.application.registry.RequestRegistry.register_handler`.
    It returns the plain result; the mediator wraps it in a
    :class:`~exemplum.application.response.Response`.

    Usage::

        class GetTodoListsQueryHandler(RequestHandler[list[TodoListDto]]):
            async def handle(self, query: GetTodoListsQuery) -> list[TodoListDto]:
                ...
    """

    @abstractmethod
    async def handle(self, request: Request[Any]) -> TResult:
        """Execute the request and return its result."""
        ...


class EventHandler(ABC, Generic[E]):
    """Base class for domain-event handlers.

    Handlers must be subscribed explicitly with the event publisher.

    Usage::

        class TodoItemCompletedHandler(EventHandler[TodoItemCompletedEvent]):
            async def handle(self, event: TodoItemCompletedEvent) -> None:
                ...
    """

    @abstractmethod
    async def handle(self, event: E) -> None:
        """React to the domain event."""
        ...
