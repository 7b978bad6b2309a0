"""Persistence ports used by the application handlers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..domain.todo import TodoItem, TodoList


class ITodoListRepository(Protocol):
    async def get(self, list_id: int) -> TodoList | None: ...

    async def list_all(self) -> list[TodoList]: ...

    def add(self, todo_list: TodoList) -> None: ...

    def remove(self, todo_list: TodoList) -> None: ...


class ITodoItemRepository(Protocol):
    async def get(self, todo_id: int) -> TodoItem | None: ...

    async def list_in(self, list_id: int) -> list[TodoItem]: ...

    def add(self, item: TodoItem) -> None: ...

    def remove(self, item: TodoItem) -> None: ...


@runtime_checkable
class IApplicationDbContext(Protocol):
    """Unit of work scope: open with ``async with``, finish with ``save_changes``."""

    todo_lists: ITodoListRepository
    todo_items: ITodoItemRepository

    async def __aenter__(self) -> IApplicationDbContext: ...

    async def __aexit__(self, *exc_info: Any) -> None: ...

    async def save_changes(self) -> int:
        """Persist tracked changes, then publish queued domain events.

        Returns the number of entities written.
        """
        ...


if TYPE_CHECKING:
    DbContextFactory = Callable[[], IApplicationDbContext]
