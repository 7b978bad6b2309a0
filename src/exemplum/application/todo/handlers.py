"""Todo request handlers.

Each handler opens its own :class:`~exemplum.ports.persistence.IApplicationDbContext`
from the injected factory, so concurrent requests never share a session.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...domain.todo import Colour, TodoItem, TodoList
from ...primitives.exceptions import EntityNotFoundError
from ..handler import RequestHandler
from .models import TodoItemDto, TodoListDto

if TYPE_CHECKING:
    from ...ports.persistence import (
        DbContextFactory,
        IApplicationDbContext,
    )
    from .commands import (
        CreateTodoItemCommand,
        CreateTodoListCommand,
        DeleteTodoItemCommand,
        MarkTodoItemCompleteCommand,
    )
    from .queries import (
        GetTodoItemsInListQuery,
        GetTodoListByIdQuery,
        GetTodoListsQuery,
    )

logger = logging.getLogger("exemplum.todo")


async def _get_list(db: IApplicationDbContext, list_id: int) -> TodoList:
    todo_list = await db.todo_lists.get(list_id)
    if todo_list is None:
        raise EntityNotFoundError("TodoList", list_id)
    return todo_list


async def _get_item(db: IApplicationDbContext, list_id: int, todo_id: int) -> TodoItem:
    item = await db.todo_items.get(todo_id)
    if item is None or item.list_id != list_id:
        raise EntityNotFoundError("TodoItem", todo_id)
    return item


class _DbHandler:
    def __init__(self, db_context_factory: DbContextFactory) -> None:
        self._db = db_context_factory


class CreateTodoListCommandHandler(_DbHandler, RequestHandler[TodoListDto]):
    async def handle(self, request: CreateTodoListCommand) -> TodoListDto:  # type: ignore[override]
        colour = Colour.from_code(request.colour) if request.colour else Colour.white()
        todo_list = TodoList(title=request.title, colour=colour)
        async with self._db() as db:
            db.todo_lists.add(todo_list)
            await db.save_changes()
        logger.info("Created todo list %s (%s)", todo_list.id, todo_list.title)
        return TodoListDto.from_entity(todo_list)


class GetTodoListsQueryHandler(_DbHandler, RequestHandler[list[TodoListDto]]):
    async def handle(self, request: GetTodoListsQuery) -> list[TodoListDto]:  # type: ignore[override]
        async with self._db() as db:
            lists = await db.todo_lists.list_all()
        return [TodoListDto.from_entity(todo_list) for todo_list in lists]


class GetTodoListByIdQueryHandler(_DbHandler, RequestHandler[TodoListDto]):
    async def handle(self, request: GetTodoListByIdQuery) -> TodoListDto:  # type: ignore[override]
        async with self._db() as db:
            todo_list = await _get_list(db, request.list_id)
        return TodoListDto.from_entity(todo_list)


class CreateTodoItemCommandHandler(_DbHandler, RequestHandler[TodoItemDto]):
    async def handle(self, request: CreateTodoItemCommand) -> TodoItemDto:  # type: ignore[override]
        async with self._db() as db:
            await _get_list(db, request.list_id)
            item = TodoItem(list_id=request.list_id, title=request.title, note=request.note)
            db.todo_items.add(item)
            await db.save_changes()
        return TodoItemDto.from_entity(item)


class GetTodoItemsInListQueryHandler(_DbHandler, RequestHandler[list[TodoItemDto]]):
    async def handle(self, request: GetTodoItemsInListQuery) -> list[TodoItemDto]:  # type: ignore[override]
        async with self._db() as db:
            await _get_list(db, request.list_id)
            items = await db.todo_items.list_in(request.list_id)
        return [TodoItemDto.from_entity(item) for item in items]


class MarkTodoItemCompleteCommandHandler(_DbHandler, RequestHandler[TodoItemDto]):
    async def handle(self, request: MarkTodoItemCompleteCommand) -> TodoItemDto:  # type: ignore[override]
        async with self._db() as db:
            item = await _get_item(db, request.list_id, request.todo_id)
            item.mark_as_done()
            await db.save_changes()
        return TodoItemDto.from_entity(item)


class DeleteTodoItemCommandHandler(_DbHandler, RequestHandler[None]):
    async def handle(self, request: DeleteTodoItemCommand) -> None:  # type: ignore[override]
        async with self._db() as db:
            item = await _get_item(db, request.list_id, request.todo_id)
            db.todo_items.remove(item)
            await db.save_changes()
        logger.info("Deleted todo item %s from list %s", request.todo_id, request.list_id)


__all__ = [
    "CreateTodoItemCommandHandler",
    "CreateTodoListCommandHandler",
    "DeleteTodoItemCommandHandler",
    "GetTodoItemsInListQueryHandler",
    "GetTodoListByIdQueryHandler",
    "GetTodoListsQueryHandler",
    "MarkTodoItemCompleteCommandHandler",
]
