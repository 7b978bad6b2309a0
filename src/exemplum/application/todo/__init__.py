from __future__ import annotations

from .commands import (
    CreateTodoItemCommand,
    CreateTodoListCommand,
    DeleteTodoItemCommand,
    MarkTodoItemCompleteCommand,
)
from .event_handlers import TodoItemCompletedEventHandler
from .handlers import (
    CreateTodoItemCommandHandler,
    CreateTodoListCommandHandler,
    DeleteTodoItemCommandHandler,
    GetTodoItemsInListQueryHandler,
    GetTodoListByIdQueryHandler,
    GetTodoListsQueryHandler,
    MarkTodoItemCompleteCommandHandler,
)
from .models import TodoItemDto, TodoListDto
from .queries import GetTodoItemsInListQuery, GetTodoListByIdQuery, GetTodoListsQuery
from .validators import CreateTodoItemCommandValidator, CreateTodoListCommandValidator

__all__ = [
    "CreateTodoItemCommand",
    "CreateTodoItemCommandHandler",
    "CreateTodoItemCommandValidator",
    "CreateTodoListCommand",
    "CreateTodoListCommandHandler",
    "CreateTodoListCommandValidator",
    "DeleteTodoItemCommand",
    "DeleteTodoItemCommandHandler",
    "GetTodoItemsInListQuery",
    "GetTodoItemsInListQueryHandler",
    "GetTodoListByIdQuery",
    "GetTodoListByIdQueryHandler",
    "GetTodoListsQuery",
    "GetTodoListsQueryHandler",
    "MarkTodoItemCompleteCommand",
    "MarkTodoItemCompleteCommandHandler",
    "TodoItemCompletedEventHandler",
    "TodoItemDto",
    "TodoListDto",
]
