from __future__ import annotations

from ..request import Query
from .models import TodoItemDto, TodoListDto


class GetTodoListsQuery(Query[list[TodoListDto]]):
    pass


class GetTodoListByIdQuery(Query[TodoListDto]):
    list_id: int


class GetTodoItemsInListQuery(Query[list[TodoItemDto]]):
    list_id: int
