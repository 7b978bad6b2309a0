from __future__ import annotations

from ..request import Command
from .models import TodoItemDto, TodoListDto


class CreateTodoListCommand(Command[TodoListDto]):
    title: str = ""
    colour: str | None = None


class CreateTodoItemCommand(Command[TodoItemDto]):
    list_id: int
    title: str = ""
    note: str = ""


class MarkTodoItemCompleteCommand(Command[TodoItemDto]):
    list_id: int
    todo_id: int


class DeleteTodoItemCommand(Command[None]):
    list_id: int
    todo_id: int
