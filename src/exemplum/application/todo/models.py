"""Todo read models returned by the handlers."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from ...domain.todo import PriorityLevel, TodoItem, TodoList


class TodoListDto(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    colour: str

    @classmethod
    def from_entity(cls, todo_list: TodoList) -> TodoListDto:
        return cls(
            id=todo_list.id or 0,
            title=todo_list.title,
            colour=todo_list.colour.code,
        )


class TodoItemDto(BaseModel):
    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int
    list_id: int
    title: str
    note: str = ""
    priority: PriorityLevel = PriorityLevel.NONE
    reminder: datetime | None = None
    done: bool = False

    @classmethod
    def from_entity(cls, item: TodoItem) -> TodoItemDto:
        return cls.model_validate(item)
