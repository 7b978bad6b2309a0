"""Domain primitives: entities, events and the todo aggregate."""

from __future__ import annotations

from .entity import BaseEntity
from .events import DomainEvent
from .todo import (
    Colour,
    PriorityLevel,
    TodoItem,
    TodoItemCompletedEvent,
    TodoList,
)

__all__: list[str] = [
    "BaseEntity",
    "Colour",
    "DomainEvent",
    "PriorityLevel",
    "TodoItem",
    "TodoItemCompletedEvent",
    "TodoList",
]
