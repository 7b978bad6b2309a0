"""Todo aggregate: lists, items, colours, priorities and their events."""

from __future__ import annotations

from .colour import PALETTE, Colour
from .events import TodoItemCompletedEvent
from .priority import PriorityLevel
from .todo_item import TodoItem
from .todo_list import TodoList

TodoItemCompletedEvent.model_rebuild(_types_namespace={"TodoItem": TodoItem})

__all__: list[str] = [
    "PALETTE",
    "Colour",
    "PriorityLevel",
    "TodoItem",
    "TodoItemCompletedEvent",
    "TodoList",
]
