"""Events raised by the todo aggregate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..events import DomainEvent

if TYPE_CHECKING:
    from .todo_item import TodoItem


class TodoItemCompletedEvent(DomainEvent):
    """A todo item was marked as done.

    Holds the item itself so subscribers see the id assigned by the store
    when the event is published after a save.
    """

    item: TodoItem
