from __future__ import annotations

from datetime import datetime

from ..entity import BaseEntity
from .events import TodoItemCompletedEvent
from .priority import PriorityLevel


class TodoItem(BaseEntity):
    """A single task inside a :class:`~exemplum.domain.todo.todo_list.TodoList`.

    ``done`` may be set when the item is created (e.g. when seeding or
    rehydrating from storage) but afterwards only :meth:`mark_as_done`
    changes it, so completing an item always queues its event.
    """

    list_id: int
    title: str
    note: str = ""
    priority: PriorityLevel = PriorityLevel.NONE
    reminder: datetime | None = None
    done: bool = False

    def mark_as_done(self) -> None:
        """Complete the item. Completing an already done item is a no-op."""
        if self.done:
            return
        self.done = True
        self._record_event(TodoItemCompletedEvent(item=self))

    def set_priority(self, priority: PriorityLevel) -> None:
        self.priority = priority

    def set_reminder(self, reminder: datetime | None) -> None:
        self.reminder = reminder

    def update_note(self, note: str) -> None:
        self.note = note
