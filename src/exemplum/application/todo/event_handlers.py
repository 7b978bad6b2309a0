from __future__ import annotations

import logging

from ...domain.todo import TodoItemCompletedEvent
from ..handler import EventHandler

logger = logging.getLogger("exemplum.todo")


class TodoItemCompletedEventHandler(EventHandler[TodoItemCompletedEvent]):
    async def handle(self, event: TodoItemCompletedEvent) -> None:
        logger.info(
            "Todo item completed: %s (id=%s, list_id=%s)",
            event.item.title,
            event.item.id,
            event.item.list_id,
        )
