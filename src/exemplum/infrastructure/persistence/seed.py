"""Sample data for a fresh database."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...domain.todo import TodoItem, TodoList
from ...primitives.exceptions import PersistenceError

if TYPE_CHECKING:
    from .db_context import ApplicationDbContext

logger = logging.getLogger("exemplum.persistence")

SAMPLE_LIST_TITLE = "Todo List"
SAMPLE_ITEMS = (
    "Make a todo list",
    "Check off the first item",
    "Realise you have already done two things on the list!",
)


async def seed_sample_data(db: ApplicationDbContext) -> bool:
    """Add one sample list with three items when the store is empty.

    Returns True when data was added.
    """
    if await db.todo_lists.list_all():
        return False

    todo_list = TodoList(title=SAMPLE_LIST_TITLE)
    db.todo_lists.add(todo_list)
    await db.save_changes()

    if todo_list.id is None:
        raise PersistenceError("Sample todo list was not assigned an id")
    for title in SAMPLE_ITEMS:
        db.todo_items.add(TodoItem(list_id=todo_list.id, title=title))
    await db.save_changes()

    logger.info("Seeded sample todo list with %d items", len(SAMPLE_ITEMS))
    return True


__all__ = ["SAMPLE_ITEMS", "SAMPLE_LIST_TITLE", "seed_sample_data"]
