"""SQLAlchemy-backed persistence."""

from __future__ import annotations

from .db_context import (
    ApplicationDbContext,
    EntityState,
    TodoItemRepository,
    TodoListRepository,
)
from .engine import IN_MEMORY_URL, create_engine, create_schema, create_session_factory
from .exception_handling import (
    DbExceptionHandler,
    PostgresUniqueViolationHandler,
    SqliteUniqueConstraintHandler,
    SqlServerDuplicateKeyHandler,
)
from .model_mapper import MappingError, ModelMapper
from .models import Base, TodoItemModel, TodoListModel
from .seed import seed_sample_data

__all__ = [
    "IN_MEMORY_URL",
    "ApplicationDbContext",
    "Base",
    "DbExceptionHandler",
    "EntityState",
    "MappingError",
    "ModelMapper",
    "PostgresUniqueViolationHandler",
    "SqlServerDuplicateKeyHandler",
    "SqliteUniqueConstraintHandler",
    "TodoItemModel",
    "TodoItemRepository",
    "TodoListModel",
    "TodoListRepository",
    "create_engine",
    "create_schema",
    "create_session_factory",
    "seed_sample_data",
]
