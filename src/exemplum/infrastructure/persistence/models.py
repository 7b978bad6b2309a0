"""SQLAlchemy table models for the todo store."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import (
    BigInteger,
    Boolean,
    DateTime,
    ForeignKey,
    Integer,
    String,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative base for all Exemplum tables."""


class AuditableModelMixin:
    """Audit columns mirroring :class:`~exemplum.domain.entity.BaseEntity`."""

    created: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    created_by: Mapped[str] = mapped_column(String(256), default="")
    last_modified: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    last_modified_by: Mapped[str] = mapped_column(String(256), default="")


class TodoListModel(AuditableModelMixin, Base):
    __tablename__ = "todo_lists"

    id: Mapped[int] = mapped_column(
        Integer().with_variant(BigInteger, "postgresql"),
        primary_key=True,
        autoincrement=True,
    )
    title: Mapped[str] = mapped_column(String(200), unique=True, index=True)
    colour: Mapped[str] = mapped_column(String(7), default="#FFFFFF")


class TodoItemModel(AuditableModelMixin, Base):
    __tablename__ = "todo_items"

    id: Mapped[int] = mapped_column(
        Integer().with_variant(BigInteger, "postgresql"),
        primary_key=True,
        autoincrement=True,
    )
    list_id: Mapped[int] = mapped_column(
        ForeignKey("todo_lists.id", ondelete="CASCADE"), index=True
    )
    title: Mapped[str] = mapped_column(String(200))
    note: Mapped[str] = mapped_column(String(2000), default="")
    priority: Mapped[str] = mapped_column(String(16), default="none")
    reminder: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    done: Mapped[bool] = mapped_column(Boolean, default=False)


__all__ = ["AuditableModelMixin", "Base", "TodoItemModel", "TodoListModel"]
