"""ApplicationDbContext: session scope, change tracking and event draining."""

from __future__ import annotations

import contextlib
import enum
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from ...domain.todo import Colour, TodoItem, TodoList
from ...primitives.exceptions import PersistenceError
from .model_mapper import ModelMapper
from .models import TodoItemModel, TodoListModel

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from sqlalchemy.ext.asyncio import AsyncSession

    from ...domain.entity import BaseEntity
    from ...ports.clock import IClock
    from ...ports.current_user import ICurrentUserService
    from ...ports.db_exceptions import IHandleDbExceptions
    from ...ports.events import IPublishDomainEvents

    AsyncSessionFactory = Callable[[], AsyncSession]

logger = logging.getLogger("exemplum.persistence")

T_Entity = TypeVar("T_Entity", bound="BaseEntity")

AUDIT_FIELDS = frozenset({"created", "created_by", "last_modified", "last_modified_by"})


class EntityState(enum.Enum):
    ADDED = "added"
    UNCHANGED = "unchanged"
    DELETED = "deleted"


@dataclass
class _Entry:
    entity: BaseEntity
    state: EntityState
    row: Any = None
    snapshot: dict[str, Any] = field(default_factory=dict)

    def take_snapshot(self) -> None:
        self.snapshot = self.entity.model_dump(exclude=set(AUDIT_FIELDS))

    @property
    def is_modified(self) -> bool:
        return self.entity.model_dump(exclude=set(AUDIT_FIELDS)) != self.snapshot


def _as_utc(value: datetime) -> datetime:
    # SQLite drops the offset of timezone-aware columns
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


AUDIT_PARSERS = {"created": _as_utc, "last_modified": _as_utc}


def default_mappers() -> dict[type[Any], ModelMapper[Any]]:
    return {
        TodoList: ModelMapper(
            TodoList,
            TodoListModel,
            type_coercers={Colour: lambda c: c.code},
            field_parsers={**AUDIT_PARSERS, "colour": Colour.from_code},
        ),
        TodoItem: ModelMapper(
            TodoItem,
            TodoItemModel,
            field_parsers={**AUDIT_PARSERS, "reminder": _as_utc},
        ),
    }


class TodoListRepository:
    def __init__(self, context: ApplicationDbContext) -> None:
        self._context = context

    async def get(self, list_id: int) -> TodoList | None:
        return await self._context.find(TodoList, list_id)

    async def list_all(self) -> list[TodoList]:
        stmt = select(TodoListModel).order_by(TodoListModel.title)
        return await self._context.query(TodoList, stmt)

    def add(self, todo_list: TodoList) -> None:
        self._context.add(todo_list)

    def remove(self, todo_list: TodoList) -> None:
        self._context.remove(todo_list)


class TodoItemRepository:
    def __init__(self, context: ApplicationDbContext) -> None:
        self._context = context

    async def get(self, todo_id: int) -> TodoItem | None:
        return await self._context.find(TodoItem, todo_id)

    async def list_in(self, list_id: int) -> list[TodoItem]:
        stmt = (
            select(TodoItemModel)
            .where(TodoItemModel.list_id == list_id)
            .order_by(TodoItemModel.id)
        )
        return await self._context.query(TodoItem, stmt)

    def add(self, item: TodoItem) -> None:
        self._context.add(item)

    def remove(self, item: TodoItem) -> None:
        self._context.remove(item)


class ApplicationDbContext:
    """
    Unit of work over one ``AsyncSession``.

    Entities are tracked explicitly: everything passed to :meth:`add` or
    loaded through :meth:`find` / :meth:`query` joins the tracking list, in
    that order. :meth:`save_changes` then

    1. stamps audit fields on added and modified entities,
    2. writes and commits (store failures go through ``db_exceptions``),
    3. publishes the queued domain events of each tracked entity, in
       tracking order, clearing an entity's queue once all of its events
       were delivered.

    Usage::

        async with ApplicationDbContext(session_factory, ...) as db:
            item = await db.todo_items.get(todo_id)
            item.mark_as_done()
            await db.save_changes()
    """

    def __init__(
        self,
        session_factory: AsyncSessionFactory,
        *,
        clock: IClock,
        current_user: ICurrentUserService,
        event_publisher: IPublishDomainEvents,
        db_exceptions: IHandleDbExceptions,
        mappers: dict[type[Any], ModelMapper[Any]] | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._session: AsyncSession | None = None
        self._clock = clock
        self._current_user = current_user
        self._event_publisher = event_publisher
        self._db_exceptions = db_exceptions
        self._mappers = mappers or default_mappers()
        self._entries: list[_Entry] = []
        self.todo_lists = TodoListRepository(self)
        self.todo_items = TodoItemRepository(self)

    # ── Session scope ────────────────────────────────────────────

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise PersistenceError(
                "Session not yet created. Use the context with 'async with'."
            )
        return self._session

    async def __aenter__(self) -> ApplicationDbContext:
        self._session = self._session_factory()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        session, self._session = self._session, None
        if session is None:
            return
        try:
            if exc_type is not None and session.in_transaction():
                await session.rollback()
        finally:
            await session.close()

    # ── Tracking ─────────────────────────────────────────────────

    @property
    def tracked_entities(self) -> list[BaseEntity]:
        return [entry.entity for entry in self._entries]

    def _entry_for(self, entity: BaseEntity) -> _Entry | None:
        return next((e for e in self._entries if e.entity is entity), None)

    def _entry_for_row(self, entity_type: type[Any], row_id: int) -> _Entry | None:
        return next(
            (
                e
                for e in self._entries
                if type(e.entity) is entity_type
                and e.row is not None
                and e.row.id == row_id
            ),
            None,
        )

    def _mapper(self, entity_type: type[Any]) -> ModelMapper[Any]:
        try:
            return self._mappers[entity_type]
        except KeyError:
            raise PersistenceError(
                f"No table mapping registered for {entity_type.__name__}"
            ) from None

    def _attach(self, entity_type: type[T_Entity], row: Any) -> T_Entity:
        existing = self._entry_for_row(entity_type, row.id)
        if existing is not None:
            return existing.entity  # type: ignore[return-value]
        entity = self._mapper(entity_type).from_model(row)
        entry = _Entry(entity=entity, state=EntityState.UNCHANGED, row=row)
        entry.take_snapshot()
        self._entries.append(entry)
        return entity  # type: ignore[no-any-return]

    def add(self, entity: BaseEntity) -> None:
        self._mapper(type(entity))
        if self._entry_for(entity) is None:
            self._entries.append(_Entry(entity=entity, state=EntityState.ADDED))

    def remove(self, entity: BaseEntity) -> None:
        entry = self._entry_for(entity)
        if entry is None:
            raise PersistenceError(
                f"{type(entity).__name__} is not tracked by this context"
            )
        if entry.state is EntityState.ADDED:
            self._entries.remove(entry)
        else:
            entry.state = EntityState.DELETED

    # ── Loading ──────────────────────────────────────────────────

    async def find(self, entity_type: type[T_Entity], entity_id: int) -> T_Entity | None:
        row = await self.session.get(self._mapper(entity_type).db_model_cls, entity_id)
        if row is None:
            return None
        return self._attach(entity_type, row)

    async def query(self, entity_type: type[T_Entity], stmt: Any) -> list[T_Entity]:
        result = await self.session.execute(stmt)
        return [self._attach(entity_type, row) for row in result.scalars().all()]

    # ── Saving ───────────────────────────────────────────────────

    async def save_changes(self) -> int:
        """Persist tracked changes and publish queued domain events.

        Returns the number of entities written. Events are published only
        after a successful commit; already published events are not
        rolled back when a later publication fails.
        """
        session = self.session
        changes = await self._stage_changes(session)
        # deleted entities still publish what they queued
        pending = [entry.entity for entry in self._entries]

        if changes:
            try:
                await session.flush()
                await session.commit()
            except SQLAlchemyError as exc:
                with contextlib.suppress(SQLAlchemyError):
                    await session.rollback()
                self._db_exceptions.handle_exception(exc)
                raise PersistenceError(f"Failed to save changes: {exc}") from exc
            self._accept_changes()
            logger.debug("Saved %d change(s)", changes)

        await self._publish_domain_events(pending)
        return changes

    async def _stage_changes(self, session: AsyncSession) -> int:
        now = self._clock.now
        user_id = self._current_user.user_id or ""
        changes = 0
        for entry in self._entries:
            mapper = self._mapper(type(entry.entity))
            if entry.state is EntityState.ADDED:
                entry.entity.stamp_created(now, user_id)
                entry.row = mapper.to_model(entry.entity)
                session.add(entry.row)
                changes += 1
            elif entry.state is EntityState.DELETED:
                await session.delete(entry.row)
                changes += 1
            elif entry.is_modified:
                entry.entity.stamp_modified(now, user_id)
                mapper.apply(entry.entity, entry.row)
                changes += 1
        return changes

    def _accept_changes(self) -> None:
        kept: list[_Entry] = []
        for entry in self._entries:
            if entry.state is EntityState.DELETED:
                continue
            if entry.state is EntityState.ADDED:
                entry.entity.id = entry.row.id
                entry.state = EntityState.UNCHANGED
            entry.take_snapshot()
            kept.append(entry)
        self._entries = kept

    async def _publish_domain_events(self, entities: list[BaseEntity]) -> None:
        for entity in entities:
            events = entity.domain_events
            if not events:
                continue
            for event in events:
                await self._event_publisher.publish(event)
            entity.clear_domain_events()


__all__ = [
    "ApplicationDbContext",
    "EntityState",
    "TodoItemRepository",
    "TodoListRepository",
    "default_mappers",
]
