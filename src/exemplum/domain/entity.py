"""Base entity with identity, audit metadata and a domain-event queue."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, cast

from pydantic import BaseModel, ConfigDict, PrivateAttr

if TYPE_CHECKING:
    from .events import DomainEvent


class BaseEntity(BaseModel):
    """Base class for all persisted entities.

    ``id`` is a surrogate key assigned by the store on first save, so it is
    ``None`` for entities that have not been saved yet.

    Domain events are appended only by the entity's own mutators (through
    :meth:`_record_event`). Collaborators see them through the read-only
    :attr:`domain_events` view; the persistence layer clears the queue after
    the events have been published.

    Usage::

        class TodoItem(BaseEntity):
            done: bool = False

            def mark_as_done(self) -> None:
                self.done = True
                self._record_event(TodoItemCompletedEvent(item=self))
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    id: int | None = None
    created: datetime | None = None
    created_by: str = ""
    last_modified: datetime | None = None
    last_modified_by: str = ""

    _domain_events: list[DomainEvent] = PrivateAttr(
        default_factory=lambda: cast("list[DomainEvent]", [])
    )

    def _record_event(self, event: DomainEvent) -> None:
        """Queue a domain event to be published when the entity is saved."""
        self._domain_events.append(event)

    @property
    def domain_events(self) -> tuple[DomainEvent, ...]:
        """Events raised since the last successful save, oldest first."""
        return tuple(self._domain_events)

    def clear_domain_events(self) -> None:
        """Drop all queued events. Reserved for the persistence layer."""
        self._domain_events.clear()

    @property
    def is_transient(self) -> bool:
        """True while the entity has not been assigned an id by the store."""
        return self.id is None

    # ── Audit (stamped by the persistence layer) ─────────────────

    def stamp_created(self, at: datetime, by: str) -> None:
        object.__setattr__(self, "created", at)
        object.__setattr__(self, "created_by", by)

    def stamp_modified(self, at: datetime, by: str) -> None:
        object.__setattr__(self, "last_modified", at)
        object.__setattr__(self, "last_modified_by", by)
