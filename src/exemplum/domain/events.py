"""Domain Event base class."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from ..correlation import get_correlation_id


class DomainEvent(BaseModel):
    """Base class for all Domain Events.

    Events are immutable facts about a state transition. They are queued on
    the entity that raised them and drained by the persistence layer when
    the entity is saved.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    event_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    occurred_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    correlation_id: str | None = Field(default_factory=get_correlation_id)
