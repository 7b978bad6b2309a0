"""Request base classes: immutable descriptions of an operation."""

from __future__ import annotations

import json
from typing import Any, ClassVar, Generic

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import TypeVar

from ..correlation import get_correlation_id

TResult = TypeVar("TResult", default=None)


class Request(BaseModel, Generic[TResult]):
    """Base for every request sent through the mediator.

    Requests are frozen pydantic models. Apart from the tracing metadata
    listed in ``metadata_fields`` they carry only their parameters, which is
    what :meth:`cache_key` encodes.

    The ``correlation_id`` is inherited from the current context (see
    :func:`~exemplum.correlation.get_correlation_id`).
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    metadata_fields: ClassVar[frozenset[str]] = frozenset({"correlation_id"})

    correlation_id: str | None = Field(default_factory=get_correlation_id)

    @classmethod
    def request_name(cls) -> str:
        return cls.__name__

    def parameters(self) -> dict[str, Any]:
        """The request's parameters, without tracing metadata."""
        return self.model_dump(mode="json", exclude=set(self.metadata_fields))

    def cache_key(self) -> str:
        """Deterministic key for this request's parameters.

        Two structurally equal requests of the same type always map to the
        same key. Override for a shorter or more readable key.
        """
        encoded = json.dumps(self.parameters(), sort_keys=True, separators=(",", ":"))
        return f"{self.request_name()}:{encoded}"


class Command(Request[TResult]):
    """
    Base for all commands.

    Commands represent write operations that change system state. They:
    - Are named with imperative verbs (e.g., CreateTodoList, MarkTodoItemComplete)
    - Are validated and authorized by the pipeline before their handler runs
    """


class Query(Request[TResult]):
    """Base class for all Queries.

    Queries represent a request for data and never change state, which makes
    them the candidates for the caching stage.
    """
