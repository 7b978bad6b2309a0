"""
ModelMapper: bidirectional mapper between pydantic entities and
SQLAlchemy table models.

Features
--------
- **Safe column extraction**: only reads columns defined in ``__table__``
  and skips unloaded attributes (no lazy loads on detached rows).
- **Enum coercion**: converts Python ``Enum`` members to their ``.value``.
- **Custom type coercers**: per-type conversion for domain → DB
  (e.g. ``{Colour: lambda c: c.code}``).
- **Field parsers**: per-column conversion for DB → domain.
- **In-place update**: :meth:`ModelMapper.apply` copies entity state onto an
  already tracked row so the session emits an ``UPDATE``.
"""

from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from sqlalchemy import inspect as sa_inspect

from ...primitives.exceptions import PersistenceError

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger("exemplum.persistence")

T_Entity = TypeVar("T_Entity")


class MappingError(PersistenceError):
    """Raised when mapping between domain entities and DB models fails."""


class ModelMapper(Generic[T_Entity]):
    """
    Maps one entity class to one table model.

    Parameters
    ----------
    entity_cls:
        The pydantic entity class.
    db_model_cls:
        The SQLAlchemy ``DeclarativeBase`` subclass for the table.
    type_coercers:
        Dictionary mapping types to coercion functions for domain → DB.
    field_parsers:
        Dictionary mapping column names to parse functions for DB → domain.
    """

    def __init__(
        self,
        entity_cls: type[T_Entity],
        db_model_cls: type[Any],
        *,
        type_coercers: dict[type, Callable[[Any], Any]] | None = None,
        field_parsers: dict[str, Callable[[Any], Any]] | None = None,
    ) -> None:
        self.entity_cls = entity_cls
        self.db_model_cls = db_model_cls
        self._type_coercers: dict[type, Callable[[Any], Any]] = type_coercers or {}
        self._field_parsers: dict[str, Callable[[Any], Any]] = field_parsers or {}
        self._columns: frozenset[str] = frozenset(db_model_cls.__table__.columns.keys())

    # ------------------------------------------------------------------
    # Domain → DB
    # ------------------------------------------------------------------

    def to_model(self, entity: T_Entity) -> Any:
        """Build a new row for a transient entity (``id`` left to the store)."""
        data = self._column_values(entity)
        if data.get("id") is None:
            data.pop("id", None)
        return self.db_model_cls(**data)

    def apply(self, entity: T_Entity, model: Any) -> None:
        """Copy the entity's column values onto an existing row."""
        for key, value in self._column_values(entity).items():
            if key == "id":
                continue
            setattr(model, key, value)

    def _column_values(self, entity: Any) -> dict[str, Any]:
        # model_dump would turn value objects into dicts, read attributes instead
        data = {
            name: getattr(entity, name)
            for name in type(entity).model_fields
            if name in self._columns
        }
        return {key: self._coerce(value) for key, value in data.items()}

    def _coerce(self, value: Any) -> Any:
        if value is None:
            return value
        coercer = self._type_coercers.get(type(value))
        if coercer is not None:
            return coercer(value)
        if isinstance(value, enum.Enum):
            return value.value
        return value

    # ------------------------------------------------------------------
    # DB → Domain
    # ------------------------------------------------------------------

    def from_model(self, model: Any) -> T_Entity:
        """Build an entity from a loaded row."""
        unloaded = sa_inspect(model).unloaded
        data: dict[str, Any] = {}
        for column in self._columns:
            if column in unloaded:
                logger.debug(
                    "Skipping unloaded column %s on %s",
                    column,
                    type(model).__name__,
                )
                continue
            value = getattr(model, column)
            parser = self._field_parsers.get(column)
            if parser is not None and value is not None:
                value = parser(value)
            data[column] = value
        try:
            return self.entity_cls.model_validate(data)  # type: ignore[attr-defined, no-any-return]
        except Exception as e:
            raise MappingError(
                f"Failed to map {type(model).__name__} to "
                f"{self.entity_cls.__name__}: {e}"
            ) from e


__all__ = ["MappingError", "ModelMapper"]
