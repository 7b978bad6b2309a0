"""Translation of store write failures into typed errors.

Each store-specific handler recognises a unique-key violation from the
structured information its driver exposes and raises
:class:`~exemplum.primitives.exceptions.DatabaseValidationError` naming the
offending column.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from ...primitives.exceptions import DatabaseValidationError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ...ports.db_exceptions import IHandlerSpecificDbException

logger = logging.getLogger("exemplum.persistence")

UNIQUE_VIOLATION_SQLSTATE = "23505"
SQLITE_UNIQUE_ERRORNAMES = frozenset(
    {"SQLITE_CONSTRAINT_UNIQUE", "SQLITE_CONSTRAINT_PRIMARYKEY"}
)

_SQLITE_UNIQUE_RE = re.compile(r"UNIQUE constraint failed: (?P<columns>.+)$")
_POSTGRES_DETAIL_RE = re.compile(
    r"Key \((?P<field>[^)]+)\)=\((?P<value>.*)\) already exists"
)
# Message parsing only: SQL Server reports no structured column info.
_SQLSERVER_DUPLICATE_RE = re.compile(
    r"Cannot insert duplicate key row in object '(?P<table>[^']+)' with unique "
    r"index '(?P<index>[^']+)'\. The duplicate key value is \((?P<value>.*?)\)"
)
SQLSERVER_DUPLICATE_KEY_ERRORS = frozenset({2601, 2627})


def duplicate_entry_message(field: str, value: Any = None) -> str:
    if value is None:
        return (
            f"Duplicate entry. An item already exists that has a '{field}' "
            "with the same value."
        )
    return (
        f"Duplicate entry. An item already exists that has a '{field}' "
        f"with the value of: '{value}'."
    )


def _driver_error(exception: BaseException) -> BaseException:
    """The DBAPI error behind a SQLAlchemy ``DBAPIError``, if any."""
    orig = getattr(exception, "orig", None)
    return orig if isinstance(orig, BaseException) else exception


class SqliteUniqueConstraintHandler:
    def can_handle(self, exception: BaseException) -> bool:
        error = _driver_error(exception)
        errorname = getattr(error, "sqlite_errorname", None)
        if errorname is not None:
            return errorname in SQLITE_UNIQUE_ERRORNAMES
        return _SQLITE_UNIQUE_RE.search(str(error)) is not None

    def handle_exception(self, exception: BaseException) -> None:
        error = _driver_error(exception)
        match = _SQLITE_UNIQUE_RE.search(str(error))
        if match is None:
            return
        # "table.column[, table.column]" -> first column name
        first = match.group("columns").split(",")[0].strip()
        field = first.rsplit(".", 1)[-1]
        raise DatabaseValidationError(field, duplicate_entry_message(field))


class PostgresUniqueViolationHandler:
    """Works with asyncpg (through SQLAlchemy's adapter) and psycopg."""

    @staticmethod
    def _sqlstate(error: BaseException) -> str | None:
        for candidate in (error, error.__cause__):
            if candidate is None:
                continue
            code = getattr(candidate, "sqlstate", None) or getattr(
                candidate, "pgcode", None
            )
            if code:
                return str(code)
        return None

    @staticmethod
    def _detail(error: BaseException) -> str:
        cause = error.__cause__
        detail = getattr(cause, "detail", None) if cause is not None else None
        if detail:
            return str(detail)
        diag = getattr(error, "diag", None)
        return str(getattr(diag, "message_detail", "") or "")

    def can_handle(self, exception: BaseException) -> bool:
        return self._sqlstate(_driver_error(exception)) == UNIQUE_VIOLATION_SQLSTATE

    def handle_exception(self, exception: BaseException) -> None:
        error = _driver_error(exception)
        match = _POSTGRES_DETAIL_RE.search(self._detail(error))
        if match is None:
            cause = error.__cause__
            constraint = getattr(cause, "constraint_name", None) or "unknown"
            raise DatabaseValidationError(
                constraint, duplicate_entry_message(constraint)
            )
        field = match.group("field")
        raise DatabaseValidationError(
            field, duplicate_entry_message(field, match.group("value"))
        )


class SqlServerDuplicateKeyHandler:
    """Fallback for SQL Server, which only reports the index name.

    The field is taken from the index name suffix
    (``IX_TodoLists_Title`` -> ``title``), so it depends on the
    ``IX_<Table>_<Column>`` naming convention.
    """

    def can_handle(self, exception: BaseException) -> bool:
        error = _driver_error(exception)
        args = getattr(error, "args", ())
        codes = {a for a in args if isinstance(a, int)}
        if codes & SQLSERVER_DUPLICATE_KEY_ERRORS:
            return True
        return _SQLSERVER_DUPLICATE_RE.search(str(error)) is not None

    def handle_exception(self, exception: BaseException) -> None:
        match = _SQLSERVER_DUPLICATE_RE.search(str(_driver_error(exception)))
        if match is None:
            return
        field = match.group("index").rsplit("_", 1)[-1].lower()
        raise DatabaseValidationError(
            field, duplicate_entry_message(field, match.group("value"))
        )


class DbExceptionHandler:
    """Runs every store-specific handler that recognises the failure.

    Returns normally when no handler raised, leaving the caller to
    propagate the original error.
    """

    def __init__(
        self, handlers: Iterable[IHandlerSpecificDbException] | None = None
    ) -> None:
        self._handlers = (
            list(handlers)
            if handlers is not None
            else [
                SqliteUniqueConstraintHandler(),
                PostgresUniqueViolationHandler(),
                SqlServerDuplicateKeyHandler(),
            ]
        )

    def handle_exception(self, exception: BaseException) -> None:
        for handler in self._handlers:
            if handler.can_handle(exception):
                logger.debug(
                    "%s handling %s", type(handler).__name__, type(exception).__name__
                )
                handler.handle_exception(exception)


__all__ = [
    "DbExceptionHandler",
    "PostgresUniqueViolationHandler",
    "SqlServerDuplicateKeyHandler",
    "SqliteUniqueConstraintHandler",
    "duplicate_entry_message",
]
