"""Tests for store-specific unique-key detection."""

from __future__ import annotations

import sqlite3

import pytest
from sqlalchemy.exc import IntegrityError

from exemplum.infrastructure.persistence import (
    DbExceptionHandler,
    PostgresUniqueViolationHandler,
    SqliteUniqueConstraintHandler,
    SqlServerDuplicateKeyHandler,
)
from exemplum.infrastructure.persistence.exception_handling import (
    duplicate_entry_message,
)
from exemplum.primitives.exceptions import DatabaseValidationError


def _wrap(orig: BaseException) -> IntegrityError:
    return IntegrityError("INSERT INTO todo_lists ...", {}, orig)


class FakeAsyncpgError(Exception):
    sqlstate = "23505"
    detail = "Key (title)=(Groceries) already exists."
    constraint_name = "ix_todo_lists_title"


class AdaptedPgError(Exception):
    """Shape of SQLAlchemy's asyncpg adapter error: driver error as cause."""


def _postgres_error(cause: Exception) -> IntegrityError:
    adapted = AdaptedPgError("duplicate key value violates unique constraint")
    adapted.__cause__ = cause
    return _wrap(adapted)


class FakePyodbcError(Exception):
    pass


SQLSERVER_MESSAGE = (
    "Cannot insert duplicate key row in object 'dbo.TodoLists' with unique "
    "index 'IX_TodoLists_Title'. The duplicate key value is (Groceries)."
)


def test_duplicate_entry_message() -> None:
    assert duplicate_entry_message("title", "Groceries") == (
        "Duplicate entry. An item already exists that has a 'title' "
        "with the value of: 'Groceries'."
    )
    assert duplicate_entry_message("title").endswith("with the same value.")


class TestSqlite:
    def test_unique_constraint_names_column(self) -> None:
        error = _wrap(
            sqlite3.IntegrityError("UNIQUE constraint failed: todo_lists.title")
        )
        handler = SqliteUniqueConstraintHandler()

        assert handler.can_handle(error)
        with pytest.raises(DatabaseValidationError) as exc_info:
            handler.handle_exception(error)
        assert exc_info.value.field == "title"

    def test_other_integrity_errors_are_ignored(self) -> None:
        error = _wrap(
            sqlite3.IntegrityError("NOT NULL constraint failed: todo_lists.title")
        )
        assert not SqliteUniqueConstraintHandler().can_handle(error)


class TestPostgres:
    def test_unique_violation_parses_detail(self) -> None:
        error = _postgres_error(FakeAsyncpgError())
        handler = PostgresUniqueViolationHandler()

        assert handler.can_handle(error)
        with pytest.raises(DatabaseValidationError) as exc_info:
            handler.handle_exception(error)
        assert exc_info.value.field == "title"
        assert "'Groceries'" in exc_info.value.message

    def test_missing_detail_falls_back_to_constraint(self) -> None:
        cause = FakeAsyncpgError()
        cause.detail = ""
        with pytest.raises(DatabaseValidationError) as exc_info:
            PostgresUniqueViolationHandler().handle_exception(_postgres_error(cause))
        assert exc_info.value.field == "ix_todo_lists_title"

    def test_other_sqlstate_is_ignored(self) -> None:
        cause = FakeAsyncpgError()
        cause.sqlstate = "23503"
        assert not PostgresUniqueViolationHandler().can_handle(_postgres_error(cause))


class TestSqlServer:
    def test_duplicate_key_message(self) -> None:
        error = _wrap(FakePyodbcError("23000", 2601, SQLSERVER_MESSAGE))
        handler = SqlServerDuplicateKeyHandler()

        assert handler.can_handle(error)
        with pytest.raises(DatabaseValidationError) as exc_info:
            handler.handle_exception(error)
        assert exc_info.value.field == "title"
        assert "'Groceries'" in exc_info.value.message


class TestDbExceptionHandler:
    def test_unrecognised_failure_returns(self) -> None:
        error = _wrap(sqlite3.IntegrityError("FOREIGN KEY constraint failed"))
        DbExceptionHandler().handle_exception(error)

    def test_custom_handlers(self) -> None:
        class Always:
            def can_handle(self, exception: BaseException) -> bool:
                return True

            def handle_exception(self, exception: BaseException) -> None:
                raise DatabaseValidationError("name", "taken")

        with pytest.raises(DatabaseValidationError):
            DbExceptionHandler([Always()]).handle_exception(RuntimeError("x"))
