"""Primitives: the exception hierarchy shared by every layer."""

from __future__ import annotations

from .exceptions import (
    AuthorizationError,
    DatabaseValidationError,
    DomainError,
    EntityNotFoundError,
    ExemplumError,
    HandlerError,
    HandlerNotFoundError,
    HandlerRegistrationError,
    InfrastructureError,
    InvariantViolationError,
    NotFoundError,
    PersistenceError,
    UnsupportedColourError,
    ValidationError,
)

__all__: list[str] = [
    "AuthorizationError",
    "DatabaseValidationError",
    "DomainError",
    "EntityNotFoundError",
    "ExemplumError",
    "HandlerError",
    "HandlerNotFoundError",
    "HandlerRegistrationError",
    "InfrastructureError",
    "InvariantViolationError",
    "NotFoundError",
    "PersistenceError",
    "UnsupportedColourError",
    "ValidationError",
]
