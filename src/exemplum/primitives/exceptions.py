"""Domain, application and infrastructure exceptions for exemplum."""

from __future__ import annotations


class ExemplumError(Exception):
    """Root exception for the whole application."""


class DomainError(ExemplumError):
    """Base class for all domain-related errors."""


class NotFoundError(DomainError):
    """Raised when an entity or resource is not found."""


class EntityNotFoundError(NotFoundError):
    """Raised when a specific entity cannot be found by ID."""

    def __init__(self, entity_type: str, entity_id: object) -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id={entity_id!r} not found")


class InvariantViolationError(DomainError):
    """Raised when a domain invariant is violated."""


class UnsupportedColourError(DomainError):
    """Raised when a colour code is not one of the supported colours."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f'Colour "{code}" is unsupported.')


class ValidationError(ExemplumError):
    """Raised when request validation fails.

    Carries structured errors: ``{field: [messages]}``.
    """

    def __init__(self, errors: dict[str, list[str]] | str | None = None) -> None:
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = {}
        else:
            self.errors = errors
        super().__init__(str(self.errors))


class AuthorizationError(ExemplumError):
    """Raised when the current principal may not perform an operation."""


class HandlerError(ExemplumError):
    """Base class for handler related errors (registration, lookup)."""


class HandlerRegistrationError(HandlerError):
    """Raised when a second handler is registered for the same request type."""


class HandlerNotFoundError(HandlerError):
    """Raised when no handler is registered for a request type."""


class InfrastructureError(ExemplumError):
    """Base class for all infrastructure-related errors."""


class PersistenceError(InfrastructureError):
    """Base class for all persistence-related errors."""


class DatabaseValidationError(PersistenceError):
    """Raised when the store rejects a write because of a data constraint.

    ``field`` names the offending column (e.g. a unique index column).
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(message)
