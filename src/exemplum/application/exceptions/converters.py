"""Built-in exception converters."""

from __future__ import annotations

import httpx

from ...primitives.exceptions import (
    AuthorizationError,
    DatabaseValidationError,
    InvariantViolationError,
    NotFoundError,
    UnsupportedColourError,
    ValidationError,
)
from ..response import ErrorEnvelope
from .converter import ICustomExceptionErrorConverter


class ApiCallExceptionConverter:
    """Failed downstream HTTP calls are reported as validation failures."""

    field_name = "api"

    def can_convert(self, exc: Exception) -> bool:
        return isinstance(exc, (httpx.HTTPStatusError, httpx.RequestError))

    def convert(self, exc: Exception) -> ErrorEnvelope:
        if isinstance(exc, httpx.HTTPStatusError):
            status = exc.response.status_code
            message = f"Downstream API call failed with status {status}."
        else:
            message = "Downstream API call could not be completed."
        return ErrorEnvelope.validation_failed(
            {self.field_name: [message]}, message=message
        )


class PermissionExceptionConverter:
    def can_convert(self, exc: Exception) -> bool:
        return isinstance(exc, (PermissionError, AuthorizationError))

    def convert(self, exc: Exception) -> ErrorEnvelope:
        return ErrorEnvelope.unauthorized()


class NotFoundExceptionConverter:
    def can_convert(self, exc: Exception) -> bool:
        return isinstance(exc, NotFoundError)

    def convert(self, exc: Exception) -> ErrorEnvelope:
        return ErrorEnvelope.not_found(str(exc))


class DatabaseValidationExceptionConverter:
    """Unique-key collisions become a ``CONFLICT`` naming the field."""

    def can_convert(self, exc: Exception) -> bool:
        return isinstance(exc, DatabaseValidationError)

    def convert(self, exc: Exception) -> ErrorEnvelope:
        if not isinstance(exc, DatabaseValidationError):
            return ErrorEnvelope.internal_error()
        return ErrorEnvelope.conflict(exc.field, exc.message)


class DomainValidationExceptionConverter:
    """Domain rule violations raised inside handlers."""

    def can_convert(self, exc: Exception) -> bool:
        return isinstance(
            exc, (ValidationError, UnsupportedColourError, InvariantViolationError)
        )

    def convert(self, exc: Exception) -> ErrorEnvelope:
        if isinstance(exc, ValidationError):
            return ErrorEnvelope.validation_failed(exc.errors)
        if isinstance(exc, UnsupportedColourError):
            return ErrorEnvelope.validation_failed({"colour": [str(exc)]})
        return ErrorEnvelope.validation_failed({"__root__": [str(exc)]})


def default_converters() -> list[ICustomExceptionErrorConverter]:
    return [
        ApiCallExceptionConverter(),
        PermissionExceptionConverter(),
        NotFoundExceptionConverter(),
        DatabaseValidationExceptionConverter(),
        DomainValidationExceptionConverter(),
    ]


__all__ = [
    "ApiCallExceptionConverter",
    "DatabaseValidationExceptionConverter",
    "DomainValidationExceptionConverter",
    "NotFoundExceptionConverter",
    "PermissionExceptionConverter",
    "default_converters",
]
