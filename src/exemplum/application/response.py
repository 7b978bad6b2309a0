"""Response wrapper and the uniform error envelope."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

from ..primitives.exceptions import ExemplumError

T = TypeVar("T")


def default_errors_factory() -> dict[str, list[str]]:
    return {}


class ErrorKind(str, Enum):
    VALIDATION_FAILED = "validation_failed"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True)
class ErrorEnvelope:
    """What a caller learns about a failed request.

    ``errors`` holds per-field messages for ``VALIDATION_FAILED`` and
    ``CONFLICT``; it is empty for the other kinds.
    """

    kind: ErrorKind
    message: str
    errors: dict[str, list[str]] = field(default_factory=default_errors_factory)

    @classmethod
    def validation_failed(
        cls,
        errors: dict[str, list[str]],
        message: str = "One or more validation failures have occurred.",
    ) -> ErrorEnvelope:
        return cls(ErrorKind.VALIDATION_FAILED, message, errors)

    @classmethod
    def unauthorized(
        cls, message: str = "You are not authorized to perform this action."
    ) -> ErrorEnvelope:
        return cls(ErrorKind.UNAUTHORIZED, message)

    @classmethod
    def not_found(cls, message: str) -> ErrorEnvelope:
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def conflict(cls, field_name: str, message: str) -> ErrorEnvelope:
        return cls(ErrorKind.CONFLICT, message, {field_name: [message]})

    @classmethod
    def internal_error(
        cls, message: str = "An unexpected error occurred."
    ) -> ErrorEnvelope:
        return cls(ErrorKind.INTERNAL_ERROR, message)

    def to_dict(self) -> dict[str, object]:
        return {"kind": self.kind.value, "message": self.message, "errors": self.errors}


class RequestFailedError(ExemplumError):
    """Raised by :meth:`Response.unwrap` for a failed response."""

    def __init__(self, envelope: ErrorEnvelope) -> None:
        self.envelope = envelope
        super().__init__(f"{envelope.kind.value}: {envelope.message}")


@dataclass(frozen=True)
class Response(Generic[T]):
    """Outcome of sending a request: a result or an error envelope, never both."""

    result: T | None = None
    error: ErrorEnvelope | None = None
    correlation_id: str | None = None

    def __post_init__(self) -> None:
        if self.error is not None and self.result is not None:
            raise ValueError("A Response cannot carry both a result and an error")

    @classmethod
    def ok(cls, result: T, correlation_id: str | None = None) -> Response[T]:
        return cls(result=result, correlation_id=correlation_id)

    @classmethod
    def fail(
        cls, error: ErrorEnvelope, correlation_id: str | None = None
    ) -> Response[T]:
        return cls(error=error, correlation_id=correlation_id)

    @property
    def is_success(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the result, raising :class:`RequestFailedError` on failure."""
        if self.error is not None:
            raise RequestFailedError(self.error)
        return self.result  # type: ignore[return-value]
