"""IValidator: request-validation protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..application.request import Request
    from ..validation.result import ValidationResult


@runtime_checkable
class IValidator(Protocol):
    """Protocol for request validators.

    Several validators may be registered for one request type; the
    validation stage runs them all and merges their results.
    """

    async def validate(self, request: Request[Any]) -> ValidationResult:
        """Validate *request* and return a
        :class:`~exemplum.validation.result.ValidationResult`.

        Must return :meth:`ValidationResult.success()` or
        :meth:`ValidationResult.failure(errors)`.
        """
        ...
