"""SchemaValidator: validates a request's parameters against a pydantic model.

Each validator names a pydantic ``schema`` holding the constraints for one
request type; the request itself stays a plain message::

    class _CreateTodoListSchema(BaseModel):
        title: str = Field(min_length=1, max_length=200)

    class CreateTodoListCommandValidator(SchemaValidator):
        schema = _CreateTodoListSchema
        messages = {("title", "string_too_short"): "Title is required."}
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .result import ValidationResult

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..application.request import Request


class SchemaValidator:
    """Runs ``schema.model_validate(request.parameters())``.

    Any :class:`pydantic.ValidationError` becomes a failed
    :class:`ValidationResult`; ``messages`` maps ``(field, error type)`` to
    the text shown to the caller.
    """

    schema: ClassVar[type[BaseModel]]
    messages: ClassVar[Mapping[tuple[str, str], str]] = {}

    async def validate(self, request: Request[Any]) -> ValidationResult:
        try:
            self.schema.model_validate(request.parameters())
        except PydanticValidationError as exc:
            return ValidationResult.from_pydantic(exc, self.messages)
        return ValidationResult.success()
