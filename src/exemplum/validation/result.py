"""ValidationResult: the field errors found for one request."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pydantic import ValidationError as PydanticValidationError

ROOT_FIELD = "__root__"


@dataclass(frozen=True)
class ValidationResult:
    """Field name -> messages. Empty means the request is valid."""

    errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @classmethod
    def success(cls) -> ValidationResult:
        return cls()

    @classmethod
    def failure(cls, errors: Mapping[str, list[str]]) -> ValidationResult:
        return cls(errors={name: list(messages) for name, messages in errors.items()})

    @classmethod
    def from_pydantic(
        cls,
        exc: PydanticValidationError,
        messages: Mapping[tuple[str, str], str] | None = None,
    ) -> ValidationResult:
        """Group pydantic's error list by field.

        The field is the dotted ``loc``; a template in *messages* replaces
        pydantic's own ``msg`` for that field and error type.
        """
        templates = messages or {}
        errors: dict[str, list[str]] = {}
        for error in exc.errors():
            loc = ".".join(str(part) for part in error["loc"]) or ROOT_FIELD
            template = templates.get((loc, error["type"]))
            if template is None:
                message = error["msg"]
            else:
                message = template.format(**error.get("ctx", {}))
            errors.setdefault(loc, []).append(message)
        return cls(errors=errors)

    def merge(self, other: ValidationResult) -> ValidationResult:
        """A new result holding both sets of errors, this one's first per field."""
        merged = {name: list(messages) for name, messages in self.errors.items()}
        for name, messages in other.errors.items():
            merged.setdefault(name, []).extend(messages)
        return ValidationResult(errors=merged)
