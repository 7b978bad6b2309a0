from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from ...domain.todo import Colour
from ...validation import SchemaValidator

TITLE_MAX_LENGTH = 200
NOTE_MAX_LENGTH = 2000

TITLE_MESSAGES = {
    ("title", "missing"): "Title is required.",
    ("title", "string_too_short"): "Title is required.",
    ("title", "string_too_long"): "Title must not exceed {max_length} characters.",
}


class _TitledSchema(BaseModel):
    # blank titles count as empty
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)


class _CreateTodoListSchema(_TitledSchema):
    colour: str | None = None

    @field_validator("colour")
    @classmethod
    def colour_in_palette(cls, value: str | None) -> str | None:
        if value is not None and not Colour.is_supported(value):
            raise PydanticCustomError(
                "unsupported_colour",
                "Colour is not supported. Use one of: {codes}",
                {"codes": ", ".join(c.code for c in Colour.supported_colours())},
            )
        return value


class _CreateTodoItemSchema(_TitledSchema):
    note: str = Field(default="", max_length=NOTE_MAX_LENGTH)


class CreateTodoListCommandValidator(SchemaValidator):
    schema = _CreateTodoListSchema
    messages = TITLE_MESSAGES


class CreateTodoItemCommandValidator(SchemaValidator):
    schema = _CreateTodoItemSchema
    messages = {
        **TITLE_MESSAGES,
        ("note", "string_too_long"): "Note must not exceed {max_length} characters.",
    }
