from __future__ import annotations

from pydantic import Field

from ...primitives.exceptions import InvariantViolationError
from ..entity import BaseEntity
from .colour import Colour


class TodoList(BaseEntity):
    """A named, coloured list of todo items. Titles are unique per store."""

    title: str
    colour: Colour = Field(default_factory=Colour.white)

    def rename(self, title: str) -> None:
        if not title.strip():
            raise InvariantViolationError("A todo list must have a title")
        self.title = title

    def change_colour(self, colour: Colour) -> None:
        self.colour = colour
