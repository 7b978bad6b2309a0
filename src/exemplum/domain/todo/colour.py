"""Colour value object restricted to a fixed palette."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from ...primitives.exceptions import UnsupportedColourError

#: Supported palette, name -> hex code.
PALETTE: dict[str, str] = {
    "White": "#FFFFFF",
    "Red": "#FF5733",
    "Orange": "#FFC300",
    "Yellow": "#FFFF66",
    "Green": "#CCFF99",
    "Blue": "#6666FF",
    "Purple": "#9966CC",
    "Grey": "#999999",
}


class Colour(BaseModel):
    """A hex colour code from the supported palette.

    Use :meth:`from_code` to build one; unknown codes raise
    :class:`~exemplum.primitives.exceptions.UnsupportedColourError`.
    """

    model_config = ConfigDict(frozen=True)

    code: str

    @classmethod
    def from_code(cls, code: str) -> Colour:
        normalised = code.strip().upper()
        if normalised not in PALETTE.values():
            raise UnsupportedColourError(code)
        return cls(code=normalised)

    @classmethod
    def white(cls) -> Colour:
        return cls(code=PALETTE["White"])

    @classmethod
    def supported_colours(cls) -> list[Colour]:
        return [cls(code=code) for code in PALETTE.values()]

    @staticmethod
    def is_supported(code: str) -> bool:
        return code.strip().upper() in PALETTE.values()

    @property
    def name(self) -> str:
        return next(name for name, code in PALETTE.items() if code == self.code)

    def __str__(self) -> str:
        return self.code

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Colour):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)
