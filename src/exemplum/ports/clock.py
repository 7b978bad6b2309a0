from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from datetime import datetime


@runtime_checkable
class IClock(Protocol):
    """Source of the current time for audit stamps."""

    @property
    def now(self) -> datetime: ...
