"""Ports for translating store-specific write failures."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IHandlerSpecificDbException(Protocol):
    """Recognises one kind of store failure and raises a typed error for it."""

    def can_handle(self, exception: BaseException) -> bool: ...

    def handle_exception(self, exception: BaseException) -> None:
        """Raise a typed error for *exception*, or return to leave it as is."""
        ...


@runtime_checkable
class IHandleDbExceptions(Protocol):
    """Runs the registered specific handlers over a failed write."""

    def handle_exception(self, exception: BaseException) -> None: ...
