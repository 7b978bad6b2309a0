"""Exception → ErrorEnvelope translation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from ..response import ErrorEnvelope

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger("exemplum.application")


@runtime_checkable
class ICustomExceptionErrorConverter(Protocol):
    """Converts one family of exceptions into an envelope."""

    def can_convert(self, exc: Exception) -> bool: ...

    def convert(self, exc: Exception) -> ErrorEnvelope: ...


@runtime_checkable
class IExceptionToErrorConverter(Protocol):
    def convert(self, exc: Exception) -> ErrorEnvelope: ...


class ExceptionToErrorConverter:
    """Picks the first custom converter that accepts the exception.

    Anything no converter recognises becomes a generic ``INTERNAL_ERROR``
    envelope, so exception details never leak to the caller. ``convert``
    itself never raises: a converter that blows up is logged and skipped.
    """

    def __init__(
        self, converters: Iterable[ICustomExceptionErrorConverter] = ()
    ) -> None:
        self._converters = list(converters)

    def add(self, converter: ICustomExceptionErrorConverter) -> None:
        self._converters.append(converter)

    def convert(self, exc: Exception) -> ErrorEnvelope:
        for converter in self._converters:
            try:
                if converter.can_convert(exc):
                    return converter.convert(exc)
            except Exception:
                logger.exception(
                    "Exception converter %s failed on %s",
                    type(converter).__name__,
                    type(exc).__name__,
                )
        return ErrorEnvelope.internal_error()


__all__ = [
    "ExceptionToErrorConverter",
    "ICustomExceptionErrorConverter",
    "IExceptionToErrorConverter",
]
