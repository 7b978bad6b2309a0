"""The caller's principal for the request being processed.

The authentication middleware opens an :func:`authenticated_as` scope;
anything awaited inside it (the mediator, its stages, handlers) sees the
same principal through :func:`get_current_principal_or_none`.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .principal import Principal

_current_principal: ContextVar[Principal | None] = ContextVar(
    "exemplum_principal", default=None
)


def get_current_principal() -> Principal:
    """The authenticated caller; raises ``LookupError`` for anonymous requests."""
    principal = _current_principal.get()
    if principal is None:
        raise LookupError("Request is anonymous: no principal was resolved.")
    return principal


def get_current_principal_or_none() -> Principal | None:
    return _current_principal.get()


def set_principal(principal: Principal | None) -> Token[Principal | None]:
    return _current_principal.set(principal)


def reset_principal(token: Token[Principal | None]) -> None:
    _current_principal.reset(token)


@contextmanager
def authenticated_as(principal: Principal) -> Iterator[Principal]:
    """Make *principal* the caller until the block exits."""
    token = set_principal(principal)
    try:
        yield principal
    finally:
        reset_principal(token)
