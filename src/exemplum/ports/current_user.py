from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..identity.principal import Principal


@runtime_checkable
class ICurrentUserService(Protocol):
    """Resolves the principal behind the request being handled, if any."""

    @property
    def principal(self) -> Principal | None: ...

    @property
    def user_id(self) -> str | None: ...
