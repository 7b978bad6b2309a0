from __future__ import annotations

from typing import TYPE_CHECKING

from .context import get_current_principal_or_none

if TYPE_CHECKING:
    from .principal import Principal


class ContextCurrentUserService:
    """Current user taken from the request-scoped principal context."""

    @property
    def principal(self) -> Principal | None:
        return get_current_principal_or_none()

    @property
    def user_id(self) -> str | None:
        principal = self.principal
        return principal.user_id if principal else None
