"""Identity: principal, request-scoped context and JWT validation."""

from __future__ import annotations

from .context import (
    authenticated_as,
    get_current_principal,
    get_current_principal_or_none,
    reset_principal,
    set_principal,
)
from .current_user import ContextCurrentUserService
from .exceptions import (
    AuthenticationError,
    ExpiredTokenError,
    IdentityError,
    InvalidTokenError,
)
from .jwt import JwtIdentityProvider
from .principal import PERMISSIONS_CLAIM, Principal
from .token import extract_bearer_token

__all__: list[str] = [
    "PERMISSIONS_CLAIM",
    "AuthenticationError",
    "ContextCurrentUserService",
    "ExpiredTokenError",
    "IdentityError",
    "InvalidTokenError",
    "JwtIdentityProvider",
    "Principal",
    "authenticated_as",
    "extract_bearer_token",
    "get_current_principal",
    "get_current_principal_or_none",
    "reset_principal",
    "set_principal",
]
