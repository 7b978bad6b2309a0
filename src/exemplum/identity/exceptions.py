"""Identity-related exceptions.

All identity errors inherit from IdentityError which extends DomainError,
ensuring proper exception hierarchy.
"""

from __future__ import annotations

from ..primitives.exceptions import DomainError


class IdentityError(DomainError):
    """Base class for all identity-related errors."""


class AuthenticationError(IdentityError):
    """Raised when authentication fails.

    This is the base exception for all authentication failures.
    Use more specific exceptions when possible.
    """


class InvalidTokenError(AuthenticationError):
    """Raised when a token is invalid or malformed.

    Examples:
        - JWT signature verification failed
        - Token format is incorrect
        - Issuer or audience claims do not match
    """


class ExpiredTokenError(AuthenticationError):
    """Raised when a token has expired.

    The token was valid at some point but is no longer usable.
    """


__all__: list[str] = [
    "AuthenticationError",
    "ExpiredTokenError",
    "IdentityError",
    "InvalidTokenError",
]
