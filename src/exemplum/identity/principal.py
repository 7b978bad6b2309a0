"""Principal value object representing an authenticated identity."""

from __future__ import annotations

import contextlib
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

#: Claim carrying API permissions (Auth0 style).
PERMISSIONS_CLAIM = "permissions"


class Principal(BaseModel):
    """Immutable identity of the caller, built from validated token claims.

    Attributes:
        user_id: Subject identifier (``sub`` claim).
        name: Display name (configurable name claim, ``name`` by default).
        roles: Role names from the configured role claim.
        permissions: Permission strings from the ``permissions`` claim.
        claims: All raw claims from the token.
        expires_at: Token expiration time (timezone-aware UTC).

    Example:
        ```python
        principal = Principal(
            user_id="auth0|123",
            name="Jane Doe",
            permissions=frozenset(["write:todo"]),
        )

        if principal.has_claim("permissions", "write:todo"):
            ...
        ```
    """

    model_config = ConfigDict(frozen=True)

    user_id: str
    name: str = ""
    roles: frozenset[str] = frozenset()
    permissions: frozenset[str] = frozenset()
    claims: dict[str, Any] = Field(default_factory=dict)
    expires_at: datetime | None = None

    @classmethod
    def from_claims(
        cls,
        claims: dict[str, Any],
        *,
        name_claim: str = "name",
        role_claim: str = "roles",
    ) -> Principal:
        """Create a Principal from validated JWT claims.

        Standard claims mapped:
            - sub → user_id
            - name_claim / nickname / email / sub → name
            - role_claim → roles
            - permissions (list) or scope (space separated) → permissions
            - exp → expires_at
        """
        user_id = str(claims.get("sub", ""))
        name = (
            claims.get(name_claim)
            or claims.get("nickname")
            or claims.get("email")
            or user_id
        )

        # Coerce to strings to handle non-string values from IdPs
        roles: set[str] = set()
        raw_roles = claims.get(role_claim)
        if isinstance(raw_roles, list):
            roles.update(str(r) for r in raw_roles)
        elif isinstance(raw_roles, str):
            roles.add(raw_roles)

        permissions: set[str] = set()
        raw_permissions = claims.get(PERMISSIONS_CLAIM)
        if isinstance(raw_permissions, list):
            permissions.update(str(p) for p in raw_permissions)
        scope = claims.get("scope")
        if isinstance(scope, str):
            permissions.update(scope.split())

        expires_at: datetime | None = None
        if "exp" in claims:
            with contextlib.suppress(TypeError, ValueError, OverflowError):
                expires_at = datetime.fromtimestamp(claims["exp"], tz=timezone.utc)

        return cls(
            user_id=user_id,
            name=str(name),
            roles=frozenset(roles),
            permissions=frozenset(permissions),
            claims=claims,
            expires_at=expires_at,
        )

    @property
    def is_expired(self) -> bool:
        if self.expires_at is None:
            return False
        expires_at = self.expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return datetime.now(timezone.utc) > expires_at

    def has_role(self, role: str) -> bool:
        return role in self.roles

    def has_permission(self, permission: str) -> bool:
        return permission in self.permissions

    def claim_values(self, claim_type: str) -> frozenset[str]:
        """All values held for *claim_type*, whatever their shape in the token."""
        if claim_type == PERMISSIONS_CLAIM:
            return self.permissions
        raw = self.claims.get(claim_type)
        if raw is None:
            return frozenset()
        if isinstance(raw, list | tuple | set | frozenset):
            return frozenset(str(v) for v in raw)
        return frozenset([str(raw)])

    def has_claim(self, claim_type: str, value: str | None = None) -> bool:
        """True if the claim is present (and holds *value*, when given)."""
        values = self.claim_values(claim_type)
        if value is None:
            return bool(values)
        return value in values

    def __hash__(self) -> int:
        # claims is a dict, so hash the identifying fields only
        return hash(
            (
                self.user_id,
                self.name,
                tuple(sorted(self.roles)),
                tuple(sorted(self.permissions)),
            )
        )


__all__: list[str] = ["PERMISSIONS_CLAIM", "Principal"]
