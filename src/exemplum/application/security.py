"""Authorization policies and the claim requirements behind them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..identity.principal import PERMISSIONS_CLAIM

if TYPE_CHECKING:
    from ..identity.principal import Principal


class ClaimTypes:
    PERMISSION = PERMISSIONS_CLAIM


class Permissions:
    WRITE_TODO = "write:todo"
    DELETE_TODO = "delete:todo"


class Policies:
    TODO_WRITE_ACCESS = "TodoWriteAccess"
    TODO_DELETE_ACCESS = "TodoDeleteAccess"


@dataclass(frozen=True)
class PolicyRequirement:
    """A named policy satisfied when the principal holds one of the values.

    ``allowed_values`` empty means the claim only has to be present.
    """

    name: str
    claim_type: str
    allowed_values: frozenset[str] = frozenset()

    def is_satisfied_by(self, principal: Principal) -> bool:
        values = principal.claim_values(self.claim_type)
        if not self.allowed_values:
            return bool(values)
        return not values.isdisjoint(self.allowed_values)


TODO_WRITE_ACCESS = PolicyRequirement(
    Policies.TODO_WRITE_ACCESS,
    ClaimTypes.PERMISSION,
    frozenset({Permissions.WRITE_TODO}),
)

TODO_DELETE_ACCESS = PolicyRequirement(
    Policies.TODO_DELETE_ACCESS,
    ClaimTypes.PERMISSION,
    frozenset({Permissions.DELETE_TODO}),
)


__all__ = [
    "TODO_DELETE_ACCESS",
    "TODO_WRITE_ACCESS",
    "ClaimTypes",
    "Permissions",
    "Policies",
    "PolicyRequirement",
]
