"""Role-based capability map.

A capability is a (resource, action) pair; each pair lists the roles that
hold it. Pairs missing from the map are granted to nobody.
"""

from typing import Literal

from src.accounting.models.enums import UserRole

Resource = Literal[
    "companies",
    "projects",
    "products",
    "vendors",
    "costHeads",
    "paymentMethods",
    "chartOfAccounts",
    "vouchers",
]
Action = Literal["READ", "WRITE", "POST"]

_ALL_ROLES = frozenset(UserRole)
_EDITORS = frozenset({UserRole.ADMIN, UserRole.ACCOUNTANT})

PERMISSIONS: dict[str, dict[str, frozenset[UserRole]]] = {
    "companies": {
        "READ": frozenset({UserRole.ADMIN}),
        "WRITE": frozenset({UserRole.ADMIN}),
    },
    "projects": {"READ": _ALL_ROLES, "WRITE": _EDITORS},
    "products": {"READ": _ALL_ROLES, "WRITE": _EDITORS},
    "vendors": {"READ": _ALL_ROLES, "WRITE": _EDITORS},
    "costHeads": {"READ": _ALL_ROLES, "WRITE": _EDITORS},
    "paymentMethods": {"READ": _ALL_ROLES, "WRITE": _EDITORS},
    "chartOfAccounts": {"READ": _ALL_ROLES, "WRITE": _EDITORS},
    "vouchers": {"READ": _ALL_ROLES, "WRITE": _EDITORS, "POST": _EDITORS},
}


def can(role: UserRole | str, resource: str, action: str) -> bool:
    """Check if a role can perform an action on a resource."""
    allowed = PERMISSIONS.get(resource, {}).get(action)
    if not allowed:
        return False
    try:
        return UserRole(role) in allowed
    except ValueError:
        return False
