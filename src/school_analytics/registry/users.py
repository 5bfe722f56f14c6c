"""Users, roles and the permission check."""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet


class Role(str, Enum):
    """User roles."""

    ADMIN = "admin"
    STAFF = "staff"
    STUDENT = "student"


class Permission(str, Enum):
    """Permissions checked by guarded accessors."""

    VIEW_PERSONAL = "view_personal"


# Roles granting each permission
_GRANTS = {
    Permission.VIEW_PERSONAL: frozenset({Role.ADMIN, Role.STAFF}),
}


@dataclass(frozen=True)
class User:
    """An authenticated user and the roles they hold.

    Roles may be given as Role members or case-insensitive names
    ("ADMIN", "staff").
    """

    user_id: str
    roles: FrozenSet[Role] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not self.user_id:
            raise ValueError("user_id must not be empty")
        object.__setattr__(
            self,
            "roles",
            frozenset(r if isinstance(r, Role) else Role(r.lower()) for r in self.roles),
        )

    @classmethod
    def with_roles(cls, user_id: str, *roles: Role | str) -> "User":
        """Build a user from role values, e.g. User.with_roles("u1", "ADMIN")."""
        return cls(user_id=user_id, roles=frozenset(roles))

    def has_permission(self, permission: Permission | str) -> bool:
        """Check if any of the user's roles grants the permission.

        Unknown permissions are never granted.
        """
        if not isinstance(permission, Permission):
            try:
                permission = Permission(permission.lower())
            except ValueError:
                return False
        return bool(self.roles & _GRANTS.get(permission, frozenset()))
