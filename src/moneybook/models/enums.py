"""Shared enums for models."""

from enum import Enum
from typing import Any


class TenantRole(str, Enum):
    """A user's role within a tenant.

    Roles are totally ordered: Viewer < Editor < Owner. A role satisfies a
    requirement when it is greater than or equal to the required role.
    """

    VIEWER = "Viewer"
    EDITOR = "Editor"
    OWNER = "Owner"

    @property
    def rank(self) -> int:
        return _ROLE_RANKS[self]

    def satisfies(self, minimum: "TenantRole") -> bool:
        """Check whether this role grants at least ``minimum``."""
        return self.rank >= minimum.rank

    @classmethod
    def parse(cls, value: Any) -> "TenantRole | None":
        """Parse a role name, returning None for anything that is not a known role."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TenantRole):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TenantRole):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TenantRole):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TenantRole):
            return NotImplemented
        return self.rank >= other.rank


_ROLE_RANKS: dict[TenantRole, int] = {
    TenantRole.VIEWER: 1,
    TenantRole.EDITOR: 2,
    TenantRole.OWNER: 3,
}
