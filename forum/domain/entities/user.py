"""Domain entity representing a forum member."""

from dataclasses import dataclass
from datetime import datetime

ROLE_MEMBER = "member"
ROLE_MODERATOR = "moderator"
ROLE_ADMIN = "admin"


@dataclass
class User:
    """Core attributes describing a forum member."""

    id: int | None
    name: str
    handle: str
    role: str
    is_active: bool
    created_at: datetime | None

    def has_role(self, alias: str) -> bool:
        """Return ``True`` when the user's role matches ``alias``."""

        return (self.role or "").lower() == alias.lower()

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.has_role(ROLE_ADMIN)

    def is_moderator(self) -> bool:
        return self.has_role(ROLE_MODERATOR)

    def can_moderate(self) -> bool:
        """Return ``True`` when the user may list and review reports."""

        return self.is_admin() or self.is_moderator()


__all__ = ["User", "ROLE_MEMBER", "ROLE_MODERATOR", "ROLE_ADMIN"]
