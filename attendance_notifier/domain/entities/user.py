"""Domain entity representing a user."""

from dataclasses import dataclass

from .role import ROLE_ADMIN, ROLE_FACULTY, Role


@dataclass
class User:
    """Identity attributes the engine needs from an application user."""

    id: int
    role: Role
    name: str
    email: str
    is_active: bool = True
    deleted: bool = False

    def has_role(self, alias: str) -> bool:
        """Return ``True`` when the user's role alias matches ``alias``."""

        return self.role.alias.lower() == alias.lower()

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.has_role(ROLE_ADMIN)

    def can_record_attendance(self) -> bool:
        """Return ``True`` for users allowed to emit attendance events."""

        return self.is_admin() or self.has_role(ROLE_FACULTY)


__all__ = ["User"]
