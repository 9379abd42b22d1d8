"""Identity of the caller as carried by a verified access token."""

from dataclasses import dataclass

from .user import ROLE_ADMIN


@dataclass(frozen=True)
class Principal:
    """Authenticated caller bound to a single request."""

    user_id: int
    email: str
    role: str

    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN

    def can_access(self, owner_id: int | None) -> bool:
        """Return ``True`` for admins and for the owner of the resource."""

        if self.is_admin():
            return True
        return owner_id is not None and owner_id == self.user_id


__all__ = ["Principal"]
