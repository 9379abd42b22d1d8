"""Authorization rules shared by use cases."""

from volunteer_api.domain.entities import Principal
from volunteer_api.domain.exceptions import PermissionDeniedError

ADMIN_REQUIRED_MESSAGE = "Admin access required"
OWNER_REQUIRED_MESSAGE = "You can only access your own resources"


def ensure_admin(principal: Principal) -> None:
    if not principal.is_admin():
        raise PermissionDeniedError(ADMIN_REQUIRED_MESSAGE)


def ensure_owner_or_admin(principal: Principal, owner_id: int | None) -> None:
    """Allow admins and the user owning the resource, reject everyone else."""

    if not principal.can_access(owner_id):
        raise PermissionDeniedError(OWNER_REQUIRED_MESSAGE)


__all__ = [
    "ADMIN_REQUIRED_MESSAGE",
    "OWNER_REQUIRED_MESSAGE",
    "ensure_admin",
    "ensure_owner_or_admin",
]
