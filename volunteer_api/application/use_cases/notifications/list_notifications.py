"""Use case for reading a user's inbox."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import Notification
from volunteer_api.infrastructure.repositories import NotificationRepository


def list_notifications(
    session: Session, user_id: int, *, unread_only: bool = False
) -> Sequence[Notification]:
    """Return the notifications of ``user_id``, newest first."""

    return NotificationRepository(session).list_for_user(user_id, unread_only=unread_only)
