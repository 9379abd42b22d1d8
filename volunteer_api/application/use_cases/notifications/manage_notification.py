"""Use cases acting on notifications that already exist."""

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import Notification, Principal
from volunteer_api.domain.exceptions import NotFoundError
from volunteer_api.infrastructure.repositories import NotificationRepository

from ...access import ensure_owner_or_admin


def _get_owned(
    repository: NotificationRepository, notification_id: int, principal: Principal
) -> Notification:
    notification = repository.get(notification_id)
    if notification is None:
        raise NotFoundError("Notification not found")
    ensure_owner_or_admin(principal, notification.user_id)
    return notification


def mark_notification_read(
    session: Session, notification_id: int, *, principal: Principal
) -> Notification:
    repository = NotificationRepository(session)
    _get_owned(repository, notification_id, principal)
    return repository.mark_as_read(notification_id)


def mark_all_notifications_read(session: Session, user_id: int) -> int:
    """Flag every unread notification of ``user_id`` as read.

    Returns the number of notifications that changed.
    """

    return NotificationRepository(session).mark_all_as_read(user_id)


def delete_notification(session: Session, notification_id: int, *, principal: Principal) -> None:
    repository = NotificationRepository(session)
    _get_owned(repository, notification_id, principal)
    repository.delete(notification_id)
