"""Use case for sending a notification manually."""

from typing import Any

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import NOTIFICATION_TYPES, Notification
from volunteer_api.domain.exceptions import NotFoundError, ValidationError
from volunteer_api.infrastructure.repositories import NotificationRepository, UserRepository
from volunteer_api.utils import now_in_app_timezone

from ..validators import clean_text, optional_text


def create_notification(
    session: Session,
    *,
    user_id: int,
    message: Any,
    type: Any,
    event_name: Any = None,
) -> Notification:
    errors: list[str] = []
    cleaned_message = clean_text(message)
    if cleaned_message is None:
        errors.append("Message is required")
    cleaned_type = clean_text(type)
    if cleaned_type not in NOTIFICATION_TYPES:
        errors.append(f"Type must be one of: {', '.join(NOTIFICATION_TYPES)}")
    cleaned_event_name = optional_text(
        event_name,
        max_length=100,
        too_long_message="Event name must be under 100 characters.",
        errors=errors,
    )
    if errors:
        raise ValidationError(errors)

    if UserRepository(session).get(user_id) is None:
        raise NotFoundError("User not found")

    notification = Notification(
        id=None,
        user_id=user_id,
        message=cleaned_message,
        type=cleaned_type,
        event_name=cleaned_event_name,
        read=False,
        created_at=now_in_app_timezone(),
    )
    return NotificationRepository(session).create(notification)
