"""Helpers to generate notifications from domain events."""

from __future__ import annotations

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import (
    NOTIFICATION_TYPE_ASSIGNMENT,
    Event,
    Notification,
)
from volunteer_api.infrastructure.repositories import NotificationRepository
from volunteer_api.utils import (
    format_12_hour_time,
    format_long_date,
    now_in_app_timezone,
    parse_date,
)


def build_assignment_message(event: Event) -> str:
    """Describe an upcoming event, e.g. for an assignment notification.

    The start time is formatted from the event's own value so no conversion is
    applied to an already formatted string.
    """

    parts = [f'You have an event coming up! "{event.event_name}"']
    event_date = parse_date(event.event_date)
    if event_date is not None:
        parts.append(f"on {format_long_date(event_date)}")
    start = format_12_hour_time(event.start_time)
    if start:
        parts.append(f"at {start}")
    parts.append(f"at {event.event_location}.")
    return " ".join(parts)


def notify_volunteer_assigned(
    session: Session, *, event: Event, user_id: int, commit: bool = True
) -> Notification:
    notification = Notification(
        id=None,
        user_id=user_id,
        message=build_assignment_message(event),
        type=NOTIFICATION_TYPE_ASSIGNMENT,
        event_name=event.event_name,
        read=False,
        created_at=now_in_app_timezone(),
    )
    return NotificationRepository(session).create(notification, commit=commit)


__all__ = ["build_assignment_message", "notify_volunteer_assigned"]
