"""Use cases for user notifications."""

from .create_notification import create_notification
from .events import build_assignment_message, notify_volunteer_assigned
from .list_notifications import list_notifications
from .manage_notification import (
    delete_notification,
    mark_all_notifications_read,
    mark_notification_read,
)

__all__ = [
    "build_assignment_message",
    "create_notification",
    "delete_notification",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
    "notify_volunteer_assigned",
]
