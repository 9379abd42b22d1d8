"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

NOTIFICATION_TYPE_ASSIGNMENT = "assignment"
NOTIFICATION_TYPE_UPDATE = "update"
NOTIFICATION_TYPE_REMINDER = "reminder"
NOTIFICATION_TYPE_CANCELLATION = "cancellation"
NOTIFICATION_TYPES = (
    NOTIFICATION_TYPE_ASSIGNMENT,
    NOTIFICATION_TYPE_UPDATE,
    NOTIFICATION_TYPE_REMINDER,
    NOTIFICATION_TYPE_CANCELLATION,
)


@dataclass
class Notification:
    """Information message delivered to a specific user."""

    id: int | None
    user_id: int
    message: str
    type: str
    event_name: str | None = None
    read: bool = False
    created_at: datetime | None = None


__all__ = [
    "NOTIFICATION_TYPES",
    "NOTIFICATION_TYPE_ASSIGNMENT",
    "NOTIFICATION_TYPE_CANCELLATION",
    "NOTIFICATION_TYPE_REMINDER",
    "NOTIFICATION_TYPE_UPDATE",
    "Notification",
]
