"""Repository implementations for infrastructure layer."""

from .event_repository import EventRepository
from .history_repository import DUPLICATE_ASSIGNMENT_MESSAGE, HistoryRepository
from .notification_repository import NotificationRepository
from .profile_repository import ProfileRepository
from .user_repository import UserRepository

__all__ = [
    "DUPLICATE_ASSIGNMENT_MESSAGE",
    "EventRepository",
    "HistoryRepository",
    "NotificationRepository",
    "ProfileRepository",
    "UserRepository",
]
