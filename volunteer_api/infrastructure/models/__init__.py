"""ORM models used by the application infrastructure."""

from .event import EventModel
from .notification import NotificationModel
from .profile import ProfileModel
from .user import UserModel
from .volunteer_history import VolunteerHistoryModel

__all__ = [
    "EventModel",
    "NotificationModel",
    "ProfileModel",
    "UserModel",
    "VolunteerHistoryModel",
]
