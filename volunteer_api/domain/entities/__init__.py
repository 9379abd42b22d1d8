"""Domain entities exposed by the application."""

from .event import (
    EVENT_LOCATION_MAX_LENGTH,
    EVENT_NAME_MAX_LENGTH,
    SKILLS,
    URGENCIES,
    URGENCY_MAX_LENGTH,
    URGENCY_MEDIUM,
    Event,
)
from .history_record import (
    HISTORY_STATUSES,
    HISTORY_STATUS_UPCOMING,
    HistoryRecord,
)
from .notification import (
    NOTIFICATION_TYPES,
    NOTIFICATION_TYPE_ASSIGNMENT,
    Notification,
)
from .match_candidate import MatchCandidate
from .principal import Principal
from .profile import STATE_CODES, Profile
from .user import ROLES, ROLE_ADMIN, ROLE_VOLUNTEER, User

__all__ = [
    "EVENT_LOCATION_MAX_LENGTH",
    "EVENT_NAME_MAX_LENGTH",
    "Event",
    "HISTORY_STATUSES",
    "HISTORY_STATUS_UPCOMING",
    "HistoryRecord",
    "MatchCandidate",
    "NOTIFICATION_TYPES",
    "NOTIFICATION_TYPE_ASSIGNMENT",
    "Notification",
    "Principal",
    "Profile",
    "ROLES",
    "ROLE_ADMIN",
    "ROLE_VOLUNTEER",
    "SKILLS",
    "STATE_CODES",
    "URGENCIES",
    "URGENCY_MAX_LENGTH",
    "URGENCY_MEDIUM",
    "User",
]
