"""Domain entity representing a volunteer's participation in an event."""

from dataclasses import dataclass, field
from datetime import date, datetime

HISTORY_STATUS_UPCOMING = "upcoming"
HISTORY_STATUS_IN_PROGRESS = "in-progress"
HISTORY_STATUS_COMPLETED = "completed"
HISTORY_STATUS_CANCELLED = "cancelled"
HISTORY_STATUSES = (
    HISTORY_STATUS_UPCOMING,
    HISTORY_STATUS_COMPLETED,
    HISTORY_STATUS_CANCELLED,
    HISTORY_STATUS_IN_PROGRESS,
)


@dataclass
class HistoryRecord:
    """Snapshot of an event taken when a volunteer was assigned to it.

    The event fields are copied rather than referenced so the record keeps
    describing the event as it was, even after the event is edited.
    ``start_time`` and ``end_time`` hold ``HH:MM:SS`` strings.
    """

    id: int | None
    user_id: int
    event_id: int
    event_name: str
    event_description: str
    event_location: str
    urgency: str
    event_date: date
    required_skills: list[str] = field(default_factory=list)
    start_time: str | None = None
    end_time: str | None = None
    status: str = HISTORY_STATUS_UPCOMING
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = [
    "HISTORY_STATUSES",
    "HISTORY_STATUS_CANCELLED",
    "HISTORY_STATUS_COMPLETED",
    "HISTORY_STATUS_IN_PROGRESS",
    "HISTORY_STATUS_UPCOMING",
    "HistoryRecord",
]
