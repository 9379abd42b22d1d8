"""Domain entity representing a volunteering event."""

from dataclasses import dataclass, field
from datetime import date, time

SKILLS = (
    "Communication",
    "Teamwork",
    "Organized",
    "Adaptability",
    "Driving",
    "English",
    "Spanish",
)

URGENCY_LOW = "low"
URGENCY_MEDIUM = "medium"
URGENCY_HIGH = "high"
URGENCY_CRITICAL = "critical"
URGENCIES = (URGENCY_LOW, URGENCY_MEDIUM, URGENCY_HIGH, URGENCY_CRITICAL)

EVENT_NAME_MAX_LENGTH = 100
EVENT_LOCATION_MAX_LENGTH = 255
URGENCY_MAX_LENGTH = 20


@dataclass
class Event:
    """An admin-created opportunity that volunteers can be assigned to."""

    id: int | None
    event_name: str
    event_description: str
    event_location: str
    required_skills: list[str] = field(default_factory=list)
    urgency: str = URGENCY_MEDIUM
    event_date: date | None = None
    start_time: time | None = None
    end_time: time | None = None


__all__ = [
    "EVENT_LOCATION_MAX_LENGTH",
    "EVENT_NAME_MAX_LENGTH",
    "Event",
    "SKILLS",
    "URGENCIES",
    "URGENCY_CRITICAL",
    "URGENCY_HIGH",
    "URGENCY_LOW",
    "URGENCY_MAX_LENGTH",
    "URGENCY_MEDIUM",
]
