"""Domain entity representing a volunteer profile."""

from dataclasses import dataclass, field
from datetime import date, datetime

STATE_CODES = frozenset(
    {
        "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "DC", "FL", "GA", "HI",
        "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD", "MA", "MI", "MN",
        "MS", "MO", "MT", "NE", "NV", "NH", "NJ", "NM", "NY", "NC", "ND", "OH",
        "OK", "OR", "PA", "RI", "SC", "SD", "TN", "TX", "UT", "VT", "VA", "WA",
        "WV", "WI", "WY",
    }
)


@dataclass
class Profile:
    """Contact details, skills and availability of a single user."""

    user_id: int
    full_name: str
    address1: str
    city: str
    state: str
    zip: str
    skills: list[str] = field(default_factory=list)
    availability: list[date] = field(default_factory=list)
    address2: str | None = None
    preferences: str | None = None
    updated_at: datetime | None = None


__all__ = ["Profile", "STATE_CODES"]
