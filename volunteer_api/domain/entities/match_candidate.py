"""Domain entity describing how well a volunteer fits an event."""

from dataclasses import dataclass, field
from datetime import date


@dataclass
class MatchCandidate:
    """A volunteer scored against a single event."""

    user_id: int
    full_name: str
    city: str
    state: str
    match_score: float
    is_available: bool
    assigned: bool
    skills: list[str] = field(default_factory=list)
    availability: list[date] = field(default_factory=list)
    preferences: str | None = None


__all__ = ["MatchCandidate"]
