"""Schemas used by the matching endpoints."""

from datetime import date
from typing import Any

from .common import CamelModel


class AssignRequest(CamelModel):
    volunteer_id: Any = None
    event_id: Any = None


class VolunteerRead(CamelModel):
    user_id: int
    full_name: str
    city: str
    state: str
    skills: list[str]
    availability: list[date]
    preferences: str | None = None


class MatchCandidateRead(VolunteerRead):
    match_score: float
    is_available: bool
    assigned: bool


__all__ = ["AssignRequest", "MatchCandidateRead", "VolunteerRead"]
