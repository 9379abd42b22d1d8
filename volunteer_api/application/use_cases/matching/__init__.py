"""Use cases for matching volunteers to events."""

from .assign_volunteer import assign_volunteer
from .get_suggestions import get_suggestions
from .scoring import compute_match_score, is_available_on, rank_candidates
from .snapshot import snapshot_event

__all__ = [
    "assign_volunteer",
    "compute_match_score",
    "get_suggestions",
    "is_available_on",
    "rank_candidates",
    "snapshot_event",
]
