"""Pure scoring functions used to rank volunteers for an event."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date
from typing import Any

from volunteer_api.domain.entities import MatchCandidate, Profile
from volunteer_api.utils import decode_date_list, decode_string_list, parse_date


def compute_match_score(volunteer_skills: Iterable[str], event_skills: Iterable[str]) -> float:
    """Return the percentage of the event's skills the volunteer has.

    The result is in ``[0, 100]``; an event without skills scores ``0``.
    """

    required = set(event_skills)
    if not required:
        return 0.0
    overlap = required.intersection(volunteer_skills)
    return 100.0 * len(overlap) / len(required)


def is_available_on(availability: Iterable[date], event_date: date | None) -> bool:
    """Return ``True`` when one of the availability dates is the event's date."""

    if event_date is None:
        return False
    return any(parse_date(value) == event_date for value in availability)


def score_volunteer(
    profile: Profile,
    *,
    event_skills: Sequence[str],
    event_date: date | None,
    assigned_user_ids: set[int],
) -> MatchCandidate:
    skills = decode_string_list(profile.skills)
    availability = decode_date_list(profile.availability)
    return MatchCandidate(
        user_id=profile.user_id,
        full_name=profile.full_name,
        city=profile.city,
        state=profile.state,
        skills=skills,
        availability=availability,
        preferences=profile.preferences,
        match_score=compute_match_score(skills, event_skills),
        is_available=is_available_on(availability, event_date),
        assigned=profile.user_id in assigned_user_ids,
    )


def rank_candidates(
    profiles: Iterable[Profile],
    *,
    event_skills: Any,
    event_date: date | None,
    assigned_user_ids: set[int] | None = None,
) -> list[MatchCandidate]:
    """Score every profile, keep the plausible ones and sort them.

    A volunteer is kept when they share at least one skill with the event or
    are available on its date. Candidates are ordered by score descending,
    then by user id ascending.
    """

    skills = decode_string_list(event_skills)
    assigned = assigned_user_ids or set()
    candidates = [
        score_volunteer(
            profile,
            event_skills=skills,
            event_date=event_date,
            assigned_user_ids=assigned,
        )
        for profile in profiles
    ]
    kept = [c for c in candidates if c.match_score > 0 or c.is_available]
    return sorted(kept, key=lambda c: (-c.match_score, c.user_id))


__all__ = [
    "compute_match_score",
    "is_available_on",
    "rank_candidates",
    "score_volunteer",
]
