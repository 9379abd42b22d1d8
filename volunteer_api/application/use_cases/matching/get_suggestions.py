"""Use case for ranking volunteers against an event."""

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import MatchCandidate
from volunteer_api.domain.exceptions import NotFoundError
from volunteer_api.infrastructure.repositories import EventRepository, HistoryRepository

from ..profiles import list_volunteers
from .scoring import rank_candidates


def get_suggestions(session: Session, event_id: int) -> list[MatchCandidate]:
    """Return the volunteers worth considering for ``event_id``, best first."""

    event = EventRepository(session).get(event_id)
    if event is None:
        raise NotFoundError("Event not found")

    assigned_user_ids = HistoryRepository(session).user_ids_for_event(event_id)
    return rank_candidates(
        list_volunteers(session),
        event_skills=event.required_skills,
        event_date=event.event_date,
        assigned_user_ids=assigned_user_ids,
    )
