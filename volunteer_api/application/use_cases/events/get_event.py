"""Use cases for reading events."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import Event
from volunteer_api.domain.exceptions import NotFoundError
from volunteer_api.infrastructure.repositories import EventRepository


def get_event(session: Session, event_id: int) -> Event:
    event = EventRepository(session).get(event_id)
    if event is None:
        raise NotFoundError("Event not found")
    return event


def list_events(session: Session) -> Sequence[Event]:
    """Return every event ordered by date and start time."""

    return EventRepository(session).list()
