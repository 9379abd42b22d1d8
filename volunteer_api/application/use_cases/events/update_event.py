"""Use case for replacing an event's fields."""

from typing import Any

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import Event
from volunteer_api.domain.exceptions import NotFoundError
from volunteer_api.infrastructure.repositories import EventRepository

from .validators import build_event


def update_event(session: Session, event_id: int, **fields: Any) -> Event:
    """Replace every field of the event.

    History records already taken from this event keep their snapshot.
    """

    repository = EventRepository(session)
    if repository.get(event_id) is None:
        raise NotFoundError("Event not found")
    event = build_event(event_id=event_id, **fields)
    return repository.update(event)
