"""Use case for assigning a volunteer to an event."""

import logging

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import HistoryRecord
from volunteer_api.domain.exceptions import ConflictError, NotFoundError
from volunteer_api.infrastructure.repositories import (
    DUPLICATE_ASSIGNMENT_MESSAGE,
    EventRepository,
    HistoryRepository,
    UserRepository,
)

from ..notifications.events import notify_volunteer_assigned
from .snapshot import snapshot_event

logger = logging.getLogger(__name__)


def assign_volunteer(session: Session, *, volunteer_id: int, event_id: int) -> HistoryRecord:
    """Record the assignment and notify the volunteer in a single transaction.

    A volunteer can be assigned to an event at most once. The existence check
    below answers the common case early; concurrent requests that both pass it
    are resolved by the unique constraint on the history table.
    """

    if UserRepository(session).get(volunteer_id) is None:
        raise NotFoundError("Volunteer not found")

    event = EventRepository(session).get(event_id)
    if event is None:
        raise NotFoundError("Event not found")

    history_repository = HistoryRepository(session)
    if history_repository.exists(user_id=volunteer_id, event_id=event_id):
        logger.info("Volunteer %s is already assigned to event %s", volunteer_id, event_id)
        raise ConflictError(DUPLICATE_ASSIGNMENT_MESSAGE)

    record = snapshot_event(event, user_id=volunteer_id)

    try:
        saved = history_repository.create(record, commit=False)
        notify_volunteer_assigned(session, event=event, user_id=volunteer_id, commit=False)
        session.commit()
    except ConflictError:
        logger.info(
            "Concurrent assignment of volunteer %s to event %s rejected",
            volunteer_id,
            event_id,
        )
        raise
    except Exception:
        session.rollback()
        raise

    refreshed = history_repository.get(saved.id)
    logger.info("Assigned volunteer %s to event %s", volunteer_id, event_id)
    return refreshed or saved
