"""Use case for deleting events."""

import logging

from sqlalchemy.orm import Session

from volunteer_api.domain.exceptions import ConflictError, NotFoundError
from volunteer_api.infrastructure.repositories import EventRepository, HistoryRepository

logger = logging.getLogger(__name__)


def delete_event(session: Session, event_id: int) -> None:
    """Delete an event that no volunteer has been assigned to."""

    repository = EventRepository(session)
    if repository.get(event_id) is None:
        raise NotFoundError("Event not found")

    assignments = HistoryRepository(session).count_for_event(event_id)
    if assignments:
        logger.info(
            "Refusing to delete event %s referenced by %s history records",
            event_id,
            assignments,
        )
        raise ConflictError("Event has volunteer history and cannot be deleted")

    repository.delete(event_id)
