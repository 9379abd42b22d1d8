"""Use case for recording participation without notifying the volunteer."""

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import HISTORY_STATUS_UPCOMING, HistoryRecord
from volunteer_api.domain.exceptions import ConflictError, NotFoundError
from volunteer_api.infrastructure.repositories import (
    DUPLICATE_ASSIGNMENT_MESSAGE,
    EventRepository,
    HistoryRepository,
    UserRepository,
)

from ..matching.snapshot import snapshot_event
from .update_status import validate_status


def log_participation(
    session: Session,
    *,
    user_id: int,
    event_id: int,
    status: str | None = None,
) -> HistoryRecord:
    """Store a snapshot of ``event_id`` in the history of ``user_id``."""

    resolved_status = validate_status(status) if status else HISTORY_STATUS_UPCOMING

    if UserRepository(session).get(user_id) is None:
        raise NotFoundError("User not found")
    event = EventRepository(session).get(event_id)
    if event is None:
        raise NotFoundError("Event not found")

    repository = HistoryRepository(session)
    if repository.exists(user_id=user_id, event_id=event_id):
        raise ConflictError(DUPLICATE_ASSIGNMENT_MESSAGE)

    return repository.create(snapshot_event(event, user_id=user_id, status=resolved_status))
