"""Use case for changing a history record's status."""

from typing import Any

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import HISTORY_STATUSES, HistoryRecord, Principal
from volunteer_api.domain.exceptions import NotFoundError, ValidationError
from volunteer_api.infrastructure.repositories import HistoryRepository

from ...access import ensure_owner_or_admin


def validate_status(status: Any) -> str:
    if not isinstance(status, str) or not status.strip():
        raise ValidationError("Status is required")
    normalized = status.strip().lower()
    if normalized not in HISTORY_STATUSES:
        raise ValidationError(f"Status must be one of: {', '.join(HISTORY_STATUSES)}")
    return normalized


def update_history_status(
    session: Session, record_id: int, *, status: Any, principal: Principal
) -> HistoryRecord:
    """Replace the status of a record.

    Any status may follow any other; e.g. a completed record can go back to
    upcoming.
    """

    repository = HistoryRepository(session)
    record = repository.get(record_id)
    if record is None:
        raise NotFoundError("History record not found")
    ensure_owner_or_admin(principal, record.user_id)

    return repository.update_status(record_id, validate_status(status))
