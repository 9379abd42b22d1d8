"""Use case for reading a volunteer's participation history."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import HistoryRecord
from volunteer_api.infrastructure.repositories import HistoryRepository


def list_history(session: Session, user_id: int) -> Sequence[HistoryRecord]:
    """Return the records of ``user_id`` with the most recent events first."""

    return HistoryRepository(session).list_for_user(user_id)
