"""Persistence layer for volunteer history records."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from volunteer_api.domain.entities import HistoryRecord
from volunteer_api.domain.exceptions import ConflictError
from volunteer_api.infrastructure.models import VolunteerHistoryModel
from volunteer_api.utils import decode_string_list, parse_date

DUPLICATE_ASSIGNMENT_MESSAGE = "Volunteer already assigned to this event"


class HistoryRepository:
    """Provide CRUD operations for :class:`HistoryRecord` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, record_id: int) -> HistoryRecord | None:
        model = self.session.get(VolunteerHistoryModel, record_id)
        return self._to_entity(model) if model else None

    def list_for_user(self, user_id: int) -> Sequence[HistoryRecord]:
        query = (
            self.session.query(VolunteerHistoryModel)
            .filter(VolunteerHistoryModel.user_id == user_id)
            .order_by(
                VolunteerHistoryModel.event_date.desc(), VolunteerHistoryModel.id.desc()
            )
        )
        return [self._to_entity(model) for model in query.all()]

    def exists(self, *, user_id: int, event_id: int) -> bool:
        query = self.session.query(VolunteerHistoryModel.id).filter(
            VolunteerHistoryModel.user_id == user_id,
            VolunteerHistoryModel.event_id == event_id,
        )
        return self.session.query(query.exists()).scalar()

    def user_ids_for_event(self, event_id: int) -> set[int]:
        rows = (
            self.session.query(VolunteerHistoryModel.user_id)
            .filter(VolunteerHistoryModel.event_id == event_id)
            .all()
        )
        return {user_id for (user_id,) in rows}

    def count_for_event(self, event_id: int) -> int:
        return (
            self.session.query(func.count(VolunteerHistoryModel.id))
            .filter(VolunteerHistoryModel.event_id == event_id)
            .scalar()
            or 0
        )

    def create(self, record: HistoryRecord, *, commit: bool = True) -> HistoryRecord:
        """Insert ``record``.

        The unique ``(user_id, event_id)`` constraint is the authoritative
        duplicate guard; a violation rolls the session back and surfaces as
        :class:`ConflictError`. With ``commit=False`` the row is only flushed so
        the caller can add more work to the same transaction.
        """

        model = VolunteerHistoryModel()
        self._apply_entity_to_model(model, record)
        self.session.add(model)
        try:
            if commit:
                self.session.commit()
            else:
                self.session.flush()
        except IntegrityError as exc:
            self.session.rollback()
            raise ConflictError(DUPLICATE_ASSIGNMENT_MESSAGE) from exc
        if commit:
            self.session.refresh(model)
        return self._to_entity(model)

    def update_status(self, record_id: int, status: str) -> HistoryRecord:
        model = self.session.get(VolunteerHistoryModel, record_id)
        if model is None:
            msg = f"History record with id {record_id} not found"
            raise ValueError(msg)
        model.status = status
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _apply_entity_to_model(model: VolunteerHistoryModel, record: HistoryRecord) -> None:
        model.user_id = record.user_id
        model.event_id = record.event_id
        model.event_name = record.event_name
        model.event_description = record.event_description
        model.event_location = record.event_location
        model.required_skills = list(record.required_skills)
        model.urgency = record.urgency
        model.event_date = record.event_date
        model.start_time = record.start_time
        model.end_time = record.end_time
        model.status = record.status

    @staticmethod
    def _to_entity(model: VolunteerHistoryModel) -> HistoryRecord:
        return HistoryRecord(
            id=model.id,
            user_id=model.user_id,
            event_id=model.event_id,
            event_name=model.event_name,
            event_description=model.event_description,
            event_location=model.event_location,
            required_skills=decode_string_list(model.required_skills),
            urgency=model.urgency,
            event_date=parse_date(model.event_date),
            start_time=model.start_time,
            end_time=model.end_time,
            status=model.status,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["DUPLICATE_ASSIGNMENT_MESSAGE", "HistoryRepository"]
