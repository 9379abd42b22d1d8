"""Persistence layer for events."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import Event
from volunteer_api.infrastructure.models import EventModel
from volunteer_api.utils import decode_string_list, parse_date, parse_time


class EventRepository:
    """Provide CRUD operations for :class:`Event` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[Event]:
        query = self.session.query(EventModel).order_by(
            EventModel.event_date.asc(), EventModel.start_time.asc(), EventModel.id.asc()
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, event_id: int) -> Event | None:
        model = self.session.get(EventModel, event_id)
        return self._to_entity(model) if model else None

    def create(self, event: Event) -> Event:
        model = EventModel()
        self._apply_entity_to_model(model, event)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, event: Event) -> Event:
        model = self.session.get(EventModel, event.id) if event.id is not None else None
        if model is None:
            msg = f"Event with id {event.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, event)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, event_id: int) -> None:
        model = self.session.get(EventModel, event_id)
        if model is None:
            msg = f"Event with id {event_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _apply_entity_to_model(model: EventModel, event: Event) -> None:
        model.event_name = event.event_name
        model.event_description = event.event_description
        model.event_location = event.event_location
        model.required_skills = list(event.required_skills)
        model.urgency = event.urgency
        model.event_date = event.event_date
        model.start_time = event.start_time
        model.end_time = event.end_time

    @staticmethod
    def _to_entity(model: EventModel) -> Event:
        return Event(
            id=model.id,
            event_name=model.event_name,
            event_description=model.event_description,
            event_location=model.event_location,
            required_skills=decode_string_list(model.required_skills),
            urgency=model.urgency,
            event_date=parse_date(model.event_date),
            start_time=parse_time(model.start_time),
            end_time=parse_time(model.end_time),
        )


__all__ = ["EventRepository"]
