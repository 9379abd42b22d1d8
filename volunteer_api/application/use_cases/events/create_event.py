"""Use case for creating events."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import Event
from volunteer_api.infrastructure.repositories import EventRepository

from .validators import build_event

logger = logging.getLogger(__name__)


def create_event(session: Session, **fields: Any) -> Event:
    """Validate ``fields`` and persist a new event."""

    event = build_event(event_id=None, **fields)
    created = EventRepository(session).create(event)
    logger.info("Created event %s (%s) on %s", created.id, created.event_name, created.event_date)
    return created
