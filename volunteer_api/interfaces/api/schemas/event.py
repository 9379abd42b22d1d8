"""Pydantic models describing event payloads."""

from datetime import date, time
from typing import Any

from .common import CamelModel


class EventPayload(CamelModel):
    """Fields accepted when creating or replacing an event.

    Fields accept any JSON value; the use case checks every rule and reports
    all violations together.
    """

    event_name: Any = None
    event_description: Any = None
    event_location: Any = None
    required_skills: Any = None
    urgency: Any = None
    event_date: Any = None
    start_time: Any = None
    end_time: Any = None


class EventRead(CamelModel):
    id: int
    event_name: str
    event_description: str
    event_location: str
    required_skills: list[str]
    urgency: str
    event_date: date
    start_time: time
    end_time: time


__all__ = ["EventPayload", "EventRead"]
