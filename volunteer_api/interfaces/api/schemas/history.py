"""Schemas for volunteer history records."""

from datetime import date, datetime
from typing import Any

from .common import CamelModel


class HistoryCreateRequest(CamelModel):
    user_id: Any = None
    event_id: Any = None
    status: str | None = None


class HistoryStatusUpdate(CamelModel):
    status: Any = None


class HistoryRecordRead(CamelModel):
    id: int
    user_id: int
    event_id: int
    event_name: str
    event_description: str
    event_location: str
    required_skills: list[str]
    urgency: str
    event_date: date
    start_time: str | None = None
    end_time: str | None = None
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["HistoryCreateRequest", "HistoryRecordRead", "HistoryStatusUpdate"]
