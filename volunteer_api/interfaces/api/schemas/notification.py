"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from .common import CamelModel


class NotificationCreate(CamelModel):
    user_id: Any = None
    message: Any = None
    type: Any = None
    event_name: Any = None


class NotificationRead(CamelModel):
    """Representation of a notification delivered to the client."""

    id: int
    user_id: int
    message: str
    type: str
    event_name: str | None = None
    read: bool
    created_at: datetime | None = None


class MarkAllReadResult(CamelModel):
    updated: int


__all__ = ["MarkAllReadResult", "NotificationCreate", "NotificationRead"]
