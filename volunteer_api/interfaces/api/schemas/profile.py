"""Pydantic models describing volunteer profiles."""

from datetime import date
from typing import Any

from .common import CamelModel


class ProfilePayload(CamelModel):
    full_name: Any = None
    address1: Any = None
    address2: Any = None
    city: Any = None
    state: Any = None
    zip: Any = None
    skills: Any = None
    preferences: Any = None
    availability: Any = None


class ProfileRead(CamelModel):
    user_id: int
    full_name: str
    address1: str
    address2: str | None = None
    city: str
    state: str
    zip: str
    skills: list[str]
    preferences: str | None = None
    availability: list[date]


__all__ = ["ProfilePayload", "ProfileRead"]
