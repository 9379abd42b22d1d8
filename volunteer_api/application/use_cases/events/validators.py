"""Validation rules applied when events are created or replaced."""

from __future__ import annotations

from datetime import date
from typing import Any

from volunteer_api.domain.entities import (
    EVENT_LOCATION_MAX_LENGTH,
    EVENT_NAME_MAX_LENGTH,
    URGENCIES,
    Event,
)
from volunteer_api.domain.exceptions import ValidationError
from volunteer_api.utils import parse_date, parse_time, today_in_app_timezone

from ..validators import clean_text, collect_skills, required_text


def build_event(
    *,
    event_id: int | None,
    event_name: Any,
    event_description: Any,
    event_location: Any,
    required_skills: Any,
    urgency: Any,
    event_date: Any,
    start_time: Any,
    end_time: Any,
    today: date | None = None,
) -> Event:
    """Return a normalized :class:`Event` or raise with every violated rule."""

    errors: list[str] = []

    name = required_text(
        event_name,
        required_message="Event name is required.",
        max_length=EVENT_NAME_MAX_LENGTH,
        too_long_message=f"Event name must be under {EVENT_NAME_MAX_LENGTH} characters.",
        errors=errors,
    )
    description = required_text(
        event_description,
        required_message="Event description is required.",
        errors=errors,
    )
    location = required_text(
        event_location,
        required_message="Event location is required.",
        max_length=EVENT_LOCATION_MAX_LENGTH,
        too_long_message=(
            f"Event location must be under {EVENT_LOCATION_MAX_LENGTH} characters."
        ),
        errors=errors,
    )
    skills = collect_skills(
        required_skills,
        errors=errors,
        empty_message="At least one skill must be selected.",
    )

    cleaned_urgency = clean_text(urgency)
    if cleaned_urgency is None or cleaned_urgency.lower() not in URGENCIES:
        errors.append("Invalid urgency level.")
    else:
        cleaned_urgency = cleaned_urgency.lower()

    parsed_date = None
    if event_date in (None, ""):
        errors.append("Event date is required.")
    else:
        parsed_date = parse_date(event_date)
        if parsed_date is None:
            errors.append("Event date must be a valid date.")
        elif parsed_date < (today or today_in_app_timezone()):
            errors.append("Event date cannot be in the past.")

    parsed_start = parsed_end = None
    if start_time in (None, "") or end_time in (None, ""):
        errors.append("Start and end times are required.")
    else:
        parsed_start = parse_time(start_time)
        parsed_end = parse_time(end_time)
        if parsed_start is None or parsed_end is None:
            errors.append("Start and end times must be valid times (HH:MM).")
        elif parsed_start >= parsed_end:
            errors.append("End time must be after start time.")

    if errors:
        raise ValidationError(errors)

    return Event(
        id=event_id,
        event_name=name,
        event_description=description,
        event_location=location,
        required_skills=skills,
        urgency=cleaned_urgency,
        event_date=parsed_date,
        start_time=parsed_start,
        end_time=parsed_end,
    )


__all__ = ["build_event"]
