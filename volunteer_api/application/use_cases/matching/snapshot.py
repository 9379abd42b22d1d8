"""Copy an event's fields into a history record."""

from volunteer_api.domain.entities import (
    EVENT_LOCATION_MAX_LENGTH,
    EVENT_NAME_MAX_LENGTH,
    HISTORY_STATUS_UPCOMING,
    URGENCY_MAX_LENGTH,
    URGENCY_MEDIUM,
    Event,
    HistoryRecord,
)
from volunteer_api.domain.exceptions import ValidationError
from volunteer_api.utils import decode_string_list, format_time, parse_date


def snapshot_event(
    event: Event, *, user_id: int, status: str = HISTORY_STATUS_UPCOMING
) -> HistoryRecord:
    """Build a :class:`HistoryRecord` describing ``event`` as it is right now.

    Text is trimmed and capped to the limits used at event creation and times
    are stored as ``HH:MM:SS`` whatever representation the event holds.
    """

    name = (event.event_name or "").strip()
    description = (event.event_description or "").strip()
    location = (event.event_location or "").strip()
    event_date = parse_date(event.event_date)
    if not name or not description or not location or event.event_date is None:
        raise ValidationError("Event is missing required fields")
    if event_date is None:
        raise ValidationError("Invalid event date format")

    urgency = (event.urgency or URGENCY_MEDIUM).strip().lower()[:URGENCY_MAX_LENGTH]

    return HistoryRecord(
        id=None,
        user_id=user_id,
        event_id=event.id,
        event_name=name[:EVENT_NAME_MAX_LENGTH],
        event_description=description,
        event_location=location[:EVENT_LOCATION_MAX_LENGTH],
        required_skills=decode_string_list(event.required_skills),
        urgency=urgency or URGENCY_MEDIUM,
        event_date=event_date,
        start_time=format_time(event.start_time),
        end_time=format_time(event.end_time),
        status=status,
    )


__all__ = ["snapshot_event"]
