"""Normalization helpers for list, date and time fields.

List columns (skills, availability, required skills) may come back from the
database either as native JSON arrays or as JSON-encoded text, depending on
the driver and on how the row was written. Every read goes through
:func:`decode_json_list`, which never raises and falls back to an empty list.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable
from datetime import date, datetime, time
from typing import Any

logger = logging.getLogger(__name__)

_TIME_PATTERN = re.compile(
    r"^\s*(?P<hour>\d{1,2}):(?P<minute>\d{1,2})(?::(?P<second>\d{1,2})(?:\.\d+)?)?\s*$"
)


def decode_json_list(value: Any) -> list[Any]:
    """Return ``value`` as a list, decoding JSON text when necessary."""

    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8", errors="replace")
    if isinstance(value, str):
        if not value.strip():
            return []
        try:
            decoded = json.loads(value)
        except (TypeError, ValueError):
            logger.debug("Discarding list field that is not valid JSON: %r", value[:80])
            return []
        # Doubly encoded values ("\"[...]\"") decode to a string first.
        if isinstance(decoded, str):
            return decode_json_list(decoded)
        if isinstance(decoded, list):
            return decoded
    return []


def decode_string_list(value: Any) -> list[str]:
    """Decode a list field into unique, stripped strings preserving order."""

    result: list[str] = []
    seen: set[str] = set()
    for item in decode_json_list(value):
        if not isinstance(item, str):
            continue
        stripped = item.strip()
        if stripped and stripped not in seen:
            seen.add(stripped)
            result.append(stripped)
    return result


def decode_date_list(value: Any) -> list[date]:
    """Decode a list field into sorted unique calendar dates, skipping bad items."""

    dates = {parsed for parsed in (parse_date(item) for item in decode_json_list(value)) if parsed}
    return sorted(dates)


def encode_date_list(values: Iterable[date]) -> list[str]:
    return [value.isoformat() for value in values]


def parse_date(value: Any) -> date | None:
    """Return the calendar date represented by ``value`` or ``None``."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        candidate = value.strip()[:10]
        try:
            return date.fromisoformat(candidate)
        except ValueError:
            return None
    return None


def parse_time(value: Any) -> time | None:
    """Return the time of day represented by ``value`` or ``None``.

    Strings may be ``H:MM``, ``HH:MM`` or ``HH:MM:SS`` with optional fractions.
    """

    if isinstance(value, datetime):
        return value.time().replace(microsecond=0)
    if isinstance(value, time):
        return value.replace(microsecond=0)
    if not isinstance(value, str):
        return None
    match = _TIME_PATTERN.match(value)
    if not match:
        return None
    hour = int(match.group("hour"))
    minute = int(match.group("minute"))
    second = int(match.group("second") or 0)
    try:
        return time(hour, minute, second)
    except ValueError:
        return None


def format_time(value: Any) -> str | None:
    """Return ``value`` in the canonical ``HH:MM:SS`` representation."""

    parsed = parse_time(value)
    return parsed.strftime("%H:%M:%S") if parsed else None


def format_long_date(value: date) -> str:
    """Format ``value`` as e.g. ``Monday, December 1, 2025``."""

    return f"{value:%A}, {value:%B} {value.day}, {value.year}"


def format_12_hour_time(value: Any) -> str | None:
    """Format a time of day on a 12-hour clock, e.g. ``9:05 AM``.

    ``value`` should be the time as stored on the event, not an already
    formatted string, so that no conversion is applied twice.
    """

    parsed = parse_time(value)
    if parsed is None:
        return None
    hour12 = parsed.hour % 12 or 12
    suffix = "PM" if parsed.hour >= 12 else "AM"
    return f"{hour12}:{parsed.minute:02d} {suffix}"


__all__ = [
    "decode_date_list",
    "decode_json_list",
    "decode_string_list",
    "encode_date_list",
    "format_12_hour_time",
    "format_long_date",
    "format_time",
    "parse_date",
    "parse_time",
]
