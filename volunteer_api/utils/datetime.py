"""Clock helpers bound to the configured application timezone."""

from __future__ import annotations

from datetime import date, datetime
from functools import lru_cache

from zoneinfo import ZoneInfo

from volunteer_api.config import get_settings


@lru_cache(maxsize=1)
def get_app_timezone() -> ZoneInfo:
    """Return the IANA zone named by ``APP_TIMEZONE``."""

    return ZoneInfo(get_settings().app_timezone.strip())


def now_in_app_timezone() -> datetime:
    return datetime.now(tz=get_app_timezone())


def today_in_app_timezone() -> date:
    """Return the calendar date used to decide whether an event is in the past."""

    return now_in_app_timezone().date()


def now_in_app_naive_datetime() -> datetime:
    """Wall-clock time in the app timezone, as stored in ``DateTime`` columns."""

    return now_in_app_timezone().replace(tzinfo=None)


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Attach the app timezone to naive values and convert aware ones."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=get_app_timezone())
    return value.astimezone(get_app_timezone())
