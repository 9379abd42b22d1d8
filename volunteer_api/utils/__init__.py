"""Utility helpers for reusable functionality."""

from .datetime import (
    ensure_app_timezone,
    get_app_timezone,
    now_in_app_naive_datetime,
    now_in_app_timezone,
    today_in_app_timezone,
)
from .fields import (
    decode_date_list,
    decode_json_list,
    decode_string_list,
    encode_date_list,
    format_12_hour_time,
    format_long_date,
    format_time,
    parse_date,
    parse_time,
)

__all__ = [
    "decode_date_list",
    "decode_json_list",
    "decode_string_list",
    "encode_date_list",
    "ensure_app_timezone",
    "format_12_hour_time",
    "format_long_date",
    "format_time",
    "get_app_timezone",
    "now_in_app_naive_datetime",
    "now_in_app_timezone",
    "parse_date",
    "parse_time",
    "today_in_app_timezone",
]
