"""Tests for list decoding and date/time formatting helpers."""

from datetime import date, time

import pytest

from volunteer_api.utils import (
    decode_date_list,
    decode_json_list,
    decode_string_list,
    format_12_hour_time,
    format_long_date,
    format_time,
    parse_time,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, []),
        ("", []),
        ("not json", []),
        ('{"a": 1}', []),
        ('["Driving", "English"]', ["Driving", "English"]),
        ('"[\\"Driving\\"]"', ["Driving"]),
        (["Teamwork"], ["Teamwork"]),
        (b'["Spanish"]', ["Spanish"]),
        (42, []),
    ],
)
def test_decode_json_list(raw, expected):
    assert decode_json_list(raw) == expected


def test_decode_string_list_strips_and_deduplicates():
    assert decode_string_list([" Driving", "Driving", "", 3, "English"]) == ["Driving", "English"]


def test_decode_date_list_sorts_and_skips_invalid_items():
    raw = '["2030-01-03", "garbage", "2030-01-01", "2030-01-03"]'
    assert decode_date_list(raw) == [date(2030, 1, 1), date(2030, 1, 3)]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("09:00", "09:00:00"),
        ("9:05", "09:05:00"),
        ("13:30:15", "13:30:15"),
        (time(7, 45), "07:45:00"),
        ("25:00", None),
        ("noon", None),
        (None, None),
    ],
)
def test_format_time(raw, expected):
    assert format_time(raw) == expected


def test_parse_time_drops_fractions():
    assert parse_time("10:20:30.500") == time(10, 20, 30)


def test_format_long_date():
    assert format_long_date(date(2025, 12, 1)) == "Monday, December 1, 2025"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("09:00:00", "9:00 AM"),
        (time(0, 5), "12:05 AM"),
        ("12:00", "12:00 PM"),
        ("17:30:00", "5:30 PM"),
        (None, None),
    ],
)
def test_format_12_hour_time(raw, expected):
    assert format_12_hour_time(raw) == expected
