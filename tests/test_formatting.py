from __future__ import annotations

import pytest

from conftest import utc, wall
from worldclock.formatting import (
    format_clock_date,
    format_clock_time,
    format_converter_clock_time,
    format_converter_date,
    format_wall_date_label,
    get_time_zone_long_name,
    get_time_zone_name_at_instant,
    get_utc_offset_label_at_instant,
    is_daytime,
)
from worldclock.zoned_parts import ZonedInstantParts


@pytest.mark.parametrize(
    "hour, expected", [(5, False), (6, True), (12, True), (17, True), (18, False), (0, False)]
)
def test_is_daytime(hour, expected):
    assert is_daytime(hour) is expected


def test_converter_clock_time_24_hour():
    assert format_converter_clock_time(utc(2024, 1, 15, 13, 5), "UTC", True) == (
        "13:05",
        "",
    )


def test_converter_clock_time_12_hour():
    assert format_converter_clock_time(utc(2024, 1, 15, 0, 5), "UTC", False) == (
        "12:05",
        "AM",
    )
    assert format_converter_clock_time(utc(2024, 1, 15, 13, 5), "UTC", False) == (
        "01:05",
        "PM",
    )


def test_live_clock_time():
    parts = ZonedInstantParts(2024, 1, 15, 14, 5, 9)

    assert format_clock_time(parts, True) == "14:05:09"
    assert format_clock_time(parts, False) == "02:05:09 PM"


def test_long_dates():
    assert format_converter_date(utc(2024, 1, 15, 23, 30), "Asia/Tokyo") == (
        "Tuesday, January 16, 2024"
    )
    assert format_wall_date_label(wall(2024, 2, 29, 23, 59)) == "Thursday, February 29, 2024"


def test_clock_date_is_day_first():
    assert format_clock_date(ZonedInstantParts(2024, 1, 15, 0, 0, 0)) == (
        "Mon 15 January 2024"
    )


def test_zone_abbreviation_tracks_dst():
    assert get_time_zone_name_at_instant(utc(2024, 1, 15), "America/Los_Angeles") == "PST"
    assert get_time_zone_name_at_instant(utc(2024, 7, 15), "America/Los_Angeles") == "PDT"
    assert get_time_zone_name_at_instant(utc(2024, 7, 15), "UTC") == "UTC"


def test_long_zone_name():
    assert get_time_zone_long_name(utc(2024, 1, 15), "Europe/Helsinki") == (
        "Eastern European Standard Time"
    )
    assert get_time_zone_long_name(utc(2024, 7, 15), "Europe/Helsinki") == (
        "Eastern European Summer Time"
    )


@pytest.mark.parametrize(
    "zone_id, label",
    [
        ("UTC", "UTC+0"),
        ("Europe/Helsinki", "UTC+2"),
        ("Asia/Kolkata", "UTC+5:30"),
        ("Asia/Kathmandu", "UTC+5:45"),
        ("America/St_Johns", "UTC-3:30"),
        ("America/Los_Angeles", "UTC-8"),
    ],
)
def test_utc_offset_label(zone_id, label):
    assert get_utc_offset_label_at_instant(utc(2024, 1, 15), zone_id) == label
