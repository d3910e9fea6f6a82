from __future__ import annotations

import json

import pytest

from conftest import utc
from worldclock import converter
from worldclock.converter import (
    INVALID_INPUT_MESSAGE,
    ConverterState,
    compute_converter_view_data,
    default_converter_state,
    describe_relative_time,
    format_hour_minute_difference,
    load_converter_state,
    save_converter_state,
    swap_converter_state,
)


def _state(source, target, date="2024-01-15", time="12:00"):
    return ConverterState(source, target, date, time)


# ---------------------------------------------------------------------------
# Offsets and wording
# ---------------------------------------------------------------------------
def test_utc_to_fixed_offset_ahead():
    view = compute_converter_view_data(_state("UTC", "Asia/Tokyo"), True)

    assert view is not None
    assert view.target_time == "21:00"
    assert view.target_period == ""
    assert view.target_date == "Monday, January 15, 2024"
    assert view.relative_emphasis == "9:00 hours ahead"
    assert view.relative_sentence == "Tokyo, Japan time is 9:00 hours ahead of UTC."
    assert view.hint == ""
    assert view.state == _state("UTC", "Asia/Tokyo")


def test_utc_to_fixed_offset_behind():
    view = compute_converter_view_data(_state("UTC", "America/Bogota"), True)

    assert view.target_time == "07:00"
    assert view.relative_emphasis == "5:00 hours behind"
    assert view.relative_sentence == "Bogota, Colombia time is 5:00 hours behind UTC."


@pytest.mark.parametrize(
    "target, emphasis",
    [
        ("Asia/Kolkata", "5:30 hours ahead"),
        ("Asia/Kathmandu", "5:45 hours ahead"),
        ("America/St_Johns", "3:30 hours behind"),
    ],
)
def test_partial_hour_offsets(target, emphasis):
    view = compute_converter_view_data(_state("UTC", target), True)

    assert view.relative_emphasis == emphasis


def test_target_date_crosses_midnight():
    view = compute_converter_view_data(
        _state("UTC", "Pacific/Auckland", "2024-12-31", "20:00"), True
    )

    # NZDT is UTC+13 in summer
    assert view.target_time == "09:00"
    assert view.target_date == "Wednesday, January 1, 2025"
    assert view.relative_emphasis == "13:00 hours ahead"


def test_twelve_hour_display_splits_period():
    view = compute_converter_view_data(_state("UTC", "Asia/Tokyo"), False)

    assert view.target_time == "09:00"
    assert view.target_period == "PM"


def test_twelve_hour_morning():
    view = compute_converter_view_data(
        _state("UTC", "Europe/Helsinki", time="07:05"), False
    )

    assert view.target_time == "09:05"
    assert view.target_period == "AM"


@pytest.mark.parametrize("time", ["00:00", "01:30", "02:30", "12:00"])
def test_same_zone_shares_local_time(time):
    view = compute_converter_view_data(
        _state("America/New_York", "America/New_York", "2024-11-03", time), True
    )

    assert view.relative_emphasis == "share the same local time"
    assert view.relative_sentence == (
        "New York, USA and New York, USA currently share the same local time."
    )


def test_offset_is_symmetric_across_swap():
    forward = compute_converter_view_data(_state("Europe/Amsterdam", "Asia/Manila"), True)
    backward = compute_converter_view_data(
        _state("Asia/Manila", "Europe/Amsterdam", "2024-01-15", forward.target_time),
        True,
    )

    assert forward.relative_emphasis == "7:00 hours ahead"
    assert backward.relative_emphasis == "7:00 hours behind"


@pytest.mark.parametrize(
    "zone_a, zone_b",
    [
        ("UTC", "Asia/Tokyo"),
        ("America/Los_Angeles", "Asia/Kathmandu"),
        ("Europe/Amsterdam", "Australia/Lord_Howe"),
    ],
)
def test_diff_minutes_negate_when_zones_swap(zone_a, zone_b):
    forward = compute_converter_view_data(_state(zone_a, zone_b), True)
    backward = compute_converter_view_data(_state(zone_b, zone_a), True)

    assert forward.diff_minutes != 0
    assert backward.diff_minutes == -forward.diff_minutes
    assert backward.relative_emphasis == forward.relative_emphasis.replace(
        "ahead", "behind"
    )


@pytest.mark.parametrize(
    "source, target",
    [("UTC", "Asia/Tokyo"), ("UTC", "America/Bogota"), ("Asia/Tokyo", "Asia/Tokyo")],
)
def test_relative_sentence_matches_rendered_parts(source, target):
    view = compute_converter_view_data(_state(source, target), True)

    assert view.relative_sentence == (
        f"{view.relative_text}{view.relative_emphasis}{view.relative_tail}"
    )


def test_zone_long_names():
    view = compute_converter_view_data(_state("UTC", "Asia/Tokyo"), True)

    assert view.target_zone_long_name == "Japan Standard Time"
    assert view.source_zone_long_name


@pytest.mark.parametrize(
    "state, target_time",
    [
        (_state("UTC", "UTC", "0001-01-01", "00:30"), "00:30"),
        (_state("Asia/Tokyo", "UTC", "9999-12-31", "23:00"), "14:00"),
        (_state("UTC", "UTC", "9999-12-31", "23:59"), "23:59"),
    ],
)
def test_calendar_end_dates_convert(state, target_time):
    view = compute_converter_view_data(state, True)

    assert view is not None
    assert view.target_time == target_time


def test_target_past_year_9999_yields_no_view():
    state = _state("UTC", "Asia/Tokyo", "9999-12-31", "23:00")

    assert compute_converter_view_data(state, True) is None


def test_zone_names_at_instant():
    view = compute_converter_view_data(
        _state("America/New_York", "Europe/Helsinki", "2024-11-03", "01:30"), True
    )

    assert view.source_zone_name == "EDT"
    assert view.target_zone_name == "EET"


# ---------------------------------------------------------------------------
# DST outcomes flow through to state and hint
# ---------------------------------------------------------------------------
def test_skipped_time_echoes_adjusted_state():
    state = _state("America/New_York", "UTC", "2024-03-10", "02:30")
    view = compute_converter_view_data(state, True)

    assert view.state == _state("America/New_York", "UTC", "2024-03-10", "03:00")
    assert view.target_time == "07:00"
    assert view.hint == (
        "The selected time in New York, USA does not exist due to daylight "
        "saving time. Used the next valid local time (2024-03-10 03:00)."
    )

    again = compute_converter_view_data(view.state, True)
    assert again.hint == ""
    assert again.state == view.state


def test_repeated_time_uses_earlier_occurrence():
    view = compute_converter_view_data(
        _state("America/New_York", "UTC", "2024-11-03", "01:30"), True
    )

    assert view.target_time == "05:30"
    assert view.relative_emphasis == "4:00 hours ahead"
    assert view.hint == (
        "The selected time in New York, USA occurs twice due to daylight saving "
        "time. Used the earlier occurrence."
    )
    assert view.source_date_display == "Sunday, November 3, 2024"


# ---------------------------------------------------------------------------
# Validation gate
# ---------------------------------------------------------------------------
def _fail_resolve(*args, **kwargs):
    raise AssertionError("resolver must not run for rejected input")


@pytest.mark.parametrize(
    "state",
    [
        _state("UTC", "Asia/Tokyo", time="25:99"),
        _state("UTC", "Asia/Tokyo", date="2024-02-30"),
        _state("UTC", "Asia/Tokyo", time="9:00"),
        _state("Mars/Olympus_Mons", "Asia/Tokyo"),
        _state("UTC", "Nowhere/Zone"),
    ],
)
def test_invalid_input_yields_no_view(state, monkeypatch):
    monkeypatch.setattr(converter, "resolve_source_instant", _fail_resolve)

    assert compute_converter_view_data(state, True) is None


def test_invalid_input_message_is_generic():
    assert "HH:MM" in INVALID_INPUT_MESSAGE


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
@pytest.mark.parametrize(
    "minutes, text",
    [(0, "0:00 hours"), (60, "1:00 hours"), (-90, "1:30 hours"), (345, "5:45 hours")],
)
def test_format_hour_minute_difference(minutes, text):
    assert format_hour_minute_difference(minutes) == text


def test_describe_relative_time():
    assert describe_relative_time("UTC", "Tokyo", 540) == (
        "Tokyo time is 9:00 hours ahead of UTC."
    )
    assert describe_relative_time("Tokyo", "UTC", -540) == (
        "UTC time is 9:00 hours behind Tokyo."
    )
    assert describe_relative_time("UTC", "UTC", 0) == (
        "UTC and UTC currently share the same local time."
    )


def test_default_state_uses_current_source_wall_time():
    state = default_converter_state(now=utc(2024, 1, 15, 12, 34, 56))

    assert state == ConverterState("UTC", "Europe/Helsinki", "2024-01-15", "12:34")


def test_swap_exchanges_zones_only():
    swapped = swap_converter_state(_state("UTC", "Asia/Tokyo", "2024-05-01", "08:15"))

    assert swapped == _state("Asia/Tokyo", "UTC", "2024-05-01", "08:15")


# ---------------------------------------------------------------------------
# Persistence
# ---------------------------------------------------------------------------
def test_state_round_trips_through_settings(settings_file):
    state = _state("Asia/Manila", "Australia/Sydney", "2024-06-01", "18:45")
    save_converter_state(state)

    stored = json.loads(settings_file.read_text(encoding="utf-8"))
    assert stored["converter_state"] == {
        "sourceTimeZone": "Asia/Manila",
        "targetTimeZone": "Australia/Sydney",
        "date": "2024-06-01",
        "time": "18:45",
    }
    assert load_converter_state() == state


def test_missing_state_loads_none(settings_file):
    assert load_converter_state() is None


@pytest.mark.parametrize(
    "raw",
    [
        "not a dict",
        {"sourceTimeZone": "UTC", "targetTimeZone": "Asia/Tokyo", "date": "2024-01-15"},
        {"sourceTimeZone": "UTC", "targetTimeZone": "Asia/Tokyo", "date": 20240115, "time": "12:00"},
        {"sourceTimeZone": "Mars/Base", "targetTimeZone": "Asia/Tokyo", "date": "2024-01-15", "time": "12:00"},
        {"sourceTimeZone": "UTC", "targetTimeZone": "Asia/Tokyo", "date": "2024-13-01", "time": "12:00"},
    ],
)
def test_invalid_stored_state_is_discarded(settings_file, raw):
    settings_file.write_text(json.dumps({"converter_state": raw}), encoding="utf-8")

    assert load_converter_state() is None
