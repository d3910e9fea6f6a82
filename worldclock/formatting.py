"""Display strings for clocks and the converter.

Patterns go through babel so month/day names come from CLDR rather than the
process locale. The converter speaks en_US; the live clock cards use the
day-first en_GB date.
"""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Tuple

from babel.dates import format_date, format_time, get_timezone_name

from worldclock.wall_time import WallTime
from worldclock.zoned_parts import ZonedInstantParts, localize_instant

CONVERTER_LOCALE = "en_US"
CLOCK_DATE_LOCALE = "en_GB"

CONVERTER_TIME_24H = "HH:mm"
CONVERTER_TIME_12H = "hh:mm a"
CLOCK_TIME_24H = "HH:mm:ss"
CLOCK_TIME_12H = "hh:mm:ss a"
CLOCK_DATE_PATTERN = "EEE d MMMM y"

DAY_START_HOUR = 6
NIGHT_START_HOUR = 18


def is_daytime(hour: int) -> bool:
    return DAY_START_HOUR <= hour < NIGHT_START_HOUR


def _split_period(formatted: str) -> Tuple[str, str]:
    """Split "01:05 PM" into ("01:05", "PM"), uppercasing the marker."""
    head, _, period = formatted.strip().rpartition(" ")
    if not head:
        return formatted.strip(), ""
    return head, period.upper()


def format_converter_clock_time(
    instant: datetime, zone_id: str, is_24_hour: bool
) -> Tuple[str, str]:
    """Return (time, period) for the converter's target display.

    Period is empty in 24-hour mode.
    """
    local = localize_instant(instant, zone_id)
    if is_24_hour:
        return format_time(local, CONVERTER_TIME_24H, locale=CONVERTER_LOCALE), ""
    return _split_period(
        format_time(local, CONVERTER_TIME_12H, locale=CONVERTER_LOCALE)
    )


def format_clock_time(parts: ZonedInstantParts, is_24_hour: bool) -> str:
    """Live-clock time with seconds, e.g. "14:05:09" or "02:05:09 PM"."""
    value = time(parts.hour, parts.minute, parts.second)
    if is_24_hour:
        return format_time(value, CLOCK_TIME_24H, locale=CONVERTER_LOCALE)
    clock, period = _split_period(
        format_time(value, CLOCK_TIME_12H, locale=CONVERTER_LOCALE)
    )
    return f"{clock} {period}"


def format_converter_date(instant: datetime, zone_id: str) -> str:
    """Long calendar date of `instant` in `zone_id`."""
    return format_date(
        localize_instant(instant, zone_id).date(), "full", locale=CONVERTER_LOCALE
    )


def format_wall_date_label(wall: WallTime) -> str:
    return format_date(
        date(wall.year, wall.month, wall.day), "full", locale=CONVERTER_LOCALE
    )


def format_clock_date(parts: ZonedInstantParts) -> str:
    return format_date(
        date(parts.year, parts.month, parts.day),
        CLOCK_DATE_PATTERN,
        locale=CLOCK_DATE_LOCALE,
    )


def get_time_zone_name_at_instant(instant: datetime, zone_id: str) -> str:
    """Short zone abbreviation in effect at `instant` (e.g. "EET")."""
    return localize_instant(instant, zone_id).tzname() or zone_id


def get_time_zone_long_name(
    instant: datetime, zone_id: str, locale: str = CONVERTER_LOCALE
) -> str:
    """Localized long zone name, DST-aware (e.g. "Eastern European Summer Time")."""
    return get_timezone_name(
        localize_instant(instant, zone_id), width="long", locale=locale
    )


def get_utc_offset_label_at_instant(instant: datetime, zone_id: str) -> str:
    """UTC offset at `instant`, e.g. "UTC+2", "UTC+5:30", "UTC-3:30"."""
    offset = localize_instant(instant, zone_id).utcoffset()
    total_minutes = int(offset.total_seconds() // 60) if offset else 0
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    if minutes:
        return f"UTC{sign}{hours}:{minutes:02d}"
    return f"UTC{sign}{hours}"
