"""Minute-granular wall time and the canonical input strings around it."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional

MINUTES_PER_DAY = 24 * 60

_DATE_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)
_TIME_RE = re.compile(r"(\d{2}):(\d{2})", re.ASCII)
_LOOSE_TIME_RE = re.compile(r"(\d{1,2}):(\d{2})", re.ASCII)
_MERIDIEM_TIME_RE = re.compile(r"(\d{1,2}):(\d{2})\s*([AP]M)", re.ASCII)


@dataclass(frozen=True)
class WallTime:
    """A civil date and time of day with no zone attached.

    Instances are only created by parsing or projection, so the date is
    always calendar-valid.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int

    def minute_epoch(self) -> int:
        """Flat minute count of the wall fields.

        Only good for ordering and subtracting wall times; it is not an
        instant.
        """
        days = date(self.year, self.month, self.day).toordinal()
        return days * MINUTES_PER_DAY + self.hour * 60 + self.minute

    def naive_utc(self) -> datetime:
        """The wall fields read as if they were UTC."""
        return datetime(
            self.year, self.month, self.day, self.hour, self.minute,
            tzinfo=timezone.utc,
        )

    def date_input_value(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def time_input_value(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"

    def hint_text(self) -> str:
        return f"{self.date_input_value()} {self.time_input_value()}"


def parse_wall_time(date_value: str, time_value: str) -> Optional[WallTime]:
    """Parse canonical `YYYY-MM-DD` and `HH:MM` strings.

    Returns None for anything malformed, out of range or calendar-invalid.
    """
    date_match = _DATE_RE.fullmatch(date_value)
    time_match = _TIME_RE.fullmatch(time_value)
    if not date_match or not time_match:
        return None

    year, month, day = (int(g) for g in date_match.groups())
    hour, minute = (int(g) for g in time_match.groups())

    if hour > 23 or minute > 59:
        return None

    try:
        date(year, month, day)
    except ValueError:
        return None

    return WallTime(year, month, day, hour, minute)


def parse_source_time_to_24(value: str) -> Optional[str]:
    """Normalise user-typed time to canonical 24-hour `HH:MM`.

    Accepts `H:MM`/`HH:MM` (0-23) and `h:MM AM|PM` (1-12), any case.
    """
    normalized = value.strip().upper()
    if not normalized:
        return None

    match = _LOOSE_TIME_RE.fullmatch(normalized)
    if match:
        hour, minute = int(match.group(1)), int(match.group(2))
        if hour <= 23 and minute <= 59:
            return f"{hour:02d}:{minute:02d}"

    match = _MERIDIEM_TIME_RE.fullmatch(normalized)
    if match:
        hour, minute = int(match.group(1)), int(match.group(2))
        if hour < 1 or hour > 12 or minute > 59:
            return None
        hour %= 12
        if match.group(3) == "PM":
            hour += 12
        return f"{hour:02d}:{minute:02d}"

    return None


def format_source_time_for_display(time24: str, is_24_hour: bool) -> str:
    """Render canonical `HH:MM` for the source time field."""
    match = _TIME_RE.fullmatch(time24)
    if not match:
        return time24

    hour, minute = int(match.group(1)), int(match.group(2))
    if is_24_hour:
        return f"{hour:02d}:{minute:02d}"

    period = "PM" if hour >= 12 else "AM"
    return f"{hour % 12 or 12}:{minute:02d} {period}"
