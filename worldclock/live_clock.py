"""Per-second readings for the clock cards."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List

from worldclock.clock_zones import ZONE_OPTIONS, ZoneOption
from worldclock.formatting import (
    format_clock_date,
    format_clock_time,
    get_utc_offset_label_at_instant,
    is_daytime,
)
from worldclock.zoned_parts import project

DAY_MARKER = "\U0001F31E"    # sun with face
NIGHT_MARKER = "\U0001F31A"  # new moon with face


@dataclass(frozen=True)
class ClockReading:
    key: str
    label: str
    time_zone: str
    time: str
    date: str
    day_night: str
    utc_offset: str


def read_clock(zone: ZoneOption, now: datetime, is_24_hour: bool) -> ClockReading:
    """Format one card for the instant `now` (timezone-aware)."""
    parts = project(now, zone.time_zone)
    return ClockReading(
        key=zone.key,
        label=zone.label,
        time_zone=zone.time_zone,
        time=format_clock_time(parts, is_24_hour),
        date=format_clock_date(parts),
        day_night=DAY_MARKER if is_daytime(parts.hour) else NIGHT_MARKER,
        utc_offset=get_utc_offset_label_at_instant(now, zone.time_zone),
    )


def read_clocks(
    now: datetime,
    is_24_hour: bool,
    zones: Iterable[ZoneOption] = ZONE_OPTIONS,
) -> List[ClockReading]:
    return [read_clock(zone, now, is_24_hour) for zone in zones]
