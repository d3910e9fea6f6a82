"""The fixed set of clock cards and converter defaults."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class ZoneOption:
    key: str
    label: str
    time_zone: str


ZONE_OPTIONS: List[ZoneOption] = [
    ZoneOption("utc", "UTC", "UTC"),
    ZoneOption("helsinki", "Helsinki, Finland", "Europe/Helsinki"),
    ZoneOption("manila", "Manila, Philippines", "Asia/Manila"),
    ZoneOption("san-francisco", "San Francisco, USA", "America/Los_Angeles"),
    ZoneOption("beijing", "Beijing, China", "Asia/Shanghai"),
    ZoneOption("netherlands", "The Hague, Netherlands", "Europe/Amsterdam"),
    ZoneOption("sydney", "Sydney, Australia", "Australia/Sydney"),
    ZoneOption("tokyo", "Tokyo, Japan", "Asia/Tokyo"),
]

CONVERTER_STORAGE_KEY = "converter_state"
TIME_FORMAT_STORAGE_KEY = "time_format_24h"

DEFAULT_SOURCE_TIMEZONE = "UTC"
DEFAULT_TARGET_TIMEZONE = "Europe/Helsinki"
