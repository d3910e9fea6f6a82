"""Project absolute instants into a time zone's wall-clock fields.

This is the only direction the zone database is asked to go: instant to
local calendar/time. Everything that needs the reverse mapping builds it
on top of `project()` (see `worldclock.resolver`).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Dict

import pytz

from worldclock.wall_time import WallTime

logger = logging.getLogger(__name__)

# zone id -> pytz tzinfo, filled lazily on first use
_zone_cache: Dict[str, tzinfo] = {}


@dataclass(frozen=True)
class ZonedInstantParts:
    """Wall-clock fields (with seconds) of an instant seen from one zone."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int

    @property
    def wall(self) -> WallTime:
        return WallTime(self.year, self.month, self.day, self.hour, self.minute)


def get_zone(zone_id: str) -> tzinfo:
    """Return the cached tzinfo for `zone_id`, building it on first use.

    Raises pytz.UnknownTimeZoneError for ids that were never validated.
    """
    zone = _zone_cache.get(zone_id)
    if zone is None:
        zone = pytz.timezone(zone_id)
        _zone_cache[zone_id] = zone
        logger.debug("Cached zone %s", zone_id)
    return zone


def cache_clear() -> None:
    _zone_cache.clear()


def localize_instant(instant: datetime, zone_id: str) -> datetime:
    """Return `instant` converted to an aware datetime in `zone_id`."""
    if instant.tzinfo is None:
        raise TypeError(
            f"instant must be timezone-aware, got naive {instant.isoformat()}"
        )
    return instant.astimezone(get_zone(zone_id))


def project(instant: datetime, zone_id: str) -> ZonedInstantParts:
    """Project an absolute instant into `zone_id`'s wall-clock fields."""
    local = localize_instant(instant, zone_id)
    return ZonedInstantParts(
        year=local.year,
        month=local.month,
        day=local.day,
        hour=local.hour,
        minute=local.minute,
        second=local.second,
    )
