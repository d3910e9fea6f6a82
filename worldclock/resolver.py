"""Resolve a requested wall time in a zone to one absolute instant.

The zone database only maps instants to wall times, so the inverse is
found by scanning every minute in a window around a naive anchor and
projecting each candidate. Ambiguous (fall-back) and skipped
(spring-forward) wall times are reported as a status rather than raised.

The half-window has to exceed any real UTC offset swing. Zones whose gap
or overlap is wider than `SEARCH_WINDOW_MINUTES` are assumed not to exist;
for such a zone the result would be whatever the truncated window yields.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import List, Optional, Tuple

from worldclock.wall_time import WallTime
from worldclock.zoned_parts import project

logger = logging.getLogger(__name__)

SEARCH_WINDOW_MINUTES = 36 * 60

_EARLIEST_INSTANT = datetime.min.replace(tzinfo=timezone.utc)
_LATEST_INSTANT = datetime.max.replace(tzinfo=timezone.utc)
_ONE_MINUTE = timedelta(minutes=1)


class DstStatus(str, Enum):
    NORMAL = "normal"
    AMBIGUOUS = "ambiguous"
    INVALID_ADJUSTED = "invalid-adjusted"


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of resolving one wall time.

    `adjusted_wall` is only set for INVALID_ADJUSTED, and holds the wall
    time that was actually used in place of the skipped one.
    """

    instant: datetime
    status: DstStatus
    adjusted_wall: Optional[WallTime] = None


def iter_candidates(anchor: datetime, window_minutes: int = SEARCH_WINDOW_MINUTES):
    """Yield whole-minute instants from anchor - window to anchor + window.

    The range is cut short at either end of the representable datetime range.
    """
    first = max(-window_minutes, -((anchor - _EARLIEST_INSTANT) // _ONE_MINUTE))
    last = min(window_minutes, (_LATEST_INSTANT - anchor) // _ONE_MINUTE)
    for delta in range(first, last + 1):
        yield anchor + timedelta(minutes=delta)


def resolve_source_instant(zone_id: str, requested_wall: WallTime) -> ConversionResult:
    """Find the instant that `zone_id` shows as `requested_wall`.

    `zone_id` must already be validated as supported.
    """
    requested_epoch = requested_wall.minute_epoch()
    baseline = requested_wall.naive_utc()

    exact_matches: List[datetime] = []
    # (wall_epoch, instant, wall); candidates arrive in instant order, so a
    # strict comparison keeps the earliest instant on equal wall times.
    next_after: Optional[Tuple[int, datetime, WallTime]] = None
    nearest: Optional[Tuple[int, datetime, WallTime]] = None

    for candidate in iter_candidates(baseline):
        try:
            wall = project(candidate, zone_id).wall
        except OverflowError:
            # local wall time falls outside year 1..9999
            continue
        wall_epoch = wall.minute_epoch()

        if wall == requested_wall:
            exact_matches.append(candidate)

        if wall_epoch > requested_epoch and (
            next_after is None or wall_epoch < next_after[0]
        ):
            next_after = (wall_epoch, candidate, wall)

        wall_diff = abs(wall_epoch - requested_epoch)
        if nearest is None or wall_diff < nearest[0]:
            nearest = (wall_diff, candidate, wall)

    if len(exact_matches) == 1:
        return ConversionResult(exact_matches[0], DstStatus.NORMAL)

    if exact_matches:
        logger.debug(
            "%s %s is ambiguous in %s (%d candidates)",
            requested_wall.date_input_value(),
            requested_wall.time_input_value(),
            zone_id,
            len(exact_matches),
        )
        return ConversionResult(min(exact_matches), DstStatus.AMBIGUOUS)

    chosen = next_after or nearest
    if chosen is None:
        logger.debug("No candidates for %s in %s", requested_wall, zone_id)
        return ConversionResult(baseline, DstStatus.INVALID_ADJUSTED)

    _, instant, wall = chosen
    logger.debug(
        "%s does not exist in %s; using %s",
        requested_wall.hint_text(),
        zone_id,
        wall.hint_text(),
    )
    return ConversionResult(
        instant,
        DstStatus.INVALID_ADJUSTED,
        adjusted_wall=wall if wall != requested_wall else None,
    )
