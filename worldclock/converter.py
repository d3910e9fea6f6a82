"""Converter state and the view data derived from it.

`compute_converter_view_data` is the single validation gate: it returns
None for unknown zones or unparsable input, and everything after it can
assume valid values.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import settings_store
from worldclock.clock_zones import (
    CONVERTER_STORAGE_KEY,
    DEFAULT_SOURCE_TIMEZONE,
    DEFAULT_TARGET_TIMEZONE,
)
from worldclock.formatting import (
    format_converter_clock_time,
    format_converter_date,
    format_wall_date_label,
    get_time_zone_long_name,
    get_time_zone_name_at_instant,
)
from worldclock.hints import build_dst_hint
from worldclock.resolver import resolve_source_instant
from worldclock.timezones import (
    find_time_zone_option_by_time_zone,
    get_time_zone_options,
    is_supported_time_zone,
)
from worldclock.wall_time import parse_wall_time
from worldclock.zoned_parts import project

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Enter time as HH:MM (24H) or h:MM AM/PM (12H)."


@dataclass(frozen=True)
class ConverterState:
    source_time_zone: str
    target_time_zone: str
    date: str
    time: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "sourceTimeZone": self.source_time_zone,
            "targetTimeZone": self.target_time_zone,
            "date": self.date,
            "time": self.time,
        }

    @classmethod
    def from_dict(cls, data: Any) -> Optional["ConverterState"]:
        """Build a state from stored JSON; None unless every field is a string."""
        if not isinstance(data, dict):
            return None
        fields = (
            data.get("sourceTimeZone"),
            data.get("targetTimeZone"),
            data.get("date"),
            data.get("time"),
        )
        if not all(isinstance(value, str) for value in fields):
            return None
        return cls(*fields)


@dataclass(frozen=True)
class ConverterViewData:
    state: ConverterState
    source_zone_name: str
    target_zone_name: str
    target_time: str
    target_period: str
    target_date: str
    relative_text: str
    relative_emphasis: str
    relative_tail: str
    hint: str
    source_date_display: str
    source_label: str
    target_label: str
    source_zone_long_name: str
    target_zone_long_name: str
    diff_minutes: int

    @property
    def relative_sentence(self) -> str:
        return describe_relative_time(
            self.source_label, self.target_label, self.diff_minutes
        )


def format_hour_minute_difference(diff_minutes: int) -> str:
    """Absolute difference as "H:MM hours"."""
    hours, minutes = divmod(abs(diff_minutes), 60)
    return f"{hours}:{minutes:02d} hours"


def describe_relative_time(
    source_label: str, target_label: str, diff_minutes: int
) -> str:
    if diff_minutes == 0:
        return f"{target_label} and {source_label} currently share the same local time."

    diff_text = format_hour_minute_difference(diff_minutes)
    if diff_minutes > 0:
        return f"{target_label} time is {diff_text} ahead of {source_label}."
    return f"{target_label} time is {diff_text} behind {source_label}."


def default_converter_state(now: Optional[datetime] = None) -> ConverterState:
    """UTC -> Helsinki at the current wall time of the source zone."""
    options = get_time_zone_options()
    fallback = options[0].time_zone if options else "UTC"
    source = (
        DEFAULT_SOURCE_TIMEZONE
        if is_supported_time_zone(DEFAULT_SOURCE_TIMEZONE)
        else fallback
    )
    target = (
        DEFAULT_TARGET_TIMEZONE
        if is_supported_time_zone(DEFAULT_TARGET_TIMEZONE)
        else source
    )

    wall = project(now or datetime.now(timezone.utc), source).wall
    return ConverterState(source, target, wall.date_input_value(), wall.time_input_value())


def load_converter_state() -> Optional[ConverterState]:
    """Return the persisted state, or None if absent or no longer valid."""
    raw = settings_store.get_setting(CONVERTER_STORAGE_KEY)
    if raw is None:
        return None

    state = ConverterState.from_dict(raw)
    if (
        state is None
        or not is_supported_time_zone(state.source_time_zone)
        or not is_supported_time_zone(state.target_time_zone)
        or parse_wall_time(state.date, state.time) is None
    ):
        logger.warning("Discarding invalid stored converter state: %r", raw)
        return None
    return state


def save_converter_state(state: ConverterState) -> None:
    settings_store.set_setting(CONVERTER_STORAGE_KEY, state.to_dict())


def swap_converter_state(state: ConverterState) -> ConverterState:
    return replace(
        state,
        source_time_zone=state.target_time_zone,
        target_time_zone=state.source_time_zone,
    )


def compute_converter_view_data(
    state: ConverterState, is_24_hour: bool
) -> Optional[ConverterViewData]:
    """Resolve the source wall time and describe it in the target zone.

    Also returns None when the resolved instant cannot be shown in the
    target zone because its wall time would leave the datetime range.
    """
    source_zone = find_time_zone_option_by_time_zone(state.source_time_zone)
    target_zone = find_time_zone_option_by_time_zone(state.target_time_zone)
    requested_wall = parse_wall_time(state.date, state.time)

    if source_zone is None or target_zone is None or requested_wall is None:
        return None

    result = resolve_source_instant(source_zone.time_zone, requested_wall)
    try:
        source_wall = project(result.instant, source_zone.time_zone).wall
        target_wall = project(result.instant, target_zone.time_zone).wall
    except OverflowError:
        logger.debug(
            "%s in %s has no %s wall time inside years 1-9999",
            requested_wall.hint_text(),
            source_zone.time_zone,
            target_zone.time_zone,
        )
        return None

    next_state = replace(
        state,
        date=source_wall.date_input_value(),
        time=source_wall.time_input_value(),
    )

    target_time, target_period = format_converter_clock_time(
        result.instant, target_zone.time_zone, is_24_hour
    )
    diff_minutes = target_wall.minute_epoch() - source_wall.minute_epoch()

    if diff_minutes == 0:
        relative_text = f"{target_zone.label} and {source_zone.label} currently "
        relative_emphasis = "share the same local time"
        relative_tail = "."
    else:
        diff_text = format_hour_minute_difference(diff_minutes)
        relative_text = f"{target_zone.label} time is "
        if diff_minutes > 0:
            relative_emphasis = f"{diff_text} ahead"
            relative_tail = f" of {source_zone.label}."
        else:
            relative_emphasis = f"{diff_text} behind"
            relative_tail = f" {source_zone.label}."

    return ConverterViewData(
        state=next_state,
        source_zone_name=get_time_zone_name_at_instant(
            result.instant, source_zone.time_zone
        ),
        target_zone_name=get_time_zone_name_at_instant(
            result.instant, target_zone.time_zone
        ),
        target_time=target_time,
        target_period=target_period,
        target_date=format_converter_date(result.instant, target_zone.time_zone),
        relative_text=relative_text,
        relative_emphasis=relative_emphasis,
        relative_tail=relative_tail,
        hint=build_dst_hint(result, source_zone.label),
        source_date_display=format_wall_date_label(source_wall),
        source_label=source_zone.label,
        target_label=target_zone.label,
        source_zone_long_name=get_time_zone_long_name(
            result.instant, source_zone.time_zone
        ),
        target_zone_long_name=get_time_zone_long_name(
            result.instant, target_zone.time_zone
        ),
        diff_minutes=diff_minutes,
    )
