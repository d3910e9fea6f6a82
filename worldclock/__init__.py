"""World clock and time-zone converter.

The public surface is the wall-time resolver and the converter view
builder; the Qt window in `worldclock.window` is a thin shell over them.
"""

from .converter import (
    ConverterState,
    ConverterViewData,
    compute_converter_view_data,
)
from .hints import build_dst_hint
from .resolver import ConversionResult, DstStatus, resolve_source_instant
from .wall_time import WallTime, parse_wall_time
from .zoned_parts import ZonedInstantParts, project

__all__ = [
    "ConversionResult",
    "ConverterState",
    "ConverterViewData",
    "DstStatus",
    "WallTime",
    "ZonedInstantParts",
    "build_dst_hint",
    "compute_converter_view_data",
    "parse_wall_time",
    "project",
    "resolve_source_instant",
]
