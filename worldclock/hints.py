"""Advisory text for daylight-saving edge cases."""

from __future__ import annotations

from worldclock.resolver import ConversionResult, DstStatus


def build_dst_hint(result: ConversionResult, source_label: str) -> str:
    """Explain a non-normal resolution; empty for DstStatus.NORMAL."""
    if result.status is DstStatus.AMBIGUOUS:
        return (
            f"The selected time in {source_label} occurs twice due to daylight "
            "saving time. Used the earlier occurrence."
        )

    if result.status is DstStatus.INVALID_ADJUSTED:
        if result.adjusted_wall is not None:
            return (
                f"The selected time in {source_label} does not exist due to "
                "daylight saving time. Used the next valid local time "
                f"({result.adjusted_wall.hint_text()})."
            )
        return (
            f"The selected time in {source_label} does not exist due to "
            "daylight saving time."
        )

    return ""
