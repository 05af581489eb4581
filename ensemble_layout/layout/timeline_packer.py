"""Lane assignment for multi-day tour bars inside a bounded window.

First-fit greedy interval partitioning: every bar lands in the first row where
it clashes with nothing already placed. Always overlap-safe, not always the
minimum number of rows.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import date
from typing import Any

from loguru import logger

from ensemble_layout.layout.types import LayoutWindow, PackedBar, TimelineLayout, TourBar


def _coerce_bar(bar: TourBar | Mapping[str, Any]) -> TourBar:
    if isinstance(bar, TourBar):
        return bar
    return TourBar.model_validate(bar)


def _date_ranges_overlap(start1: date, end1: date, start2: date, end2: date) -> bool:
    """Check if two inclusive date ranges share at least one day."""
    return start1 <= end2 and start2 <= end1


def _overlaps_window(bar: TourBar, window: LayoutWindow) -> bool:
    return bar.date_start <= window.end and bar.date_end >= window.start


def pack_timeline_bars(
    bars: Sequence[TourBar | Mapping[str, Any]],
    window: LayoutWindow,
) -> TimelineLayout:
    """Clip bars to the window and assign each one a non-clashing row.

    Args:
        bars: Tour bars (TourBar or mappings accepted by TourBar)
        window: Inclusive date window, usually one Monday-Sunday week

    Returns:
        TimelineLayout with bars in date_start order and the number of rows used
    """
    if not bars:
        return TimelineLayout(bars=[], row_count=0)

    visible = [bar for bar in (_coerce_bar(item) for item in bars) if _overlaps_window(bar, window)]
    visible.sort(key=lambda bar: bar.date_start)

    window_days = window.length_days
    rows: list[list[tuple[date, date]]] = []
    packed: list[PackedBar] = []

    for bar in visible:
        effective_start = max(bar.date_start, window.start)
        effective_end = min(bar.date_end, window.end)
        if effective_end < effective_start:
            logger.warning(f"[LAYOUT] Tour bar {bar.id} ends before it starts ({bar.date_start} -> {bar.date_end}); drawing one day")
            effective_end = effective_start

        row_index: int | None = None
        for index, row in enumerate(rows):
            clash = any(
                _date_ranges_overlap(effective_start, effective_end, placed_start, placed_end)
                for placed_start, placed_end in row
            )
            if not clash:
                row_index = index
                break
        if row_index is None:
            rows.append([])
            row_index = len(rows) - 1
        rows[row_index].append((effective_start, effective_end))

        offset_days = (effective_start - window.start).days
        span_days = (effective_end - effective_start).days + 1

        packed.append(
            PackedBar(
                id=bar.id,
                date_start=bar.date_start,
                date_end=bar.date_end,
                payload=dict(bar.payload),
                row_index=row_index,
                left=offset_days / window_days * 100,
                width=span_days / window_days * 100,
                effective_start=effective_start,
                effective_end=effective_end,
                is_window_start=bar.date_start >= window.start,
                is_window_end=bar.date_end <= window.end,
            )
        )

    logger.debug(
        f"[LAYOUT] Packed {len(packed)} of {len(bars)} tour bars into {len(rows)} rows "
        f"for window {window.start} -> {window.end}"
    )
    return TimelineLayout(bars=packed, row_count=len(rows))
