"""Layout module - overlap-free placement for the calendar screens.

This module provides:
- Timestamp to day-fraction conversion (top/height of a day column)
- Side-by-side packing of overlapping events within a day
- Lane packing of multi-day tour bars within a week window
- Week-grid helpers (Monday-Sunday windows, per-day bucketing, program types)
"""

import ensemble_layout.core.logger  # noqa: F401
from ensemble_layout.layout.day_packer import pack_day_events
from ensemble_layout.layout.time_fraction import height_percent, hour_lines, top_percent
from ensemble_layout.layout.timeline_packer import pack_timeline_bars
from ensemble_layout.layout.types import (
    DayEvent,
    LayoutWindow,
    PackedBar,
    PackedDayEvent,
    TimelineLayout,
    TourBar,
)
from ensemble_layout.layout.week import (
    classify_program_type,
    filter_by_program_type,
    group_events_by_day,
    pack_week_events,
    week_days,
    week_end,
    week_start,
    week_window,
)

__all__ = [
    "DayEvent",
    "LayoutWindow",
    "PackedBar",
    "PackedDayEvent",
    "TimelineLayout",
    "TourBar",
    "classify_program_type",
    "filter_by_program_type",
    "group_events_by_day",
    "height_percent",
    "hour_lines",
    "pack_day_events",
    "pack_timeline_bars",
    "pack_week_events",
    "top_percent",
    "week_days",
    "week_end",
    "week_start",
    "week_window",
]
