"""Timestamp to day-fraction conversions.

Positions inside a day column are percentages of a 24h day (1440 minutes), so
the renderer can scale the column to any pixel height.
"""

from __future__ import annotations

from datetime import datetime

from loguru import logger

from ensemble_layout.config.settings import settings

MINUTES_PER_DAY = 24 * 60
HOURS_PER_DAY = 24


def top_percent(timestamp: datetime | None) -> float:
    """Offset of a timestamp from midnight, as a percent of the day.

    Only the wall-clock hour and minute are used; date, seconds and tzinfo
    are ignored. A missing timestamp sits at the top of the column.
    """
    if timestamp is None:
        return 0.0
    minutes = timestamp.hour * 60 + timestamp.minute
    return minutes / MINUTES_PER_DAY * 100


def height_percent(start: datetime | None, end: datetime | None) -> float:
    """Duration of an interval as a percent of the day.

    Clamped to ``settings.min_height_percent`` so short events stay clickable,
    and to 100 at most. A negative duration (end before start) is clamped to the
    minimum instead of producing a negative size.

    Args:
        start: Interval start
        end: Interval end

    Returns:
        Height percent; ``settings.default_height_percent`` if either end is missing
    """
    if start is None or end is None:
        return settings.default_height_percent

    if start.tzinfo is not None or end.tzinfo is not None:
        start = start.replace(tzinfo=None)
        end = end.replace(tzinfo=None)

    diff_minutes = (end - start).total_seconds() / 60
    if diff_minutes < 0:
        logger.warning(f"[LAYOUT] Interval ends before it starts ({start} -> {end}); clamping height")

    percent = diff_minutes / MINUTES_PER_DAY * 100
    if percent < settings.min_height_percent:
        return settings.min_height_percent
    return min(percent, 100.0)


def hour_lines() -> list[tuple[float, float]]:
    """(top, height) percent pairs for the 24 hour bands of a day column."""
    band = 100 / HOURS_PER_DAY
    return [(hour / HOURS_PER_DAY * 100, band) for hour in range(HOURS_PER_DAY)]
