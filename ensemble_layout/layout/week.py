"""Week-grid helpers: Monday-Sunday windows, per-day bucketing, program types.

Week boundaries are Monday-Sunday (ISO week).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from datetime import date, timedelta
from typing import Any, TypeVar

from loguru import logger

from ensemble_layout.layout.day_packer import pack_day_events
from ensemble_layout.layout.types import DayEvent, LayoutWindow, PackedDayEvent
from ensemble_layout.utils.calendar import week_end, week_start

T = TypeVar("T")

PROGRAM_TYPE_SYMPHONIC = "Sinfónico"
PROGRAM_TYPE_CAMERATA = "Camerata"
PROGRAM_TYPE_ENSEMBLE = "Ensamble"
PROGRAM_TYPE_OTHER = "Otros"

# Checked in order; first substring hit wins
_PROGRAM_TYPE_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("sinf", PROGRAM_TYPE_SYMPHONIC),
    ("camerata", PROGRAM_TYPE_CAMERATA),
    ("ensamble", PROGRAM_TYPE_ENSEMBLE),
)


def week_days(d: date) -> list[date]:
    """Return the seven dates, Monday to Sunday, of the week containing d."""
    monday = week_start(d)
    return [monday + timedelta(days=offset) for offset in range(7)]


def week_window(d: date) -> LayoutWindow:
    return LayoutWindow.for_week(d)


def group_events_by_day(
    events: Iterable[DayEvent | Mapping[str, Any]],
    window: LayoutWindow,
) -> dict[date, list[DayEvent]]:
    """Bucket events by the calendar date of their start.

    Every window day gets a key, even when empty. Events starting outside the
    window are dropped. Input order is preserved inside each bucket.
    """
    buckets: dict[date, list[DayEvent]] = {day: [] for day in window.days()}
    dropped = 0
    for item in events:
        event = item if isinstance(item, DayEvent) else DayEvent.model_validate(item)
        day = event.start.date()
        if window.contains(day):
            buckets[day].append(event)
        else:
            dropped += 1

    if dropped:
        logger.debug(f"[LAYOUT] Dropped {dropped} events outside window {window.start} -> {window.end}")
    return buckets


def pack_week_events(
    events: Iterable[DayEvent | Mapping[str, Any]],
    window: LayoutWindow,
) -> dict[date, list[PackedDayEvent]]:
    """Pack each day of the window independently."""
    return {day: pack_day_events(day_events) for day, day_events in group_events_by_day(events, window).items()}


def classify_program_type(raw: str | None) -> str:
    """Map a free-text program type to one of the display categories.

    Examples:
        "Programa Sinfónico" -> "Sinfónico"
        "camerata de cuerdas" -> "Camerata"
        None -> "Otros"
    """
    lowered = (raw or "").lower()
    for keyword, program_type in _PROGRAM_TYPE_KEYWORDS:
        if keyword in lowered:
            return program_type
    return PROGRAM_TYPE_OTHER


def _raw_program_type(item: Any, key: str) -> str | None:
    if isinstance(item, Mapping):
        if key in item:
            return item[key]
        payload = item.get("payload")
    else:
        if hasattr(item, key):
            return getattr(item, key)
        payload = getattr(item, "payload", None)
    if isinstance(payload, Mapping):
        return payload.get(key)
    return None


def filter_by_program_type(
    items: Sequence[T],
    enabled: Mapping[str, bool],
    key: str = "program_type",
) -> list[T]:
    """Keep items whose program type is switched on in ``enabled``.

    The raw type is read from ``key`` on the item itself, or from its payload.
    Types missing from ``enabled`` are treated as switched off.
    """
    return [item for item in items if enabled.get(classify_program_type(_raw_program_type(item, key)), False)]
