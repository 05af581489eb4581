"""Side-by-side placement of overlapping events inside one day column.

Collision groups are direct-overlap only: an event shares its column with the
events it overlaps itself, not with the whole chain of overlaps. For a chain
A-B-C where A and C do not touch, A and C each get half the width while B gets
a third. Existing day views are drawn around that asymmetry.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from loguru import logger

from ensemble_layout.layout.time_fraction import height_percent, top_percent
from ensemble_layout.layout.types import DayEvent, PackedDayEvent


def _coerce_event(event: DayEvent | Mapping[str, Any]) -> DayEvent:
    if isinstance(event, DayEvent):
        return event
    return DayEvent.model_validate(event)


def _find_collisions(ordered: list[DayEvent]) -> list[list[int]]:
    """Pairwise collision lists for events already sorted by start.

    With start_i <= start_j, end_i > start_j is the full overlap test.
    """
    collisions: list[list[int]] = [[] for _ in ordered]
    for i in range(len(ordered)):
        for j in range(i + 1, len(ordered)):
            if ordered[i].end > ordered[j].start:
                collisions[i].append(j)
                collisions[j].append(i)
    return collisions


def pack_day_events(events: Sequence[DayEvent | Mapping[str, Any]]) -> list[PackedDayEvent]:
    """Compute top/height/left/width for every event of a single day.

    Events are sorted by start (stable, so equal starts keep input order) and
    returned in that order. Each event with collisions splits the width evenly
    with the events it directly overlaps and takes the slot matching its
    position among them.

    Args:
        events: Events of one day (DayEvent or mappings accepted by DayEvent)

    Returns:
        Packed events in start order
    """
    if not events:
        return []

    ordered = sorted((_coerce_event(event) for event in events), key=lambda event: event.start)

    for event in ordered:
        if event.end < event.start:
            logger.warning(f"[LAYOUT] Day event {event.id} ends before it starts ({event.start} -> {event.end})")

    collisions = _find_collisions(ordered)

    packed: list[PackedDayEvent] = []
    for index, event in enumerate(ordered):
        width = 100.0
        left = 0.0
        if collisions[index]:
            group = sorted({index, *collisions[index]})
            width = 100 / len(group)
            left = group.index(index) * width

        packed.append(
            PackedDayEvent(
                id=event.id,
                start=event.start,
                end=event.end,
                payload=dict(event.payload),
                top=top_percent(event.start),
                height=height_percent(event.start, event.end),
                left=left,
                width=width,
                collisions=sorted(collisions[index]),
            )
        )

    logger.debug(
        f"[LAYOUT] Packed {len(packed)} day events, "
        f"{sum(1 for item in packed if item.collisions)} with collisions"
    )
    return packed
