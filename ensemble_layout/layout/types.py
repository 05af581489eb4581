"""Value types for the calendar layout engine.

All timestamps follow a naive local wall-clock policy: an aware datetime keeps
its own hour/minute reading and simply loses its tzinfo. Nothing is converted
to UTC, so top/height fractions match what the viewer sees on the clock.

Models accept both snake_case and the camelCase names used by the front-end
(``rowIndex``, ``dateStart``...).
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from ensemble_layout.utils.calendar import as_date, week_end, week_start

_MODEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
)


def _to_wall_clock(value: datetime) -> datetime:
    if value.tzinfo is not None:
        return value.replace(tzinfo=None)
    return value


class DayEvent(BaseModel):
    """A time-bounded item placed inside a single day column.

    Attributes:
        id: Caller identity for the event (opaque to the layout)
        start: Start timestamp (naive wall-clock)
        end: End timestamp (naive wall-clock); end < start is tolerated
        payload: Display fields carried through untouched
    """

    model_config = _MODEL_CONFIG

    id: str | None = None
    start: datetime
    end: datetime
    payload: dict[str, Any] = Field(default_factory=dict)

    @field_validator("start", "end")
    @classmethod
    def drop_timezone(cls, value: datetime) -> datetime:
        return _to_wall_clock(value)


class PackedDayEvent(DayEvent):
    """DayEvent plus its placement inside the day column.

    Attributes:
        top: Offset from midnight, percent of the column height
        height: Duration, percent of the column height
        left: Horizontal offset, percent of the column width
        width: Horizontal size, percent of the column width
        collisions: Indices (into the packed output) of directly overlapping events
    """

    top: float
    height: float
    left: float
    width: float
    collisions: list[int] = Field(default_factory=list)


class TourBar(BaseModel):
    """A date-ranged item (whole days, inclusive) shown across a window."""

    model_config = _MODEL_CONFIG

    id: str | None = None
    date_start: date
    date_end: date
    payload: dict[str, Any] = Field(default_factory=dict)

    @field_validator("date_start", "date_end", mode="before")
    @classmethod
    def datetime_to_date(cls, value: Any) -> Any:
        return as_date(value)


class LayoutWindow(BaseModel):
    """Inclusive date range that tour bars are clipped and positioned against."""

    model_config = _MODEL_CONFIG

    start: date
    end: date

    @field_validator("start", "end", mode="before")
    @classmethod
    def datetime_to_date(cls, value: Any) -> Any:
        return as_date(value)

    @model_validator(mode="after")
    def check_order(self) -> LayoutWindow:
        if self.end < self.start:
            raise ValueError(f"Window end {self.end} is before window start {self.start}")
        return self

    @property
    def length_days(self) -> int:
        return (self.end - self.start).days + 1

    def days(self) -> list[date]:
        """Every date of the window, in order."""
        return [self.start + timedelta(days=offset) for offset in range(self.length_days)]

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    @classmethod
    def for_week(cls, day: date) -> LayoutWindow:
        """Monday-Sunday window of the ISO week containing ``day``."""
        return cls(start=week_start(day), end=week_end(day))


class PackedBar(TourBar):
    """TourBar plus its lane and window-relative placement.

    Attributes:
        row_index: Lane the bar was assigned to (0-based)
        left: Offset from the window start, percent of the window width
        width: Clipped length, percent of the window width
        effective_start: date_start clipped to the window
        effective_end: date_end clipped to the window
        is_window_start: True when the bar really starts inside the window
        is_window_end: True when the bar really ends inside the window
    """

    row_index: int
    left: float
    width: float
    effective_start: date
    effective_end: date
    is_window_start: bool
    is_window_end: bool


class TimelineLayout(BaseModel):
    """Result of packing tour bars into a window."""

    model_config = _MODEL_CONFIG

    bars: list[PackedBar] = Field(default_factory=list)
    row_count: int = 0
