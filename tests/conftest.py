"""Root conftest for all tests.

This file makes shared fixtures available across all test modules.
"""

from collections.abc import Callable
from datetime import date, datetime

import pytest
from loguru import logger

from ensemble_layout.layout.types import DayEvent, LayoutWindow, TourBar

# Monday
WEEK_MONDAY = date(2024, 3, 4)


@pytest.fixture
def week() -> LayoutWindow:
    """Monday 2024-03-04 to Sunday 2024-03-10."""
    return LayoutWindow(start=WEEK_MONDAY, end=date(2024, 3, 10))


@pytest.fixture
def make_event() -> Callable[..., DayEvent]:
    """Factory for day events on 2024-03-04 from HH:MM strings."""

    def _make(event_id: str, start: str, end: str, day: date = WEEK_MONDAY, **payload) -> DayEvent:
        start_h, start_m = (int(part) for part in start.split(":"))
        end_h, end_m = (int(part) for part in end.split(":"))
        return DayEvent(
            id=event_id,
            start=datetime(day.year, day.month, day.day, start_h, start_m),
            end=datetime(day.year, day.month, day.day, end_h, end_m),
            payload=payload,
        )

    return _make


@pytest.fixture
def make_bar() -> Callable[..., TourBar]:
    """Factory for tour bars from ISO date strings."""

    def _make(bar_id: str, date_start: str, date_end: str, **payload) -> TourBar:
        return TourBar(
            id=bar_id,
            date_start=date.fromisoformat(date_start),
            date_end=date.fromisoformat(date_end),
            payload=payload,
        )

    return _make


@pytest.fixture
def captured_warnings():
    """Collect loguru WARNING+ messages emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)
