"""Canonical week-window helpers.

Week boundaries are Monday-Sunday (ISO week). A datetime counts as its
calendar day.
"""

from datetime import date, datetime, timedelta


def as_date(d: date) -> date:
    if isinstance(d, datetime):
        return d.date()
    return d


def week_start(d: date) -> date:
    """Return Monday of the calendar week containing d."""
    d = as_date(d)
    return d - timedelta(days=d.weekday())


def week_end(d: date) -> date:
    """Return Sunday of the calendar week containing d."""
    return week_start(d) + timedelta(days=6)
