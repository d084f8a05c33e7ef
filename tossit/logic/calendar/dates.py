"""Day-granularity date helpers and view-window geometry."""
from __future__ import annotations
import calendar as _calendar
from datetime import date, timedelta
from typing import Any, List, Optional, Sequence

from tossit.domain.CalendarEvent import ViewKind, ViewWindow
from tossit.domain.FoodItem import parse_day
from tossit.utilities.constants import DAYS_IN_WEEK, NAVIGATION_STEP_DAYS

__all__ = [
    "normalize_day", "whole_days_between", "week_window", "index_of_date_in_week",
    "visible_dates", "shift_window", "drill_down",
]


def normalize_day(value: Any) -> Optional[date]:
    """Truncate a date, datetime or date string to its calendar day."""
    return parse_day(value)


def whole_days_between(start: date, end: date) -> int:
    """end - start in whole days; negative when end is before start."""
    return (normalize_day(end) - normalize_day(start)).days


def week_window(reference: date, week_start: int) -> List[date]:
    """The 7 contiguous dates of the week containing reference."""
    reference = normalize_day(reference)
    offset = (reference.weekday() - week_start) % DAYS_IN_WEEK
    first = reference - timedelta(days=offset)
    return [first + timedelta(days=i) for i in range(DAYS_IN_WEEK)]


def index_of_date_in_week(day: date, week_dates: Sequence[date]) -> Optional[int]:
    day = normalize_day(day)
    if day is None or not week_dates:
        return None
    idx = (day - week_dates[0]).days
    if 0 <= idx < len(week_dates):
        return idx
    return None


def visible_dates(window: ViewWindow) -> List[date]:
    ref = window.reference_date
    if window.kind is ViewKind.WEEK:
        return week_window(ref, window.week_start)
    if window.kind is ViewKind.DAY:
        return [ref]
    days_in_month = _calendar.monthrange(ref.year, ref.month)[1]
    return [date(ref.year, ref.month, d) for d in range(1, days_in_month + 1)]


def shift_window(window: ViewWindow, steps: int) -> ViewWindow:
    """Move the window backward (negative steps) or forward by whole navigation steps."""
    delta = NAVIGATION_STEP_DAYS[window.kind.value] * steps
    return ViewWindow(window.kind, window.reference_date + timedelta(days=delta), window.week_start)


def drill_down(window: ViewWindow, day: date) -> ViewWindow:
    """Selecting a day in month view opens that day; other views are unchanged."""
    if window.kind is not ViewKind.MONTH:
        return window
    return ViewWindow(ViewKind.DAY, normalize_day(day), window.week_start)
