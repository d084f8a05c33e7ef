"""Pantry list analysis helpers: badge statuses and the expiring-soon list."""
from __future__ import annotations
from datetime import date
from typing import List, Dict, Any, Iterable

from tossit.domain.CalendarEvent import Zone
from tossit.domain.FoodItem import FoodItem
from tossit.logic.calendar.dates import whole_days_between
from tossit.logic.calendar.zones import item_status
from tossit.utilities.constants import DATE_FORMAT, DEFAULT_REMINDER_DAYS

__all__ = ["compute_statuses", "compute_expiring_soon", "compute_pantry_snapshot"]


def compute_statuses(items: Iterable[FoodItem], today: date, *, window: int | None = None) -> Dict[str, str]:
    """Return item id -> badge status value."""
    reminder = window if window is not None else DEFAULT_REMINDER_DAYS
    return {item.id: item_status(item, today, reminder).value for item in items}


def compute_expiring_soon(items: Iterable[FoodItem], today: date, *, window: int | None = None) -> List[Dict[str, Any]]:
    """Return items within the reminder window (including already past best by)."""
    reminder = window if window is not None else DEFAULT_REMINDER_DAYS
    result: List[Dict[str, Any]] = []
    for item in items:
        status = item_status(item, today, reminder)
        if status not in (Zone.SOON, Zone.EXPIRED):
            continue
        result.append({
            'id': item.id,
            'name': item.name,
            'best_by': item.best_by_date.strftime(DATE_FORMAT),
            'days_left': whole_days_between(today, item.best_by_date),
            'status': status.value,
            'category': item.category,
        })
    result.sort(key=lambda x: (x['days_left'], x['name']))
    return result


def compute_pantry_snapshot(items: Iterable[FoodItem], today: date, *, window: int | None = None):
    items = list(items)
    return compute_statuses(items, today, window=window), compute_expiring_soon(items, today, window=window)
