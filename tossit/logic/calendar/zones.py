"""Point-in-time freshness classification, used for list badges.

Independent of the calendar tiling: the reminder window is a user setting,
the calendar's lookback is fixed.
"""
from __future__ import annotations
from datetime import date

from tossit.domain.CalendarEvent import Zone
from tossit.domain.FoodItem import FoodItem
from tossit.logic.calendar.dates import whole_days_between

__all__ = ["classify", "item_status"]


def classify(terminal_date: date, today: date, reminder_window_days: int) -> Zone:
    if reminder_window_days < 0:
        raise ValueError(f"reminder_window_days cannot be negative: {reminder_window_days}")
    days_remaining = whole_days_between(today, terminal_date)
    if days_remaining < 0:
        return Zone.EXPIRED
    if days_remaining <= reminder_window_days:
        return Zone.SOON
    return Zone.FRESH


def item_status(item: FoodItem, today: date, reminder_window_days: int) -> Zone:
    """Badge status for an item; frozen or undated items read as fresh."""
    if item.is_frozen or item.best_by_date is None:
        return Zone.FRESH
    return classify(item.best_by_date, today, reminder_window_days)
