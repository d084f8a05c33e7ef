"""Render Model Builder: composes the calendar components into one view-specific model.

Month and day events are not clipped; the grid widget virtualizes its own
date range in those modes. Day and week modes carry a pixel offset so the
stacking follows proximity to the terminal date, not insertion order.
"""
from __future__ import annotations
import logging
from collections import defaultdict
from dataclasses import replace
from datetime import date
from typing import Any, Dict, FrozenSet, Iterable, List, Optional

from tossit.domain.CalendarEvent import (
    CALENDAR_ZONES, CalendarEvent, RenderModel, ViewKind, ViewWindow, Zone
)
from tossit.domain.FoodItem import FoodItem
from tossit.events.event_helpers import publish_item_selected
from tossit.logic.calendar.dates import normalize_day, visible_dates
from tossit.logic.calendar.events import generate_events
from tossit.logic.calendar.rows import assign_rows, unique_items
from tossit.logic.calendar.week import build_week_rows, map_to_week
from tossit.logic.calendar.zones import item_status
from tossit.utilities.constants import DEFAULT_ROW_HEIGHT_PX

logger = logging.getLogger(__name__)

__all__ = ["build", "zones_by_day", "legend", "resolve_event", "select_event"]


def build(items: Iterable[FoodItem], window: ViewWindow, today: date, reminder_window_days: int,
          row_height: int = DEFAULT_ROW_HEIGHT_PX) -> RenderModel:
    items = unique_items(items)
    today = normalize_day(today)
    statuses = {item.id: item_status(item, today, reminder_window_days) for item in items}
    dates = tuple(visible_dates(window))

    if window.kind is ViewKind.WEEK:
        events = map_to_week(items, today, dates, row_height)
        rows = tuple(build_week_rows(events, row_height))
    else:
        events = _stacked_events(items, today, row_height if window.kind is ViewKind.DAY else None)
        rows = ()

    logger.debug("Built %s model for %s: %d events, %d rows",
                 window.kind.value, window.reference_date, len(events), len(rows))
    return RenderModel(
        window=window,
        today=today,
        events=tuple(events),
        visible_dates=dates,
        rows=rows,
        day_zones=zones_by_day(events),
        statuses=statuses,
        row_height=row_height,
    )


def _stacked_events(items: List[FoodItem], today: date, row_height: Optional[int]) -> List[CalendarEvent]:
    rows = assign_rows(items, today)
    stacked: List[CalendarEvent] = []
    for item in items:
        row_index = rows.get(item.id)
        if row_index is None:
            continue
        top_px = row_index * row_height if row_height is not None else None
        for event in generate_events(item):
            stacked.append(replace(event, row_index=row_index, top_px=top_px))
    stacked.sort(key=lambda e: (e.row_index, e.date))
    return stacked


def zones_by_day(events: Iterable[CalendarEvent]) -> Dict[date, FrozenSet[Zone]]:
    """Union of every zone present on each day (a month cell shows all of them)."""
    acc: Dict[date, set] = defaultdict(set)
    for event in events:
        acc[event.date].add(event.zone)
    return {day: frozenset(zones) for day, zones in acc.items()}


def legend() -> List[Dict[str, Any]]:
    return [{"zone": z.value, "label": z.label, "color": z.color} for z in CALENDAR_ZONES]


def resolve_event(items: Iterable[FoodItem], event: Optional[CalendarEvent]) -> Optional[FoodItem]:
    if event is None:
        return None
    for item in items:
        if item.id == event.item_id:
            return item
    return None


def select_event(items: Iterable[FoodItem], event: Optional[CalendarEvent]) -> Optional[FoodItem]:
    """Click handler: resolve the tile to its item and hand it to navigation.

    An empty cell (no event) or an event whose item vanished is a no-op.
    """
    item = resolve_event(items, event)
    if item is not None:
        publish_item_selected(item)
    return item
