"""Freshness-calendar layout engine.

Pure functions only: items, a view window and "today" in, a RenderModel out.
"""
from tossit.logic.calendar.zones import classify, item_status
from tossit.logic.calendar.events import generate_events
from tossit.logic.calendar.rows import assign_rows
from tossit.logic.calendar.week import map_to_week, resolve_week_cell
from tossit.logic.calendar.render import build, legend, resolve_event, select_event

__all__ = [
    "classify", "item_status", "generate_events", "assign_rows",
    "map_to_week", "resolve_week_cell", "build", "legend", "resolve_event", "select_event",
]
