"""Week Gantt view: column mapping, clipping and the stale-item filter.

Only the week view drops items whose terminal date is already behind today;
month and day views keep showing their red tile.
"""
from __future__ import annotations
import logging
from dataclasses import replace
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence

from tossit.domain.CalendarEvent import CalendarEvent, RenderModel, WeekRow, Zone
from tossit.domain.FoodItem import FoodItem
from tossit.logic.calendar.dates import index_of_date_in_week, normalize_day
from tossit.logic.calendar.events import generate_events
from tossit.logic.calendar.rows import assign_rows, unique_items
from tossit.utilities.constants import DAYS_IN_WEEK, DEFAULT_ROW_HEIGHT_PX

logger = logging.getLogger(__name__)

__all__ = ["map_to_week", "build_week_rows", "resolve_week_cell"]


def map_to_week(items: Iterable[FoodItem], today: date, week_dates: Sequence[date],
                row_height: int = DEFAULT_ROW_HEIGHT_PX) -> List[CalendarEvent]:
    """Events of non-stale items that fall inside the week, with column and row placement.

    Row indices come from the whole collection, so an item keeps its slot when
    the user navigates to a week where some other item is hidden.
    """
    items = unique_items(items)
    today = normalize_day(today)
    rows = assign_rows(items, today)

    placed: List[CalendarEvent] = []
    for item in items:
        terminal = item.effective_terminal_date
        if terminal is None or item.id not in rows:
            continue
        if terminal < today:
            logger.debug("Item %s dropped from week view: terminal date %s before %s",
                         item.id, terminal, today)
            continue
        row_index = rows[item.id]
        for event in generate_events(item):
            column = index_of_date_in_week(event.date, week_dates)
            if column is None:
                continue
            placed.append(replace(event, row_index=row_index, column=column,
                                  top_px=row_index * row_height))
    placed.sort(key=lambda e: (e.row_index, e.column))
    return placed


def build_week_rows(events: Iterable[CalendarEvent], row_height: int = DEFAULT_ROW_HEIGHT_PX) -> List[WeekRow]:
    """Materialize one row per item with at least one visible column."""
    cells: Dict[str, List[Optional[Zone]]] = {}
    meta: Dict[str, CalendarEvent] = {}
    for event in events:
        if event.column is None or event.row_index is None:
            continue
        if event.item_id not in cells:
            cells[event.item_id] = [None] * DAYS_IN_WEEK
            meta[event.item_id] = event
        cells[event.item_id][event.column] = event.zone

    rows = [
        WeekRow(
            item_id=item_id,
            row_index=meta[item_id].row_index,
            label=meta[item_id].label,
            top_px=meta[item_id].row_index * row_height,
            cells=tuple(row_cells),
        )
        for item_id, row_cells in cells.items()
    ]
    rows.sort(key=lambda r: r.row_index)
    return rows


def resolve_week_cell(model: RenderModel, row_index: int, column: int) -> Optional[str]:
    """Item id under a week-grid cell; None for an empty cell."""
    for row in model.rows:
        if row.row_index != row_index:
            continue
        if 0 <= column < len(row.cells) and row.cells[column] is not None:
            return row.item_id
        return None
    return None
