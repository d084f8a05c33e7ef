"""Vertical stacking: one row per trackable item, most imminent first."""
from __future__ import annotations
import logging
from datetime import date
from typing import Dict, Iterable, List

from tossit.domain.FoodItem import FoodItem
from tossit.logic.calendar.dates import whole_days_between

logger = logging.getLogger(__name__)

__all__ = ["unique_items", "assign_rows"]


def unique_items(items: Iterable[FoodItem]) -> List[FoodItem]:
    """One item per id: the first trackable occurrence, else the first occurrence.

    Input order is kept for the survivors, so row ties still follow it.
    """
    items = list(items)
    chosen: Dict[str, int] = {}
    for pos, item in enumerate(items):
        if item.id not in chosen:
            chosen[item.id] = pos
        elif item.is_trackable and not items[chosen[item.id]].is_trackable:
            chosen[item.id] = pos
    if len(chosen) < len(items):
        logger.warning("Dropped %d duplicate item id(s)", len(items) - len(chosen))
    keep = set(chosen.values())
    return [item for pos, item in enumerate(items) if pos in keep]


def assign_rows(items: Iterable[FoodItem], today: date) -> Dict[str, int]:
    """Map item id -> row index, ordered by days until the effective terminal date.

    Past-due items (negative days) come first. Ties keep input order (sorted() is stable);
    items without an effective terminal date get no row.
    """
    keyed = []
    for item in unique_items(items):
        terminal = item.effective_terminal_date
        if terminal is None:
            logger.debug("Item %s skipped for row assignment: no terminal date", item.id)
            continue
        keyed.append((whole_days_between(today, terminal), item.id))

    ordered = sorted(keyed, key=lambda pair: pair[0])
    return {item_id: row for row, (_, item_id) in enumerate(ordered)}
