"""Per-item calendar lifecycle: the zoned day tiles an item contributes."""
from __future__ import annotations
import logging
from datetime import timedelta
from typing import List

from tossit.domain.CalendarEvent import CalendarEvent, Zone
from tossit.domain.FoodItem import FoodItem
from tossit.utilities.constants import LIFECYCLE_TILING

logger = logging.getLogger(__name__)

__all__ = ["generate_events"]


def generate_events(item: FoodItem) -> List[CalendarEvent]:
    """Return the item's day events in date order, without row placement.

    A frozen item with a thaw date yields one Thaw tile and nothing else.
    Any other item with a best-by date T yields five tiles on T-4 .. T:
    Soon, Soon, Freeze, Freeze, Expired. Items with neither yield nothing.
    """
    if item.is_frozen and item.thaw_date is not None:
        return [CalendarEvent(
            item_id=item.id,
            date=item.thaw_date,
            zone=Zone.THAW,
            label=item.name,
            terminal_date=item.thaw_date,
        )]

    terminal = item.best_by_date
    if terminal is None:
        logger.debug("Item %s has no terminal date; no calendar events", item.id)
        return []

    return [
        CalendarEvent(
            item_id=item.id,
            date=terminal + timedelta(days=offset),
            zone=Zone(zone),
            label=item.name,
            terminal_date=terminal,
        )
        for offset, zone in LIFECYCLE_TILING
    ]
