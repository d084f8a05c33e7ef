"""Event helper utilities.

Quick import:
    from tossit.events.event_helpers import (
        publish_item_selected, publish_expiring_snapshot,
        CALENDAR_ITEM_SELECTED, PANTRY_EXPIRING_SNAPSHOT
    )
"""
from __future__ import annotations
from typing import Iterable, Any
from tossit.events.Event_Bus import (
    publish, CALENDAR_ITEM_SELECTED, PANTRY_EXPIRING_SNAPSHOT
)
from tossit.utilities.constants import ITEM_ROUTE_TEMPLATE

__all__ = [
    'publish_item_selected', 'publish_expiring_snapshot', 'item_route',
    'CALENDAR_ITEM_SELECTED', 'PANTRY_EXPIRING_SNAPSHOT'
]


def item_route(item_id: str) -> str:
    return ITEM_ROUTE_TEMPLATE.format(item_id=item_id)


def publish_item_selected(item: Any):
    """Publish a calendar.item_selected event; navigation listens for it."""
    item_id = getattr(item, 'id', '')
    publish(CALENDAR_ITEM_SELECTED, {
        'item': item,
        'item_id': item_id,
        'route': item_route(item_id),
    })


def publish_expiring_snapshot(items: Iterable[dict]):
    """Publish a snapshot of items that need attention soon.

    Payload structure:
        {
          'count': <int>,
          'items': [ { id, name, best_by, days_left, status }, ... ]
        }
    """
    items_list = list(items) if not isinstance(items, list) else items
    publish(PANTRY_EXPIRING_SNAPSHOT, {
        'count': len(items_list),
        'items': items_list
    })
