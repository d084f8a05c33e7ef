"""Calendar render values: zones, view windows, positioned events and the render model.

All values are immutable and rebuilt on every render pass.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date, datetime, time
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Tuple

from tossit.domain.FoodItem import parse_day
from tossit.utilities.constants import DATE_FORMAT, WEEKDAY_INDEX, ZONE_COLORS, ZONE_LABELS


class Zone(str, Enum):
    SOON = "soon"
    FREEZE = "freeze"
    EXPIRED = "expired"
    THAW = "thaw"
    FRESH = "fresh"

    @property
    def color(self) -> str:
        return ZONE_COLORS[self.value]

    @property
    def label(self) -> str:
        return ZONE_LABELS[self.value]


# Zones that can appear as calendar tiles, in legend order
CALENDAR_ZONES: Tuple[Zone, ...] = (Zone.SOON, Zone.FREEZE, Zone.EXPIRED, Zone.THAW)


class ViewKind(str, Enum):
    MONTH = "month"
    WEEK = "week"
    DAY = "day"

    @classmethod
    def parse(cls, value) -> "ViewKind":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown view kind: {value!r}") from None


def parse_week_start(value) -> int:
    """Weekday index (Monday=0 .. Sunday=6) from a name or an int."""
    if isinstance(value, int) and 0 <= value <= 6:
        return value
    key = str(value).strip().lower()
    if key not in WEEKDAY_INDEX:
        raise ValueError(f"Unknown week start day: {value!r}")
    return WEEKDAY_INDEX[key]


@dataclass(frozen=True)
class ViewWindow:
    kind: ViewKind
    reference_date: date
    week_start: int = WEEKDAY_INDEX["sunday"]

    def __post_init__(self):
        # reference_date is always a plain day
        object.__setattr__(self, "reference_date", parse_day(self.reference_date))


@dataclass(frozen=True)
class CalendarEvent:
    item_id: str
    date: date
    zone: Zone
    label: str
    terminal_date: Optional[date] = None
    row_index: Optional[int] = None
    column: Optional[int] = None
    top_px: Optional[int] = None

    @property
    def start(self) -> datetime:
        return datetime.combine(self.date, time.min)

    @property
    def end(self) -> datetime:
        return datetime.combine(self.date, time(23, 59, 59, 999000))

    def to_dict(self):
        return {
            "item_id": self.item_id,
            "date": self.date.strftime(DATE_FORMAT),
            "zone": self.zone.value,
            "color": self.zone.color,
            "label": self.label,
            "terminal_date": self.terminal_date.strftime(DATE_FORMAT) if self.terminal_date else None,
            "row_index": self.row_index,
            "column": self.column,
            "top_px": self.top_px,
        }


@dataclass(frozen=True)
class WeekRow:
    """One Gantt row of the week view: a cell per column, None where the item has no tile."""
    item_id: str
    row_index: int
    label: str
    top_px: int
    cells: Tuple[Optional[Zone], ...]

    def to_dict(self):
        return {
            "item_id": self.item_id,
            "row_index": self.row_index,
            "label": self.label,
            "top_px": self.top_px,
            "cells": [z.value if z else None for z in self.cells],
        }


@dataclass(frozen=True)
class RenderModel:
    window: ViewWindow
    today: date
    events: Tuple[CalendarEvent, ...]
    visible_dates: Tuple[date, ...]
    rows: Tuple[WeekRow, ...] = ()
    day_zones: Dict[date, FrozenSet[Zone]] = field(default_factory=dict)
    statuses: Dict[str, Zone] = field(default_factory=dict)
    row_height: int = 0

    def events_on(self, day: date) -> List[CalendarEvent]:
        return [e for e in self.events if e.date == day]

    def to_dict(self):
        return {
            "view": self.window.kind.value,
            "date": self.window.reference_date.strftime(DATE_FORMAT),
            "today": self.today.strftime(DATE_FORMAT),
            "start": self.visible_dates[0].strftime(DATE_FORMAT) if self.visible_dates else None,
            "end": self.visible_dates[-1].strftime(DATE_FORMAT) if self.visible_dates else None,
            "row_height": self.row_height,
            "events": [e.to_dict() for e in self.events],
            "rows": [r.to_dict() for r in self.rows],
            "day_zones": {
                d.strftime(DATE_FORMAT): [z.value for z in CALENDAR_ZONES if z in zones]
                for d, zones in sorted(self.day_zones.items())
            },
            "statuses": {item_id: z.value for item_id, z in self.statuses.items()},
            "count": len(self.events),
        }
