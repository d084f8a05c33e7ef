from datetime import date as _date
from typing import List, Optional
import logging

from fastapi import APIRouter, HTTPException, Query

from tossit.domain.CalendarEvent import ViewKind, ViewWindow, parse_week_start
from tossit.domain.FoodItem import FoodItem, parse_day
from tossit.events.event_helpers import item_route, publish_expiring_snapshot
from tossit.infra.Item_Repository import reading_from_items
from tossit.logic.calendar import build, legend, resolve_week_cell, select_event
from tossit.logic.calendar.dates import drill_down, shift_window, visible_dates
from tossit.logic.pantry.analysis import compute_pantry_snapshot
from tossit.utilities.config import REMINDER_DAYS, ROW_HEIGHT_PX, WEEK_START_DAY
from tossit.utilities.constants import DATE_FORMAT
from tossit.utilities.validators import FoodItemInput, RenderRequest, SelectRequest, StatusRequest

router = APIRouter()
logger = logging.getLogger(__name__)


# === Helpers ===
def _parse_date(value: Optional[str], field: str) -> _date:
    parsed = parse_day(value)
    if parsed is None:
        raise HTTPException(status_code=400, detail=f"Invalid {field}: {value!r}. Expected YYYY-MM-DD")
    return parsed


def _window(view: str, ref: str, week_start: Optional[str]) -> ViewWindow:
    try:
        kind = ViewKind.parse(view)
        start = parse_week_start(week_start or WEEK_START_DAY)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ViewWindow(kind, _parse_date(ref, "date"), start)


def _items(payload: List[FoodItemInput]) -> List[FoodItem]:
    return [FoodItem.from_dict(i.model_dump()) for i in payload]


def _reminder(value: Optional[int]) -> int:
    return REMINDER_DAYS if value is None else value


def _window_dict(window: ViewWindow):
    dates = visible_dates(window)
    return {
        "view": window.kind.value,
        "date": window.reference_date.strftime(DATE_FORMAT),
        "start": dates[0].strftime(DATE_FORMAT),
        "end": dates[-1].strftime(DATE_FORMAT),
    }


# === Calendar ===
@router.post("/api/calendar/render")
def render_calendar(req: RenderRequest):
    """Render model for items supplied in the request body."""
    window = _window(req.view, req.date, req.week_start)
    today = _parse_date(req.today, "today")
    items = _items(req.items)
    logger.info("Render %s %s for %d items", window.kind.value, window.reference_date, len(items))
    model = build(items, window, today, _reminder(req.reminder_days), ROW_HEIGHT_PX)
    return model.to_dict()


@router.get("/api/calendar")
def calendar_from_snapshot(
    view: str = Query(default="month"),
    date: Optional[str] = Query(default=None, description="Reference date (YYYY-MM-DD)"),
    today: Optional[str] = Query(default=None, description="Defaults to the server's current date"),
    reminder_days: Optional[int] = Query(default=None, ge=0, le=365),
    week_start: Optional[str] = Query(default=None),
):
    """Render model for the configured items snapshot file."""
    today_date = _parse_date(today, "today") if today else _date.today()
    window = _window(view, date or today_date.strftime(DATE_FORMAT), week_start)
    items = reading_from_items()
    logger.info("Render %s %s from snapshot (%d items)", window.kind.value, window.reference_date, len(items))
    model = build(items, window, today_date, _reminder(reminder_days), ROW_HEIGHT_PX)
    return model.to_dict()


@router.post("/api/calendar/select")
def select_calendar_item(req: SelectRequest):
    """Resolve a clicked tile or week cell to its item; empty cells select nothing."""
    window = _window(req.view, req.date, req.week_start)
    today = _parse_date(req.today, "today")
    items = _items(req.items)
    model = build(items, window, today, _reminder(req.reminder_days), ROW_HEIGHT_PX)

    item_id = req.item_id
    event_day = parse_day(req.event_date) if req.event_date else None
    if window.kind is ViewKind.WEEK and req.row_index is not None and req.column is not None:
        item_id = resolve_week_cell(model, req.row_index, req.column)
        event_day = None

    event = None
    if item_id:
        event = next((e for e in model.events
                      if e.item_id == item_id and (event_day is None or e.date == event_day)), None)
    item = select_event(items, event)
    if item is None:
        return {"selected": None}
    return {"selected": {"id": item.id, "name": item.name, "route": item_route(item.id)}}


@router.get("/api/calendar/navigate")
def navigate_calendar(
    view: str = Query(default="month"),
    date: str = Query(..., description="Current reference date (YYYY-MM-DD)"),
    steps: int = Query(default=1, ge=-520, le=520),
    week_start: Optional[str] = Query(default=None),
):
    """Shift the displayed window backward (negative steps) or forward."""
    return _window_dict(shift_window(_window(view, date, week_start), steps))


@router.get("/api/calendar/drill-down")
def drill_down_calendar(
    view: str = Query(default="month"),
    date: str = Query(...),
    day: str = Query(..., description="Selected day slot (YYYY-MM-DD)"),
    week_start: Optional[str] = Query(default=None),
):
    """Selecting a day in month view opens that day in day view."""
    window = _window(view, date, week_start)
    return _window_dict(drill_down(window, _parse_date(day, "day")))


@router.get("/api/calendar/legend")
def calendar_legend():
    return {"zones": legend()}


# === Items list badges ===
@router.post("/api/items/status")
def items_status(req: StatusRequest):
    today = _parse_date(req.today, "today")
    items = _items(req.items)
    statuses, expiring = compute_pantry_snapshot(items, today, window=_reminder(req.reminder_days))
    publish_expiring_snapshot(expiring)
    return {"statuses": statuses, "expiring_soon": expiring, "count": len(expiring)}
