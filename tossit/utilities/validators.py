"""
Input validation schemas using Pydantic for the calendar API.

Item dates stay as raw strings here: an item with an unparseable date is
not a request error, the calendar simply skips it.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from tossit.utilities.constants import WEEKDAY_INDEX


class FoodItemInput(BaseModel):
    """Schema for one perishable item in a render request."""
    id: str = Field(..., min_length=1, max_length=200)
    name: str = Field("", max_length=200)
    best_by_date: Optional[str] = None
    is_frozen: bool = False
    thaw_date: Optional[str] = None
    category: str = ""
    quantity: Optional[int] = Field(None, ge=0)
    notes: str = ""

    @field_validator('id', 'name')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v


class ViewInput(BaseModel):
    """Schema for the displayed window and the clock reading."""
    view: str = Field("month", pattern=r'^(month|week|day)$')
    date: str = Field(..., min_length=8)
    today: str = Field(..., min_length=8)
    reminder_days: Optional[int] = Field(None, ge=0, le=365)
    week_start: Optional[str] = None

    @field_validator('view', mode='before')
    @classmethod
    def lower_view(cls, v):
        """Accept MONTH, Week, ... as well."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator('week_start')
    @classmethod
    def validate_week_start(cls, v):
        """Accept weekday names only."""
        if v is None:
            return v
        key = v.strip().lower()
        if key not in WEEKDAY_INDEX:
            raise ValueError(f'Unknown week start day: {v}')
        return key


class RenderRequest(ViewInput):
    """Schema for POST /api/calendar/render."""
    items: List[FoodItemInput] = Field(default_factory=list)


class SelectRequest(RenderRequest):
    """Schema for resolving a click to an item.

    Either item_id (month/day tiles) or row_index + column (week cells).
    """
    item_id: Optional[str] = None
    event_date: Optional[str] = None
    row_index: Optional[int] = Field(None, ge=0)
    column: Optional[int] = Field(None, ge=0, le=6)


class StatusRequest(BaseModel):
    """Schema for POST /api/items/status."""
    today: str = Field(..., min_length=8)
    reminder_days: Optional[int] = Field(None, ge=0, le=365)
    items: List[FoodItemInput] = Field(default_factory=list)
