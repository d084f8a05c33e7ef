from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"
LEGACY_DATE_FORMAT: Final[str] = "%d-%m-%Y"

DEFAULT_REMINDER_DAYS: Final[int] = 7
DEFAULT_ROW_HEIGHT_PX: Final[int] = 44
DAYS_IN_WEEK: Final[int] = 7

# Calendar lifecycle tiling: (day offset from the terminal date, zone value).
# Two days to eat it, two days to freeze it, one day past due.
LIFECYCLE_TILING: Final[tuple[tuple[int, str], ...]] = (
    (-4, "soon"),
    (-3, "soon"),
    (-2, "freeze"),
    (-1, "freeze"),
    (0, "expired"),
)

# Days moved by one navigation step per view kind
NAVIGATION_STEP_DAYS: Final[dict[str, int]] = {"month": 30, "week": 7, "day": 1}

WEEKDAY_INDEX: Final[dict[str, int]] = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
}

ZONE_COLORS: Final[dict[str, str]] = {
    "soon": "#eab308",
    "freeze": "#3b82f6",
    "expired": "#ef4444",
    "thaw": "#F4A261",
    "fresh": "#6b7280",
}
ZONE_LABELS: Final[dict[str, str]] = {
    "soon": "Best by soon",
    "freeze": "Freeze now",
    "expired": "Past best by",
    "thaw": "Thaw",
    "fresh": "Fresh",
}

ITEM_ROUTE_TEMPLATE: Final[str] = "/item/{item_id}"
