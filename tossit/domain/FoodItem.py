"""FoodItem domain entity: a perishable item with a best-by date or, once frozen, a thaw date."""
from datetime import date, datetime
from typing import Any, Optional

from tossit.utilities.constants import DATE_FORMAT, LEGACY_DATE_FORMAT


def parse_day(value: Any) -> Optional[date]:
    '''Coerce a stored date value to a calendar day; None when missing or unparseable.'''
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    for fmt in (DATE_FORMAT, LEGACY_DATE_FORMAT):
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            pass
    try:
        # ISO datetimes, including a trailing Z for UTC
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


class FoodItem:
    def __init__(self, id: str = "", name: str = "", best_by_date: Optional[date] = None,
                 is_frozen: bool = False, thaw_date: Optional[date] = None,
                 category: str = "", quantity: Optional[int] = None, notes: str = ""):
        self.id = id
        self.name = name
        self.best_by_date = parse_day(best_by_date)
        self.is_frozen = bool(is_frozen)
        self.thaw_date = parse_day(thaw_date)
        self.category = category
        self.quantity = quantity
        self.notes = notes

    @property
    def effective_terminal_date(self) -> Optional[date]:
        '''The thaw date for frozen items that have one, otherwise the best-by date.'''
        if self.is_frozen and self.thaw_date is not None:
            return self.thaw_date
        return self.best_by_date

    @property
    def is_trackable(self) -> bool:
        return self.effective_terminal_date is not None

    def __str__(self) -> str:
        parts = [self.name or self.id]
        if self.is_frozen:
            parts.append("Frozen")
            if self.thaw_date:
                parts.append(f"Thaw: {self.thaw_date.strftime(DATE_FORMAT)}")
        elif self.best_by_date:
            parts.append(f"Best by: {self.best_by_date.strftime(DATE_FORMAT)}")
        return " - ".join(parts)

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a FoodItem from a dictionary. Accepts camelCase keys and ignores unknown ones.'''
        d = dict(data) if isinstance(data, dict) else {}
        best_by = None
        for key in ("best_by_date", "bestByDate", "expirationDate", "terminal_date"):
            if d.get(key):
                best_by = d[key]
                break
        quantity = d.get("quantity")
        try:
            quantity = int(quantity) if quantity not in (None, "") else None
        except (TypeError, ValueError):
            quantity = None
        return FoodItem(
            id=str(d.get("id", "")),
            name=str(d.get("name", "")),
            best_by_date=best_by,
            is_frozen=bool(d.get("is_frozen", d.get("isFrozen", False))),
            thaw_date=d.get("thaw_date", d.get("thawDate")),
            category=d.get("category") or "",
            quantity=quantity,
            notes=d.get("notes") or "",
        )

    def to_dict(self):
        '''Converts the FoodItem to a JSON-friendly dictionary.'''
        return {
            "id": self.id,
            "name": self.name,
            "best_by_date": self.best_by_date.strftime(DATE_FORMAT) if self.best_by_date else "",
            "is_frozen": self.is_frozen,
            "thaw_date": self.thaw_date.strftime(DATE_FORMAT) if self.thaw_date else "",
            "category": self.category,
            "quantity": self.quantity,
            "notes": self.notes,
        }
