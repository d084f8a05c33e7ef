from datetime import date, datetime, timedelta
import unittest
from tossit.domain.CalendarEvent import Zone
from tossit.domain.FoodItem import FoodItem
from tossit.logic.calendar.events import generate_events


class TestGenerateEvents(unittest.TestCase):

    def test_best_by_item_gets_five_day_lifecycle(self):
        milk = FoodItem("milk", "Milk", date(2024, 6, 10))
        events = generate_events(milk)
        self.assertEqual([e.date for e in events],
                         [date(2024, 6, d) for d in (6, 7, 8, 9, 10)])
        self.assertEqual([e.zone for e in events],
                         [Zone.SOON, Zone.SOON, Zone.FREEZE, Zone.FREEZE, Zone.EXPIRED])
        for e in events:
            self.assertEqual(e.item_id, "milk")
            self.assertEqual(e.label, "Milk")
            self.assertEqual(e.terminal_date, date(2024, 6, 10))
            self.assertIsNone(e.row_index)

    def test_lifecycle_holds_for_any_terminal_date(self):
        start = date(2023, 12, 28)
        for i in range(0, 400, 37):
            terminal = start + timedelta(days=i)
            events = generate_events(FoodItem(str(i), "x", terminal))
            self.assertEqual(len(events), 5)
            self.assertEqual(events[0].date, terminal - timedelta(days=4))
            self.assertEqual(events[-1].date, terminal)
            self.assertEqual(len({e.date for e in events}), 5)

    def test_frozen_item_gets_single_thaw_event(self):
        chicken = FoodItem("c", "Frozen Chicken", date(2024, 6, 1), is_frozen=True, thaw_date=date(2024, 6, 15))
        events = generate_events(chicken)
        self.assertEqual(len(events), 1)
        self.assertEqual(events[0].date, date(2024, 6, 15))
        self.assertEqual(events[0].zone, Zone.THAW)

    def test_frozen_without_thaw_date_uses_best_by(self):
        peas = FoodItem("p", "Peas", date(2024, 6, 10), is_frozen=True)
        self.assertEqual(len(generate_events(peas)), 5)

    def test_item_without_terminal_date_has_no_events(self):
        self.assertEqual(generate_events(FoodItem("r", "Rice")), [])
        self.assertEqual(generate_events(FoodItem("f", "Fish", is_frozen=True)), [])

    def test_time_component_does_not_shift_days(self):
        late = FoodItem("m", "Milk", datetime(2024, 6, 10, 23, 45))
        self.assertEqual(generate_events(late)[-1].date, date(2024, 6, 10))

    def test_event_spans_whole_day(self):
        event = generate_events(FoodItem("m", "Milk", date(2024, 6, 10)))[-1]
        self.assertEqual(event.start, datetime(2024, 6, 10, 0, 0))
        self.assertEqual(event.end.date(), date(2024, 6, 10))
        self.assertEqual((event.end.hour, event.end.minute), (23, 59))
