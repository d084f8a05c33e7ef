from datetime import date, datetime
import unittest
from tossit.domain.CalendarEvent import ViewKind, ViewWindow, Zone
from tossit.domain.FoodItem import FoodItem
from tossit.events.Event_Bus import GLOBAL_EVENT_BUS, CALENDAR_ITEM_SELECTED
from tossit.logic.calendar.dates import drill_down, shift_window, visible_dates
from tossit.logic.calendar.render import build, legend, select_event

MONDAY = 0


class TestBuild(unittest.TestCase):

    def setUp(self):
        self.milk = FoodItem("milk", "Milk", date(2024, 6, 10))
        self.cheese = FoodItem("cheese", "Cheese", date(2024, 6, 12))
        self.chicken = FoodItem("chk", "Frozen Chicken", date(2024, 5, 1), is_frozen=True, thaw_date=date(2024, 6, 10))
        self.rice = FoodItem("rice", "Rice")
        self.items = [self.cheese, self.rice, self.milk, self.chicken]

    def test_month_view_is_unclipped_without_pixel_hints(self):
        model = build(self.items, ViewWindow(ViewKind.MONTH, date(2024, 6, 1)), date(2024, 6, 10), 7)
        self.assertEqual(len(model.events), 11)
        self.assertTrue(all(e.top_px is None for e in model.events))
        self.assertEqual(model.rows, ())
        self.assertEqual(len(model.visible_dates), 30)

    def test_month_day_cells_union_all_zones(self):
        model = build(self.items, ViewWindow(ViewKind.MONTH, date(2024, 6, 1)), date(2024, 6, 10), 7)
        self.assertEqual(model.day_zones[date(2024, 6, 10)], frozenset({Zone.EXPIRED, Zone.FREEZE, Zone.THAW}))
        self.assertEqual(model.day_zones[date(2024, 6, 6)], frozenset({Zone.SOON}))
        self.assertEqual(model.to_dict()["day_zones"]["2024-06-10"], ["freeze", "expired", "thaw"])

    def test_day_view_stacks_by_row(self):
        model = build(self.items, ViewWindow(ViewKind.DAY, date(2024, 6, 10)), date(2024, 6, 10), 7, row_height=50)
        on_day = model.events_on(date(2024, 6, 10))
        self.assertEqual([(e.item_id, e.zone, e.row_index, e.top_px) for e in on_day], [
            ("milk", Zone.EXPIRED, 0, 0),
            ("chk", Zone.THAW, 1, 50),
            ("cheese", Zone.FREEZE, 2, 100),
        ])

    def test_past_due_item_still_visible_in_day_but_not_week(self):
        today = date(2024, 6, 11)
        day = build([self.milk], ViewWindow(ViewKind.DAY, date(2024, 6, 10)), today, 7)
        self.assertEqual([e.zone for e in day.events_on(date(2024, 6, 10))], [Zone.EXPIRED])
        week = build([self.milk], ViewWindow(ViewKind.WEEK, date(2024, 6, 10), MONDAY), today, 7)
        self.assertEqual(week.events, ())
        self.assertEqual(week.rows, ())

    def test_same_row_index_across_views(self):
        today = date(2024, 6, 8)
        month = build(self.items, ViewWindow(ViewKind.MONTH, today), today, 7)
        week = build(self.items, ViewWindow(ViewKind.WEEK, today, MONDAY), today, 7)
        month_rows = {e.item_id: e.row_index for e in month.events}
        week_rows = {e.item_id: e.row_index for e in week.events}
        for item_id, row in week_rows.items():
            self.assertEqual(month_rows[item_id], row)

    def test_build_is_idempotent(self):
        window = ViewWindow(ViewKind.WEEK, date(2024, 6, 10))
        first = build(self.items, window, date(2024, 6, 9), 7)
        second = build(self.items, window, date(2024, 6, 9), 7)
        self.assertEqual(first.to_dict(), second.to_dict())
        self.assertEqual(first.events, second.events)

    def test_statuses_use_reminder_window(self):
        model = build(self.items, ViewWindow(ViewKind.MONTH, date(2024, 6, 1)), date(2024, 6, 10), 1)
        self.assertEqual(model.statuses, {
            "cheese": Zone.FRESH, "rice": Zone.FRESH, "milk": Zone.SOON, "chk": Zone.FRESH,
        })

    def test_untracked_items_never_blank_the_calendar(self):
        broken = FoodItem.from_dict({"id": "bad", "name": "Bad", "best_by_date": "not a date"})
        model = build([broken, self.milk], ViewWindow(ViewKind.MONTH, date(2024, 6, 1)), date(2024, 6, 1), 7)
        self.assertEqual({e.item_id for e in model.events}, {"milk"})

    def test_legend(self):
        self.assertEqual([z["zone"] for z in legend()], ["soon", "freeze", "expired", "thaw"])
        self.assertEqual(legend()[2]["color"], "#ef4444")


class TestNavigation(unittest.TestCase):

    def test_shift_window_steps_per_view(self):
        ref = date(2024, 6, 10)
        self.assertEqual(shift_window(ViewWindow(ViewKind.MONTH, ref), 1).reference_date, date(2024, 7, 10))
        self.assertEqual(shift_window(ViewWindow(ViewKind.WEEK, ref), -1).reference_date, date(2024, 6, 3))
        self.assertEqual(shift_window(ViewWindow(ViewKind.DAY, ref), 2).reference_date, date(2024, 6, 12))

    def test_drill_down_from_month_opens_day(self):
        window = drill_down(ViewWindow(ViewKind.MONTH, date(2024, 6, 1)), date(2024, 6, 14))
        self.assertEqual((window.kind, window.reference_date), (ViewKind.DAY, date(2024, 6, 14)))
        self.assertEqual(visible_dates(window), [date(2024, 6, 14)])

    def test_drill_down_elsewhere_is_unchanged(self):
        week = ViewWindow(ViewKind.WEEK, date(2024, 6, 1))
        self.assertIs(drill_down(week, date(2024, 6, 3)), week)

    def test_unknown_view_kind(self):
        with self.assertRaises(ValueError):
            ViewKind.parse("year")


class TestSelectEvent(unittest.TestCase):

    def setUp(self):
        self.received = []
        listener = lambda name, payload: self.received.append(payload)
        GLOBAL_EVENT_BUS.subscribe(CALENDAR_ITEM_SELECTED, listener)
        self.addCleanup(GLOBAL_EVENT_BUS.unsubscribe, CALENDAR_ITEM_SELECTED, listener)

    def test_click_dispatches_item_to_navigation(self):
        milk = FoodItem("milk", "Milk", date(2024, 6, 10))
        model = build([milk], ViewWindow(ViewKind.MONTH, date(2024, 6, 1)), date(2024, 6, 1), 7)
        item = select_event([milk], model.events[0])
        self.assertIs(item, milk)
        self.assertEqual(len(self.received), 1)
        self.assertEqual(self.received[0]["route"], "/item/milk")

    def test_empty_cell_dispatches_nothing(self):
        self.assertIsNone(select_event([], None))
        self.assertEqual(self.received, [])


class TestDuplicateIds(unittest.TestCase):
    today = date(2024, 6, 3)

    def _views(self, items, reminder=7):
        month = build(items, ViewWindow(ViewKind.MONTH, self.today), self.today, reminder)
        week = build(items, ViewWindow(ViewKind.WEEK, self.today, MONDAY), self.today, reminder)
        return month, week

    def test_undated_first_copy_does_not_hide_dated_one(self):
        items = [FoodItem("x", "Undated"), FoodItem("x", "Milk", date(2024, 6, 10))]
        month, week = self._views(items)
        self.assertEqual(len(month.events), 5)
        self.assertEqual({e.label for e in month.events}, {"Milk"})
        self.assertEqual([(r.item_id, r.label) for r in week.rows], [("x", "Milk")])
        self.assertEqual(len(week.events), 4)
        self.assertEqual(month.statuses, {"x": Zone.SOON})

    def test_first_dated_copy_wins_in_every_view(self):
        items = [FoodItem("x", "First", date(2024, 6, 6)), FoodItem("x", "Second", date(2024, 6, 8))]
        month, week = self._views(items, reminder=4)
        self.assertEqual(len(month.events), 5)
        self.assertEqual({e.label for e in month.events}, {"First"})
        self.assertEqual({e.row_index for e in month.events}, {0})
        self.assertEqual(len(week.rows), 1)
        self.assertEqual(week.rows[0].label, "First")
        self.assertEqual(week.rows[0].cells,
                         (Zone.SOON, Zone.FREEZE, Zone.FREEZE, Zone.EXPIRED, None, None, None))
        self.assertEqual({e.label for e in week.events}, {"First"})
        self.assertEqual(month.statuses, {"x": Zone.SOON})


class TestWindowNormalization(unittest.TestCase):

    def test_datetime_reference_is_truncated_to_its_day(self):
        milk = FoodItem("milk", "Milk", date(2024, 6, 10))
        window = ViewWindow(ViewKind.DAY, datetime(2024, 6, 10, 15, 30))
        self.assertEqual(type(window.reference_date), date)
        model = build([milk], window, datetime(2024, 6, 9, 8, 0), 7)
        self.assertEqual(model.visible_dates, (date(2024, 6, 10),))
        self.assertEqual([e.zone for e in model.events_on(model.visible_dates[0])], [Zone.EXPIRED])


if __name__ == '__main__':
    unittest.main()
