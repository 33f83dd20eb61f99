"""
Unit tests for the in-memory event store.

Store contract:
- records are replaced by id, never mutated in place
- join/leave adjusts joined_count (never below zero)
- unknown ids are programming errors -> KeyError
"""

import unittest
from datetime import date

from campuslife import demo
from campuslife.model import CampusCategory, CampusEvent
from campuslife.store import EventStore, create_event, short_title

TODAY = date(2025, 3, 3)


class TestEventStore(unittest.TestCase):
    def setUp(self) -> None:
        self.store = EventStore(demo.campus_circle_events(TODAY))

    def _by_title(self, title: str) -> CampusEvent:
        return next(ev for ev in self.store.all() if ev.title == title)

    def test_toggle_join_roundtrip(self) -> None:
        pizza = self._by_title("Pizza Night")
        joined = self.store.toggle_join(pizza.event_id)
        self.assertTrue(joined.is_joined)
        self.assertEqual(joined.joined_count, 4)
        self.assertEqual(self.store.get(pizza.event_id), joined)

        # original record is untouched
        self.assertFalse(pizza.is_joined)
        self.assertEqual(pizza.joined_count, 3)

        left = self.store.toggle_join(pizza.event_id)
        self.assertFalse(left.is_joined)
        self.assertEqual(left.joined_count, 3)

    def test_leave_never_goes_below_zero(self) -> None:
        ev = CampusEvent(
            title="Odd",
            date=TODAY,
            time_label="12:00",
            location="x",
            description="",
            is_official=False,
            joined_count=0,
            is_joined=True,
        )
        store = EventStore([ev])
        self.assertEqual(store.toggle_join(ev.event_id).joined_count, 0)

    def test_unknown_id_raises(self) -> None:
        with self.assertRaises(KeyError):
            self.store.get("does-not-exist")
        with self.assertRaises(KeyError):
            self.store.toggle_join("does-not-exist")

    def test_ids_are_unique(self) -> None:
        ids = [ev.event_id for ev in self.store.all()]
        self.assertEqual(len(ids), len(set(ids)))

    def test_filter_by_category(self) -> None:
        sports = self.store.filter(CampusCategory.SPORTS)
        self.assertEqual([ev.title for ev in sports], ["Volleyball Meet", "Football Match"])

    def test_filter_search_is_case_insensitive(self) -> None:
        self.assertEqual([ev.title for ev in self.store.filter(CampusCategory.SOCIAL, "KARAOKE")], ["Karaoke Night"])
        # location and description are searched too
        self.assertEqual([ev.title for ev in self.store.filter(CampusCategory.SOCIAL, "audimax")], ["Movie Games Night"])
        self.assertEqual([ev.title for ev in self.store.filter(CampusCategory.FOOD, "vegan")], ["Pizza Night"])

    def test_blank_search_matches_all(self) -> None:
        self.assertEqual(len(self.store.filter(CampusCategory.FOOD, "   ")), 2)
        self.assertEqual(self.store.filter(CampusCategory.FOOD, "nothing like this"), [])

    def test_on_day(self) -> None:
        store = EventStore(demo.calendar_events(TODAY))
        self.assertEqual(len(store.on_day(TODAY)), 2)
        self.assertEqual(len(store.on_day(date(2025, 3, 4))), 1)
        self.assertEqual(store.on_day(date(2025, 3, 10)), [])


class TestCreateEvent(unittest.TestCase):
    def test_defaults(self) -> None:
        ev = create_event("  Chess Club  ", today=TODAY, center=demo.MAP_CENTER, tags_text="chess, , games ")
        self.assertEqual(ev.title, "Chess Club")
        self.assertEqual(ev.location, "Custom location")
        self.assertEqual(ev.time_label, "See details")
        self.assertEqual(ev.date, TODAY)
        self.assertFalse(ev.is_official)
        self.assertEqual(ev.joined_count, 0)
        self.assertEqual(ev.tags, ["chess", "games"])
        self.assertIsNone(ev.price_text)
        self.assertEqual((ev.latitude, ev.longitude), demo.MAP_CENTER)
        self.assertEqual(ev.category, CampusCategory.FOOD)

    def test_empty_title_rejected(self) -> None:
        with self.assertRaises(ValueError):
            create_event("   ", today=TODAY, center=demo.MAP_CENTER)

    def test_added_event_is_listed(self) -> None:
        store = EventStore()
        ev = store.add(
            create_event("Sketch Jam", today=TODAY, center=(1.0, 2.0), location="Studio",
                         category=CampusCategory.CREATIVITY, price_text="Free")
        )
        self.assertEqual(store.filter(CampusCategory.CREATIVITY), [ev])
        self.assertEqual(ev.price_text, "Free")
        self.assertEqual(len(store), 1)


class TestShortTitle(unittest.TestCase):
    def test_short_title(self) -> None:
        self.assertEqual(short_title("Pizza Night"), "Pizza Night")
        self.assertEqual(short_title("Exactly 14 chr"), "Exactly 14 chr")
        self.assertEqual(short_title("Photography Walk"), "Photography …")


if __name__ == "__main__":
    unittest.main()
