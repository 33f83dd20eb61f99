import unittest
from datetime import date

from campuslife import demo
from campuslife.model import CampusCategory
from campuslife.session import new_session


class TestSession(unittest.TestCase):
    def test_defaults_follow_today(self) -> None:
        s = new_session(date(2025, 3, 3))
        self.assertEqual(s.selected_date, date(2025, 3, 3))
        self.assertEqual(s.displayed_month, date(2025, 3, 3))
        self.assertEqual(s.week_start, date(2025, 3, 3))
        self.assertEqual(len(s.grid()) % 7, 0)

    def test_month_mode_recenters_on_selection(self) -> None:
        s = new_session(date(2025, 3, 3))
        s.change_month(2)
        s.selected_date = date(2025, 7, 9)
        s.set_mode("month")
        self.assertEqual(s.displayed_month, date(2025, 7, 9))

    def test_unknown_mode(self) -> None:
        s = new_session(date(2025, 3, 3))
        with self.assertRaises(ValueError):
            s.set_mode("year")

    def test_selected_day_panel_reads_raw_events(self) -> None:
        s = new_session(date(2025, 3, 3))
        s.select_date(date(2025, 3, 4))
        self.assertEqual([ev.title for ev in s.selected_day_events()], ["Board Games & Pizza Night"])
        self.assertEqual(len(s.day_items()), 1)

    def test_create_event_uses_session_category_and_center(self) -> None:
        s = new_session(date(2025, 3, 3))
        s.category = CampusCategory.SPORTS
        ev = s.create_event("Morning Run", location="")
        self.assertEqual(ev.category, CampusCategory.SPORTS)
        self.assertEqual((ev.latitude, ev.longitude), demo.MAP_CENTER)
        self.assertIn(ev, s.filtered_events())

    def test_friend_request_actions(self) -> None:
        s = new_session(date(2025, 3, 3))
        friend = s.accept_request(s.requests[0].request_id)
        self.assertEqual(friend.name, "Lea M.")
        self.assertIs(s.friends[-1], friend)
        s.decline_request(s.requests[0].request_id)
        self.assertEqual([r.name for r in s.requests], ["Marta S.", "Yusuf A."])
        self.assertEqual(len(s.friends), 11)

    def test_connect_interest_and_buddy(self) -> None:
        s = new_session(date(2025, 3, 3))
        self.assertEqual(s.interest, "Study")
        s.set_interest("sports")
        self.assertTrue(all("Sports" in p.interests for p in s.filtered_connections()))
        self.assertEqual([e.title for e in s.filtered_experiences()], ["Evening Volleyball Meetup"])

        profile_id = s.filtered_connections()[0].profile_id
        self.assertTrue(s.toggle_buddy(profile_id))
        self.assertFalse(s.toggle_buddy(profile_id))
        with self.assertRaises(ValueError):
            s.set_interest("chess")
        self.assertEqual(s.interest, "Sports")


class TestDemoData(unittest.TestCase):
    def test_circle_covers_every_category(self) -> None:
        events = demo.campus_circle_events(date(2025, 3, 3))
        self.assertEqual(len(events), 13)
        self.assertEqual({ev.category for ev in events}, set(CampusCategory))

    def test_category_from_text(self) -> None:
        self.assertIs(CampusCategory.from_text("it & robotics"), CampusCategory.IT_ROBOTICS)
        self.assertIs(CampusCategory.from_text("IT_ROBOTICS"), CampusCategory.IT_ROBOTICS)
        self.assertIs(CampusCategory.from_text("Cafés"), CampusCategory.CAFES)
        with self.assertRaises(ValueError):
            CampusCategory.from_text("chess")


if __name__ == "__main__":
    unittest.main()
