"""
Tests for the interactive session.

The prompt is replaced by a scripted list of answers and the rich console
writes into a buffer, so every flow runs without a terminal.
"""

import io
import unittest
from datetime import date
from unittest import mock

from rich.console import Console

from campuslife import interactive
from campuslife.model import CampusCategory, CampusEvent, LectureSlot
from campuslife.session import new_session


class TestInteractive(unittest.TestCase):
    def setUp(self) -> None:
        self.session = new_session(date(2025, 3, 15))
        self.out = io.StringIO()
        patcher = mock.patch.object(interactive, "console", Console(file=self.out, width=160))
        patcher.start()
        self.addCleanup(patcher.stop)

    def _run(self, answers: list[str]) -> str:
        with mock.patch.object(interactive, "_prompt", side_effect=answers):
            interactive.run_interactive(self.session)
        return self.out.getvalue()

    def test_exit_renders_day_view(self) -> None:
        out = self._run(["0"])
        self.assertIn("Today, March 15", out)
        self.assertIn("Bye.", out)

    def test_next_month_resets_selection(self) -> None:
        out = self._run(["5", "0"])
        self.assertEqual(self.session.mode, "month")
        self.assertEqual((self.session.displayed_month.year, self.session.displayed_month.month), (2025, 4))
        self.assertEqual(self.session.selected_date, date(2025, 4, 1))
        self.assertIn("April 2025", out)

    def test_pick_date_then_month_view(self) -> None:
        self._run(["6", "2025-05-20", "3", "0"])
        self.assertEqual(self.session.selected_date, date(2025, 5, 20))
        self.assertEqual(self.session.displayed_month, date(2025, 5, 20))

    def test_invalid_date_keeps_selection(self) -> None:
        out = self._run(["6", "someday", "0"])
        self.assertIn("Invalid date.", out)
        self.assertEqual(self.session.selected_date, date(2025, 3, 15))

    def test_join_event_from_directory(self) -> None:
        # category blank (Food), search blank, join #1, back, exit
        self._run(["7", "", "", "1", "", "0"])
        pizza = next(ev for ev in self.session.circle.all() if ev.title == "Pizza Night")
        self.assertTrue(pizza.is_joined)
        self.assertEqual(pizza.joined_count, 4)

    def test_create_event(self) -> None:
        self._run(["8", "Chess Club", "Library", "3", "", "chess, games", "Weekly games", "0"])
        created = self.session.circle.filter(CampusCategory.STUDY, "chess")
        self.assertEqual(len(created), 1)
        self.assertEqual(created[0].tags, ["chess", "games"])
        self.assertEqual(created[0].location, "Library")

    def test_create_event_without_title_is_cancelled(self) -> None:
        before = len(self.session.circle)
        out = self._run(["8", "   ", "0"])
        self.assertIn("Cancelled", out)
        self.assertEqual(len(self.session.circle), before)

    def test_tick_mission(self) -> None:
        self._run(["9", "1", "x", "", "0"])
        self.assertEqual(self.session.points, 40)

    def test_markup_in_titles_is_printed_literally(self) -> None:
        self.session.lectures = [LectureSlot("[bold]Lab[/bold]", "09:00", "10:00", "Room [red]1[/red]")]
        self.session.calendar_events.add(
            CampusEvent(
                title="[green]Quiz[/green]",
                date=date(2025, 3, 15),
                time_label="12:00",
                location="Hall",
                description="",
                is_official=False,
            )
        )
        self.session.calendar_events.add(
            CampusEvent(
                title="[blue]Fri[/blue]",
                date=date(2025, 3, 14),
                time_label="12:00",
                location="Hall",
                description="",
                is_official=True,
            )
        )
        out = self._run(["2", "3", "0"])
        # day table and month panel both keep the brackets
        self.assertGreaterEqual(out.count("[bold]Lab[/bold]"), 2)
        self.assertIn("Room [red]1[/red]", out)
        self.assertIn("[green]Quiz[/green]", out)
        # week grid (Fri 14)
        self.assertIn("[blue]Fri[/blue]", out)

    def test_accept_friend_request(self) -> None:
        out = self._run(["10", "a 1", "", "0"])
        self.assertIn("You and Lea M. are now friends.", out)
        self.assertEqual(len(self.session.requests), 3)
        self.assertEqual(self.session.friends[-1].name, "Lea M.")
        self.assertEqual(self.session.friends[-1].last_seen, "Online")

    def test_decline_friend_request(self) -> None:
        out = self._run(["10", "d 2", "x 1", "", "0"])
        self.assertIn("Declined: Tariq H.", out)
        self.assertIn("Invalid choice.", out)
        self.assertEqual([r.name for r in self.session.requests], ["Lea M.", "Marta S.", "Yusuf A."])
        self.assertEqual(len(self.session.friends), 10)

    def test_connect_buddy_up_and_withdraw(self) -> None:
        # interest 4 = Music, buddy up with #1, then withdraw again
        out = self._run(["11", "4", "1", "", "11", "", "1", "", "0"])
        self.assertEqual(self.session.interest, "Music")
        self.assertIn("People into Music", out)
        self.assertIn("Open Mic & Music Jam", out)
        self.assertIn("Request sent to Sara A.", out)
        self.assertIn("Withdrawn: Sara A.", out)
        self.assertEqual(self.session.pending, frozenset())

if __name__ == "__main__":
    unittest.main()
