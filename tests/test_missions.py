import unittest

from campuslife import demo
from campuslife.missions import leaderboard, toggle_mission, weekly_points
from campuslife.model import CampusStar


class TestMissions(unittest.TestCase):
    def test_toggle_and_points(self) -> None:
        missions = demo.missions()
        self.assertEqual(weekly_points(missions), 0)

        ticked = toggle_mission(missions, missions[0].mission_id)
        ticked = toggle_mission(ticked, missions[3].mission_id)
        self.assertEqual(weekly_points(ticked), 40 + 45)
        # the input list is left alone
        self.assertFalse(missions[0].done)

        unticked = toggle_mission(ticked, missions[0].mission_id)
        self.assertEqual(weekly_points(unticked), 45)

    def test_unknown_mission_raises(self) -> None:
        with self.assertRaises(KeyError):
            toggle_mission(demo.missions(), "nope")

    def test_leaderboard_reranks(self) -> None:
        stars = [
            CampusStar(name="Iva", points=230, rank=3),
            CampusStar(name="Myra", points=320, rank=1),
            CampusStar(name="You", points=300, rank=0),
        ]
        ranked = leaderboard(stars)
        self.assertEqual([(s.rank, s.name) for s in ranked], [(1, "Myra"), (2, "You"), (3, "Iva")])


if __name__ == "__main__":
    unittest.main()
