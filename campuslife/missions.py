"""
Weekly missions and the campus-stars leaderboard.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from campuslife.model import CampusStar, Mission


def toggle_mission(missions: list[Mission], mission_id: str) -> list[Mission]:
    """
    Return a new list with the given mission ticked/unticked.
    Raises KeyError for an unknown mission id.
    """
    out: list[Mission] = []
    found = False
    for m in missions:
        if m.mission_id == mission_id:
            m = replace(m, done=not m.done)
            found = True
        out.append(m)
    if not found:
        raise KeyError(f"Unknown mission id: {mission_id!r}")
    return out


def weekly_points(missions: Iterable[Mission]) -> int:
    return sum(m.points for m in missions if m.done)


def leaderboard(stars: Iterable[CampusStar]) -> list[CampusStar]:
    # sorted() is stable: equal points keep their given order
    ordered = sorted(stars, key=lambda s: s.points, reverse=True)
    return [replace(s, rank=i) for i, s in enumerate(ordered, start=1)]
