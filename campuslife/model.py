"""
Central data model definitions used across the project.

This module defines the canonical structure of lectures, campus events and the
derived calendar records so that:
- the calendar core, the event store and the UI layers share the same field names
- derived records (grid days, schedule items, week blocks) stay display-ready
- friends, friend requests and Connect profiles share one identity scheme (opaque ids)
- records that change during a session are replaced, never mutated in place
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional


def _new_id() -> str:
    return uuid.uuid4().hex


class CampusCategory(str, Enum):
    FOOD = "Food"
    CAFES = "Cafés"
    STUDY = "Study"
    SPORTS = "Sports"
    SOCIAL = "Social"
    CREATIVITY = "Creativity"
    IT_ROBOTICS = "IT & Robotics"

    @property
    def section_title(self) -> str:
        return _SECTION_TITLES[self]

    @classmethod
    def from_text(cls, text: str) -> "CampusCategory":
        """
        Resolve a category from its label or enum name (case-insensitive).
        Raises ValueError for unknown input.
        """
        needle = text.strip().lower()
        for cat in cls:
            if needle in (cat.value.lower(), cat.name.lower()):
                return cat
        raise ValueError(f"Unknown category: {text!r}")


_SECTION_TITLES = {
    CampusCategory.FOOD: "Food nights & socials",
    CampusCategory.CAFES: "Cafés & hangouts",
    CampusCategory.STUDY: "Study groups & workshops",
    CampusCategory.SPORTS: "Sports meetups",
    CampusCategory.SOCIAL: "Social nights",
    CampusCategory.CREATIVITY: "Creativity & art",
    CampusCategory.IT_ROBOTICS: "IT & robotics events",
}


class SourceKind(str, Enum):
    LECTURE = "lecture"
    OFFICIAL_EVENT = "official"
    STUDENT_EVENT = "student"


@dataclass(frozen=True)
class LectureSlot:
    """
    One timetable slot. Lectures carry no date: they always count as "today".
    """

    title: str
    start: str
    end: str
    location: str


@dataclass(frozen=True)
class CampusEvent:
    """
    Represents one campus event (calendar entry or campus-circle listing).

    Only the calendar day of `date` matters for day matching.
    `time_label` is free text and is never parsed for ordering.
    """

    title: str
    date: date
    time_label: str
    location: str
    description: str
    is_official: bool
    latitude: float = 0.0
    longitude: float = 0.0
    joined_count: int = 0
    is_joined: bool = False
    category: CampusCategory = CampusCategory.SOCIAL
    tags: List[str] = field(default_factory=list)
    price_text: Optional[str] = None
    event_id: str = field(default_factory=_new_id)


@dataclass(frozen=True)
class CalendarDay:
    date: date
    in_displayed_month: bool
    is_today: bool = False


@dataclass(frozen=True)
class DayScheduleItem:
    """
    Display-ready union of a lecture and an event on one calendar day.
    """

    title: str
    time_label: str
    location: str
    subtitle: Optional[str]
    source_kind: SourceKind


@dataclass(frozen=True)
class WeekBlock:
    day_offset: int  # 0 = Mon, 1 = Tue, ...
    start_hour: int
    end_hour: int
    title: str
    subtitle: str
    source_kind: SourceKind


@dataclass(frozen=True)
class Mission:
    day: str
    title: str
    points: int
    done: bool = False
    mission_id: str = field(default_factory=_new_id)


@dataclass(frozen=True)
class CampusStar:
    name: str
    points: int
    rank: int
    emoji: str = ""


@dataclass(frozen=True)
class Friend:
    name: str
    major: str
    location: str
    last_seen: str
    friend_id: str = field(default_factory=_new_id)


@dataclass(frozen=True)
class FriendRequest:
    name: str
    major: str
    details: str
    request_id: str = field(default_factory=_new_id)


@dataclass(frozen=True)
class ConnectProfile:
    """
    A student shown in the Connect directory, matched by shared interests.
    """

    name: str
    major: str
    interests: List[str]
    distance: str
    profile_id: str = field(default_factory=_new_id)


@dataclass(frozen=True)
class ConnectExperience:
    title: str
    time_label: str
    location: str
    tag: str
    description: str
    interests: List[str]
    experience_id: str = field(default_factory=_new_id)
