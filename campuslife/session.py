"""
Session state shared by the CLI commands and the interactive menu.

A Session is built once from the demo data for a given "today" and then
changed only through its methods, one user action at a time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from campuslife import aggregator, demo, social
from campuslife.missions import leaderboard, toggle_mission, weekly_points
from campuslife.model import (
    CalendarDay,
    CampusCategory,
    CampusEvent,
    CampusStar,
    ConnectExperience,
    ConnectProfile,
    DayScheduleItem,
    Friend,
    FriendRequest,
    LectureSlot,
    Mission,
    WeekBlock,
)
from campuslife.store import EventStore, create_event

MODES = ("day", "week", "month")


@dataclass
class Session:
    today: date
    lectures: list[LectureSlot]
    calendar_events: EventStore
    circle: EventStore
    missions: list[Mission]
    stars: list[CampusStar]
    friends: list[Friend] = field(default_factory=list)
    requests: list[FriendRequest] = field(default_factory=list)
    connections: list[ConnectProfile] = field(default_factory=list)
    experiences: list[ConnectExperience] = field(default_factory=list)
    mode: str = "day"
    displayed_month: Optional[date] = None
    selected_date: Optional[date] = None
    category: CampusCategory = CampusCategory.FOOD
    search: str = ""
    center: tuple[float, float] = demo.MAP_CENTER
    interest: str = social.DEFAULT_INTEREST
    pending: frozenset = frozenset()

    def __post_init__(self) -> None:
        if self.selected_date is None:
            self.selected_date = self.today
        if self.displayed_month is None:
            self.displayed_month = self.selected_date

    # -- navigation ---------------------------------------------------------

    def set_mode(self, mode: str) -> None:
        if mode not in MODES:
            raise ValueError(f"Unknown mode: {mode!r}")
        self.mode = mode
        if mode == "month":
            self.displayed_month = self.selected_date

    def select_date(self, day: date) -> None:
        self.selected_date = day
        self.displayed_month = day

    def change_month(self, delta: int) -> None:
        self.displayed_month, self.selected_date = aggregator.change_month(
            self.displayed_month, delta, self.selected_date
        )

    # -- calendar views -----------------------------------------------------

    @property
    def week_start(self) -> date:
        return aggregator.week_start(self.selected_date)

    def grid(self) -> list[CalendarDay]:
        return aggregator.month_grid(self.displayed_month, self.today)

    def day_items(self, day: Optional[date] = None) -> list[DayScheduleItem]:
        return aggregator.items_for_day(
            day or self.selected_date, self.today, self.lectures, self.calendar_events.all()
        )

    def selected_day_events(self) -> list[CampusEvent]:
        return self.calendar_events.on_day(self.selected_date)

    def week_blocks(self) -> list[WeekBlock]:
        return aggregator.week_blocks(self.week_start, self.today, self.lectures, self.calendar_events.all())

    # -- campus circle ------------------------------------------------------

    def filtered_events(self) -> list[CampusEvent]:
        return self.circle.filter(self.category, self.search)

    def toggle_join(self, event_id: str) -> CampusEvent:
        return self.circle.toggle_join(event_id)

    def create_event(self, title: str, **form: str) -> CampusEvent:
        category = CampusCategory.from_text(form.pop("category", self.category.value))
        event = create_event(title, today=self.today, center=self.center, category=category, **form)
        return self.circle.add(event)

    # -- missions -----------------------------------------------------------

    def toggle_mission(self, mission_id: str) -> None:
        self.missions = toggle_mission(self.missions, mission_id)

    @property
    def points(self) -> int:
        return weekly_points(self.missions)

    def ranking(self) -> list[CampusStar]:
        return leaderboard(self.stars)

    # -- friends and Connect -----------------------------------------------

    def accept_request(self, request_id: str) -> Friend:
        self.requests, self.friends = social.accept_request(self.requests, self.friends, request_id)
        return self.friends[-1]

    def decline_request(self, request_id: str) -> None:
        self.requests = social.decline_request(self.requests, request_id)

    def set_interest(self, text: str) -> None:
        self.interest = social.resolve_interest(text)

    def filtered_connections(self) -> list[ConnectProfile]:
        return social.connections_for(self.interest, self.connections)

    def filtered_experiences(self) -> list[ConnectExperience]:
        return social.experiences_for(self.interest, self.experiences)

    def toggle_buddy(self, profile_id: str) -> bool:
        """
        Flip the "Buddy up" state of one profile. Returns True when now pending.
        """
        self.pending = social.toggle_buddy(self.pending, profile_id)
        return profile_id in self.pending


def new_session(today: date) -> Session:
    return Session(
        today=today,
        lectures=demo.lectures(),
        calendar_events=EventStore(demo.calendar_events(today)),
        circle=EventStore(demo.campus_circle_events(today)),
        missions=demo.missions(),
        stars=demo.stars(),
        friends=demo.friends(),
        requests=demo.friend_requests(),
        connections=demo.connections(),
        experiences=demo.experiences(),
    )
