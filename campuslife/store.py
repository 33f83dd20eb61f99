"""
In-memory store for campus events.

The store owns the session's list of CampusEvent records:

    directory listing  -> filter(category, search)
    calendar panel     -> on_day(day)
    join button        -> toggle_join(event_id)
    create form        -> create_event(...) + add(event)

Records are frozen. Every change goes through an explicit update-by-id that
replaces the record inside the owning list. Nothing is written to disk:
created events live until the process exits.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Iterable, Optional

from campuslife.model import CampusCategory, CampusEvent

DEFAULT_LOCATION = "Custom location"
CREATED_TIME_LABEL = "See details"


class EventStore:
    def __init__(self, events: Iterable[CampusEvent] = ()) -> None:
        self._events: list[CampusEvent] = list(events)

    def __len__(self) -> int:
        return len(self._events)

    def all(self) -> list[CampusEvent]:
        return list(self._events)

    def _index_of(self, event_id: str) -> int:
        for i, ev in enumerate(self._events):
            if ev.event_id == event_id:
                return i
        # Ids always come from records handed out by this store
        raise KeyError(f"Unknown event id: {event_id!r}")

    def get(self, event_id: str) -> CampusEvent:
        return self._events[self._index_of(event_id)]

    def update(self, event: CampusEvent) -> CampusEvent:
        """
        Replace the stored record that has the same event_id.
        """
        self._events[self._index_of(event.event_id)] = event
        return event

    def add(self, event: CampusEvent) -> CampusEvent:
        self._events.append(event)
        return event

    def toggle_join(self, event_id: str) -> CampusEvent:
        """
        Join or leave an event. Leaving never drops the count below zero.
        """
        ev = self.get(event_id)
        if ev.is_joined:
            updated = replace(ev, is_joined=False, joined_count=max(0, ev.joined_count - 1))
        else:
            updated = replace(ev, is_joined=True, joined_count=ev.joined_count + 1)
        return self.update(updated)

    def filter(self, category: CampusCategory, search: str = "") -> list[CampusEvent]:
        """
        Events of one category, optionally narrowed by a case-insensitive
        substring match on title, location or description.
        """
        query = (search or "").strip().lower()
        out: list[CampusEvent] = []
        for ev in self._events:
            if ev.category != category:
                continue
            if query:
                hay = f"{ev.title}\n{ev.location}\n{ev.description}".lower()
                if query not in hay:
                    continue
            out.append(ev)
        return out

    def on_day(self, day: date) -> list[CampusEvent]:
        return [ev for ev in self._events if ev.date == day]


def create_event(
    title: str,
    today: date,
    center: tuple[float, float],
    location: str = "",
    category: CampusCategory = CampusCategory.FOOD,
    price_text: str = "",
    tags_text: str = "",
    description: str = "",
) -> CampusEvent:
    """
    Build a student-created event from the create form fields.

    Raises ValueError when the title is empty after trimming
    (the form's Save button stays disabled in that case).
    """
    clean_title = (title or "").strip()
    if not clean_title:
        raise ValueError("Event title must not be empty")

    clean_location = (location or "").strip()
    tags = [t.strip() for t in (tags_text or "").split(",") if t.strip()]
    price: Optional[str] = price_text if price_text else None

    return CampusEvent(
        title=clean_title,
        date=today,
        time_label=CREATED_TIME_LABEL,
        location=clean_location or DEFAULT_LOCATION,
        description=description,
        is_official=False,
        latitude=center[0],
        longitude=center[1],
        joined_count=0,
        is_joined=False,
        category=category,
        tags=tags,
        price_text=price,
    )


def short_title(title: str) -> str:
    """
    Label for a map pin: titles longer than 14 characters are cut to 12 + '…'.
    """
    if len(title) <= 14:
        return title
    return title[:12] + "…"
