"""
Calendar aggregation (the core of the calendar screens).

Pure date arithmetic and list merging:
- month grid for the month card (Monday-first, padded with adjacent-month days)
- merged lecture + event items for one selected day
- Monday week start, week day chips and hour blocks for the week grid
- month navigation with selection reset

Nothing here reads the clock: "today" is always passed in by the caller.
"""

from __future__ import annotations

import calendar
import re
from datetime import MAXYEAR, MINYEAR, date, timedelta
from typing import Iterable, Optional, Sequence

from campuslife.model import (
    CalendarDay,
    CampusEvent,
    DayScheduleItem,
    LectureSlot,
    SourceKind,
    WeekBlock,
)

FIRST_HOUR = 8
LAST_HOUR = 20
VISIBLE_DAYS = 5  # Mon–Fri

WEEKDAY_LABELS = ["M", "T", "W", "T", "F", "S", "S"]

_TIME_RE = re.compile(r"(\d{1,2}):(\d{2})")


# ---------------------------------------------------------------------------
# Date arithmetic helpers
# ---------------------------------------------------------------------------


def _shift_days(day: date, n: int) -> date:
    """
    Add n days. Falls back to the input date if the result is not representable.
    """
    try:
        return day + timedelta(days=n)
    except OverflowError:
        return day


def add_months(day: date, delta: int) -> date:
    """
    Add `delta` calendar months, clamping the day to the target month's length
    (Jan 31 + 1 month = Feb 28/29). Returns `day` unchanged if out of range.
    """
    month_index = day.year * 12 + (day.month - 1) + delta
    year, month0 = divmod(month_index, 12)
    if not (MINYEAR <= year <= MAXYEAR):
        return day
    last = calendar.monthrange(year, month0 + 1)[1]
    return date(year, month0 + 1, min(day.day, last))


def _same_month(a: date, b: date) -> bool:
    return (a.year, a.month) == (b.year, b.month)


# ---------------------------------------------------------------------------
# Month grid
# ---------------------------------------------------------------------------


def month_grid(reference_date: date, today: date) -> list[CalendarDay]:
    """
    Build the day cells for the month containing `reference_date`.

    Leading cells come from the end of the previous month, trailing cells from
    the start of the next month. The result has a multiple of 7 cells, except at
    the edges of the date range, where padding stops at date.min / date.max
    rather than repeating a day.
    """
    first = reference_date.replace(day=1)
    days_in_month = calendar.monthrange(first.year, first.month)[1]

    # weekday index Sunday=1..Saturday=7, remapped to Monday-first columns
    weekday_index = first.isoweekday() % 7 + 1
    leading = (weekday_index + 5) % 7

    days: list[CalendarDay] = []

    for back in range(leading, 0, -1):
        try:
            d = first - timedelta(days=back)
        except OverflowError:
            continue
        days.append(CalendarDay(date=d, in_displayed_month=False, is_today=d == today))

    for n in range(days_in_month):
        d = first.replace(day=n + 1)
        days.append(CalendarDay(date=d, in_displayed_month=True, is_today=d == today))

    # Trailing cells to fill the last row
    remainder = len(days) % 7
    if remainder:
        last = first.replace(day=days_in_month)
        for n in range(1, 7 - remainder + 1):
            try:
                d = last + timedelta(days=n)
            except OverflowError:
                break
            days.append(CalendarDay(date=d, in_displayed_month=False, is_today=d == today))

    return days


# ---------------------------------------------------------------------------
# Day items
# ---------------------------------------------------------------------------


def events_on(day: date, events: Iterable[CampusEvent]) -> list[CampusEvent]:
    return [ev for ev in events if ev.date == day]


def has_events(day: date, events: Iterable[CampusEvent]) -> bool:
    return any(ev.date == day for ev in events)


def items_for_day(
    selected_date: date,
    today: date,
    lectures: Sequence[LectureSlot],
    events: Sequence[CampusEvent],
) -> list[DayScheduleItem]:
    """
    Merge lectures and events of one calendar day into display items.

    Lectures are only included when the selected date is today.
    Items are sorted by their raw time label (plain string comparison, so
    "18:00" sorts before "9:00"); ties keep lectures before events.
    """
    items: list[DayScheduleItem] = []

    if selected_date == today:
        for lec in lectures:
            items.append(
                DayScheduleItem(
                    title=lec.title,
                    time_label=f"{lec.start} – {lec.end}",
                    location=lec.location,
                    subtitle="Lecture",
                    source_kind=SourceKind.LECTURE,
                )
            )

    for ev in events_on(selected_date, events):
        items.append(
            DayScheduleItem(
                title=ev.title,
                time_label=ev.time_label,
                location=ev.location,
                subtitle=ev.description,
                source_kind=SourceKind.OFFICIAL_EVENT if ev.is_official else SourceKind.STUDENT_EVENT,
            )
        )

    return sorted(items, key=lambda item: item.time_label)


# ---------------------------------------------------------------------------
# Week
# ---------------------------------------------------------------------------


def week_start(selected_date: date) -> date:
    """
    Monday of the ISO week containing `selected_date`.
    """
    iso = selected_date.isocalendar()
    try:
        return date.fromisocalendar(iso[0], iso[1], 1)
    except ValueError:
        return selected_date


def week_days(start: date, count: int = VISIBLE_DAYS) -> list[date]:
    return [_shift_days(start, i) for i in range(count)]


def parse_time_span(label: str) -> Optional[tuple[int, Optional[int]]]:
    """
    Read '<start>[ – <end>]' times out of a free-text label.

    Returns (start_minutes, end_minutes or None), or None if the label holds
    no valid HH:MM time (e.g. "See details").
    """
    minutes: list[int] = []
    for hh, mm in _TIME_RE.findall(label or ""):
        h, m = int(hh), int(mm)
        if not (0 <= h <= 23 and 0 <= m <= 59):
            return None
        minutes.append(h * 60 + m)
        if len(minutes) == 2:
            break

    if not minutes:
        return None
    end = minutes[1] if len(minutes) > 1 else None
    return minutes[0], end


def week_blocks(
    start: date,
    today: date,
    lectures: Sequence[LectureSlot],
    events: Sequence[CampusEvent],
) -> list[WeekBlock]:
    """
    Place every Mon–Fri schedule item with a readable start time into hour blocks.
    """
    blocks: list[WeekBlock] = []
    for offset, day in enumerate(week_days(start)):
        for item in items_for_day(day, today, lectures, events):
            span = parse_time_span(item.time_label)
            if span is None:
                continue
            start_min, end_min = span
            start_hour = start_min // 60
            if end_min is not None and end_min > start_min:
                end_hour = -(-end_min // 60)  # round up to the full hour
            else:
                end_hour = start_hour + 1
            blocks.append(
                WeekBlock(
                    day_offset=offset,
                    start_hour=start_hour,
                    end_hour=max(end_hour, start_hour + 1),
                    title=item.title,
                    subtitle=f"{item.time_label} · {item.location}",
                    source_kind=item.source_kind,
                )
            )
    return blocks


def block_at(blocks: Iterable[WeekBlock], day_offset: int, hour: int) -> Optional[WeekBlock]:
    """
    The block shown in a grid cell: starts in that hour, longest one wins.
    """
    candidates = [b for b in blocks if b.day_offset == day_offset and b.start_hour == hour]
    candidates.sort(key=lambda b: b.end_hour, reverse=True)
    return candidates[0] if candidates else None


# ---------------------------------------------------------------------------
# Month navigation
# ---------------------------------------------------------------------------


def change_month(displayed_month: date, delta: int, selected_date: date) -> tuple[date, date]:
    """
    Move the displayed month by `delta` months.

    Returns (new_displayed_month, new_selected_date). The selection resets to
    the first day of the new month when it is no longer inside it.
    """
    new_month = add_months(displayed_month, delta)
    if not _same_month(selected_date, new_month):
        selected_date = new_month.replace(day=1)
    return new_month, selected_date


# ---------------------------------------------------------------------------
# Titles
# ---------------------------------------------------------------------------


def month_title(displayed_month: date) -> str:
    return f"{calendar.month_name[displayed_month.month]} {displayed_month.year}"


def week_range_title(start: date) -> str:
    end = _shift_days(start, VISIBLE_DAYS - 1)
    return f"{start:%b} {start.day} – {end:%b} {end.day} {start.year}"


def day_header_title(selected_date: date, today: date) -> str:
    day_text = f"{calendar.month_name[selected_date.month]} {selected_date.day}"
    if selected_date == today:
        return f"Today, {day_text}"
    return f"{calendar.day_name[selected_date.weekday()]}, {day_text}"


def day_summary(count: int) -> str:
    if count == 0:
        return "No events or lectures yet."
    if count == 1:
        return "1 item on this day."
    return f"{count} items on this day."
