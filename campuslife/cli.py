"""
CLI (Command Line Interface).

This module provides quick terminal commands for the campus calendar, e.g.:

    campuslife month [--date 2025-03-15]
    campuslife day [--date 2025-03-15]
    campuslife week [--date 2025-03-15]
    campuslife events --category sports --search football
    campuslife missions
    campuslife friends
    campuslife connect [--interest music]
    campuslife interactive

`--today YYYY-MM-DD` (before the command) pins the reference day instead of
reading the system clock.

Note:
- The interactive UI lives in campuslife/interactive.py
- This CLI is intentionally simple and prints plain text (no rich formatting)
"""

from __future__ import annotations

import argparse
from datetime import date, datetime
from typing import Optional

from campuslife import aggregator, social
from campuslife.model import CalendarDay, CampusCategory, CampusEvent, DayScheduleItem
from campuslife.session import Session, new_session
from campuslife.store import short_title


def parse_date(text: Optional[str], default: date) -> date:
    """
    Parse 'YYYY-MM-DD'. Blank input means `default`.
    Raises ValueError for anything else.
    """
    if text is None or not text.strip():
        return default
    return datetime.strptime(text.strip(), "%Y-%m-%d").date()


# ---------------------------------------------------------------------------
# Plain-text formatting
# ---------------------------------------------------------------------------


def item_line(item: DayScheduleItem) -> str:
    bits = [item.time_label, item.title, f"({item.source_kind.value})"]
    if item.location:
        bits.append(f"@ {item.location}")
    return " | ".join(b for b in bits if b)


def event_line(ev: CampusEvent) -> str:
    joined = "joined" if ev.is_joined else "join"
    bits = [ev.time_label, ev.title, f"@ {ev.location}", f"{ev.joined_count} joined [{joined}]"]
    if ev.tags:
        bits.append(", ".join(ev.tags))
    if ev.price_text:
        bits.append(ev.price_text)
    return " | ".join(bits)


def _month_cell(day: CalendarDay, selected: date, has_events: bool) -> str:
    num = f"{day.date.day:>2}"
    text = num if day.in_displayed_month else f"({num})"
    marker = ">" if day.date == selected else " "
    dot = "*" if has_events else " "
    return f"{marker}{text:^4}{dot}"


def month_lines(session: Session) -> list[str]:
    events = session.calendar_events.all()
    lines = [aggregator.month_title(session.displayed_month)]
    lines.append("".join(f" {label:^4} " for label in aggregator.WEEKDAY_LABELS))

    grid = session.grid()
    for row in range(0, len(grid), 7):
        cells = [
            _month_cell(d, session.selected_date, aggregator.has_events(d.date, events)) for d in grid[row : row + 7]
        ]
        lines.append("".join(cells))
    return lines


def day_lines(session: Session) -> list[str]:
    items = session.day_items()
    lines = [
        aggregator.day_header_title(session.selected_date, session.today),
        aggregator.day_summary(len(items)),
    ]
    lines.extend(f"- {item_line(item)}" for item in items)
    return lines


def week_lines(session: Session) -> list[str]:
    start = session.week_start
    days = aggregator.week_days(start)
    blocks = session.week_blocks()
    col_width = 24

    lines = [f"Upcoming {aggregator.week_range_title(start)}"]
    header = "      | " + " | ".join(f"{d:%a} {d.day}".ljust(col_width) for d in days)
    lines.append(header)
    lines.append("-" * len(header))

    for hour in range(aggregator.FIRST_HOUR, aggregator.LAST_HOUR + 1):
        parts = []
        for offset in range(len(days)):
            block = aggregator.block_at(blocks, offset, hour)
            txt = f"{block.title} ({block.start_hour:02d}-{block.end_hour:02d})" if block else ""
            parts.append(txt[:col_width].ljust(col_width))
        lines.append(f"{hour:02d}:00 | " + " | ".join(parts))
    return lines


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _select(args: argparse.Namespace, session: Session) -> bool:
    try:
        session.select_date(parse_date(getattr(args, "date", None), session.today))
    except ValueError:
        print(f"Invalid date: {args.date!r} (expected YYYY-MM-DD)")
        return False
    return True


def _cmd_month(args: argparse.Namespace, session: Session) -> int:
    """
    Print the month grid and the selected day's items below it.
    """
    if not _select(args, session):
        return 1
    session.set_mode("month")

    for line in month_lines(session):
        print(line)
    print()
    for line in day_lines(session):
        print(line)
    return 0


def _cmd_day(args: argparse.Namespace, session: Session) -> int:
    if not _select(args, session):
        return 1
    for line in day_lines(session):
        print(line)
    return 0


def _cmd_week(args: argparse.Namespace, session: Session) -> int:
    if not _select(args, session):
        return 1
    session.set_mode("week")
    for line in week_lines(session):
        print(line)
    return 0


def _cmd_events(args: argparse.Namespace, session: Session) -> int:
    """
    List campus-circle events of one category, optionally filtered by search text.
    """
    try:
        session.category = CampusCategory.from_text(args.category or CampusCategory.FOOD.value)
    except ValueError:
        names = ", ".join(c.value for c in CampusCategory)
        print(f"Unknown category: {args.category!r} (choose from: {names})")
        return 1
    session.search = args.search or ""

    events = session.filtered_events()
    print(session.category.section_title)
    if not events:
        print("No items for this filter yet.")
        return 0

    for ev in events:
        print(f"- [{short_title(ev.title)}] {event_line(ev)}")
    return 0


def _cmd_missions(args: argparse.Namespace, session: Session) -> int:
    print("Campus Stars")
    for star in session.ranking():
        print(f"{star.rank}. {star.emoji} {star.name} – {star.points} pts")

    print("\nWeekly missions")
    for m in session.missions:
        box = "x" if m.done else " "
        print(f"[{box}] {m.day} | {m.title} | {m.points} pts")
    print(f"\nYour points: {session.points}")
    return 0


def _cmd_friends(args: argparse.Namespace, session: Session) -> int:
    print(f"Friends ({len(session.friends)})")
    for f in session.friends:
        print(f"- {f.name} | {f.major} | {f.location} | {f.last_seen}")

    print(f"\nFriend requests ({len(session.requests)})")
    if not session.requests:
        print("No pending requests.")
    for r in session.requests:
        print(f"- {r.name} | {r.major} | {r.details}")
    return 0


def _cmd_connect(args: argparse.Namespace, session: Session) -> int:
    """
    List Connect profiles and experiences that share one interest.
    """
    try:
        session.set_interest(args.interest or social.DEFAULT_INTEREST)
    except ValueError:
        print(f"Unknown interest: {args.interest!r} (choose from: {', '.join(social.INTERESTS)})")
        return 1

    people = session.filtered_connections()
    print(f"People into {session.interest} ({len(people)})")
    for p in people:
        print(f"- {p.name} | {p.major} | {p.distance} | {', '.join(p.interests)}")

    print(f"\nExperiences for {session.interest}")
    experiences = session.filtered_experiences()
    if not experiences:
        print("No experiences for this interest yet.")
    for e in experiences:
        print(f"- {e.time_label} | {e.title} @ {e.location} | {e.tag}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="campuslife", description="Campus life calendar CLI")
    parser.add_argument("--today", type=str, default=None, help="Reference day YYYY-MM-DD (default: system date)")
    sub = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("month", "Show the month grid"),
        ("day", "Show lectures and events of one day"),
        ("week", "Show the Mon–Fri week grid"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("--date", type=str, default=None, help="Selected day YYYY-MM-DD (default: today)")

    p_events = sub.add_parser("events", help="List campus events by category")
    p_events.add_argument("--category", type=str, default=None, help="Category (e.g. Food, Sports, 'IT & Robotics')")
    p_events.add_argument("--search", type=str, default="", help="Search text (title, location, description)")

    sub.add_parser("missions", help="Show leaderboard and weekly missions")

    sub.add_parser("friends", help="List friends and pending friend requests")

    p_connect = sub.add_parser("connect", help="Students and experiences sharing an interest")
    p_connect.add_argument("--interest", type=str, default=None, help="Study, Sports, Gaming, Music or Events (default: Study)")

    sub.add_parser("interactive", help="Interactive menu mode")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        today = parse_date(args.today, date.today())
    except ValueError:
        print(f"Invalid --today: {args.today!r} (expected YYYY-MM-DD)")
        raise SystemExit(1)

    session = new_session(today)

    if args.command == "month":
        raise SystemExit(_cmd_month(args, session))
    if args.command == "day":
        raise SystemExit(_cmd_day(args, session))
    if args.command == "week":
        raise SystemExit(_cmd_week(args, session))
    if args.command == "events":
        raise SystemExit(_cmd_events(args, session))
    if args.command == "missions":
        raise SystemExit(_cmd_missions(args, session))
    if args.command == "friends":
        raise SystemExit(_cmd_friends(args, session))
    if args.command == "connect":
        raise SystemExit(_cmd_connect(args, session))

    if args.command == "interactive":
        from campuslife.interactive import run_interactive

        run_interactive(session)
        raise SystemExit(0)

    raise SystemExit(2)
