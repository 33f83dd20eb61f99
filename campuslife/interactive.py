from __future__ import annotations

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from campuslife import aggregator, social
from campuslife.cli import parse_date
from campuslife.model import CampusCategory, SourceKind
from campuslife.session import Session
from campuslife.store import short_title

console = Console()

KIND_STYLES = {
    SourceKind.LECTURE: "orange1",
    SourceKind.OFFICIAL_EVENT: "blue",
    SourceKind.STUDENT_EVENT: "green",
}


def _println(msg: str = "") -> None:
    console.print(msg)


def _prompt(msg: str) -> str:
    return console.input(msg)


def _pick_index(raw: str, count: int) -> int | None:
    """
    Convert a 1-based menu answer into a list index, printing why it failed.
    """
    if not raw.isdigit():
        _println("Not a number.")
        return None
    i = int(raw)
    if not (1 <= i <= count):
        _println("Out of range.")
        return None
    return i - 1


def run_interactive(session: Session) -> None:
    """
    Interactive menu loop. Every action updates the session before the next render.
    """
    while True:
        _render(session)

        choice = _prompt(
            "\n[1] Day view   [2] Week view   [3] Month view\n"
            "[4] Previous month   [5] Next month   [6] Pick date\n"
            "[7] Campus events   [8] Create event   [9] Missions\n"
            "[10] Friends   [11] Connect\n"
            "[0] Exit\n"
            "Select: "
        ).strip()

        if choice == "0":
            _println("Bye.")
            return

        if choice == "1":
            session.set_mode("day")
        elif choice == "2":
            session.set_mode("week")
        elif choice == "3":
            session.set_mode("month")
        elif choice == "4":
            session.change_month(-1)
            session.set_mode("month")
        elif choice == "5":
            session.change_month(1)
            session.set_mode("month")
        elif choice == "6":
            _flow_pick_date(session)
        elif choice == "7":
            _flow_events(session)
        elif choice == "8":
            _flow_create_event(session)
        elif choice == "9":
            _flow_missions(session)
        elif choice == "10":
            _flow_friends(session)
        elif choice == "11":
            _flow_connect(session)
        else:
            _println("Invalid choice.")


# ---------------------------------------------------------------------------
# Calendar views
# ---------------------------------------------------------------------------


def _render(session: Session) -> None:
    _println(f"\n=== Calendar ({session.mode}) ===")
    if session.mode == "week":
        _render_week(session)
    elif session.mode == "month":
        _render_month(session)
    else:
        _render_day(session)


def _render_day(session: Session) -> None:
    chips = []
    for d in aggregator.week_days(session.week_start):
        label = f"{d:%a} {d.day}"
        if d == session.selected_date:
            label = f"[reverse]{label}[/]"
        elif d == session.today:
            label = f"[bold]{label}[/]"
        chips.append(label)
    _println("  ".join(chips))

    items = session.day_items()
    table = Table(
        title=aggregator.day_header_title(session.selected_date, session.today),
        caption=aggregator.day_summary(len(items)),
        box=box.SIMPLE,
    )
    table.add_column("Time")
    table.add_column("Title")
    table.add_column("Location")
    table.add_column("Details")
    for item in items:
        style = KIND_STYLES[item.source_kind]
        table.add_row(
            escape(item.time_label),
            f"[{style}]{escape(item.title)}[/]",
            escape(item.location),
            escape(item.subtitle or ""),
        )
    console.print(table)

    if not items:
        _println("No items yet. Check the campus events to discover events for this day.")


def _render_week(session: Session) -> None:
    start = session.week_start
    days = aggregator.week_days(start)
    blocks = session.week_blocks()

    table = Table(title=f"Upcoming {aggregator.week_range_title(start)}", box=box.SIMPLE)
    table.add_column("", justify="right")
    for d in days:
        header = f"{d:%a} {d.day}"
        if d == session.today:
            header = f"[bold red]{header}[/]"
        elif d == session.selected_date:
            header = f"[reverse]{header}[/]"
        table.add_column(header)

    for hour in range(aggregator.FIRST_HOUR, aggregator.LAST_HOUR + 1):
        row = [f"{hour:02d}:00"]
        for offset in range(len(days)):
            block = aggregator.block_at(blocks, offset, hour)
            if block:
                row.append(f"[{KIND_STYLES[block.source_kind]}]{escape(block.title)}[/]\n{escape(block.subtitle)}")
            else:
                row.append("")
        table.add_row(*row)
    console.print(table)


def _render_month(session: Session) -> None:
    events = session.calendar_events.all()

    table = Table(title=aggregator.month_title(session.displayed_month), box=box.SIMPLE)
    for label in aggregator.WEEKDAY_LABELS:
        table.add_column(label, justify="center")

    grid = session.grid()
    for row in range(0, len(grid), 7):
        cells = []
        for day in grid[row : row + 7]:
            text = str(day.date.day)
            if aggregator.has_events(day.date, events):
                text += "•"
            if day.date == session.selected_date:
                text = f"[reverse]{text}[/]"
            elif day.is_today:
                text = f"[bold red]{text}[/]"
            elif not day.in_displayed_month:
                text = f"[dim]{text}[/]"
            cells.append(text)
        table.add_row(*cells)
    console.print(table)

    # Panel below the grid reads the raw events, not the merged day items
    is_today = session.selected_date == session.today
    day_events = session.selected_day_events()
    count = len(day_events) + (len(session.lectures) if is_today else 0)
    sel = session.selected_date
    title = "Today" if is_today else f"{sel:%a}, {sel.day} {sel:%b}"
    _println(f"\n[bold]{title}[/] – {aggregator.day_summary(count)}")

    if is_today:
        for lec in session.lectures:
            _println(f"  [orange1]{lec.start}–{lec.end}[/] {escape(lec.title)} @ {escape(lec.location)}")

    if not day_events:
        _println("  No events planned. Create your own event from the menu ([8]).")
    for ev in day_events:
        style = KIND_STYLES[SourceKind.OFFICIAL_EVENT if ev.is_official else SourceKind.STUDENT_EVENT]
        _println(f"  [{style}]{escape(ev.time_label)}[/] {escape(ev.title)} @ {escape(ev.location)}")


def _flow_pick_date(session: Session) -> None:
    raw = _prompt("Date (YYYY-MM-DD) (blank = today): ").strip()
    try:
        session.select_date(parse_date(raw, session.today))
    except ValueError:
        _println("Invalid date.")


# ---------------------------------------------------------------------------
# Campus circle
# ---------------------------------------------------------------------------


def _pick_category(session: Session) -> None:
    cats = list(CampusCategory)
    for i, cat in enumerate(cats, start=1):
        marker = "*" if cat == session.category else " "
        _println(f"{marker}{i}) {cat.value}")
    raw = _prompt(f"Category (blank = {session.category.value}): ").strip()
    if not raw:
        return
    idx = _pick_index(raw, len(cats))
    if idx is not None:
        session.category = cats[idx]


def _flow_events(session: Session) -> None:
    """
    Browse one category, search it, and join/leave events without leaving the list.
    """
    _pick_category(session)
    session.search = _prompt("Search text (blank = all): ").strip()

    while True:
        events = session.filtered_events()

        table = Table(title=session.category.section_title, box=box.SIMPLE)
        table.add_column("#", justify="right")
        table.add_column("Pin")
        table.add_column("Event")
        table.add_column("Time")
        table.add_column("Location")
        table.add_column("Joined", justify="right")
        for i, ev in enumerate(events, start=1):
            joined = f"[green]{ev.joined_count} ✓[/]" if ev.is_joined else str(ev.joined_count)
            tags = f"\n[magenta]{escape(', '.join(ev.tags))}[/]" if ev.tags else ""
            table.add_row(
                str(i),
                escape(short_title(ev.title)),
                f"{escape(ev.title)}{tags}",
                escape(ev.time_label),
                escape(ev.location),
                joined,
            )
        console.print(table)

        if not events:
            _println("No items for this filter yet. Use [8] to create one.")
            return

        pick = _prompt("Enter number to join/leave (blank = back): ").strip()
        if not pick:
            return
        idx = _pick_index(pick, len(events))
        if idx is None:
            continue

        updated = session.toggle_join(events[idx].event_id)
        state = "Joined" if updated.is_joined else "Left"
        _println(f"{state}: {escape(updated.title)} ({updated.joined_count} joined)")


def _flow_create_event(session: Session) -> None:
    title = _prompt("Title (e.g. Pizza Night) (blank = cancel): ").strip()
    if not title:
        _println("Cancelled: a title is required.")
        return

    location = _prompt("Location (room / building / place): ").strip()
    _pick_category(session)
    price = _prompt("Price (optional): ").strip()
    tags = _prompt("Tags, comma-separated (optional): ").strip()
    description = _prompt("Description (optional): ").strip()

    event = session.create_event(
        title,
        location=location,
        category=session.category.value,
        price_text=price,
        tags_text=tags,
        description=description,
    )
    _println(f"Created: {escape(event.title)} @ {escape(event.location)} ({event.category.value})")


# ---------------------------------------------------------------------------
# Missions
# ---------------------------------------------------------------------------


def _flow_missions(session: Session) -> None:
    while True:
        stars = Table(title="Campus Stars", box=box.SIMPLE)
        stars.add_column("Rank", justify="right")
        stars.add_column("Name")
        stars.add_column("Points", justify="right")
        for star in session.ranking():
            stars.add_row(str(star.rank), f"{star.emoji} {escape(star.name)}", f"{star.points} pts")
        console.print(stars)

        table = Table(title=f"Weekly missions – your points: {session.points}", box=box.SIMPLE)
        table.add_column("#", justify="right")
        table.add_column("Day")
        table.add_column("Mission")
        table.add_column("Points", justify="right")
        for i, m in enumerate(session.missions, start=1):
            title = f"[strike]{escape(m.title)}[/]" if m.done else escape(m.title)
            table.add_row(str(i), m.day, title, f"[yellow]{m.points}[/]")
        console.print(table)

        pick = _prompt("Enter number to tick/untick (blank = back): ").strip()
        if not pick:
            return
        idx = _pick_index(pick, len(session.missions))
        if idx is not None:
            session.toggle_mission(session.missions[idx].mission_id)



# ---------------------------------------------------------------------------
# Friends and Connect
# ---------------------------------------------------------------------------


def _flow_friends(session: Session) -> None:
    """
    Show friends and handle the request inbox: "a N" accepts, "d N" declines.
    """
    while True:
        table = Table(title=f"Friends ({len(session.friends)})", box=box.SIMPLE)
        table.add_column("Name")
        table.add_column("Major")
        table.add_column("Where")
        table.add_column("Seen")
        for f in session.friends:
            seen = f"[green]{f.last_seen}[/]" if f.last_seen == social.ONLINE else escape(f.last_seen)
            table.add_row(escape(f.name), escape(f.major), escape(f.location), seen)
        console.print(table)

        if not session.requests:
            _println("No pending friend requests.")
            return

        inbox = Table(title=f"Friend requests ({len(session.requests)})", box=box.SIMPLE)
        inbox.add_column("#", justify="right")
        inbox.add_column("Name")
        inbox.add_column("Major")
        inbox.add_column("Details")
        for i, r in enumerate(session.requests, start=1):
            inbox.add_row(str(i), escape(r.name), escape(r.major), escape(r.details))
        console.print(inbox)

        raw = _prompt("Accept with 'a N', decline with 'd N' (blank = back): ").strip().lower()
        if not raw:
            return
        action, _, num = raw.partition(" ")
        if action not in ("a", "d"):
            _println("Invalid choice.")
            continue
        idx = _pick_index(num.strip(), len(session.requests))
        if idx is None:
            continue

        req = session.requests[idx]
        if action == "a":
            session.accept_request(req.request_id)
            _println(f"You and {escape(req.name)} are now friends.")
        else:
            session.decline_request(req.request_id)
            _println(f"Declined: {escape(req.name)}")


def _pick_interest(session: Session) -> None:
    for i, interest in enumerate(social.INTERESTS, start=1):
        marker = "*" if interest == session.interest else " "
        _println(f"{marker}{i}) {interest}")
    raw = _prompt(f"Interest (blank = {session.interest}): ").strip()
    if not raw:
        return
    idx = _pick_index(raw, len(social.INTERESTS))
    if idx is not None:
        session.set_interest(social.INTERESTS[idx])


def _flow_connect(session: Session) -> None:
    """
    Pick an interest, see who shares it, and buddy up (or withdraw) by number.
    """
    _pick_interest(session)

    while True:
        people = session.filtered_connections()

        table = Table(title=f"People into {session.interest}", box=box.SIMPLE)
        table.add_column("#", justify="right")
        table.add_column("Name")
        table.add_column("Major")
        table.add_column("Where")
        table.add_column("Interests")
        table.add_column("")
        for i, p in enumerate(people, start=1):
            state = "[yellow]Pending[/]" if p.profile_id in session.pending else "Buddy up"
            table.add_row(
                str(i), escape(p.name), escape(p.major), escape(p.distance), escape(", ".join(p.interests)), state
            )
        console.print(table)

        for e in session.filtered_experiences():
            _println(f"  [magenta]{escape(e.tag)}[/] {escape(e.time_label)} {escape(e.title)} @ {escape(e.location)}")

        if not people:
            _println("Nobody shares this interest yet.")
            return

        pick = _prompt("Enter number to buddy up / withdraw (blank = back): ").strip()
        if not pick:
            return
        idx = _pick_index(pick, len(people))
        if idx is None:
            continue

        profile = people[idx]
        if session.toggle_buddy(profile.profile_id):
            _println(f"Request sent to {escape(profile.name)}.")
        else:
            _println(f"Withdrawn: {escape(profile.name)}")
