"""
Static demo data for one session.

Everything is generated relative to an explicit `today`, so the same call
always produces the same schedule for a given date.
"""

from __future__ import annotations

from datetime import date, timedelta

from campuslife.model import (
    CampusCategory,
    CampusEvent,
    CampusStar,
    ConnectExperience,
    ConnectProfile,
    Friend,
    FriendRequest,
    LectureSlot,
    Mission,
)

MAP_CENTER = (49.1422, 9.2195)


def lectures() -> list[LectureSlot]:
    return [
        LectureSlot(
            title="IN0001 – Einführung in die Informatik",
            start="10:15",
            end="11:45",
            location="HN-G C.0.50",
        ),
        LectureSlot(
            title="Algorithmen & Datenstrukturen",
            start="14:15",
            end="16:00",
            location="HN-G C.1.10",
        ),
    ]


def calendar_events(today: date) -> list[CampusEvent]:
    """
    Events shown in the calendar screens (today and tomorrow).
    """
    tomorrow = today + timedelta(days=1)
    return [
        CampusEvent(
            title="Study Jam – Analysis I",
            date=today,
            time_label="18:00",
            location="HN-G Learning Area",
            description="Open study session for Analysis. Bring questions + laptop.",
            is_official=False,
            latitude=49.1422,
            longitude=9.2195,
            joined_count=3,
        ),
        CampusEvent(
            title="Board Games & Pizza Night",
            date=tomorrow,
            time_label="19:30",
            location="Campus Lounge",
            description="Chill evening with games, pizza and new people.",
            is_official=True,
            latitude=49.1426,
            longitude=9.2200,
            joined_count=8,
        ),
        CampusEvent(
            title="Campus Tour for New Students",
            date=today,
            time_label="14:00",
            location="HN-G main entrance",
            description="Quick tour around lecture halls, study spaces and printers.",
            is_official=True,
            latitude=49.1420,
            longitude=9.2188,
            joined_count=15,
        ),
    ]


def _circle(
    title: str,
    today: date,
    time_label: str,
    location: str,
    description: str,
    is_official: bool,
    latitude: float,
    longitude: float,
    joined_count: int,
    category: CampusCategory,
    tags: list[str],
    price_text: str | None = None,
) -> CampusEvent:
    return CampusEvent(
        title=title,
        date=today,
        time_label=time_label,
        location=location,
        description=description,
        is_official=is_official,
        latitude=latitude,
        longitude=longitude,
        joined_count=joined_count,
        category=category,
        tags=tags,
        price_text=price_text,
    )


def campus_circle_events(today: date) -> list[CampusEvent]:
    """
    Directory listings for the campus map, one or more per category.
    """
    c = CampusCategory
    return [
        _circle("Pizza Night", today, "18:00–20:30", "Mensa Bildungscampus",
                "Shared pizza night at Mensa with veggie and vegan options.",
                True, 49.1423, 9.2197, 3, c.FOOD, ["Food", "Social"], "€3–5"),
        _circle("Ice Cream Social", today, "16:00–18:00", "Mensa Terrace",
                "Ice cream, music and meeting new students.",
                False, 49.14225, 9.2198, 7, c.FOOD, ["Dessert", "Mensa"], "Free"),
        _circle("Café Study Hangout", today, "14:00–17:00", "Café Einstein",
                "Quiet tables reserved for light group study with coffee.",
                False, 49.1424, 9.2196, 5, c.CAFES, ["Café", "Chill"]),
        _circle("Group Study Session", today, "18:00–20:00", "HN-G 3rd floor study rooms",
                "Bring your Analysis / ADS questions and work together.",
                False, 49.1420, 9.2191, 4, c.STUDY, ["Study group"]),
        _circle("Coding Workshop", today, "19:00–21:00", "Computer Lab HN-G",
                "Hands-on intro to Git, GitHub and basic app structure.",
                True, 49.14205, 9.2192, 12, c.STUDY, ["Workshop", "Coding"]),
        _circle("Volleyball Meet", today, "20:00–22:00", "Campus Sports Hall",
                "Casual volleyball games, all levels welcome.",
                False, 49.1426, 9.2200, 10, c.SPORTS, ["Sports"]),
        _circle("Football Match", today, "18:30–20:00", "Outdoor Pitch",
                "Friendly campus football match, bring your friends.",
                False, 49.1427, 9.2201, 14, c.SPORTS, ["Sports"]),
        _circle("Board Games Night", today, "19:30–23:00", "Campus Lounge",
                "Card games, board games and snacks.",
                True, 49.1428, 9.2199, 16, c.SOCIAL, ["Social", "Free"]),
        _circle("Movie Games Night", today, "20:00–23:30", "Audimax",
                "Party games plus movie quiz on big screen.",
                False, 49.1429, 9.2194, 11, c.SOCIAL, ["Social"]),
        _circle("Karaoke Night", today, "21:00–00:00", "Campus Bar",
                "Pick a song and sing – no talent required.",
                False, 49.1430, 9.2193, 9, c.SOCIAL, ["Social", "Music"]),
        _circle("Arts & Chill", today, "17:00–19:00", "Design Studio",
                "Drawing, painting, sketching – materials provided.",
                False, 49.1421, 9.2199, 6, c.CREATIVITY, ["Art", "Relax"]),
        _circle("Photography Walk", today, "16:30–18:30", "Meet at main entrance",
                "Golden hour walk around Heilbronn – phones welcome.",
                False, 49.14215, 9.2190, 8, c.CREATIVITY, ["Photography"]),
        _circle("Robotics Workshop", today, "15:00–18:00", "Robotics Lab",
                "Build and program a simple line-following robot.",
                True, 49.14218, 9.2189, 13, c.IT_ROBOTICS, ["Robotics", "Hands-on"]),
    ]


def missions() -> list[Mission]:
    return [
        Mission(day="Mon", title="Invite someone new to sit with you at Mensa.", points=40),
        Mission(day="Tue", title="Join or host a study group for 1 hour.", points=35),
        Mission(day="Wed", title="Help a first-semester student find a room or printer.", points=30),
        Mission(day="Thu", title="Attend a student-run event on campus.", points=45),
        Mission(day="Fri", title="Introduce two friends who don’t know each other.", points=25),
        Mission(day="Sat", title="Organise a small walk / coffee meetup.", points=25),
        Mission(day="Sun", title="Text someone you met this week and check in.", points=20),
    ]


def stars() -> list[CampusStar]:
    return [
        CampusStar(name="Myra", points=320, rank=1, emoji="👑"),
        CampusStar(name="Noah", points=270, rank=2, emoji="🥈"),
        CampusStar(name="Iva", points=230, rank=3, emoji="🥉"),
    ]


def friends() -> list[Friend]:
    return [
        Friend(name="Maria K.", major="Informatics", location="Dorms · 3 min", last_seen="Online"),
        Friend(name="Omar S.", major="BIE", location="HN-G · 1st floor", last_seen="5 min ago"),
        Friend(name="Jin Woo", major="Robotics", location="Library · Silent", last_seen="10 min ago"),
        Friend(name="Noura A.", major="BMDS", location="Campus Lounge", last_seen="1 h ago"),
        Friend(name="Lucas T.", major="Mathematics", location="Sports Hall", last_seen="Today"),
        Friend(name="Aya R.", major="Architecture", location="Café Einstein", last_seen="Today"),
        Friend(name="Hassan M.", major="Informatics", location="Dorms · 2 min", last_seen="Online"),
        Friend(name="Elena V.", major="Management", location="Campus Lounge", last_seen="Yesterday"),
        Friend(name="Rami L.", major="BIE", location="Library · 2nd floor", last_seen="Today"),
        Friend(name="Chiara P.", major="Psychology", location="Mensa", last_seen="3 h ago"),
    ]


def friend_requests() -> list[FriendRequest]:
    return [
        FriendRequest(name="Lea M.", major="Informatics", details="Same Algorithms group · Library 2nd floor"),
        FriendRequest(name="Tariq H.", major="BIE", details="Joined your last Study Jam · HN-G"),
        FriendRequest(name="Marta S.", major="BMDS", details="Met at Board Games Night · Campus Lounge"),
        FriendRequest(name="Yusuf A.", major="Mathematics", details="Plays volleyball on Fridays · Sports hall"),
    ]


# (name, major, interests, distance)
_CONNECTIONS = [
    ("Sara A.", "BIE", ["Study", "Music"], "120 m · HN-G"),
    ("Leon M.", "MIM", ["Events", "Study"], "Library · 2nd floor"),
    ("Fatima K.", "BMDS", ["Sports", "Study"], "Sports hall"),
    ("Jonas R.", "Informatics", ["Gaming", "Events"], "Dorms · 5 min walk"),
    ("Mina S.", "BIE", ["Music", "Events"], "HN-G · Ground floor"),
    ("Omar T.", "BMDS", ["Sports", "Gaming"], "Gym entrance"),
    ("Lena P.", "Management & Tech", ["Study", "Events"], "Library · Silent area"),
    ("Yuki H.", "Informatics", ["Gaming", "Study"], "Mensa upstairs"),
    ("David G.", "BWL", ["Events", "Sports"], "Campus lounge"),
    ("Nadia L.", "BIE", ["Music", "Study"], "HN-G · 3rd floor"),
    ("Samir Z.", "Informatics", ["Gaming"], "E-sports room"),
    ("Julia W.", "Psychology", ["Events", "Music"], "Auditorium"),
    ("Bilal K.", "BMDS", ["Sports", "Study", "Events"], "Outdoor court"),
    ("Aisha H.", "Robotics", ["Study", "Events"], "Lab building"),
    ("Marco V.", "Mathematics", ["Study"], "Library · Basement"),
    ("Ella S.", "Architecture", ["Music", "Events"], "Design studio"),
    ("Hassan L.", "Informatics", ["Gaming", "Study"], "Dorms · 2 min"),
    ("Nico R.", "BIE", ["Sports"], "Sports field"),
    ("Laila J.", "MIM", ["Events", "Music"], "Campus lounge"),
    ("Oksana P.", "Informatics", ["Study", "Gaming"], "HN-G · 4th floor"),
    ("Ravi K.", "BIE", ["Study", "Sports"], "Library · Group room"),
    ("Yara M.", "BMDS", ["Study"], "HN-G · Ground floor"),
    ("Timo F.", "Informatics", ["Gaming", "Events"], "Dorms · 7 min"),
    ("Ana L.", "Psychology", ["Music"], "Café Einstein"),
    ("Sven P.", "BWL", ["Events"], "Campus bar"),
]


def connections() -> list[ConnectProfile]:
    return [
        ConnectProfile(name=name, major=major, interests=list(interests), distance=distance)
        for name, major, interests, distance in _CONNECTIONS
    ]


def experiences() -> list[ConnectExperience]:
    return [
        ConnectExperience(
            title="Algorithms Study Jam",
            time_label="Today · 18:00",
            location="HN-G Learning Area",
            tag="Study · BIE / BMDS",
            description="Small group solving old exam questions together.",
            interests=["Study"],
        ),
        ConnectExperience(
            title="AI & Ethics Workshop",
            time_label="Thu · 17:00",
            location="Room HN-G C.1.10",
            tag="Workshop",
            description="Hands-on session about AI use at university and in exams.",
            interests=["Study", "Events"],
        ),
        ConnectExperience(
            title="Evening Volleyball Meetup",
            time_label="Fri · 20:00",
            location="Campus sports hall",
            tag="Sports · Social",
            description="Casual games, all skill levels welcome, just bring sports shoes.",
            interests=["Sports", "Events"],
        ),
        ConnectExperience(
            title="LAN Party Night",
            time_label="Sat · 19:00",
            location="HN-G project room",
            tag="Gaming",
            description="Bring your laptop or console and play co-op games all night.",
            interests=["Gaming", "Events"],
        ),
        ConnectExperience(
            title="Open Mic & Music Jam",
            time_label="Wed · 19:30",
            location="Campus lounge",
            tag="Music · Social",
            description="Sing, play an instrument or just listen and meet other music lovers.",
            interests=["Music", "Events"],
        ),
    ]
