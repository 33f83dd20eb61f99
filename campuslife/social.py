"""
Friends and the Connect directory.

Friend requests:
    accept  -> request leaves the inbox, sender joins the friend list as "Online"
    decline -> request leaves the inbox

Connect:
    profiles and experiences are listed when they share the selected interest;
    "Buddy up" marks a profile as pending (tap again to withdraw).

All functions return new collections; inputs are left untouched.
"""

from __future__ import annotations

from typing import AbstractSet, Iterable

from campuslife.model import ConnectExperience, ConnectProfile, Friend, FriendRequest

INTERESTS = ["Study", "Sports", "Gaming", "Music", "Events"]
DEFAULT_INTEREST = "Study"

ONLINE = "Online"


def _find_request(requests: Iterable[FriendRequest], request_id: str) -> FriendRequest:
    for req in requests:
        if req.request_id == request_id:
            return req
    raise KeyError(f"Unknown friend request id: {request_id!r}")


def accept_request(
    requests: list[FriendRequest], friends: list[Friend], request_id: str
) -> tuple[list[FriendRequest], list[Friend]]:
    """
    Accept one request. Returns (remaining_requests, friends_with_new_friend).
    Raises KeyError for an unknown request id.
    """
    req = _find_request(requests, request_id)
    friend = Friend(name=req.name, major=req.major, location=req.details, last_seen=ONLINE)
    remaining = [r for r in requests if r.request_id != request_id]
    return remaining, [*friends, friend]


def decline_request(requests: list[FriendRequest], request_id: str) -> list[FriendRequest]:
    _find_request(requests, request_id)
    return [r for r in requests if r.request_id != request_id]


def resolve_interest(text: str) -> str:
    """
    Match an interest label case-insensitively. Raises ValueError if unknown.
    """
    needle = (text or "").strip().lower()
    for interest in INTERESTS:
        if interest.lower() == needle:
            return interest
    raise ValueError(f"Unknown interest: {text!r}")


def connections_for(interest: str, profiles: Iterable[ConnectProfile]) -> list[ConnectProfile]:
    return [p for p in profiles if interest in p.interests]


def experiences_for(interest: str, experiences: Iterable[ConnectExperience]) -> list[ConnectExperience]:
    return [e for e in experiences if interest in e.interests]


def toggle_buddy(pending: AbstractSet[str], profile_id: str) -> frozenset[str]:
    # membership flips: pending -> withdrawn, otherwise -> pending
    if profile_id in pending:
        return frozenset(pending - {profile_id})
    return frozenset(pending | {profile_id})
