"""
Date assignment and schedule views for round-robin fixtures.

Stamps an ordered match sequence with calendar dates, honoring a per-day
match cap and a set of allowed weekdays, and groups the result for display.
"""

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta
from typing import Iterable, Optional, Union

from roundrobin.fixtures import InvalidInput, Match

logger = logging.getLogger("roundrobin.scheduler")


# --- Day of Week Parsing ---

WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
WORKWEEK = WEEKDAYS[:5]
WEEKEND = WEEKDAYS[5:]

DAY_NAME_TO_INT = {name.lower(): i for i, name in enumerate(WEEKDAYS)}


def _parse_day_of_week(day_str: str) -> int:
    """Convert day name to integer (0=Monday, 6=Sunday)."""
    try:
        return DAY_NAME_TO_INT[day_str.strip().lower()]
    except (KeyError, AttributeError):
        raise InvalidInput(f"Unknown weekday: {day_str!r}") from None


def canonical_weekday(day_str: str) -> str:
    """Return the capitalised name for a weekday given in any case."""
    return WEEKDAYS[_parse_day_of_week(day_str)]


def normalize_weekdays(days: Iterable[str]) -> list[str]:
    """Return the capitalised weekday names in Monday..Sunday order."""
    indices = {_parse_day_of_week(d) for d in days}
    if not indices:
        raise InvalidInput("At least one weekday must be allowed")
    return [WEEKDAYS[i] for i in sorted(indices)]


def parse_date(value: Union[date, datetime, str]) -> date:
    """Coerce a date, datetime or ISO YYYY-MM-DD string to a calendar date."""
    # datetime is a date subclass, so check it first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise InvalidInput(f"Invalid date: {value!r}, expected YYYY-MM-DD") from None


# --- Data Classes ---

@dataclass
class SchedulingConfig:
    """When and how densely matches may be played."""
    start_date: date
    matches_per_day: int
    allowed_weekdays: list[str]

    def __post_init__(self):
        self.start_date = parse_date(self.start_date)
        self.allowed_weekdays = normalize_weekdays(self.allowed_weekdays)
        if self.matches_per_day < 1:
            raise InvalidInput(f"matches_per_day must be at least 1, got {self.matches_per_day}")

    def assign(self, matches: list[Match]) -> list[Match]:
        return assign_dates(matches, self.start_date, self.matches_per_day, self.allowed_weekdays)


# --- Date Assignment ---

def _next_allowed_day(current: date, allowed: set[int]) -> date:
    """Advance day by day until current falls on an allowed weekday."""
    while current.weekday() not in allowed:
        current += timedelta(days=1)
    return current


def assign_dates(
    matches: list[Match],
    start_date: Union[date, datetime, str],
    matches_per_day: int,
    allowed_weekdays: Iterable[str],
) -> list[Match]:
    """
    Assign a calendar date to every match, in sequence order.

    The cursor starts on the first allowed weekday on or after start_date.
    Each day takes at most matches_per_day matches before the cursor moves
    to the next allowed weekday. Matches are not re-sorted by round.

    Returns a new list of copies; the input matches are left untouched.

    Raises:
        InvalidInput: matches_per_day < 1, or no valid allowed weekdays.
    """
    if matches_per_day < 1:
        raise InvalidInput(f"matches_per_day must be at least 1, got {matches_per_day}")
    allowed = {_parse_day_of_week(d) for d in allowed_weekdays}
    if not allowed:
        raise InvalidInput("At least one weekday must be allowed")

    current = _next_allowed_day(parse_date(start_date), allowed)
    matches_on_current = 0

    dated = []
    for match in matches:
        if matches_on_current >= matches_per_day:
            current = _next_allowed_day(current + timedelta(days=1), allowed)
            matches_on_current = 0

        dated.append(replace(match, date=current))
        matches_on_current += 1

    if dated:
        logger.debug(f"Assigned {len(dated)} matches from {dated[0].date} to {dated[-1].date}")
    return dated


# --- Reordering ---

def move_match(matches: list[Match], old_index: int, new_index: int) -> list[Match]:
    """Move one match to a new position, returning a new sequence."""
    size = len(matches)
    for index in (old_index, new_index):
        if not 0 <= index < size:
            raise InvalidInput(f"Match index {index} out of range for {size} matches")

    reordered = list(matches)
    reordered.insert(new_index, reordered.pop(old_index))
    return reordered


# --- Views ---

GROUP_KEYS = ("round", "date")


def group_matches(matches: list[Match], by: str = "date") -> dict:
    """
    Group matches for display by "round" or "date".

    Round groups come out in ascending round order. Date groups are sorted by
    date, then round; undated matches are collected under None at the end.
    Within a group the sequence order is kept.
    """
    if by == "round":
        ordered = sorted(matches, key=lambda m: m.round)
        key = lambda m: m.round
    elif by == "date":
        ordered = sorted(matches, key=lambda m: (m.date is None, m.date or date.min, m.round))
        key = lambda m: m.date
    else:
        raise InvalidInput(f"Unknown grouping {by!r}, expected one of {GROUP_KEYS}")

    groups: dict = {}
    for m in ordered:
        groups.setdefault(key(m), []).append(m)
    return groups


def player_name(players, player_id: int) -> str:
    """Look up a player's name by id, falling back to 'Player <id>'."""
    for p in players:
        if p.id == player_id:
            return p.name
    return f"Player {player_id}"


def format_date(value: Optional[date]) -> str:
    """Format a date as e.g. 'Monday, January 1, 2024'."""
    if value is None:
        return "Date TBD"
    return f"{value:%A}, {value:%B} {value.day}, {value.year}"


def format_schedule(matches: list[Match], players, by: str = "date") -> str:
    """Render the grouped schedule as printable text."""
    groups = group_matches(matches, by)

    lines = ["=" * 60, f"TOURNAMENT SCHEDULE ({len(players)} players, {len(matches)} matches)", "=" * 60]
    for group_key, group in groups.items():
        if by == "round":
            lines.append(f"\nRound {group_key}:")
        else:
            lines.append(f"\n{format_date(group_key)}:")

        for m in group:
            home = player_name(players, m.player1)
            away = player_name(players, m.player2)
            if by == "round":
                label = m.date.isoformat() if m.date else "TBD"
            else:
                label = f"Round {m.round}"
            lines.append(f"  {label:10} | {home} vs {away}")

    lines.append("\n" + "=" * 60)
    return "\n".join(lines)
