"""
Tournament setup workflow.

Each operation takes the current Tournament record and returns an updated
copy, so every change to players, scheduling options or match order is a
full recomputation that replaces the previous state in one step.
"""
import logging
from datetime import date
from typing import Optional

from roundrobin.config import AppConfig
from roundrobin.fixtures import InvalidInput, Match, generate_fixtures
from roundrobin.models import MatchRecord, Player, Tournament
from roundrobin.scheduler import (
    WEEKDAYS,
    WEEKEND,
    WORKWEEK,
    SchedulingConfig,
    move_match,
    normalize_weekdays,
    parse_date,
)

logger = logging.getLogger("roundrobin.tournament")

WEEK_TYPE_DAYS = {
    "normal": WEEKDAYS,
    "workweek": WORKWEEK,
    "weekend": WEEKEND,
}


def default_tournament(today: Optional[date] = None) -> Tournament:
    """Fresh tournament: default sizes, starting today, every day allowed."""
    today = today or date.today()
    return Tournament(
        player_count=AppConfig.DEFAULT_PLAYER_COUNT,
        play_twice=False,
        players=[],
        matches=[],
        matches_per_day=AppConfig.DEFAULT_MATCHES_PER_DAY,
        start_date=today,
        week_type="normal",
        selected_days=list(WEEKDAYS),
        is_full_week=True,
    )


def reset(today: Optional[date] = None) -> Tournament:
    """Discard everything and return to the default configuration."""
    logger.info("Tournament reset to defaults")
    return default_tournament(today)


def current_step(tournament: Tournament) -> str:
    """Which screen a restored tournament should resume on."""
    if tournament.matches:
        return "schedule"
    if tournament.players:
        return "players"
    return "setup"


# ---------- Setup ----------

def set_player_count(tournament: Tournament, count: int) -> Tournament:
    if not AppConfig.MIN_PLAYERS <= count <= AppConfig.MAX_PLAYERS:
        raise InvalidInput(
            f"Player count must be between {AppConfig.MIN_PLAYERS} and {AppConfig.MAX_PLAYERS}, got {count}"
        )
    return tournament.model_copy(update={"player_count": count})


def set_matches_per_day(tournament: Tournament, count: int) -> Tournament:
    if not AppConfig.MIN_MATCHES_PER_DAY <= count <= AppConfig.MAX_MATCHES_PER_DAY:
        raise InvalidInput(
            f"Matches per day must be between {AppConfig.MIN_MATCHES_PER_DAY} "
            f"and {AppConfig.MAX_MATCHES_PER_DAY}, got {count}"
        )
    return tournament.model_copy(update={"matches_per_day": count})


def set_play_twice(tournament: Tournament, play_twice: bool) -> Tournament:
    return tournament.model_copy(update={"play_twice": play_twice})


def set_start_date(tournament: Tournament, value) -> Tournament:
    return tournament.model_copy(update={"start_date": parse_date(value)})


def set_week_type(tournament: Tournament, week_type: str) -> Tournament:
    """
    Switch between normal, workweek and weekend scheduling.

    Workweek and weekend always select their full day range. Normal selects
    all seven days only while the full-week option is on, otherwise the
    current custom selection is kept.
    """
    if week_type not in WEEK_TYPE_DAYS:
        raise InvalidInput(f"Unknown week type {week_type!r}, expected one of {list(WEEK_TYPE_DAYS)}")

    selected_days = list(tournament.selected_days)
    is_full_week = tournament.is_full_week

    if week_type in ("workweek", "weekend"):
        selected_days = list(WEEK_TYPE_DAYS[week_type])
        is_full_week = True
    elif tournament.is_full_week:
        selected_days = list(WEEKDAYS)

    return tournament.model_copy(update={
        "week_type": week_type,
        "selected_days": selected_days,
        "is_full_week": is_full_week,
    })


def set_full_week(tournament: Tournament, checked: bool) -> Tournament:
    """Toggle the full-week option; checking it selects the whole day range."""
    selected_days = list(tournament.selected_days)
    if checked and tournament.week_type in ("normal", "workweek"):
        selected_days = list(WEEK_TYPE_DAYS[tournament.week_type])

    return tournament.model_copy(update={
        "is_full_week": checked,
        "selected_days": selected_days,
    })


def toggle_day(tournament: Tournament, day: str) -> Tournament:
    """Add or remove one day from the custom selection."""
    day = normalize_weekdays([day])[0]
    if day in tournament.selected_days:
        selected_days = [d for d in tournament.selected_days if d != day]
    else:
        selected_days = [*tournament.selected_days, day]

    is_full_week = tournament.is_full_week
    if tournament.week_type == "normal" and len(selected_days) < len(WEEKDAYS):
        is_full_week = False
    elif tournament.week_type == "workweek" and not all(d in selected_days for d in WORKWEEK):
        is_full_week = False

    return tournament.model_copy(update={
        "selected_days": selected_days,
        "is_full_week": is_full_week,
    })


def scheduling_config(tournament: Tournament) -> SchedulingConfig:
    return SchedulingConfig(
        start_date=tournament.start_date or date.today(),
        matches_per_day=tournament.matches_per_day,
        allowed_weekdays=tournament.selected_days,
    )


# ---------- Players ----------

def init_players(tournament: Tournament) -> Tournament:
    """Create player_count unnamed players with ids 1..player_count."""
    players = [Player(id=i + 1, name="") for i in range(tournament.player_count)]
    return tournament.model_copy(update={"players": players})


def validate_player_names(players: list[Player]) -> dict[int, str]:
    """
    Check names before fixtures are generated.

    Returns a map of player index to error message; empty when all names are
    present and unique (ignoring case and surrounding whitespace).
    """
    errors = {}
    seen = set()
    for index, player in enumerate(players):
        name = player.name.strip()
        if not name:
            errors[index] = "Name is required"
            continue
        folded = name.lower()
        if folded in seen:
            errors[index] = "Name must be unique"
        seen.add(folded)
    return errors


def submit_players(tournament: Tournament, players: list[Player]) -> Tournament:
    """Accept the named players, generate fixtures and date them."""
    errors = validate_player_names(players)
    if errors:
        raise InvalidInput(f"{len(errors)} player name(s) are invalid", errors=errors)

    players = [Player(id=p.id, name=p.name.strip()) for p in players]
    updated = tournament.model_copy(update={"players": players})
    fixtures = generate_fixtures(updated.participants(), tournament.play_twice)
    dated = scheduling_config(updated).assign(fixtures)

    logger.info(f"Scheduled {len(dated)} matches for {len(players)} players")
    return _with_matches(updated, dated)


# ---------- Match Order ----------

def _with_matches(tournament: Tournament, matches: list[Match]) -> Tournament:
    records = [MatchRecord.from_match(m) for m in matches]
    return tournament.model_copy(update={"matches": records})


def reschedule(tournament: Tournament) -> Tournament:
    """Re-date the existing match order with the current configuration."""
    return _with_matches(tournament, scheduling_config(tournament).assign(tournament.schedule()))


def reorder_matches(tournament: Tournament, old_index: int, new_index: int) -> Tournament:
    """Move one match and recompute every date from scratch."""
    reordered = move_match(tournament.schedule(), old_index, new_index)
    logger.debug(f"Moved match {old_index} -> {new_index}")
    return _with_matches(tournament, scheduling_config(tournament).assign(reordered))


def apply_order(tournament: Tournament, matches: list[Match]) -> Tournament:
    """
    Accept an externally reordered match sequence.

    The sequence must contain exactly the current matches; only their order
    may differ. Dates are recomputed for the new order.
    """
    current = sorted(m.key for m in tournament.schedule())
    proposed = sorted(m.key for m in matches)
    if current != proposed:
        raise InvalidInput("Reordered matches must be a permutation of the current matches")
    return _with_matches(tournament, scheduling_config(tournament).assign(list(matches)))


def start_over(tournament: Tournament) -> Tournament:
    """Drop players and matches but keep the scheduling options."""
    return tournament.model_copy(update={"players": [], "matches": []})
