"""
Round-robin fixture generation.

Pairs participants with the circle method: participant 0 stays fixed while
the others rotate around it, giving every pair exactly one meeting across
n - 1 rounds. Odd fields get a synthetic bye participant whose pairings are
dropped.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

logger = logging.getLogger("roundrobin.fixtures")

BYE_ID = -1


class InvalidInput(ValueError):
    """Raised when tournament input cannot produce a valid schedule."""

    def __init__(self, message: str, errors: Optional[dict] = None):
        super().__init__(message)
        self.errors = errors or {}


# --- Data Classes ---

@dataclass(frozen=True)
class Participant:
    """A tournament participant in seeding order."""
    id: int
    name: str = ""

    @property
    def is_bye(self) -> bool:
        return self.id == BYE_ID


@dataclass(frozen=True)
class Match:
    """A single fixture between two participants."""
    round: int
    player1: int
    player2: int
    date: Optional[date] = None  # Set by the date assigner

    @property
    def key(self) -> str:
        """Stable identifier used when moving matches around."""
        return f"match-{self.round}-{self.player1}-{self.player2}"

    def involves(self, player_id: int) -> bool:
        return player_id in (self.player1, self.player2)


# --- Counting Helpers ---

def round_count(player_count: int) -> int:
    """Number of rounds in a single round-robin for player_count players."""
    n = player_count + (player_count % 2)
    return n - 1


def expected_match_count(player_count: int, double_round: bool = False) -> int:
    """Number of matches generate_fixtures produces for player_count players."""
    single = player_count * (player_count - 1) // 2
    return single * 2 if double_round else single


# --- Generation ---

def _validate_participants(participants: list[Participant]):
    if len(participants) < 2:
        raise InvalidInput(f"At least 2 participants are required, got {len(participants)}")

    seen = set()
    for p in participants:
        if p.id == BYE_ID:
            raise InvalidInput(f"Participant id {BYE_ID} is reserved for the bye")
        if p.id in seen:
            raise InvalidInput(f"Duplicate participant id: {p.id}")
        seen.add(p.id)


def _pairing(round_number: int, slot: int, n: int) -> tuple[int, int]:
    """Return (home, away) seat indices for one slot of one round."""
    if slot == 0:
        return 0, round_number

    # 0 maps to the last seat so seat 0 stays the fixed anchor
    home = (round_number + slot) % (n - 1)
    if home == 0:
        home = n - 1

    away = (round_number - slot + n - 1) % (n - 1)
    if away == 0:
        away = n - 1

    return home, away


def generate_fixtures(participants: list[Participant], double_round: bool = False) -> list[Match]:
    """
    Generate the complete round-robin fixture list.

    Args:
        participants: Participants in seeding order. Ids must be unique.
        double_round: Append a second leg with home and away swapped.

    Returns:
        Matches ordered by round. Byes are omitted, so odd fields have one
        participant sitting out each round.

    Raises:
        InvalidInput: Fewer than two participants or duplicate ids.
    """
    _validate_participants(participants)

    seats = list(participants)
    if len(seats) % 2 == 1:
        seats.append(Participant(id=BYE_ID, name="BYE"))
    n = len(seats)
    rounds = n - 1

    matches = []
    for round_number in range(1, rounds + 1):
        for slot in range(n // 2):
            home, away = _pairing(round_number, slot, n)
            if seats[home].is_bye or seats[away].is_bye:
                continue
            matches.append(Match(
                round=round_number,
                player1=seats[home].id,
                player2=seats[away].id,
            ))

    if double_round:
        second_leg = [
            Match(round=m.round + rounds, player1=m.player2, player2=m.player1)
            for m in matches
        ]
        matches.extend(second_leg)

    logger.debug(
        f"Generated {len(matches)} matches over {rounds * (2 if double_round else 1)} rounds "
        f"for {len(participants)} participants"
    )
    return matches
