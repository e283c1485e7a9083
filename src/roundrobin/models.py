"""Pydantic models for the persisted tournament record."""

import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from roundrobin.fixtures import Match, Participant
from roundrobin.scheduler import WEEKDAYS, canonical_weekday

WeekType = Literal["normal", "workweek", "weekend"]


# ---------- Player/Match Models ----------

class Player(BaseModel):
    """Player as entered on the naming screen."""
    id: int
    name: str = ""


class MatchRecord(BaseModel):
    """Stored fixture."""
    round: int
    player1: int
    player2: int
    date: Optional[datetime.date] = None  # Serialized as YYYY-MM-DD

    @classmethod
    def from_match(cls, match: Match) -> "MatchRecord":
        return cls(round=match.round, player1=match.player1, player2=match.player2, date=match.date)

    def to_match(self) -> Match:
        return Match(round=self.round, player1=self.player1, player2=self.player2, date=self.date)


# ---------- Tournament Record ----------

class Tournament(BaseModel):
    """
    The whole tournament state as a single serializable record.

    Serialized with camelCase keys (playerCount, playTwice, ...). Workflow
    functions in roundrobin.tournament return updated copies rather than
    mutating a shared instance.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    player_count: int = 4
    play_twice: bool = False
    players: list[Player] = Field(default_factory=list)
    matches: list[MatchRecord] = Field(default_factory=list)
    matches_per_day: int = 2
    start_date: Optional[datetime.date] = None  # Serialized as YYYY-MM-DD
    week_type: WeekType = "normal"
    selected_days: list[str] = Field(default_factory=lambda: list(WEEKDAYS))
    is_full_week: bool = True

    @field_validator("selected_days")
    @classmethod
    def _known_weekdays(cls, days: list[str]) -> list[str]:
        # Stored order is kept; InvalidInput is a ValueError, so pydantic reports it
        return [canonical_weekday(d) for d in days]

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)

    @classmethod
    def from_json(cls, payload: str) -> "Tournament":
        return cls.model_validate_json(payload)

    def participants(self) -> list[Participant]:
        return [Participant(id=p.id, name=p.name) for p in self.players]

    def schedule(self) -> list[Match]:
        return [m.to_match() for m in self.matches]
