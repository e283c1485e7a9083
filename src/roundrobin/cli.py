"""
Command-line front end: build a tournament from a YAML file and print it.

Usage: roundrobin <tournament.yaml> [round|date]
"""
import logging
import sys
from pathlib import Path

import yaml

from roundrobin import tournament as workflow
from roundrobin.fixtures import InvalidInput
from roundrobin.log import init_logging
from roundrobin.models import Player, Tournament
from roundrobin.scheduler import GROUP_KEYS, format_schedule

logger = logging.getLogger("roundrobin.cli")


def read_tournament_file(path: Path) -> dict:
    """Parse a tournament YAML file, which must hold a mapping at the top level."""
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise InvalidInput(f"Could not parse {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidInput(f"{path} must contain a mapping of tournament settings, got {type(data).__name__}")
    return data


def build_tournament(data: dict) -> Tournament:
    """
    Schedule a tournament from parsed settings.

    Expected keys: players (list of names), and optionally play_twice,
    matches_per_day, start_date, week_type, days. Values go through the same
    setup operations as interactive use, so the same limits apply.
    """
    names = data.get("players") or []
    if not isinstance(names, list):
        raise InvalidInput("players must be a list of names")
    t = workflow.default_tournament()
    t = workflow.set_player_count(t, len(names))
    t = workflow.set_play_twice(t, bool(data.get("play_twice", False)))
    t = workflow.set_matches_per_day(t, int(data.get("matches_per_day", t.matches_per_day)))
    if "start_date" in data:
        # YAML may already have parsed an unquoted date
        t = workflow.set_start_date(t, data["start_date"])
    t = workflow.set_week_type(t, data.get("week_type", "normal"))

    if "days" in data:
        t = t.model_copy(update={"selected_days": [], "is_full_week": False})
        for day in data["days"]:
            t = workflow.toggle_day(t, day)

    players = [Player(id=i + 1, name=str(name)) for i, name in enumerate(names)]
    return workflow.submit_players(t, players)


def load_tournament_file(path: Path) -> Tournament:
    """Load a tournament description from YAML and schedule it."""
    return build_tournament(read_tournament_file(path))


def main():
    """Command-line interface for fixture generation."""
    if len(sys.argv) < 2:
        print("Usage: roundrobin <tournament.yaml> [round|date]")
        sys.exit(1)

    init_logging("cli")

    config_path = Path(sys.argv[1])
    if not config_path.exists():
        print(f"Error: Tournament file not found: {config_path}")
        sys.exit(1)

    logger.info(f"Loading tournament from: {config_path}")
    try:
        data = read_tournament_file(config_path)
        group_by = sys.argv[2] if len(sys.argv) > 2 else data.get("group_by", "date")
        if group_by not in GROUP_KEYS:
            raise InvalidInput(f"grouping must be one of {', '.join(GROUP_KEYS)}, got {group_by!r}")
        t = build_tournament(data)
    except InvalidInput as e:
        print(f"Error: {e}")
        for index, message in sorted(e.errors.items()):
            print(f"  player {index + 1}: {message}")
        sys.exit(1)

    print(format_schedule(t.schedule(), t.players, by=group_by))


if __name__ == "__main__":
    main()
