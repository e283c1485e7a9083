"""
Configuration management for the round-robin fixture maker.

Uses environment variables with sensible defaults.
"""
import os


class AppConfig:
    """Configuration for roundrobin."""

    # Persistence
    DB_PATH = os.getenv("ROUNDROBIN_DB_PATH", "tournament.db")
    STORE_KEY = os.getenv("ROUNDROBIN_STORE_KEY", "tournament")

    # New tournament defaults
    DEFAULT_PLAYER_COUNT = int(os.getenv("ROUNDROBIN_DEFAULT_PLAYERS", "4"))
    DEFAULT_MATCHES_PER_DAY = int(os.getenv("ROUNDROBIN_DEFAULT_MATCHES_PER_DAY", "2"))

    # Setup limits
    MIN_PLAYERS = 2
    MAX_PLAYERS = 20
    MIN_MATCHES_PER_DAY = 1
    MAX_MATCHES_PER_DAY = 10


def get_app_config():
    """Get configuration for roundrobin."""
    return AppConfig


def print_config(config_class):
    """Print configuration for debugging."""
    print(f"\n{'='*60}")
    print(f"{config_class.__name__} Configuration:")
    print(f"{'='*60}")
    for attr in dir(config_class):
        if attr.isupper():
            value = getattr(config_class, attr)
            print(f"  {attr:20} = {value}")
    print(f"{'='*60}\n")
