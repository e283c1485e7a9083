"""
SQLite-backed storage for the tournament record.

The whole tournament is kept as one serialized record under a fixed key.
A record that fails to parse is discarded and the default tournament is
returned in its place.
"""

import json
import logging
import sqlite3
import time
from typing import Optional

from pydantic import ValidationError

from roundrobin.config import AppConfig
from roundrobin.models import Tournament
from roundrobin.tournament import default_tournament

logger = logging.getLogger("roundrobin.store")


def get_db(db_path: str):
    """Get database connection with Row factory."""
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(db_path: str):
    """Create the records table if it doesn't exist."""
    db = get_db(db_path)
    db.execute("""
        CREATE TABLE IF NOT EXISTS records (
            key TEXT PRIMARY KEY,
            payload TEXT NOT NULL,
            updated_at INTEGER NOT NULL
        )
    """)
    db.commit()
    db.close()


class TournamentStore:
    """Explicit load/save capability for a single tournament record."""

    def __init__(self, db_path: Optional[str] = None, key: Optional[str] = None):
        self.db_path = db_path or AppConfig.DB_PATH
        self.key = key or AppConfig.STORE_KEY
        init_db(self.db_path)

    def load_raw(self) -> Optional[str]:
        """Return the stored payload exactly as saved, or None."""
        db = get_db(self.db_path)
        row = db.execute("SELECT payload FROM records WHERE key = ?", (self.key,)).fetchone()
        db.close()
        return row["payload"] if row else None

    def load(self) -> Tournament:
        """Load the tournament, falling back to defaults if absent or corrupt."""
        payload = self.load_raw()
        if payload is None:
            logger.info(f"No saved tournament under '{self.key}', using defaults")
            return default_tournament()

        default = default_tournament()
        try:
            saved = json.loads(payload)
            # Saved keys win; anything missing comes from the defaults
            merged = {**default.model_dump(by_alias=True), **saved}
            return Tournament.model_validate(merged)
        except (ValueError, TypeError, ValidationError) as e:
            logger.error(f"Failed to parse saved tournament '{self.key}', discarding it: {e}")
            self.clear()
            return default

    def save(self, tournament: Tournament):
        db = get_db(self.db_path)
        db.execute(
            "INSERT OR REPLACE INTO records (key, payload, updated_at) VALUES (?, ?, ?)",
            (self.key, tournament.to_json(), int(time.time())),
        )
        db.commit()
        db.close()
        logger.debug(f"Saved tournament '{self.key}' ({len(tournament.matches)} matches)")

    def clear(self):
        db = get_db(self.db_path)
        db.execute("DELETE FROM records WHERE key = ?", (self.key,))
        db.commit()
        db.close()
