"""
score_db.py: Database layer for best-score persistence.
Failures are logged and swallowed here so the game never depends on storage.
"""

import sqlite3
from typing import Optional

from .constants import DB_FILE, BEST_RECORD_KEY
from .logger import get_logger

log = get_logger("score_db")


class ScoreDatabase:
    """Handles all interaction with the SQLite database."""

    def __init__(self, db_file: str = DB_FILE, key: str = BEST_RECORD_KEY):
        self.db_file = db_file
        self.key = key
        self.conn: Optional[sqlite3.Connection] = None
        try:
            # check_same_thread=False so a render thread may read between ticks
            self.conn = sqlite3.connect(db_file, check_same_thread=False)
            self.setup()
        except sqlite3.Error as e:
            log.warning("Score database unavailable at %s: %s", db_file, e)
            self.conn = None

    @property
    def available(self) -> bool:
        return self.conn is not None

    def setup(self):
        """Creates tables if they don't exist."""
        self.conn.execute("""
            CREATE TABLE IF NOT EXISTS BestRecords (
                key TEXT PRIMARY KEY,
                best INTEGER NOT NULL DEFAULT 0
            )
        """)
        self.conn.commit()

    def load_best_record(self) -> int:
        """Fetches the stored best score, 0 if none or on failure."""
        if self.conn is None:
            return 0
        try:
            row = self.conn.execute(
                "SELECT best FROM BestRecords WHERE key=?", (self.key,)).fetchone()
        except sqlite3.Error as e:
            log.warning("Could not load best record: %s", e)
            return 0
        return int(row[0]) if row else 0

    def save_best_record(self, best: int) -> bool:
        """Stores best if it beats the stored value. Returns False on failure."""
        if self.conn is None:
            return False
        try:
            self.conn.execute(
                "INSERT INTO BestRecords (key, best) VALUES (?, ?) "
                "ON CONFLICT(key) DO UPDATE SET best = MAX(best, excluded.best)",
                (self.key, int(best)))
            self.conn.commit()
        except sqlite3.Error as e:
            log.warning("Could not save best record %d: %s", best, e)
            return False
        return True

    def close(self):
        if self.conn is not None:
            self.conn.close()
            self.conn = None
