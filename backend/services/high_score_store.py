"""
Persistent high score for the snake game.

The best score is kept in a small SQLite table, with the database path
chosen from the environment (SNAKE_HIGH_SCORE_DB) or defaulting to a file
next to the backend. Storage failures never interrupt play: loads fall back
to the in-memory value and failed saves are logged.
"""

import logging
import os
import sqlite3
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

HIGH_SCORE_KEY = "snakeHighScore"


def get_database_path() -> str:
    """
    Determine the SQLite file that stores the high score.

    Returns:
        SNAKE_HIGH_SCORE_DB when set, otherwise backend/snake_high_score.db
    """
    db_path = os.getenv("SNAKE_HIGH_SCORE_DB", "").strip()
    if db_path:
        return db_path

    backend_dir = Path(__file__).resolve().parent.parent
    return str(backend_dir / "snake_high_score.db")


class HighScoreStore:
    """
    Reads and updates the stored best score.

    Attributes:
        db_path: SQLite database file
        key: row key, so several games could share one database
        best: last known high score (kept even if the database is unavailable)
    """

    def __init__(self, db_path: Optional[str] = None, key: str = HIGH_SCORE_KEY):
        self.db_path = db_path or get_database_path()
        self.key = key
        self.best = 0

    def get_connection(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row  # Enable column access by name
        return conn

    def init_database(self) -> None:
        """Create the schema. Safe to call multiple times (uses IF NOT EXISTS)."""
        conn = self.get_connection()
        try:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS high_scores (
                    key TEXT PRIMARY KEY,
                    score INTEGER NOT NULL DEFAULT 0 CHECK(score >= 0),
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)
            conn.commit()
        finally:
            conn.close()

    def load(self) -> int:
        """Return the stored high score, or the last known one if it cannot be read."""
        try:
            self.init_database()
            conn = self.get_connection()
            try:
                row = conn.execute(
                    "SELECT score FROM high_scores WHERE key = ?", (self.key,)
                ).fetchone()
            finally:
                conn.close()
        except sqlite3.Error as e:
            logger.warning("Error loading high score from %s: %s", self.db_path, e)
            return self.best

        self.best = int(row["score"]) if row else 0
        return self.best

    def record(self, score: int, strict: bool = False) -> bool:
        """
        Store `score` if it beats the current high score.

        Args:
            score: final score of a finished game
            strict: re-raise storage errors instead of only logging them

        Returns:
            True if `score` is a new high score.
        """
        if score < 0:
            raise ValueError(f"Score cannot be negative, got {score}.")

        current = self.load()
        if score <= current:
            return False

        self.best = score
        try:
            self.init_database()
            conn = self.get_connection()
            try:
                conn.execute(
                    """
                    INSERT INTO high_scores (key, score, updated_at)
                    VALUES (?, ?, CURRENT_TIMESTAMP)
                    ON CONFLICT(key) DO UPDATE SET
                        score = excluded.score,
                        updated_at = excluded.updated_at
                    """,
                    (self.key, score),
                )
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error:
            logger.exception("Error saving high score %s to %s", score, self.db_path)
            if strict:
                raise
            logger.warning("New high score %d kept in memory only", score)
            return True

        logger.info("New high score: %d", score)
        return True

    def reset(self) -> None:
        """Forget the stored high score."""
        self.init_database()
        conn = self.get_connection()
        try:
            conn.execute("DELETE FROM high_scores WHERE key = ?", (self.key,))
            conn.commit()
        finally:
            conn.close()
        self.best = 0
