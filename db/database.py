import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Mapping, Optional

from utils.scheduler import ReviewState
from .schema import SCHEMA_SQL, INDEXES_SQL, SCHEMA_VERSION

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".senderos"
DB_PATH = CONFIG_DIR / "senderos.db"

def init_db():
    """Initialize the database by creating tables and indexes if they don't exist."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    with get_conn() as conn:
        conn.executescript(SCHEMA_SQL)
        conn.executescript(INDEXES_SQL)
        ensure_schema_version(conn)
        conn.commit()

def get_schema_version(conn: sqlite3.Connection) -> int:
    """Read the SQLite schema version from PRAGMA user_version."""
    cursor = conn.cursor()
    cursor.execute("PRAGMA user_version")
    row = cursor.fetchone()
    return int(row[0]) if row else 0

def set_schema_version(conn: sqlite3.Connection, version: int) -> None:
    """Set the SQLite schema version via PRAGMA user_version."""
    conn.execute(f"PRAGMA user_version = {int(version)}")

def ensure_schema_version(conn: sqlite3.Connection) -> None:
    """Ensure the current schema version is written to the database."""
    current = get_schema_version(conn)
    if current != SCHEMA_VERSION:
        set_schema_version(conn, SCHEMA_VERSION)

@contextmanager
def get_conn(db_path: Optional[Path] = None):
    """Context manager for SQLite connection, using row_factory for dict-like rows."""
    conn = sqlite3.connect(db_path or DB_PATH, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    try:
        yield conn
    finally:
        conn.close()

class ScheduleStore:
    """Load/save access to the whole card schedule mapping."""

    def __init__(self, conn: sqlite3.Connection):
        self._conn = conn

    def load(self) -> Dict[str, ReviewState]:
        """Return every stored schedule; unreadable data counts as no data."""
        try:
            rows = self._conn.execute(
                "SELECT card_id, ef, reps, interval_ms, due_ms, lapses, is_leech FROM schedules"
            ).fetchall()
        except sqlite3.DatabaseError as exc:
            logger.warning("Schedule data unreadable, starting empty: %s", exc)
            return {}
        schedules: Dict[str, ReviewState] = {}
        for row in rows:
            try:
                schedules[str(row["card_id"])] = ReviewState(
                    ef=float(row["ef"]),
                    reps=int(row["reps"]),
                    interval=int(row["interval_ms"]),
                    due=int(row["due_ms"]),
                    lapses=int(row["lapses"]),
                    is_leech=bool(row["is_leech"]),
                )
            except (TypeError, ValueError) as exc:
                logger.warning("Schedule data corrupt, starting empty: %s", exc)
                return {}
        return schedules

    def save(self, schedules: Mapping[str, ReviewState]) -> None:
        """Replace the stored mapping with ``schedules`` in one transaction."""
        with self._conn:
            self._conn.execute("DELETE FROM schedules")
            self._conn.executemany(
                """
                INSERT INTO schedules (card_id, ef, reps, interval_ms, due_ms, lapses, is_leech)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                [
                    (
                        card_id,
                        state.ef,
                        state.reps,
                        state.interval,
                        state.due,
                        state.lapses,
                        int(state.is_leech),
                    )
                    for card_id, state in schedules.items()
                ],
            )

def get_store():
    """FastAPI dependency that yields a ScheduleStore over a fresh connection."""
    with get_conn() as conn:
        yield ScheduleStore(conn)
