import logging
import sqlite3
from pathlib import Path

logger = logging.getLogger(__name__)

MIN_INTEGER = -(2**63)
MAX_INTEGER = 2**63 - 1


def fits_integer(value: int) -> bool:
    """True if value can be bound as a SQLite INTEGER."""
    return MIN_INTEGER <= value <= MAX_INTEGER


def connect(db_path: Path, busy_timeout_ms: int = 5000) -> sqlite3.Connection:
    """Open an autocommit connection with foreign keys enforced.

    Writes go through store.transaction(), which issues BEGIN itself.
    """
    conn = sqlite3.connect(db_path, check_same_thread=False, isolation_level=None)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    conn.execute(f"PRAGMA busy_timeout = {int(busy_timeout_ms)}")

    mode = conn.execute("PRAGMA journal_mode = WAL").fetchone()[0]
    if mode.lower() != "wal":
        logger.warning(f"{db_path.name}: WAL unavailable, journal_mode is {mode}")

    return conn
