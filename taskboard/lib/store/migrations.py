"""Database schema migrations and initialization."""

import logging
import sqlite3
from collections.abc import Callable
from pathlib import Path

from taskboard.errors import MigrationError
from taskboard.lib.store.sqlite import connect

logger = logging.getLogger(__name__)


def load_migrations(migrations_dir: Path) -> list[tuple[str, str]]:
    """Load numbered .sql files (001_*.sql, 002_*.sql, ...) in lexical order.

    Returns:
        List of (migration_name, sql_content) tuples
    """
    if not migrations_dir.exists():
        return []

    migrations = []
    for sql_file in sorted(migrations_dir.glob("*.sql")):
        migrations.append((sql_file.stem, sql_file.read_text()))

    return migrations


def ensure_schema(
    db_path: Path,
    migs: list[tuple[str, str | Callable]] | None = None,
) -> None:
    """Ensure schema exists and apply migrations."""
    conn = connect(db_path)
    try:
        if migs:
            migrate(conn, migs)
    finally:
        conn.close()


def migrate(conn: sqlite3.Connection, migs: list[tuple[str, str | Callable]]) -> None:
    """Apply migrations to connection with data loss safeguards."""
    conn.execute("CREATE TABLE IF NOT EXISTS _migrations (name TEXT PRIMARY KEY)")

    for name, migration in migs:
        applied = conn.execute("SELECT 1 FROM _migrations WHERE name = ?", (name,)).fetchone()
        if applied:
            continue

        tables = [
            row[0]
            for row in conn.execute(
                "SELECT name FROM sqlite_master WHERE type='table' AND name != '_migrations' AND name != 'sqlite_sequence'"
            ).fetchall()
        ]
        before = {t: _get_table_count(conn, t) for t in tables}

        try:
            if callable(migration):
                conn.execute("BEGIN")
                migration(conn)
            else:
                # executescript commits any open transaction first, so the
                # BEGIN has to travel inside the script.
                conn.executescript(f"BEGIN;\n{migration}\n")

            for table, count_before in before.items():
                _check_migration_safety(conn, table, count_before, allow_loss=0)

            conn.execute("INSERT OR IGNORE INTO _migrations (name) VALUES (?)", (name,))
            conn.execute("COMMIT")
        except Exception as e:
            if conn.in_transaction:
                conn.execute("ROLLBACK")
            logger.error(f"Migration '{name}' failed: {e}")
            raise MigrationError(f"Migration '{name}' failed: {e}") from e

        logger.info(f"Applied migration {name}")


def _get_table_count(conn: sqlite3.Connection, table: str) -> int:
    """Get row count for table, returns 0 if table doesn't exist."""
    try:
        cursor = conn.execute(
            "SELECT COUNT(*) FROM sqlite_master WHERE type='table' AND name=?",
            (table,),
        )
        if not cursor.fetchone()[0]:
            return 0
        result = conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()
        return result[0] if result else 0
    except sqlite3.OperationalError:
        return 0


def _check_migration_safety(
    conn: sqlite3.Connection, table: str, before: int, allow_loss: int = 0
) -> None:
    """Verify row count after migration, raise if data loss exceeds threshold.

    Raises:
        ValueError: If data loss detected exceeds allow_loss
    """
    after = _get_table_count(conn, table)
    lost = before - after

    if lost > allow_loss:
        msg = f"Migration {table}: {lost} rows lost (before: {before}, after: {after})"
        logger.error(msg)
        raise ValueError(msg)

    if lost > 0:
        logger.warning(
            f"Migration {table}: {lost} rows removed (expected for allow_loss={allow_loss})"
        )
