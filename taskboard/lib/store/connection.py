import logging
import sqlite3
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import fields
from pathlib import Path
from typing import Any, TypeVar

from taskboard import config
from taskboard.lib import paths
from taskboard.lib.store import migrations
from taskboard.lib.store.sqlite import connect

logger = logging.getLogger(__name__)

T = TypeVar("T")

Row = sqlite3.Row

_connections = threading.local()
_schema_ready: set[str] = set()
_schema_lock = threading.Lock()


def db_path() -> Path:
    return paths.data_dir() / config.get("db_file")


def database_exists() -> bool:
    return db_path().exists()


def from_row(row: dict[str, Any] | Any, dataclass_type: type[T]) -> T:
    """Convert dict-like row to dataclass instance.

    Backend-agnostic: works with sqlite3.Row, dict, or any dict-like object.
    """
    field_names = {f.name for f in fields(dataclass_type)}
    row_dict = dict(row) if not isinstance(row, dict) else row
    kwargs = {key: row_dict[key] for key in field_names if key in row_dict}
    return dataclass_type(**kwargs)


def ensure() -> sqlite3.Connection:
    """Ensure the database exists with migrations applied.

    Returns a connection cached per thread and per database file.
    """
    path = db_path()
    cache_key = str(path)

    cache = getattr(_connections, "by_path", None)
    if cache is None:
        cache = _connections.by_path = {}

    conn = cache.get(cache_key)
    if conn is not None:
        return conn

    path.parent.mkdir(parents=True, exist_ok=True)

    with _schema_lock:
        if cache_key not in _schema_ready:
            migs = migrations.load_migrations(paths.migrations_dir())
            migrations.ensure_schema(path, migs)
            _schema_ready.add(cache_key)

    conn = connect(path, busy_timeout_ms=config.get("busy_timeout_ms"))
    cache[cache_key] = conn
    return conn


@contextmanager
def transaction() -> Iterator[sqlite3.Connection]:
    """Run a block of writes atomically.

    COMMIT on normal exit, ROLLBACK on any exception, which is re-raised.
    """
    conn = ensure()
    conn.execute("BEGIN IMMEDIATE")
    try:
        yield conn
        conn.execute("COMMIT")
    except BaseException:
        if conn.in_transaction:
            conn.execute("ROLLBACK")
            logger.debug("Transaction rolled back")
        raise


def close_all() -> None:
    """Close connections cached by the calling thread."""
    cache = getattr(_connections, "by_path", None)
    if cache:
        for conn in cache.values():
            conn.close()
        cache.clear()


def _reset_for_testing() -> None:
    close_all()
    with _schema_lock:
        _schema_ready.clear()
