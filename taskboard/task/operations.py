"""Task operations: titled units of work with a done flag and keywords."""

import logging
import sqlite3
from collections import defaultdict
from datetime import datetime

from taskboard.core.models import Keyword, Task
from taskboard.errors import KeywordNotFoundError, TaskNotFoundError, ValidationError
from taskboard.lib import store
from taskboard.lib.store import from_row

logger = logging.getLogger(__name__)

_COLUMNS = "id, title, is_done, created_at, updated_at"

# Stay well below SQLITE_MAX_VARIABLE_NUMBER on older builds.
_CHUNK = 500


def _keywords_by_task(
    conn: sqlite3.Connection, task_id: int | None = None
) -> dict[int, list[Keyword]]:
    """Load keywords for one task, or for every task in a single query."""
    query = (
        "SELECT kt.task_id, k.id, k.name, k.created_at, k.updated_at "
        "FROM keyword_task kt JOIN keywords k ON k.id = kt.keyword_id"
    )
    params: tuple = ()
    if task_id is not None:
        query += " WHERE kt.task_id = ?"
        params = (task_id,)
    query += " ORDER BY kt.task_id, k.id"

    grouped: dict[int, list[Keyword]] = defaultdict(list)
    for row in conn.execute(query, params).fetchall():
        grouped[row["task_id"]].append(from_row(row, Keyword))
    return grouped


def _fetch_task(conn: sqlite3.Connection, task_id: int) -> Task | None:
    row = conn.execute(f"SELECT {_COLUMNS} FROM tasks WHERE id = ?", (task_id,)).fetchone()
    if not row:
        return None
    task = from_row(row, Task)
    task.keywords = _keywords_by_task(conn, task_id).get(task_id, [])
    return task


def _missing_keyword_ids(conn: sqlite3.Connection, keyword_ids: list[int]) -> list[int]:
    # ids outside the INTEGER range cannot be bound and cannot exist
    candidates = [kid for kid in keyword_ids if store.fits_integer(kid)]
    found: set[int] = set()
    for start in range(0, len(candidates), _CHUNK):
        chunk = candidates[start : start + _CHUNK]
        placeholders = ", ".join("?" for _ in chunk)
        rows = conn.execute(
            f"SELECT id FROM keywords WHERE id IN ({placeholders})", chunk
        ).fetchall()
        found.update(row["id"] for row in rows)
    return [kid for kid in keyword_ids if kid not in found]


def _attach_keywords(conn: sqlite3.Connection, task_id: int, keyword_ids: list[int]) -> None:
    missing = _missing_keyword_ids(conn, keyword_ids)
    if missing:
        raise KeywordNotFoundError(missing)
    conn.executemany(
        "INSERT INTO keyword_task (task_id, keyword_id) VALUES (?, ?)",
        [(task_id, kid) for kid in keyword_ids],
    )


def list_tasks() -> list[Task]:
    """All tasks newest first, keywords eager-loaded."""
    with store.ensure() as conn:
        rows = conn.execute(f"SELECT {_COLUMNS} FROM tasks ORDER BY id DESC").fetchall()
        keywords = _keywords_by_task(conn) if rows else {}

    tasks = [from_row(row, Task) for row in rows]
    for task in tasks:
        task.keywords = keywords.get(task.id, [])
    return tasks


def get_task(task_id: int) -> Task | None:
    if not store.fits_integer(task_id):
        return None
    with store.ensure() as conn:
        return _fetch_task(conn, task_id)


def create_task(title: str, keyword_ids: list[int] | None = None) -> Task:
    """Create a task and attach existing keywords in one transaction.

    Unknown keyword ids abort the whole write: no task row is left behind.
    Repeated ids are attached once.
    """
    title = (title or "").strip()
    if not title:
        raise ValidationError("title")

    ids = list(dict.fromkeys(keyword_ids or []))
    now = datetime.now().isoformat(timespec="seconds")

    with store.transaction() as conn:
        cursor = conn.execute(
            "INSERT INTO tasks (title, is_done, created_at, updated_at) VALUES (?, 0, ?, ?)",
            (title, now, now),
        )
        task_id = cursor.lastrowid
        if ids:
            _attach_keywords(conn, task_id, ids)
        task = _fetch_task(conn, task_id)

    logger.info(f"Created task {task.id} with {len(task.keywords)} keyword(s)")
    return task


def toggle_task(task_id: int) -> Task:
    """Flip is_done. Raises TaskNotFoundError for unknown ids."""
    if not store.fits_integer(task_id):
        raise TaskNotFoundError(task_id)

    now = datetime.now().isoformat(timespec="seconds")

    with store.transaction() as conn:
        row = conn.execute("SELECT is_done FROM tasks WHERE id = ?", (task_id,)).fetchone()
        if row is None:
            raise TaskNotFoundError(task_id)
        conn.execute(
            "UPDATE tasks SET is_done = ?, updated_at = ? WHERE id = ?",
            (0 if row["is_done"] else 1, now, task_id),
        )
        task = _fetch_task(conn, task_id)

    logger.info(f"Task {task.id} is now {task.status.value}")
    return task
