"""Keyword operations: named tags attachable to tasks."""

import logging
from datetime import datetime

from taskboard.core.models import Keyword
from taskboard.errors import ValidationError
from taskboard.lib import store
from taskboard.lib.store import from_row

logger = logging.getLogger(__name__)

_COLUMNS = "id, name, created_at, updated_at"


def _row_to_keyword(row: store.Row) -> Keyword:
    return from_row(dict(row), Keyword)


def list_keywords() -> list[Keyword]:
    """All keywords, newest first."""
    with store.ensure() as conn:
        rows = conn.execute(f"SELECT {_COLUMNS} FROM keywords ORDER BY id DESC").fetchall()
    return [_row_to_keyword(row) for row in rows]


def get_keyword(keyword_id: int) -> Keyword | None:
    if not store.fits_integer(keyword_id):
        return None
    with store.ensure() as conn:
        row = conn.execute(
            f"SELECT {_COLUMNS} FROM keywords WHERE id = ?", (keyword_id,)
        ).fetchone()
    return _row_to_keyword(row) if row else None


def create_keyword(name: str) -> Keyword:
    name = (name or "").strip()
    if not name:
        raise ValidationError("name")

    now = datetime.now().isoformat(timespec="seconds")
    with store.transaction() as conn:
        cursor = conn.execute(
            "INSERT INTO keywords (name, created_at, updated_at) VALUES (?, ?, ?)",
            (name, now, now),
        )
        row = conn.execute(
            f"SELECT {_COLUMNS} FROM keywords WHERE id = ?", (cursor.lastrowid,)
        ).fetchone()

    keyword = _row_to_keyword(row)
    logger.info(f"Created keyword {keyword.id} ({keyword.name!r})")
    return keyword
