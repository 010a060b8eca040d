"""Database connection management and utilities."""

from taskboard.lib.store.connection import (
    Row,
    _reset_for_testing,
    close_all,
    database_exists,
    db_path,
    ensure,
    from_row,
    transaction,
)
from taskboard.lib.store.sqlite import MAX_INTEGER, connect, fits_integer

__all__ = [
    "ensure",
    "transaction",
    "from_row",
    "Row",
    "database_exists",
    "db_path",
    "_reset_for_testing",
    "close_all",
    "connect",
    "fits_integer",
    "MAX_INTEGER",
]
