"""
SQLite database integration.

``Database`` wraps a connection string and hands out short-lived
connections: every store operation opens its own connection, runs a
single statement and closes it again, so a ``Database`` instance can be
shared freely between request threads.  ``init_db`` creates the
``places`` table on application start.

The column widths mirror the validation limits in
``schemas.place``.  SQLite ignores ``VARCHAR(n)``, so the limits are
enforced with ``CHECK`` constraints as well.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from places_api.app.schemas.place import (
    ADDRESS_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
    NAME_MAX_LENGTH,
)

logger = logging.getLogger(__name__)

SQLITE_URL_PREFIX = "sqlite:///"

PLACES_TABLE_DDL = f"""
CREATE TABLE IF NOT EXISTS places (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name VARCHAR({NAME_MAX_LENGTH}) NOT NULL CHECK (length(name) <= {NAME_MAX_LENGTH}),
    address VARCHAR({ADDRESS_MAX_LENGTH}) NOT NULL CHECK (length(address) <= {ADDRESS_MAX_LENGTH}),
    description TEXT CHECK (length(description) <= {DESCRIPTION_MAX_LENGTH}),
    created TIMESTAMP DEFAULT CURRENT_TIMESTAMP
)
"""


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def resolve_database_path(database_url: str) -> str:
    """Turn a connection string into a filesystem path.

    Accepts a plain path or a ``sqlite:///`` URL.  Absolute paths are
    returned as is; relative paths are resolved against the project
    root (the directory containing the ``places_api`` package).
    """
    path = database_url
    if path.startswith(SQLITE_URL_PREFIX):
        path = path[len(SQLITE_URL_PREFIX):]
    if os.path.isabs(path):
        return path
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / path).resolve())


class Database:
    """Connection factory for the places store."""

    def __init__(self, database_url: str) -> None:
        if not database_url:
            raise ValueError("database_url must not be empty")
        self.path = resolve_database_path(database_url)

    def get_connection(self) -> sqlite3.Connection:
        """Open a new connection whose rows are addressable by column name.

        SQLite's built-in ``LOWER`` only folds ASCII; it is replaced with
        Python's ``str.lower`` so name filters match accented names too.
        """
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        conn.create_function("LOWER", 1, _unicode_lower, deterministic=True)
        return conn

    @contextmanager
    def get_cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor, commit if the block succeeds and always close."""
        conn = self.get_connection()
        try:
            yield conn.cursor()
            conn.commit()
        finally:
            conn.close()

    def init_db(self) -> None:
        """Create the ``places`` table if it does not exist yet.

        Errors propagate: a store that cannot be opened or migrated is
        fatal at startup.
        """
        with self.get_cursor() as cursor:
            cursor.execute(PLACES_TABLE_DDL)
        logger.info("Database ready at %s", self.path)
