"""
Service layer for places.

Each method maps one API operation onto exactly one parameterized SQL
statement against the ``places`` table and converts rows into
``PlaceRead`` schemas.  Nothing is cached between calls: the store
holds the authoritative record.

Error behaviour differs per operation and callers rely on it:

* ``get_place`` raises ``PlaceNotFoundError`` when no row matches.
* ``create_place`` wraps any driver failure in ``PlaceStoreError``.
* ``update_place`` and ``delete_place`` let ``sqlite3.Error`` propagate
  and do not check how many rows were affected, so unknown ids are a
  silent no-op.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List

from places_api.app.core.db import Database
from places_api.app.schemas.place import PlaceBase, PlaceRead

logger = logging.getLogger(__name__)


class PlaceNotFoundError(LookupError):
    """No place exists with the requested id."""


class PlaceStoreError(RuntimeError):
    """A write to the places table failed."""


class PlaceService:
    """CRUD operations for places, bound to one ``Database``."""

    def __init__(self, database: Database) -> None:
        self.database = database

    def list_places(self, name_filter: str = "") -> List[PlaceRead]:
        """Return places whose name contains ``name_filter`` (any case).

        An empty filter matches every row.  ``%`` and ``_`` keep their
        LIKE meaning.
        """
        with self.database.get_cursor() as cursor:
            rows = cursor.execute(
                """
                SELECT id, name, address, description
                FROM places
                WHERE LOWER(name) LIKE '%' || ? || '%'
                """,
                (name_filter.lower(),),
            ).fetchall()
        return [self._row_to_place_read(row) for row in rows]

    def get_place(self, place_id: int) -> PlaceRead:
        with self.database.get_cursor() as cursor:
            row = cursor.execute(
                "SELECT id, name, address, description FROM places WHERE id = ?",
                (place_id,),
            ).fetchone()
        if row is None:
            raise PlaceNotFoundError("place not found")
        return self._row_to_place_read(row)

    def create_place(self, data: PlaceBase) -> PlaceRead:
        """Insert a place and return it with its store-assigned id."""
        try:
            with self.database.get_cursor() as cursor:
                # fetchall() steps the statement to completion so the
                # commit in get_cursor does not see it in progress.
                rows = cursor.execute(
                    """
                    INSERT INTO places (name, address, description)
                    VALUES (?, ?, ?)
                    RETURNING id
                    """,
                    (data.name, data.address, data.description),
                ).fetchall()
        except sqlite3.Error as exc:
            raise PlaceStoreError(f"inserting place: {exc}") from exc
        place_id = rows[0]["id"]
        logger.info("Inserted place %s", place_id)
        return PlaceRead(id=place_id, **data.model_dump())

    def update_place(self, place_id: int, data: PlaceBase) -> None:
        """Replace name, address and description of ``place_id``."""
        with self.database.get_cursor() as cursor:
            cursor.execute(
                "UPDATE places SET name = ?, address = ?, description = ? WHERE id = ?",
                (data.name, data.address, data.description, place_id),
            )
        logger.info("Updated place %s", place_id)

    def delete_place(self, place_id: int) -> None:
        with self.database.get_cursor() as cursor:
            cursor.execute("DELETE FROM places WHERE id = ?", (place_id,))
        logger.info("Deleted place %s", place_id)

    @staticmethod
    def _row_to_place_read(row: sqlite3.Row) -> PlaceRead:
        """Convert a database row to a PlaceRead schema instance."""
        return PlaceRead(
            id=row["id"],
            name=row["name"],
            address=row["address"],
            # Rows written outside the API may carry NULL here.
            description=row["description"] or "",
        )
