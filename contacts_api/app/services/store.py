"""
Document collection for contacts.

``ContactStore`` exposes the primitives the service needs (find all,
find by id, find by field, insert, update by id, delete by id) over
the ``contacts`` table created by ``core.db.init_db``.  The store is
constructed once with an open connection and shared by all requests.

All queries use parameterized statements.  SQLite failures are
re-raised as ``StoreError``; a violation of the unique mobile index is
reported as ``ConflictError`` so concurrent duplicate inserts cannot
both succeed.
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager, suppress
from typing import Iterator, List, Optional

from ..core.errors import ConflictError, StoreError
from ..core.identifiers import new_identifier
from ..schemas.contact import ContactIn, ContactRead

logger = logging.getLogger(__name__)

DUPLICATE_MOBILE = "Mobile is Already exists"

# Model attribute -> column.  Also the allow-list for ``find_one``.
_COLUMNS = {
    "id": "id",
    "name": "name",
    "image_url": "image_url",
    "email": "email",
    "mobile": "mobile",
    "company": "company",
    "title": "title",
    "group_id": "group_id",
}

_SELECT = "SELECT id, name, image_url, email, mobile, company, title, group_id FROM contacts"


@contextmanager
def _store_errors(conn: sqlite3.Connection) -> Iterator[None]:
    try:
        yield
    except sqlite3.IntegrityError as exc:
        conn.rollback()
        if "mobile" in str(exc):
            raise ConflictError(DUPLICATE_MOBILE) from exc
        raise StoreError(str(exc)) from exc
    except sqlite3.Error as exc:
        # The connection may already be closed.
        with suppress(sqlite3.ProgrammingError):
            conn.rollback()
        raise StoreError(str(exc)) from exc


class ContactStore:
    """Contacts collection keyed by an opaque object id."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    async def find_all(self) -> List[ContactRead]:
        """Return every contact in insertion order."""
        with _store_errors(self._conn):
            rows = self._conn.execute(f"{_SELECT} ORDER BY seq").fetchall()
        return [self._row_to_contact(row) for row in rows]

    async def find_by_id(self, contact_id: str) -> Optional[ContactRead]:
        return await self.find_one("id", contact_id)

    async def find_one(self, field: str, value: object) -> Optional[ContactRead]:
        """Return the first contact whose ``field`` equals ``value``."""
        column = _COLUMNS.get(field)
        if column is None:
            raise StoreError(f"Unknown contact field {field!r}")
        with _store_errors(self._conn):
            row = self._conn.execute(
                f"{_SELECT} WHERE {column} = ? ORDER BY seq LIMIT 1", (value,)
            ).fetchone()
        return self._row_to_contact(row) if row else None

    async def insert(self, data: ContactIn) -> ContactRead:
        """Insert a new contact and return it with its assigned id."""
        contact_id = new_identifier()
        with _store_errors(self._conn):
            self._conn.execute(
                """
                INSERT INTO contacts (id, name, image_url, email, mobile, company, title, group_id)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (contact_id, *self._values(data)),
            )
            self._conn.commit()
        logger.debug("Inserted contact %s", contact_id)
        return ContactRead(id=contact_id, **data.model_dump())

    async def update_by_id(self, contact_id: str, data: ContactIn) -> Optional[ContactRead]:
        """Replace every field of a contact.

        Fields absent from ``data`` are stored as NULL.  Returns the
        updated record, or ``None`` if no contact has ``contact_id``.
        """
        with _store_errors(self._conn):
            cursor = self._conn.execute(
                """
                UPDATE contacts
                SET name = ?, image_url = ?, email = ?, mobile = ?, company = ?, title = ?, group_id = ?
                WHERE id = ?
                """,
                (*self._values(data), contact_id),
            )
            self._conn.commit()
        if cursor.rowcount == 0:
            return None
        return await self.find_by_id(contact_id)

    async def delete_by_id(self, contact_id: str) -> Optional[ContactRead]:
        """Delete a contact and return its last snapshot, or ``None``."""
        snapshot = await self.find_by_id(contact_id)
        if snapshot is None:
            return None
        with _store_errors(self._conn):
            self._conn.execute("DELETE FROM contacts WHERE id = ?", (contact_id,))
            self._conn.commit()
        return snapshot

    @staticmethod
    def _values(data: ContactIn) -> tuple:
        return (
            data.name,
            data.image_url,
            data.email,
            data.mobile,
            data.company,
            data.title,
            data.group_id,
        )

    @staticmethod
    def _row_to_contact(row: sqlite3.Row) -> ContactRead:
        """Convert a database row to a ContactRead instance."""
        return ContactRead(
            id=row["id"],
            name=row["name"],
            image_url=row["image_url"],
            email=row["email"],
            mobile=row["mobile"],
            company=row["company"],
            title=row["title"],
            group_id=row["group_id"],
        )
