"""
SQLite database integration and simple migration system.

This module provides functions for opening the process-wide database
connection (``get_connection``) and applying migrations on
application start (``init_db``).  SQLite is used as a lightweight
embedded backend for the contacts collection; to switch to another
DBMS you would replace the connection logic and ``ContactStore``.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from pathlib import Path

logger = logging.getLogger(__name__)

MEMORY_DATABASE = ":memory:"


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths and ``:memory:`` are used as is; anything else is
    resolved relative to the project root.
    """
    if database_url == MEMORY_DATABASE or os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / database_url).resolve())


def get_connection(database_url: str) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection uses a row factory to access columns by name.  It
    is shared by every request for the lifetime of the process, so it
    is opened with ``check_same_thread`` disabled.
    """
    db_path = get_database_path(database_url)
    conn = sqlite3.connect(db_path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    logger.debug("Opened database %s", db_path)
    return conn


def init_db(conn: sqlite3.Connection) -> None:
    """Apply pending migrations on ``conn``.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version and applies any newer entries from the
    list below.  To change the schema, append a migration with an
    incremented version number.
    """
    migrations: list[tuple[int, str]] = [
        (
            1,
            """
            CREATE TABLE IF NOT EXISTS contacts (
                seq INTEGER PRIMARY KEY AUTOINCREMENT,
                id TEXT NOT NULL UNIQUE,
                name TEXT NOT NULL,
                image_url TEXT,
                email TEXT,
                mobile TEXT NOT NULL,
                company TEXT,
                title TEXT,
                group_id TEXT
            );
            """,
        ),
        (
            2,
            """
            -- One contact per mobile number, enforced by the database
            CREATE UNIQUE INDEX IF NOT EXISTS ux_contacts_mobile ON contacts(mobile);
            """,
        ),
    ]

    cursor = conn.cursor()
    cursor.execute(
        "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
    )
    cursor.execute("SELECT MAX(version) as version FROM migrations")
    row = cursor.fetchone()
    current_version = row["version"] if row and row["version"] is not None else 0

    for version, sql in migrations:
        if version > current_version:
            cursor.executescript(sql)
            cursor.execute(
                "INSERT INTO migrations (version) VALUES (?)", (version,)
            )
            logger.info("Applied migration %s", version)
            current_version = version
    conn.commit()
