"""
SQLite-backed document store and simple migration system.

The store keeps every entity family as a named *collection* of
schemaless JSON records inside a single ``documents`` table keyed by
``(collection, id)``.  It enforces nothing about record contents: no
foreign keys, no cross-collection transactions.  The only constraints
are the unique expression indexes on user names and emails, which
surface as ``DuplicateKeyError``.

``collection(name)`` returns a handle with ``read_raw``, ``get``,
``set``, ``add``, ``remove``, ``search`` and ``search_keys``.  Typing
is imposed by the mapper and repository layers above this module.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import json
import logging
import os
import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List

from .config import settings
from .errors import DuplicateKeyError, NotFoundError

logger = logging.getLogger(__name__)

Record = Dict[str, Any]

# Key under which the document id is exposed inside every record.
ID_FIELD = "id"


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # resource_pack_api/
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection with name-addressable rows."""
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: document and sequence tables
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS documents (
            collection TEXT NOT NULL,
            id TEXT NOT NULL,
            data TEXT NOT NULL,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            PRIMARY KEY (collection, id)
        );

        -- Last generated id per collection, used by ``Collection.add``.
        CREATE TABLE IF NOT EXISTS sequences (
            collection TEXT PRIMARY KEY,
            value INTEGER NOT NULL
        );
        """,
    ),
    # Migration 2: account uniqueness
    (
        2,
        """
        -- Usernames and emails are unique across the users collection.
        -- NULLs never collide, so accounts without a username are fine.
        CREATE UNIQUE INDEX IF NOT EXISTS idx_users_username
            ON documents(json_extract(data, '$.username'))
            WHERE collection = 'users';
        CREATE UNIQUE INDEX IF NOT EXISTS idx_users_email
            ON documents(json_extract(data, '$.email'))
            WHERE collection = 'users';
        """,
    ),
]


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any new migrations defined in
    ``MIGRATIONS``.  Append new migrations with an incremented version.
    """
    with get_cursor() as cursor:
        cursor.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
                current_version = version
                logger.info("Applied migration %s", version)


@dataclass
class WriteConfirmation:
    """Acknowledgement returned by ``set`` and ``remove``."""

    collection: str
    id: str
    message: str


def _load(row: sqlite3.Row) -> Record:
    record = json.loads(row["data"])
    record[ID_FIELD] = row["id"]
    return record


class Collection:
    """Handle on one named collection of the document store.

    Every method opens its own connection; nothing is cached between
    calls, so each call observes the current store state.
    """

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"Collection({self.name!r})"

    def read_raw(self) -> Dict[str, Record]:
        """Return every record of the collection keyed by id, in insertion order."""
        conn = get_connection()
        try:
            rows = conn.execute(
                "SELECT id, data FROM documents WHERE collection = ? ORDER BY rowid",
                (self.name,),
            ).fetchall()
            return {row["id"]: _load(row) for row in rows}
        finally:
            conn.close()

    def get(self, id: str) -> Record:
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT id, data FROM documents WHERE collection = ? AND id = ?",
                (self.name, str(id)),
            ).fetchone()
        finally:
            conn.close()
        if row is None:
            raise NotFoundError(f"{self.name} entry '{id}' not found", details={"collection": self.name, "id": str(id)})
        return _load(row)

    def exists(self, id: str) -> bool:
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT 1 FROM documents WHERE collection = ? AND id = ?",
                (self.name, str(id)),
            ).fetchone()
            return row is not None
        finally:
            conn.close()

    def set(self, id: str, record: Record) -> WriteConfirmation:
        """Insert or replace the record stored under ``id``.

        The stored ``id`` field always equals the key.  Raises
        ``DuplicateKeyError`` when a unique index rejects the write.
        """
        key = str(id)
        payload = dict(record)
        payload[ID_FIELD] = key
        conn = get_connection()
        try:
            conn.execute(
                "INSERT INTO documents (collection, id, data) VALUES (?, ?, ?)"
                " ON CONFLICT(collection, id) DO UPDATE SET data = excluded.data, updated_at = CURRENT_TIMESTAMP",
                (self.name, key, json.dumps(payload)),
            )
            conn.commit()
        except sqlite3.IntegrityError as e:
            conn.rollback()
            raise DuplicateKeyError(self.name, str(e)) from e
        finally:
            conn.close()
        logger.debug("Wrote %s/%s", self.name, key)
        return WriteConfirmation(collection=self.name, id=key, message="Written")

    def add(self, record: Record) -> str:
        """Store ``record`` under the next generated id and return that id.

        Ids are the collection's sequence value rendered as a string.
        Values already taken by explicitly keyed records are skipped.
        """
        conn = get_connection()
        try:
            cursor = conn.cursor()
            while True:
                cursor.execute(
                    "INSERT INTO sequences (collection, value) VALUES (?, 1)"
                    " ON CONFLICT(collection) DO UPDATE SET value = value + 1",
                    (self.name,),
                )
                value = cursor.execute(
                    "SELECT value FROM sequences WHERE collection = ?", (self.name,)
                ).fetchone()["value"]
                key = str(value)
                taken = cursor.execute(
                    "SELECT 1 FROM documents WHERE collection = ? AND id = ?", (self.name, key)
                ).fetchone()
                if taken is None:
                    break
            payload = dict(record)
            payload[ID_FIELD] = key
            cursor.execute(
                "INSERT INTO documents (collection, id, data) VALUES (?, ?, ?)",
                (self.name, key, json.dumps(payload)),
            )
            conn.commit()
        except sqlite3.IntegrityError as e:
            conn.rollback()
            raise DuplicateKeyError(self.name, str(e)) from e
        finally:
            conn.close()
        logger.debug("Added %s/%s", self.name, key)
        return key

    def remove(self, id: str) -> WriteConfirmation:
        key = str(id)
        conn = get_connection()
        try:
            cursor = conn.execute(
                "DELETE FROM documents WHERE collection = ? AND id = ?", (self.name, key)
            )
            conn.commit()
            deleted = cursor.rowcount
        finally:
            conn.close()
        if deleted == 0:
            raise NotFoundError(f"{self.name} entry '{key}' not found", details={"collection": self.name, "id": key})
        logger.debug("Removed %s/%s", self.name, key)
        return WriteConfirmation(collection=self.name, id=key, message="Removed")

    def search(self, field: str, value: Any) -> List[Record]:
        """Return records whose top-level ``field`` equals the scalar ``value``."""
        if isinstance(value, bool):
            value = int(value)
        conn = get_connection()
        try:
            rows = conn.execute(
                "SELECT id, data FROM documents WHERE collection = ?"
                " AND json_extract(data, ?) = ? ORDER BY rowid",
                (self.name, f"$.{field}", value),
            ).fetchall()
            return [_load(row) for row in rows]
        finally:
            conn.close()

    def search_keys(self, ids: Iterable[str]) -> List[Record]:
        """Return the records for the ids that exist, in request order."""
        keys = [str(i) for i in ids]
        if not keys:
            return []
        placeholders = ", ".join("?" for _ in keys)
        conn = get_connection()
        try:
            rows = conn.execute(
                f"SELECT id, data FROM documents WHERE collection = ? AND id IN ({placeholders})",
                (self.name, *keys),
            ).fetchall()
        finally:
            conn.close()
        found = {row["id"]: _load(row) for row in rows}
        return [found[k] for k in keys if k in found]


def collection(name: str) -> Collection:
    """Return a handle on the named collection."""
    return Collection(name)
