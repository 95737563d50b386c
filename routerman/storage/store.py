"""
SQLite record store for routerman.

One ``Database`` owns the connection and exposes a store per record type.
Every store offers create/read/read_many/delete; stores of user-owned records
add the ``*_by_user_id`` variants and the device store adds MAC lookups.
"""

import logging
import sqlite3
from pathlib import Path
from typing import Iterable, Optional, Union

from routerman.common.errors import RoutermanError

from .dataclasses import BandwidthSlot, Device, User

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS devices (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id INTEGER NOT NULL,
    mac TEXT NOT NULL UNIQUE,
    alias TEXT NOT NULL DEFAULT ''
);
CREATE TABLE IF NOT EXISTS bandwidth_slots (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id INTEGER NOT NULL,
    remote_id INTEGER NOT NULL
);
"""


class StoreError(RoutermanError):
    """Raised when the database cannot complete an operation."""
    pass


class NotFoundError(StoreError):
    """Raised when a record id no longer resolves."""
    pass


class RecordStore:
    """Common CRUD operations over one table."""

    table = ""
    columns: tuple = ()
    record_type = None

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def _execute(self, sql: str, params: Iterable = ()) -> sqlite3.Cursor:
        """Run a write statement in its own transaction."""
        try:
            with self.conn:
                return self.conn.execute(sql, tuple(params))
        except sqlite3.Error as e:
            raise StoreError(f"{self.table}: {e}") from e

    def _query(self, sql: str, params: Iterable = ()) -> list:
        try:
            return self.conn.execute(sql, tuple(params)).fetchall()
        except sqlite3.Error as e:
            raise StoreError(f"{self.table}: {e}") from e

    def _to_record(self, row: sqlite3.Row):
        return self.record_type(**{key: row[key] for key in row.keys()})

    def create(self, record) -> int:
        """Insert a record, set its id and return it."""
        placeholders = ", ".join("?" for _ in self.columns)
        cursor = self._execute(
            f"INSERT INTO {self.table} ({', '.join(self.columns)}) VALUES ({placeholders})",
            [getattr(record, column) for column in self.columns],
        )
        record.id = cursor.lastrowid
        logger.info("created %s id=%s", self.table, record.id)
        return record.id

    def read(self, record_id: int):
        """Fetch one record by id (raises NotFoundError)."""
        rows = self._query(f"SELECT * FROM {self.table} WHERE id = ?", [record_id])
        if not rows:
            raise NotFoundError(f"{self.table} record {record_id} not found")
        return self._to_record(rows[0])

    def read_many(self, page_size: int, page_number: int) -> list:
        """Fetch one page of records ordered by id (pages are 1-based)."""
        rows = self._query(
            f"SELECT * FROM {self.table} ORDER BY id LIMIT ? OFFSET ?",
            [page_size, (page_number - 1) * page_size],
        )
        return [self._to_record(row) for row in rows]

    def delete(self, record_id: int) -> None:
        """Delete one record by id (raises NotFoundError if absent)."""
        cursor = self._execute(f"DELETE FROM {self.table} WHERE id = ?", [record_id])
        if cursor.rowcount == 0:
            raise NotFoundError(f"{self.table} record {record_id} not found")
        logger.info("deleted %s id=%s", self.table, record_id)


class UserOwnedStore(RecordStore):
    """Store for records carrying a ``user_id`` column."""

    def read_many_by_user_id(self, user_id: int, page_size: int, page_number: int) -> list:
        rows = self._query(
            f"SELECT * FROM {self.table} WHERE user_id = ? ORDER BY id LIMIT ? OFFSET ?",
            [user_id, page_size, (page_number - 1) * page_size],
        )
        return [self._to_record(row) for row in rows]

    def delete_by_user_id(self, user_id: int) -> None:
        cursor = self._execute(f"DELETE FROM {self.table} WHERE user_id = ?", [user_id])
        logger.info("deleted %d %s for user_id=%s", cursor.rowcount, self.table, user_id)


class UserStore(RecordStore):
    table = "users"
    columns = ("name",)
    record_type = User


class DeviceStore(UserOwnedStore):
    table = "devices"
    columns = ("user_id", "mac", "alias")
    record_type = Device

    def read_many_by_mac(self, macs: Iterable[str]) -> list:
        """Fetch every device whose MAC is in ``macs``."""
        macs = [mac for mac in macs if mac]
        if not macs:
            return []
        placeholders = ", ".join("?" for _ in macs)
        rows = self._query(
            f"SELECT * FROM {self.table} WHERE mac IN ({placeholders}) ORDER BY id", macs
        )
        return [self._to_record(row) for row in rows]


class BandwidthSlotStore(UserOwnedStore):
    table = "bandwidth_slots"
    columns = ("user_id", "remote_id")
    record_type = BandwidthSlot


class Database:
    """Connection owner exposing the user, device and bandwidth slot stores."""

    def __init__(self, path: Union[str, Path] = ":memory:"):
        if str(path) != ":memory:":
            Path(path).parent.mkdir(parents=True, exist_ok=True)
        try:
            self.conn = sqlite3.connect(str(path))
            self.conn.row_factory = sqlite3.Row
            self.conn.executescript(SCHEMA)
        except sqlite3.Error as e:
            raise StoreError(f"Cannot open database {path}: {e}") from e

        self.users = UserStore(self.conn)
        self.devices = DeviceStore(self.conn)
        self.bandwidth_slots = BandwidthSlotStore(self.conn)

    def close(self) -> None:
        self.conn.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def open_database(path: Optional[Union[str, Path]] = None) -> Database:
    """Open the database at ``path`` (in memory when None)."""
    return Database(path if path is not None else ":memory:")
