# draftboard/row_store.py
"""
Row store adapters.

The engine only needs three things from storage: every row in insertion
order (row 0 is the header), a single-row append, and narrow reads of one
column. `SqliteRowStore` keeps each row as a JSON array so the positional
layout survives untouched; `MemoryRowStore` holds rows in a list.
"""

from __future__ import annotations

import json
import logging
import os
import sqlite3
import time
from typing import Any, List, Optional, Sequence

from draftboard.errors import StoreUnavailable, StoreWriteError
from draftboard.record_builder import header_row

logger = logging.getLogger(__name__)


class RowStore:
    """Contract shared by all row stores."""

    def read_all(self) -> List[List[Any]]:
        raise NotImplementedError

    def append(self, record: Sequence[Any]) -> None:
        raise NotImplementedError

    def read_column(self, index: int, start_row: int, row_count: int) -> List[Any]:
        """Return cells at `index` for rows [start_row, start_row + row_count)."""
        rows = self.read_all()[start_row:start_row + max(0, row_count)]
        return [row[index] if index < len(row) else "" for row in rows]

    def row_count(self) -> int:
        return len(self.read_all())

    def ensure_header(self) -> bool:
        """Write the header row into an empty store. Returns True if written."""
        if self.row_count() > 0:
            return False
        self.append(header_row())
        logger.info("Initialized empty store with header row")
        return True

    def close(self) -> None:
        pass


class MemoryRowStore(RowStore):
    """List-backed store. Pass `rows` including the header row."""

    def __init__(self, rows: Optional[Sequence[Sequence[Any]]] = None, with_header: bool = True):
        self._rows: List[List[Any]] = [list(r) for r in rows] if rows is not None else []
        if with_header and rows is None:
            self._rows.append(header_row())

    def read_all(self) -> List[List[Any]]:
        return [list(r) for r in self._rows]

    def append(self, record: Sequence[Any]) -> None:
        self._rows.append(list(record))

    def read_column(self, index: int, start_row: int, row_count: int) -> List[Any]:
        rows = self._rows[start_row:start_row + max(0, row_count)]
        return [row[index] if index < len(row) else "" for row in rows]

    def row_count(self) -> int:
        return len(self._rows)


class SqliteRowStore(RowStore):
    """Append-only row table in SQLite, one JSON array per row."""

    def __init__(self, db_path: str | os.PathLike, create: bool = True):
        self.db_path = str(db_path)
        self.conn: Optional[sqlite3.Connection] = None
        self._open(create)

    def _open(self, create: bool) -> None:
        if not create and not os.path.exists(self.db_path):
            raise StoreUnavailable(f"Row store not found at '{self.db_path}'")

        db_dir = os.path.dirname(self.db_path)
        if db_dir and create:
            try:
                os.makedirs(db_dir, exist_ok=True)
            except OSError as e:
                raise StoreUnavailable(f"Failed to create store directory '{db_dir}': {e}")

        try:
            self.conn = sqlite3.connect(self.db_path, timeout=30.0)
            self.conn.execute("PRAGMA busy_timeout = 30000")
            self._set_wal_mode_best_effort()
            self.conn.execute("""
                CREATE TABLE IF NOT EXISTS match_rows (
                    row_id      INTEGER PRIMARY KEY AUTOINCREMENT,
                    cells       TEXT NOT NULL,
                    created_at  TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)
            self.conn.commit()
        except sqlite3.Error as e:
            raise StoreUnavailable(f"Failed to open row store '{self.db_path}': {e}")

        if create:
            self.ensure_header()

    def _set_wal_mode_best_effort(self, retries: int = 5, delay_seconds: float = 0.2) -> None:
        """Try to enable WAL without failing startup if the DB is temporarily locked."""
        for attempt in range(retries):
            try:
                self.conn.execute("PRAGMA journal_mode = WAL")
                return
            except sqlite3.OperationalError as e:
                msg = str(e).lower()
                if "locked" not in msg and "busy" not in msg:
                    raise
                if attempt == retries - 1:
                    logger.warning("Could not enable WAL mode (database locked); continuing. (%s)", e)
                    return
                time.sleep(delay_seconds)

    def _cursor(self) -> sqlite3.Cursor:
        if self.conn is None:
            raise StoreUnavailable(f"Row store '{self.db_path}' is closed")
        return self.conn.cursor()

    @staticmethod
    def _decode(raw: str) -> List[Any]:
        try:
            cells = json.loads(raw)
        except (TypeError, json.JSONDecodeError):
            logger.warning("Undecodable row payload; treating as empty row.")
            return []
        return cells if isinstance(cells, list) else []

    def read_all(self) -> List[List[Any]]:
        try:
            cursor = self._cursor()
            cursor.execute("SELECT cells FROM match_rows ORDER BY row_id")
            return [self._decode(raw) for (raw,) in cursor.fetchall()]
        except sqlite3.Error as e:
            raise StoreUnavailable(f"Failed to read rows: {e}")

    def read_column(self, index: int, start_row: int, row_count: int) -> List[Any]:
        if row_count <= 0:
            return []
        try:
            cursor = self._cursor()
            cursor.execute(
                "SELECT cells FROM match_rows ORDER BY row_id LIMIT ? OFFSET ?",
                (row_count, max(0, start_row)),
            )
            rows = [self._decode(raw) for (raw,) in cursor.fetchall()]
        except sqlite3.Error as e:
            raise StoreUnavailable(f"Failed to read column {index}: {e}")
        return [row[index] if index < len(row) else "" for row in rows]

    def row_count(self) -> int:
        try:
            cursor = self._cursor()
            cursor.execute("SELECT COUNT(*) FROM match_rows")
            return int(cursor.fetchone()[0])
        except sqlite3.Error as e:
            raise StoreUnavailable(f"Failed to count rows: {e}")

    def append(self, record: Sequence[Any]) -> None:
        try:
            payload = json.dumps(list(record), ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise StoreWriteError(f"Record is not serializable: {e}")
        try:
            cursor = self._cursor()
            cursor.execute("INSERT INTO match_rows (cells) VALUES (?)", (payload,))
            self.conn.commit()
        except (sqlite3.Error, StoreUnavailable) as e:
            raise StoreWriteError(f"Failed to append row: {e}")

    def close(self) -> None:
        """Close database connection."""
        if self.conn:
            self.conn.close()
            self.conn = None
