"""SQLite-backed local search index."""

from __future__ import annotations

import json
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Sequence

from docsindex.models import SearchRecord


class SQLiteRecordStore:
    """Persistence layer for search records, mirroring a remote index."""

    def __init__(self, db_path: Path) -> None:
        self.db_path = Path(db_path)
        self._conn = sqlite3.connect(self.db_path)
        self._conn.row_factory = sqlite3.Row
        self._conn.execute("PRAGMA journal_mode=WAL;")
        self._conn.execute("PRAGMA synchronous=NORMAL;")
        self._ensure_schema()

    @property
    def connection(self) -> sqlite3.Connection:
        return self._conn

    def close(self) -> None:
        self._conn.close()

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        try:
            yield self._conn
            self._conn.commit()
        except Exception:
            self._conn.rollback()
            raise

    def _ensure_schema(self) -> None:
        with self.transaction() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS records (
                    object_id TEXT PRIMARY KEY,
                    position INTEGER NOT NULL,
                    url TEXT NOT NULL,
                    hierarchy TEXT NOT NULL,
                    type TEXT NOT NULL,
                    content TEXT,
                    created_at TEXT DEFAULT CURRENT_TIMESTAMP
                )
                """
            )
            conn.execute(
                """CREATE INDEX IF NOT EXISTS idx_records_position
                    ON records(position)
                """
            )

    def clear_all(self) -> None:
        """Remove every record from the index."""
        with self.transaction() as conn:
            conn.execute("DELETE FROM records")

    def bulk_insert(self, records: Sequence[SearchRecord]) -> None:
        """Insert a batch of records in one transaction, after existing ones."""
        with self.transaction() as conn:
            start = conn.execute("SELECT COALESCE(MAX(position) + 1, 0) FROM records").fetchone()[0]
            for offset, record in enumerate(records):
                wire = record.to_wire()
                conn.execute(
                    """
                    INSERT OR REPLACE INTO records(object_id, position, url, hierarchy, type, content)
                    VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    (
                        wire["objectID"],
                        start + offset,
                        wire["url"],
                        json.dumps(wire["hierarchy"], ensure_ascii=False),
                        wire["type"],
                        wire.get("content"),
                    ),
                )

    def list_records(self, path_prefix: str | None = None) -> List[Dict[str, Any]]:
        """Return stored records in insertion order as wire dicts."""
        query = "SELECT object_id, url, hierarchy, type, content FROM records"
        params: tuple = ()
        if path_prefix:
            query += " WHERE object_id LIKE ? ESCAPE '\\'"
            escaped = path_prefix.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
            params = (escaped + "%",)
        query += " ORDER BY position"

        results: List[Dict[str, Any]] = []
        for row in self._conn.execute(query, params):
            item: Dict[str, Any] = {
                "objectID": row["object_id"],
                "url": row["url"],
                "hierarchy": json.loads(row["hierarchy"]),
                "type": row["type"],
            }
            if row["content"] is not None:
                item["content"] = row["content"]
            results.append(item)
        return results

    def count(self) -> int:
        return self._conn.execute("SELECT COUNT(*) FROM records").fetchone()[0]
