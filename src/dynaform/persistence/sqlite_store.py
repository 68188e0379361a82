"""
Snapshots en una base de datos SQLite.

Una fila por clave; varios formularios pueden compartir el mismo archivo.
"""

import sqlite3
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterator, Optional

from dynaform.persistence.base import SnapshotStore


SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS snapshots (
    key TEXT PRIMARY KEY,
    data TEXT NOT NULL,  -- JSON object
    updated_at TEXT NOT NULL
);
"""


class SqliteSnapshotStore(SnapshotStore):
    """Guarda el snapshot en la tabla snapshots."""

    read_errors = SnapshotStore.read_errors + (sqlite3.Error,)

    def __init__(self, key: str, db_path: Optional[Path] = None):
        """
        Args:
            key: Clave del snapshot
            db_path: Ruta al archivo SQLite. Default: ~/.dynaform/dynaform.db
        """
        super().__init__(key)
        if db_path is None:
            db_path = Path.home() / ".dynaform" / "dynaform.db"
        self.db_path = Path(db_path)
        self._initialized = False

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """Context manager para conexiones; hace commit al salir sin errores."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        try:
            if not self._initialized:
                conn.executescript(SCHEMA_SQL)
                self._initialized = True
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _read(self) -> Optional[str]:
        with self.connection() as conn:
            row = conn.execute(
                "SELECT data FROM snapshots WHERE key = ?", (self.key,)
            ).fetchone()
        return row["data"] if row else None

    def _write(self, raw: str) -> None:
        with self.connection() as conn:
            conn.execute(
                """
                INSERT INTO snapshots (key, data, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    data = excluded.data,
                    updated_at = excluded.updated_at
                """,
                (self.key, raw, datetime.now().isoformat()),
            )

    def _delete(self) -> None:
        with self.connection() as conn:
            conn.execute("DELETE FROM snapshots WHERE key = ?", (self.key,))

