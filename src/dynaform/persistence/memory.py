"""
Snapshots en memoria (tests y hosts sin almacenamiento).
"""

from typing import Optional

from dynaform.persistence.base import SnapshotStore


class MemoryStore(SnapshotStore):
    """Guarda el snapshot serializado en un dict compartido opcional."""

    def __init__(self, key: str, backing: Optional[dict] = None):
        super().__init__(key)
        self.backing = backing if backing is not None else {}
        self.writes = 0

    def _read(self) -> Optional[str]:
        return self.backing.get(self.key)

    def _write(self, raw: str) -> None:
        self.backing[self.key] = raw
        self.writes += 1

    def _delete(self) -> None:
        self.backing.pop(self.key, None)
