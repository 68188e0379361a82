"""
Snapshots como archivos JSON en disco.
"""

from pathlib import Path
from typing import Optional

from dynaform.persistence.base import SnapshotStore


class JsonFileStore(SnapshotStore):
    """Guarda el snapshot en <directorio>/<clave>.json."""

    def __init__(self, key: str, directory: Optional[Path] = None):
        """
        Args:
            key: Clave del snapshot (nombre del archivo)
            directory: Directorio de snapshots. Default: ~/.dynaform/
        """
        super().__init__(key)
        if directory is None:
            directory = Path.home() / ".dynaform"
        self.directory = Path(directory)

    @property
    def path(self) -> Path:
        return self.directory / f"{self.key}.json"

    def _read(self) -> Optional[str]:
        if not self.path.exists():
            return None
        with open(self.path, "r", encoding="utf-8") as f:
            return f.read()

    def _write(self, raw: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(raw)

    def _delete(self) -> None:
        if self.path.exists():
            self.path.unlink()
