"""
Persistencia de snapshots de valores del formulario.

Backends disponibles:
- json: un archivo por clave en el directorio de almacenamiento
- sqlite: una fila por clave en una base SQLite
- memory: en proceso, sin persistencia real
"""

from typing import Optional

from dynaform.config import FormSettings, StorageBackend
from dynaform.persistence.base import SnapshotStore, encode_snapshot, decode_snapshot
from dynaform.persistence.json_store import JsonFileStore
from dynaform.persistence.sqlite_store import SqliteSnapshotStore
from dynaform.persistence.memory import MemoryStore


def open_store(settings: FormSettings, key: str) -> Optional[SnapshotStore]:
    """
    Crea el almacén configurado.

    Returns:
        SnapshotStore o None si la persistencia está deshabilitada
    """
    if not settings.use_storage:
        return None
    if settings.backend == StorageBackend.JSON:
        return JsonFileStore(key, directory=settings.storage_dir)
    if settings.backend == StorageBackend.SQLITE:
        return SqliteSnapshotStore(key, db_path=settings.db_path)
    if settings.backend == StorageBackend.MEMORY:
        return MemoryStore(key)
    raise AssertionError(f"Backend no contemplado: {settings.backend}")


__all__ = [
    "SnapshotStore",
    "JsonFileStore",
    "SqliteSnapshotStore",
    "MemoryStore",
    "encode_snapshot",
    "decode_snapshot",
    "open_store",
]
