"""
Interfaz de almacenamiento de snapshots.

Un snapshot es el mapa de valores serializado como objeto JSON plano
(nombre de campo -> string o booleano), guardado bajo una clave fija.
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import Optional

logger = logging.getLogger(__name__)


def encode_snapshot(snapshot: dict) -> str:
    """Serializa un snapshot a JSON."""
    return json.dumps(snapshot, ensure_ascii=False)


def decode_snapshot(raw: Optional[str]) -> Optional[dict]:
    """
    Deserializa un snapshot.

    Returns:
        dict o None si raw está vacío

    Raises:
        ValueError: Si el contenido no es JSON o no es un objeto
    """
    if not raw:
        return None
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError(f"Snapshot debe ser un objeto JSON, no {type(data).__name__}")
    return data


class SnapshotStore(ABC):
    """
    Almacén de un único snapshot bajo una clave.

    Las subclases implementan _read/_write/_delete; load() nunca lanza:
    un snapshot ilegible se registra y se trata como ausente.
    """

    # Errores de lectura que load() trata como snapshot ausente
    read_errors: tuple = (OSError, ValueError, RecursionError)

    def __init__(self, key: str):
        self.key = key

    @abstractmethod
    def _read(self) -> Optional[str]:
        """Lee el snapshot crudo o None si no existe."""

    @abstractmethod
    def _write(self, raw: str) -> None:
        """Escribe el snapshot crudo."""

    @abstractmethod
    def _delete(self) -> None:
        """Elimina el snapshot si existe."""

    def load(self) -> Optional[dict]:
        """Carga el snapshot; None si no existe o no se puede leer."""
        try:
            return decode_snapshot(self._read())
        except self.read_errors as e:
            logger.warning("No se pudo cargar el snapshot '%s': %s", self.key, e)
            return None

    def save(self, snapshot: dict) -> None:
        """Guarda el snapshot (reemplaza el anterior)."""
        self._write(encode_snapshot(snapshot))
        logger.debug("Snapshot '%s' guardado (%d campos)", self.key, len(snapshot))

    def clear(self) -> None:
        """Elimina el snapshot."""
        self._delete()
        logger.debug("Snapshot '%s' eliminado", self.key)
