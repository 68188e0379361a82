"""Modelos Pydantic para esquemas de formulario y configuración."""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from dynaform.errors import SchemaError

logger = logging.getLogger(__name__)


DEFAULT_STORAGE_KEY = "dynamic_form_data"
DEFAULT_TITLE = "Dynamic Form"


class FieldKind(str, Enum):
    """Tipos de campo soportados (conjunto cerrado)."""
    TEXT = "text"
    EMAIL = "email"
    NUMBER = "number"
    RADIO = "radio"
    CHECKBOX = "checkbox"

    @classmethod
    def values(cls) -> set[str]:
        return {k.value for k in cls}


class StorageBackend(str, Enum):
    """Backends de persistencia del snapshot."""
    JSON = "json"
    SQLITE = "sqlite"
    MEMORY = "memory"


# ============================================================================
# Descriptor de campo
# ============================================================================

class FieldDescriptor(BaseModel):
    """Definición inmutable de un campo del formulario."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., min_length=1, description="Clave única del campo")
    kind: FieldKind = Field(
        ...,
        validation_alias=AliasChoices("kind", "type"),
        description="Tipo de campo",
    )
    required: bool = Field(default=False, description="Campo obligatorio")
    label: str = Field(..., description="Etiqueta visible (default: name)")
    # text / email
    min_length: Optional[int] = Field(
        None, ge=0, validation_alias=AliasChoices("min_length", "minLength")
    )
    max_length: Optional[int] = Field(
        None, ge=0, validation_alias=AliasChoices("max_length", "maxLength")
    )
    # number (int se conserva como int para los mensajes)
    min: Optional[Union[int, float]] = None
    max: Optional[Union[int, float]] = None
    # radio
    options: tuple[str, ...] = Field(default_factory=tuple)

    @model_validator(mode="before")
    @classmethod
    def default_label(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("label"):
            data = {**data, "label": data.get("name")}
        return data

    @model_validator(mode="after")
    def check_options(self) -> "FieldDescriptor":
        if self.kind == FieldKind.RADIO and not self.options:
            raise ValueError(f"El campo radio '{self.name}' requiere opciones")
        return self

    @property
    def is_checkbox(self) -> bool:
        return self.kind == FieldKind.CHECKBOX

    def default_value(self) -> Union[str, bool]:
        """Valor inicial según el tipo: False para checkbox, "" para el resto."""
        return False if self.is_checkbox else ""


# ============================================================================
# Esquema de formulario
# ============================================================================

class FormSchema(BaseModel):
    """Lista ordenada de campos más metadatos del formulario."""
    model_config = ConfigDict(frozen=True)

    title: str = Field(default=DEFAULT_TITLE, description="Título del formulario")
    fields: tuple[FieldDescriptor, ...] = Field(default_factory=tuple)
    storage_key: str = Field(
        default=DEFAULT_STORAGE_KEY,
        min_length=1,
        description="Clave del snapshot en el almacenamiento",
    )

    @field_validator("fields", mode="before")
    @classmethod
    def drop_unknown_kinds(cls, value: Any) -> Any:
        """Descarta entradas cuyo tipo no está en FieldKind."""
        if not isinstance(value, (list, tuple)):
            return value
        kept = []
        for entry in value:
            if isinstance(entry, dict):
                kind = entry.get("kind", entry.get("type"))
                if isinstance(kind, FieldKind):
                    kind = kind.value
                if kind not in FieldKind.values():
                    logger.warning(
                        "Campo '%s' ignorado: tipo desconocido %r",
                        entry.get("name"), kind,
                    )
                    continue
            kept.append(entry)
        return kept

    @model_validator(mode="after")
    def check_unique_names(self) -> "FormSchema":
        seen = set()
        for fld in self.fields:
            if fld.name in seen:
                raise ValueError(f"Nombre de campo duplicado: '{fld.name}'")
            seen.add(fld.name)
        return self

    def get_field(self, name: str) -> Optional[FieldDescriptor]:
        """Obtiene un campo por su nombre."""
        for fld in self.fields:
            if fld.name == name:
                return fld
        return None

    def field_names(self) -> list[str]:
        return [fld.name for fld in self.fields]

    def default_values(self) -> dict:
        """Mapa de valores por defecto derivado del esquema."""
        return {fld.name: fld.default_value() for fld in self.fields}


def build_schema(data: Any, storage_key: Optional[str] = None) -> FormSchema:
    """
    Construye un FormSchema desde datos crudos (dict o lista de campos).

    Args:
        data: {"fields": [...], "title": ...} o directamente la lista de campos
        storage_key: Clave a usar si el esquema no define una

    Returns:
        FormSchema validado

    Raises:
        SchemaError: Si el esquema es inválido
    """
    if isinstance(data, (list, tuple)):
        data = {"fields": list(data)}
    if not isinstance(data, dict):
        raise SchemaError("El esquema debe ser un objeto o una lista de campos")

    if storage_key and not data.get("storage_key"):
        data = {**data, "storage_key": storage_key}

    try:
        return FormSchema.model_validate(data)
    except ValidationError as e:
        raise SchemaError(f"Esquema inválido: {e}") from e


def load_schema(path: Path) -> FormSchema:
    """
    Carga un esquema desde un archivo JSON.

    Si el archivo no define storage_key se usa el nombre del archivo,
    así dos formularios distintos no comparten snapshot.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise SchemaError(f"Esquema no encontrado: {path}") from e
    except (OSError, json.JSONDecodeError) as e:
        raise SchemaError(f"No se pudo leer el esquema {path}: {e}") from e

    return build_schema(data, storage_key=path.stem)


# ============================================================================
# Configuración de la aplicación
# ============================================================================

class FormSettings(BaseModel):
    """Configuración de persistencia del formulario."""
    storage_dir: Path = Field(
        default_factory=lambda: Path.home() / ".dynaform",
        description="Directorio para snapshots",
    )
    backend: StorageBackend = Field(
        default=StorageBackend.JSON, description="Backend de persistencia"
    )
    use_storage: bool = Field(default=True, description="Persistir valores")
    db_filename: str = Field(default="dynaform.db", description="Archivo SQLite")

    @property
    def db_path(self) -> Path:
        return self.storage_dir / self.db_filename
