"""
Estado del formulario: valores, campos tocados y errores.

Cada operación retorna un FormState nuevo; el estado de entrada nunca se
modifica. Los tres mapas se actualizan siempre juntos.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional

from dynaform.config import FieldDescriptor, FormSchema, FieldKind
from dynaform.errors import UnknownFieldError
from dynaform.core.validator import validate_field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormState:
    """Snapshot lógico del formulario."""
    schema: FormSchema
    values: dict = field(default_factory=dict)
    touched: dict = field(default_factory=dict)
    errors: dict = field(default_factory=dict)

    def value(self, name: str) -> Any:
        return self.values[_require_field(self.schema, name).name]

    def is_touched(self, name: str) -> bool:
        return bool(self.touched.get(name, False))

    def error(self, name: str) -> Optional[str]:
        """Error calculado (visible o no)."""
        return self.errors.get(name)


def _require_field(schema: FormSchema, name: str) -> FieldDescriptor:
    fld = schema.get_field(name)
    if fld is None:
        raise UnknownFieldError(name)
    return fld


# ============================================================================
# Snapshot persistido
# ============================================================================

def _snapshot_entry_ok(fld: FieldDescriptor, value: Any) -> bool:
    if fld.kind == FieldKind.CHECKBOX:
        return isinstance(value, bool)
    if not isinstance(value, str):
        return False
    if fld.kind == FieldKind.RADIO:
        return value == "" or value in fld.options
    return True


def reconcile_snapshot(schema: FormSchema, snapshot: Optional[Mapping]) -> dict:
    """
    Combina un snapshot persistido con los valores por defecto del esquema.

    Se descartan claves desconocidas, valores con tipo incorrecto y opciones
    de radio que ya no existen. Los campos ausentes toman su default.
    """
    values = schema.default_values()
    if snapshot is None:
        return values
    if not isinstance(snapshot, Mapping):
        logger.warning("Snapshot ignorado: se esperaba un objeto, no %s", type(snapshot).__name__)
        return values

    for key, value in snapshot.items():
        fld = schema.get_field(key)
        if fld is None:
            logger.info("Snapshot: clave desconocida '%s' descartada", key)
            continue
        if not _snapshot_entry_ok(fld, value):
            logger.info("Snapshot: valor inválido para '%s' descartado: %r", key, value)
            continue
        values[key] = value
    return values


# ============================================================================
# Operaciones
# ============================================================================

def initialize_state(schema: FormSchema, snapshot: Optional[Mapping] = None) -> FormState:
    """
    Crea el estado inicial.

    Args:
        schema: Esquema del formulario
        snapshot: Valores persistidos (opcional)

    Returns:
        FormState sin campos tocados ni errores
    """
    return FormState(
        schema=schema,
        values=reconcile_snapshot(schema, snapshot),
        touched={name: False for name in schema.field_names()},
        errors={},
    )


def set_value(state: FormState, name: str, value: Any) -> FormState:
    """
    Reemplaza el valor de un campo.

    Si el campo ya fue tocado se revalida; si no, su error queda como estaba.
    """
    fld = _require_field(state.schema, name)
    values = {**state.values, name: value}
    errors = state.errors
    if state.is_touched(name):
        errors = {**state.errors, name: validate_field(fld, value)}
    return replace(state, values=values, errors=errors)


def mark_touched(state: FormState, name: str) -> FormState:
    """Marca un campo como tocado y lo revalida."""
    fld = _require_field(state.schema, name)
    return replace(
        state,
        touched={**state.touched, name: True},
        errors={**state.errors, name: validate_field(fld, state.values.get(name))},
    )


def touch_all(state: FormState) -> FormState:
    """Marca todos los campos del esquema como tocados."""
    return replace(state, touched={name: True for name in state.schema.field_names()})


def validate_all(state: FormState) -> tuple[FormState, bool]:
    """
    Valida todos los campos en el orden del esquema.

    Returns:
        (estado con el mapa de errores reemplazado, True si todo es válido)
    """
    errors = {
        fld.name: validate_field(fld, state.values.get(fld.name))
        for fld in state.schema.fields
    }
    all_valid = all(msg is None for msg in errors.values())
    return replace(state, errors=errors), all_valid


def reset_state(state: FormState) -> FormState:
    """Vuelve a los valores por defecto del esquema."""
    return initialize_state(state.schema)


def visible_error(state: FormState, name: str) -> Optional[str]:
    """Error a mostrar: solo si el campo fue tocado."""
    _require_field(state.schema, name)
    if not state.is_touched(name):
        return None
    return state.errors.get(name)


def visible_errors(state: FormState) -> dict:
    """Errores visibles de todo el formulario (solo los no nulos)."""
    result = {}
    for name in state.schema.field_names():
        msg = visible_error(state, name)
        if msg is not None:
            result[name] = msg
    return result
