"""
Validación y formateo de valores de campos.

validate_field es una función pura: (descriptor, valor) -> mensaje o None.
El primer chequeo que falla gana; los siguientes no se evalúan.
"""

import re
from typing import Any, Optional, Union

from dynaform.config import FieldDescriptor, FieldKind


EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
NUMBER_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def format_number(value: Union[int, float]) -> str:
    """Formatea un límite numérico: 18.0 -> "18", 2.5 -> "2.5"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def parse_number(value: Any) -> Optional[float]:
    """
    Interpreta un valor como número.

    Acepta int/float (no bool) tal cual y strings decimales con signo,
    fracción y exponente opcionales. Retorna None si no es un número.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not NUMBER_PATTERN.fullmatch(text):
        return None
    return float(text)


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


# ============================================================================
# Chequeos por tipo
# ============================================================================

def _check_length(field: FieldDescriptor, value: Any) -> Optional[str]:
    length = len(_as_text(value))
    # Un límite de 0 equivale a no tenerlo
    if field.min_length and length < field.min_length:
        return f"{field.label} must be at least {field.min_length} characters"
    if field.max_length and length > field.max_length:
        return f"{field.label} must be less than {field.max_length} characters"
    return None


def _check_email(field: FieldDescriptor, value: Any) -> Optional[str]:
    error = _check_length(field, value)
    if error:
        return error
    if not _is_empty(value) and not EMAIL_PATTERN.fullmatch(_as_text(value)):
        return "Please enter a valid email address"
    return None


def _check_number(field: FieldDescriptor, value: Any) -> Optional[str]:
    if _is_empty(value):
        return None
    number = parse_number(value)
    if number is None:
        return "Please enter a valid number"
    if field.min is not None and number < field.min:
        return f"Value must be at least {format_number(field.min)}"
    if field.max is not None and number > field.max:
        return f"Value must be less than or equal to {format_number(field.max)}"
    return None


def validate_field(field: FieldDescriptor, value: Any) -> Optional[str]:
    """
    Valida el valor de un campo.

    Args:
        field: Descriptor del campo
        value: Valor actual (str, bool o None)

    Returns:
        Mensaje de error o None si el valor es válido
    """
    if field.required and _is_empty(value):
        return f"{field.label} is required"

    kind = field.kind
    if kind == FieldKind.TEXT:
        return _check_length(field, value)
    if kind == FieldKind.EMAIL:
        return _check_email(field, value)
    if kind == FieldKind.NUMBER:
        return _check_number(field, value)
    if kind in (FieldKind.RADIO, FieldKind.CHECKBOX):
        return None
    raise AssertionError(f"Tipo de campo no contemplado: {kind}")


def format_field_value(field: FieldDescriptor, value: Any) -> str:
    """Formatea el valor de un campo para mostrar."""
    if field.kind == FieldKind.CHECKBOX:
        return "yes" if value is True else "no"
    if _is_empty(value):
        return "-"
    return str(value)
