"""
Motor de formularios: validación, estado y envío.
"""

from dynaform.core.validator import (
    validate_field,
    parse_number,
    format_number,
    format_field_value,
)
from dynaform.core.state import (
    FormState,
    initialize_state,
    reconcile_snapshot,
    set_value,
    mark_touched,
    touch_all,
    validate_all,
    reset_state,
    visible_error,
    visible_errors,
)
from dynaform.core.submission import SubmitResult, submit
from dynaform.core.form import DynamicForm

__all__ = [
    # Validación
    "validate_field",
    "parse_number",
    "format_number",
    "format_field_value",
    # Estado
    "FormState",
    "initialize_state",
    "reconcile_snapshot",
    "set_value",
    "mark_touched",
    "touch_all",
    "validate_all",
    "reset_state",
    "visible_error",
    "visible_errors",
    # Envío
    "SubmitResult",
    "submit",
    # Host
    "DynamicForm",
]
