"""
dynaform - Formularios dinámicos definidos por esquema.

Valida valores campo a campo, lleva el registro de campos tocados y
errores, y persiste los valores entre sesiones.
"""

__version__ = "0.1.0"

from dynaform.config import (
    FieldKind,
    FieldDescriptor,
    FormSchema,
    FormSettings,
    StorageBackend,
    build_schema,
    load_schema,
)
from dynaform.errors import DynaformError, SchemaError, UnknownFieldError
from dynaform.core import (
    DynamicForm,
    FormState,
    SubmitResult,
    initialize_state,
    set_value,
    mark_touched,
    validate_all,
    validate_field,
    visible_error,
    submit,
)

__all__ = [
    "FieldKind",
    "FieldDescriptor",
    "FormSchema",
    "FormSettings",
    "StorageBackend",
    "build_schema",
    "load_schema",
    "DynaformError",
    "SchemaError",
    "UnknownFieldError",
    "DynamicForm",
    "FormState",
    "SubmitResult",
    "initialize_state",
    "set_value",
    "mark_touched",
    "validate_all",
    "validate_field",
    "visible_error",
    "submit",
]
