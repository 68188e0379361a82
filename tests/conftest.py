"""Configuración de pytest para tests de dynaform."""

import json

import pytest

from dynaform.config import FieldDescriptor, FieldKind, build_schema
from dynaform.persistence import MemoryStore


@pytest.fixture
def signup_fields():
    """Campos del formulario de ejemplo (mismo formato que los archivos JSON)."""
    return [
        {"name": "username", "type": "text", "required": True, "minLength": 3, "label": "Username"},
        {"name": "email", "type": "email", "required": True, "label": "Email Address"},
        {"name": "age", "type": "number", "min": 18, "max": 60, "label": "Age"},
        {"name": "gender", "type": "radio", "options": ["Male", "Female", "Other"], "label": "Gender"},
        {"name": "terms", "type": "checkbox"},
    ]


@pytest.fixture
def signup_schema(signup_fields):
    """Esquema de registro con los cinco tipos de campo."""
    return build_schema({"title": "Signup", "fields": signup_fields, "storage_key": "signup"})


@pytest.fixture
def age_schema():
    """Esquema con un único campo numérico requerido."""
    return build_schema([
        FieldDescriptor(name="age", kind=FieldKind.NUMBER, min=18, max=60, required=True),
    ])


@pytest.fixture
def valid_signup_values():
    """Valores que pasan todas las validaciones del esquema de registro."""
    return {
        "username": "alice",
        "email": "alice@example.com",
        "age": "30",
        "gender": "Female",
        "terms": True,
    }


@pytest.fixture
def memory_store():
    """Almacén en memoria con la clave del esquema de registro."""
    return MemoryStore("signup")


@pytest.fixture
def schema_file(tmp_path, signup_fields):
    """Archivo JSON con el esquema de registro."""
    path = tmp_path / "signup.json"
    path.write_text(json.dumps({"title": "Signup", "fields": signup_fields}), encoding="utf-8")
    return path
