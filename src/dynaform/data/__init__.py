"""
Esquemas incluidos con el paquete.
"""

from pathlib import Path

from dynaform.config import FormSchema, load_schema


DATA_DIR = Path(__file__).parent
EXAMPLE_SCHEMA_PATH = DATA_DIR / "example_schema.json"


def example_schema() -> FormSchema:
    """Esquema de ejemplo: usuario, email, edad, género y términos."""
    return load_schema(EXAMPLE_SCHEMA_PATH)


__all__ = ["DATA_DIR", "EXAMPLE_SCHEMA_PATH", "example_schema"]
