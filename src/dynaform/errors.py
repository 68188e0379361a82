"""
Excepciones de dynaform.

Los errores de validación de campos NO son excepciones: son mensajes en el
mapa de errores del estado. Estas clases cubren errores de esquema y de
integración del host.
"""


class DynaformError(Exception):
    """Base de todas las excepciones del paquete."""


class SchemaError(DynaformError, ValueError):
    """Esquema inválido (nombres duplicados, radio sin opciones, archivo ilegible)."""


class UnknownFieldError(DynaformError, KeyError):
    """Nombre de campo que no existe en el esquema."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Campo desconocido: {self.name!r}"
