"""
Tema de colores y funciones de impresión para la CLI.

Proporciona una paleta consistente, la consola Rich compartida y
helpers para imprimir mensajes con estilo.
"""

import logging
import sys
from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text
from rich.theme import Theme


@dataclass
class ColorPalette:
    """Paleta de colores para un tema."""
    primary: str      # Títulos, fila seleccionada
    secondary: str    # Encabezados de tabla
    accent: str       # Valores ingresados
    success: str
    warning: str
    error: str
    info: str
    muted: str        # Texto secundario
    border: str


THEME_DEFAULT = ColorPalette(
    primary="#5f87af",      # Azul suave
    secondary="#87afaf",    # Cyan apagado
    accent="#af87af",       # Púrpura suave
    success="#87af87",      # Verde suave
    warning="#d7af5f",      # Amarillo/naranja suave
    error="#d75f5f",        # Rojo suave
    info="#5f87af",         # Azul info
    muted="#808080",        # Gris
    border="#5f5f5f",       # Gris oscuro
)


def _detect_unicode_support() -> bool:
    """Detecta si el terminal soporta los iconos Unicode."""
    try:
        encoding = getattr(sys.stdout, 'encoding', None) or 'ascii'
        "✓✗•".encode(encoding)
        return True
    except (UnicodeEncodeError, LookupError):
        return False


@dataclass
class IconSet:
    """Iconos de estado de campo."""
    check: str
    cross: str
    pending: str


UNICODE_ICONS = IconSet(check="✓", cross="✗", pending="•")
ASCII_ICONS = IconSet(check="+", cross="x", pending="-")


class CLITheme:
    """Gestor de tema para la CLI."""

    _palette: ColorPalette = THEME_DEFAULT
    _console: Optional[Console] = None
    _icons: Optional[IconSet] = None

    @classmethod
    def get_palette(cls) -> ColorPalette:
        return cls._palette

    @classmethod
    def get_icons(cls) -> IconSet:
        if cls._icons is None:
            cls._icons = UNICODE_ICONS if _detect_unicode_support() else ASCII_ICONS
        return cls._icons

    @classmethod
    def get_console(cls) -> Console:
        """Obtiene la consola Rich con el tema aplicado."""
        if cls._console is None:
            p = cls._palette
            custom_theme = Theme({
                "primary": p.primary,
                "secondary": p.secondary,
                "accent": p.accent,
                "success": p.success,
                "warning": p.warning,
                "error": p.error,
                "info": p.info,
                "muted": p.muted,
                "title": f"bold {p.primary}",
                "value": f"bold {p.accent}",
            })
            cls._console = Console(theme=custom_theme)
        return cls._console


def get_console() -> Console:
    """Obtiene la consola Rich con tema aplicado."""
    return CLITheme.get_console()


def get_palette() -> ColorPalette:
    """Obtiene la paleta de colores actual."""
    return CLITheme.get_palette()


def get_icons() -> IconSet:
    return CLITheme.get_icons()


def setup_logging(verbose: bool = False) -> None:
    """Configura el logging raíz con salida por la consola Rich."""
    handler = RichHandler(console=get_console(), show_path=False, markup=False)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )


# =============================================================================
# IMPRESIÓN
# =============================================================================

def print_header(text: str, subtitle: str = None) -> None:
    """Imprime un encabezado."""
    console = get_console()
    p = get_palette()
    header = Text(text, style=f"bold {p.primary}")
    if subtitle:
        header.append(f"\n{subtitle}", style=p.muted)
    console.print(header)


def print_success(text: str) -> None:
    """Imprime mensaje de éxito."""
    get_console().print(Text(f"[+] {text}", style=get_palette().success))


def print_warning(text: str) -> None:
    """Imprime advertencia."""
    get_console().print(Text(f"[!] {text}", style=get_palette().warning))


def print_error(text: str) -> None:
    """Imprime error."""
    get_console().print(Text(f"[x] {text}", style=get_palette().error))


def print_info(text: str) -> None:
    """Imprime información."""
    get_console().print(Text(f"[i] {text}", style=get_palette().info))
