"""
Construcción de los componentes visuales del formulario.
"""

from rich import box
from rich.table import Table
from rich.text import Text

from dynaform.config import FieldDescriptor, FieldKind
from dynaform.core import FormState, format_field_value, format_number, visible_error
from dynaform.cli.theme import get_icons, get_palette


def describe_constraints(fld: FieldDescriptor) -> str:
    """Resumen corto de las restricciones de un campo."""
    parts = []
    if fld.kind in (FieldKind.TEXT, FieldKind.EMAIL):
        if fld.min_length:
            parts.append(f"min {fld.min_length} chars")
        if fld.max_length:
            parts.append(f"max {fld.max_length} chars")
    elif fld.kind == FieldKind.NUMBER:
        if fld.min is not None:
            parts.append(f"min {format_number(fld.min)}")
        if fld.max is not None:
            parts.append(f"max {format_number(fld.max)}")
    elif fld.kind == FieldKind.RADIO:
        parts.append(" / ".join(fld.options))
    return ", ".join(parts)


def build_form_table(state: FormState) -> Table:
    """
    Construye la tabla del formulario.

    Los errores solo se muestran para campos tocados.
    """
    p = get_palette()
    icons = get_icons()

    table = Table(
        title=state.schema.title,
        title_style=f"bold {p.primary}",
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
        show_header=True,
        padding=(0, 1),
        expand=False,
    )

    table.add_column("#", justify="right", width=3)
    table.add_column("Field", justify="left", min_width=16)
    table.add_column("Value", justify="left", min_width=16)
    table.add_column("Status", justify="left", min_width=10)

    for idx, fld in enumerate(state.schema.fields):
        value = state.values.get(fld.name)
        error = visible_error(state, fld.name)

        label = fld.label + (" *" if fld.required else "")
        value_str = format_field_value(fld, value)

        if error:
            status = Text(f"{icons.cross} {error}", style=p.error)
        elif state.is_touched(fld.name):
            status = Text(f"{icons.check} ok", style=p.success)
        else:
            status = Text(f"{icons.pending}", style=p.muted)

        table.add_row(
            Text(str(idx + 1), style=p.muted),
            Text(label, style="bold" if fld.required else p.muted),
            Text(value_str, style=f"bold {p.accent}" if value_str != "-" else p.muted),
            status,
        )

    return table

