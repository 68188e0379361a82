"""
Ingreso interactivo de campos con questionary.

Cada respuesta es un evento de cambio (set_value) y salir del prompt es un
evento de salida del campo (mark_touched). Un campo se vuelve a preguntar
mientras tenga un error visible.
"""

from typing import Any, Optional

import questionary
from questionary import Style

from dynaform.config import FieldDescriptor, FieldKind
from dynaform.core import DynamicForm, SubmitResult
from dynaform.cli.render import build_form_table, describe_constraints
from dynaform.cli.theme import get_console, get_palette, print_error


NO_SELECTION = "(none)"


def get_form_style() -> Style:
    """Estilo de questionary basado en la paleta actual."""
    p = get_palette()
    return Style([
        ('qmark', f'fg:{p.accent} bold'),
        ('question', 'bold'),
        ('answer', f'fg:{p.success} bold'),
        ('pointer', f'fg:{p.accent} bold'),
        ('highlighted', f'fg:{p.primary} bold'),
        ('instruction', f'fg:{p.muted} italic'),
        ('text', ''),
    ])


def _question_text(fld: FieldDescriptor) -> str:
    text = fld.label + (" *" if fld.required else "")
    hint = describe_constraints(fld)
    if hint and fld.kind != FieldKind.RADIO:
        text += f" ({hint})"
    return text


def ask_field(fld: FieldDescriptor, current: Any) -> Any:
    """
    Pregunta el valor de un campo.

    Args:
        fld: Descriptor del campo
        current: Valor actual (se ofrece como default)

    Returns:
        Nuevo valor, o None si el usuario cancela (Ctrl-C)
    """
    style = get_form_style()
    message = _question_text(fld)
    kind = fld.kind

    if kind in (FieldKind.TEXT, FieldKind.EMAIL, FieldKind.NUMBER):
        default = "" if current is None else str(current)
        return questionary.text(message, default=default, style=style).ask()

    if kind == FieldKind.RADIO:
        choices = [questionary.Choice(opt, value=opt) for opt in fld.options]
        if not fld.required:
            choices.append(questionary.Choice(NO_SELECTION, value=""))
        default = current if current in fld.options else None
        return questionary.select(
            message, choices=choices, default=default, style=style
        ).ask()

    if kind == FieldKind.CHECKBOX:
        return questionary.confirm(message, default=bool(current), style=style).ask()

    raise AssertionError(f"Tipo de campo no contemplado: {kind}")


def fill_field(form: DynamicForm, fld: FieldDescriptor) -> bool:
    """
    Completa un campo hasta que no tenga error visible.

    Returns:
        False si el usuario canceló
    """
    while True:
        answer = ask_field(fld, form.state.values.get(fld.name))
        if answer is None:
            return False
        form.change(fld.name, answer)
        form.blur(fld.name)
        error = form.error_for(fld.name)
        if error is None:
            return True
        print_error(error)


def run_form(form: DynamicForm) -> Optional[SubmitResult]:
    """
    Recorre todos los campos y envía el formulario.

    Si el envío falla se muestra la tabla y se vuelven a preguntar
    los campos con error.

    Returns:
        SubmitResult exitoso, o None si el usuario cancela
    """
    console = get_console()

    for fld in form.schema.fields:
        if not fill_field(form, fld):
            return None

    while True:
        result = form.submit()
        if result:
            return result

        console.print(build_form_table(form.state))
        for name in result.errors:
            if not fill_field(form, form.schema.get_field(name)):
                return None
