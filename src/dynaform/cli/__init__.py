"""
CLI de dynaform.

Comandos:
- fill: Completar un formulario definido en JSON
- demo: Completar el formulario de ejemplo
- check: Validar un archivo de valores sin interacción
- show: Ver los valores guardados
- clear: Borrar los valores guardados
"""

from typing import Annotated

import typer

from dynaform.cli.theme import setup_logging
from dynaform.cli.commands import form_check, form_clear, form_demo, form_fill, form_show

app = typer.Typer(
    name="dynaform",
    help="Formularios dinámicos definidos por esquema JSON.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Mostrar logs de depuración")] = False,
):
    """
    dynaform - Formularios dinámicos con validación y persistencia.
    """
    setup_logging(verbose)


app.command("fill")(form_fill)
app.command("demo")(form_demo)
app.command("check")(form_check)
app.command("show")(form_show)
app.command("clear")(form_clear)


__all__ = ["app", "main"]
