"""
Comandos CLI para completar, revisar y limpiar formularios.
"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from dynaform.config import FormSchema, FormSettings, StorageBackend, load_schema
from dynaform.errors import SchemaError
from dynaform.core import DynamicForm, touch_all, validate_all
from dynaform.persistence import open_store
from dynaform.cli.prompts import run_form
from dynaform.cli.render import build_form_table
from dynaform.cli.theme import (
    get_console,
    print_error,
    print_header,
    print_info,
    print_success,
    print_warning,
)


SchemaArg = Annotated[Path, typer.Argument(help="Archivo JSON con el esquema del formulario")]
StorageDirOpt = Annotated[
    Optional[Path], typer.Option("--storage-dir", help="Directorio de snapshots (default: ~/.dynaform)")
]
BackendOpt = Annotated[StorageBackend, typer.Option("--backend", help="Backend: json, sqlite, memory")]
NoStorageOpt = Annotated[bool, typer.Option("--no-storage", help="No cargar ni guardar valores")]
KeyOpt = Annotated[Optional[str], typer.Option("--key", help="Clave del snapshot (default: la del esquema)")]


def _settings(
    storage_dir: Optional[Path],
    backend: StorageBackend,
    no_storage: bool,
) -> FormSettings:
    options = {"backend": backend, "use_storage": not no_storage}
    if storage_dir is not None:
        options["storage_dir"] = storage_dir
    return FormSettings(**options)


def _load(schema_path: Path) -> FormSchema:
    """Carga el esquema o termina con código 1."""
    try:
        return load_schema(schema_path)
    except SchemaError as e:
        print_error(str(e))
        raise typer.Exit(1)


def _run_interactive(schema: FormSchema, settings: FormSettings, key: Optional[str]) -> None:
    console = get_console()
    store = open_store(settings, key or schema.storage_key)
    form = DynamicForm(schema, store=store)

    print_header(schema.title, "Fields marked * are required. Ctrl-C cancels.")
    if store is not None and form.values != schema.default_values():
        print_info("Restored values from a previous session")

    result = run_form(form)
    if result is None:
        if store is not None:
            print_warning("Form cancelled; entered values were saved")
        else:
            print_warning("Form cancelled")
        raise typer.Exit(1)

    print_success("Form submitted successfully!")
    console.print_json(data=result.values)


def form_fill(
    schema_path: SchemaArg,
    storage_dir: StorageDirOpt = None,
    backend: BackendOpt = StorageBackend.JSON,
    no_storage: NoStorageOpt = False,
    key: KeyOpt = None,
):
    """
    Completa un formulario de forma interactiva.

    Ejemplo:
        dynaform fill signup.json
        dynaform fill signup.json --backend sqlite
    """
    schema = _load(schema_path)
    _run_interactive(schema, _settings(storage_dir, backend, no_storage), key)


def form_demo(
    storage_dir: StorageDirOpt = None,
    backend: BackendOpt = StorageBackend.JSON,
    no_storage: NoStorageOpt = False,
):
    """Completa el formulario de ejemplo incluido."""
    from dynaform.data import example_schema

    _run_interactive(example_schema(), _settings(storage_dir, backend, no_storage), None)


def form_check(
    schema_path: SchemaArg,
    values_path: Annotated[Path, typer.Argument(help="Archivo JSON con los valores")],
):
    """
    Valida un archivo de valores contra el esquema sin interacción.

    Termina con código 1 si algún campo es inválido.
    """
    console = get_console()
    schema = _load(schema_path)

    try:
        with open(values_path, "r", encoding="utf-8") as f:
            values = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        print_error(f"Could not read values file {values_path}: {e}")
        raise typer.Exit(1)
    if not isinstance(values, dict):
        print_error("Values file must contain a JSON object")
        raise typer.Exit(1)

    form = DynamicForm(schema)
    for name, value in values.items():
        if schema.get_field(name) is None:
            print_warning(f"Ignoring unknown field '{name}'")
            continue
        form.change(name, value)

    result = form.submit()
    console.print(build_form_table(form.state))

    if not result:
        print_error(f"{len(result.errors)} invalid field(s)")
        raise typer.Exit(1)
    print_success("All fields are valid")


def form_show(
    schema_path: SchemaArg,
    storage_dir: StorageDirOpt = None,
    backend: BackendOpt = StorageBackend.JSON,
    key: KeyOpt = None,
    show_all: Annotated[bool, typer.Option("--all", help="Mostrar errores de todos los campos")] = False,
):
    """Muestra los valores guardados de un formulario."""
    console = get_console()
    schema = _load(schema_path)
    store = open_store(_settings(storage_dir, backend, False), key or schema.storage_key)

    form = DynamicForm(schema, store=store)
    state = form.state
    if show_all:
        state, _ = validate_all(touch_all(state))
    console.print(build_form_table(state))


def form_clear(
    schema_path: SchemaArg,
    storage_dir: StorageDirOpt = None,
    backend: BackendOpt = StorageBackend.JSON,
    key: KeyOpt = None,
):
    """Elimina los valores guardados de un formulario."""
    schema = _load(schema_path)
    store_key = key or schema.storage_key
    store = open_store(_settings(storage_dir, backend, False), store_key)
    store.clear()
    print_success(f"Saved values for '{store_key}' cleared")
