"""
Host del formulario: conecta eventos de la interfaz con el estado.

DynamicForm guarda el FormState actual, aplica las operaciones puras del
módulo state ante cada evento (cambio, salida del campo, envío) y escribe
el snapshot de valores cada vez que estos cambian.
"""

import logging
from typing import Any, Optional

from dynaform.config import FormSchema
from dynaform.core.state import (
    FormState,
    initialize_state,
    set_value,
    mark_touched,
    reset_state,
    touch_all,
    validate_all,
    visible_error,
    visible_errors,
)
from dynaform.core.submission import SubmitCallback, SubmitResult, submit
from dynaform.persistence.base import SnapshotStore

logger = logging.getLogger(__name__)


class DynamicForm:
    """Instancia de formulario con estado y persistencia opcional."""

    def __init__(
        self,
        schema: FormSchema,
        store: Optional[SnapshotStore] = None,
        on_submit: Optional[SubmitCallback] = None,
    ):
        """
        Args:
            schema: Esquema del formulario
            store: Almacén de snapshots (None = sin persistencia)
            on_submit: Callback llamado con los valores en un envío válido
        """
        self.schema = schema
        self.store = store
        self.on_submit = on_submit

        snapshot = store.load() if store is not None else None
        self.state: FormState = initialize_state(schema, snapshot)

    @property
    def values(self) -> dict:
        return dict(self.state.values)

    @property
    def errors(self) -> dict:
        """Errores visibles (campos tocados con error)."""
        return visible_errors(self.state)

    def error_for(self, name: str) -> Optional[str]:
        return visible_error(self.state, name)

    # ========================================================================
    # Eventos
    # ========================================================================

    def change(self, name: str, value: Any) -> FormState:
        """Evento de cambio de valor."""
        previous = self.state.values
        self.state = set_value(self.state, name, value)
        if self.state.values != previous:
            self._persist()
        return self.state

    def blur(self, name: str) -> FormState:
        """Evento de salida del campo."""
        self.state = mark_touched(self.state, name)
        return self.state

    def submit(self) -> SubmitResult:
        """
        Intenta enviar el formulario.

        El estado validado (todos los campos tocados) queda aplicado aunque
        el callback lance una excepción.
        """
        self.state, _ = validate_all(touch_all(self.state))
        result = submit(self.state, self.on_submit)
        self.state = result.state
        if result:
            logger.info("Formulario '%s' enviado", self.schema.storage_key)
        else:
            logger.debug("Envío rechazado: %s", ", ".join(result.errors))
        return result

    def reset(self) -> FormState:
        """Vuelve a los valores por defecto y borra el snapshot."""
        self.state = reset_state(self.state)
        if self.store is not None:
            try:
                self.store.clear()
            except Exception:
                logger.warning(
                    "No se pudo borrar el snapshot '%s'", self.store.key, exc_info=True
                )
        return self.state

    def _persist(self) -> None:
        """Escritura del snapshot sin propagar errores."""
        if self.store is None:
            return
        try:
            self.store.save(self.values)
        except Exception:
            logger.warning(
                "No se pudo guardar el snapshot '%s'", self.store.key, exc_info=True
            )
