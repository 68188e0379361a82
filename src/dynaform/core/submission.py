"""
Control de envío del formulario.

Un envío es una única decisión atómica: se marcan todos los campos como
tocados, se valida todo y solo si no hay errores se llama al callback.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional

from dynaform.core.state import FormState, touch_all, validate_all, visible_errors


SubmitCallback = Callable[[dict], None]


@dataclass(frozen=True)
class SubmitResult:
    """Resultado de un intento de envío."""
    success: bool
    state: FormState
    values: Optional[dict] = None  # Valores enviados (solo si success)
    errors: dict = field(default_factory=dict)  # Errores visibles tras el envío

    def __bool__(self) -> bool:
        return self.success


def submit(state: FormState, on_submit: Optional[SubmitCallback] = None) -> SubmitResult:
    """
    Intenta enviar el formulario.

    Args:
        state: Estado actual
        on_submit: Callback externo; recibe una copia de los valores

    Returns:
        SubmitResult con el nuevo estado (todos los campos tocados)
    """
    state, all_valid = validate_all(touch_all(state))

    if not all_valid:
        return SubmitResult(success=False, state=state, errors=visible_errors(state))

    values = dict(state.values)
    if on_submit is not None:
        on_submit(dict(values))
    return SubmitResult(success=True, state=state, values=values)
