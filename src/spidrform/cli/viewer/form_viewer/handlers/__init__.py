"""
Handlers de teclas para el formulario interactivo.

Cada módulo maneja un modo específico del formulario.
"""

from typing import Optional

from spidrform.cli.viewer.terminal import Key, PointerEvent

from ..models import FormState

from .navigate import handle_navigate
from .edit import handle_edit
from .confirm import handle_confirm_quit
from .pointer import handle_pointer


def handle_key(key: Key, state: FormState) -> Optional[dict]:
    """
    Maneja una tecla presionada o un evento del puntero.

    Returns:
        None si debe continuar el loop
        dict con resultado si debe salir
    """
    if isinstance(key, PointerEvent):
        return handle_pointer(key, state)

    if state.mode == "confirm_quit":
        return handle_confirm_quit(key, state)

    elif state.mode == "edit":
        return handle_edit(key, state)

    elif state.mode == "navigate":
        return handle_navigate(key, state)

    return None


__all__ = ["handle_key"]
