"""
Handler para el modo de edición de texto.

Cada tecla pasa por el formateador del campo: el valor mostrado es
siempre el valor almacenado.
"""

from typing import Optional

from ..models import FormState


def handle_edit(key: str, state: FormState) -> Optional[dict]:
    """Maneja el modo de edición de un campo."""
    fld = state.current_field

    if key == 'enter':
        state.mode = "navigate"
        state.selected_idx = state.next_field()

    elif key == 'esc':
        state.mode = "navigate"

    elif key in ('up', 'down'):
        state.mode = "navigate"
        state.selected_idx = state.prev_field() if key == 'up' else state.next_field()

    elif key == 'backspace':
        state.session.backspace(fld.key)

    elif key == 'tab':
        state.show_pin = not state.show_pin

    elif key == 'ctrl_c':
        return {"_cancel": True}

    elif len(key) == 1 and key.isprintable():
        state.session.type_text(fld.key, key)

    return None
