"""
Handler para el modo de navegación del formulario.
"""

from typing import Optional

from ..models import FormState, FormResult


def handle_navigate(key: str, state: FormState) -> Optional[dict]:
    """Maneja el modo de navegación."""
    if key in ('s', 'S'):
        result = state.session.submit()
        if result.success:
            state.set_message(result.message, "success")
            return {"_result": FormResult.SUBMITTED, "submission": result}
        state.set_message(result.message, "error")
        state.select_first_error()

    elif key == 'esc':
        state.mode = "confirm_quit"

    elif key == 'up':
        state.selected_idx = state.prev_field()
        state.message = ""

    elif key == 'down':
        state.selected_idx = state.next_field()
        state.message = ""

    elif key in ('tab', 'p', 'P'):
        state.show_pin = not state.show_pin

    elif key == 'enter':
        state.message = ""
        state.mode = "edit"

    elif key == 'ctrl_c':
        return {"_cancel": True}

    return None
