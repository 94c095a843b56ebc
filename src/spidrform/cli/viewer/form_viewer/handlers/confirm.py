"""
Handler para la confirmación de salida.
"""

from typing import Optional

from ..models import FormState


def handle_confirm_quit(key: str, state: FormState) -> Optional[dict]:
    """Maneja la confirmación de salida sin enviar."""
    if key in ('y', 'Y', 'enter'):
        return {"_cancel": True}
    if key in ('n', 'N', 'esc'):
        state.mode = "navigate"
    return None
