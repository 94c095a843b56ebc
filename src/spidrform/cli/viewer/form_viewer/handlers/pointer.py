"""
Handler para movimientos del puntero (telarañas decorativas).
"""

from typing import Optional

from spidrform.cli.theme import get_console
from spidrform.cli.viewer.terminal import PointerEvent

from ..models import FormState
from ..canvas import cell_to_px


def handle_pointer(event: PointerEvent, state: FormState) -> Optional[dict]:
    """Pasa el movimiento al spawner de efectos."""
    if event.leave:
        state.effects.on_pointer_leave()
        return None

    x, y = cell_to_px(event.x, event.y)
    pattern = state.effects.on_pointer_move(x, y)
    if pattern is not None and state.debug:
        get_console().log(f"Creating network at: {x:.0f} {y:.0f}")
    return None
