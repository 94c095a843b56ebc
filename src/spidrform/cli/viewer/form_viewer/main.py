"""
Función principal del formulario interactivo.
"""

import shutil
from typing import Optional

from rich.live import Live

from spidrform.cli.theme import get_console
from spidrform.cli.viewer.terminal import Key, get_key, clear_screen, mouse_tracking
from spidrform.config import FormSettings
from spidrform.core.effects import EffectSpawner, NetworkSpawner
from spidrform.models import SubmissionResult
from spidrform.session import FormSession

from .models import FormState, FormResult
from .builders import build_display, measure_form
from .canvas import CELL_H, CELL_W, form_bounds_px
from .handlers import handle_key

FORM_TITLE = "Contest Entry Form"
FORM_SUBTITLE = "Fill out the form below to enter our air fryer giveaway"
FORM_FOOTER = "By submitting this form, you agree to our terms and conditions."

# Sin entrada durante este tiempo se redibuja igual (vencimiento de telarañas)
IDLE_POLL_S = 0.1


def _layout(state: FormState, console) -> int:
    """
    Recalcula el tamaño del formulario y del contenedor de efectos.

    Returns:
        Columnas disponibles para el lienzo de telarañas
    """
    columns, rows = shutil.get_terminal_size()
    state.form_size = measure_form(console, state)
    form_width, form_height = state.form_size

    if isinstance(state.effects, NetworkSpawner):
        state.effects.resize(
            columns * CELL_W,
            rows * CELL_H,
            form_bounds_px(form_width, form_height),
        )
    return max(columns - form_width - 1, 0)


def process_key(key: Key, state: FormState) -> Optional[dict]:
    """
    Procesa una tecla (o "" si no hubo entrada) y avanza los efectos.

    Returns:
        None si el loop continúa, o el dict de salida del handler
    """
    result = handle_key(key, state)
    if result is None:
        state.effects.tick()
    return result


def interactive_form(
    session: Optional[FormSession] = None,
    settings: Optional[FormSettings] = None,
    effects: Optional[EffectSpawner] = None,
) -> Optional[SubmissionResult]:
    """
    Muestra el formulario de participación interactivo.

    Args:
        session: Sesión a editar (por defecto una vacía con ConsoleReporter)
        settings: Configuración (efectos, depuración)
        effects: Spawner de telarañas; si no se pasa se crea uno según settings

    Returns:
        SubmissionResult del envío exitoso, o None si el usuario sale
    """
    console = get_console()
    settings = settings or FormSettings()
    session = session or FormSession()

    if effects is None and settings.effects_enabled:
        columns, rows = shutil.get_terminal_size()
        effects = NetworkSpawner(columns * CELL_W, rows * CELL_H, settings=settings.effects)

    state = FormState(
        title=FORM_TITLE,
        subtitle=FORM_SUBTITLE,
        footer=FORM_FOOTER,
        session=session,
        debug=settings.debug,
    )
    if effects is not None:
        state.effects = effects

    show_canvas = settings.effects_enabled
    canvas_width = _layout(state, console)

    clear_screen()

    with mouse_tracking(show_canvas), Live(console=console, auto_refresh=False, screen=False) as live:
        live.update(build_display(state, canvas_width if show_canvas else 0), refresh=True)
        state.effects.mark_visible()

        while True:
            key = get_key(IDLE_POLL_S if show_canvas else None)

            result = process_key(key, state)

            if result is not None:
                if result.get("_cancel"):
                    return None
                if result.get("_result") == FormResult.SUBMITTED:
                    live.update(build_display(state), refresh=True)
                    return result["submission"]

            canvas_width = _layout(state, console)
            live.update(build_display(state, canvas_width if show_canvas else 0), refresh=True)
            state.effects.mark_visible()
