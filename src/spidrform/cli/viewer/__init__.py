"""
Módulo de visores interactivos.

Submodulos:
- terminal: Utilidades de terminal (clear_screen, get_key, mouse)
- form_viewer: Formulario interactivo de participación
"""

from spidrform.cli.viewer.form_viewer import (
    interactive_form,
    FormField,
    FormState,
    FieldStatus,
    FormResult,
)

__all__ = [
    "interactive_form",
    "FormField",
    "FormState",
    "FieldStatus",
    "FormResult",
]
