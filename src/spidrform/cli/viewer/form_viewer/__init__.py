"""
Visor interactivo tipo formulario para el ingreso de datos.

Muestra una tabla con los campos del formulario; cada tecla se
formatea al escribirla y el envío valida todos los campos.
"""

from .models import (
    FieldStatus,
    FormField,
    FormState,
    FormResult,
    contest_fields,
)
from .main import interactive_form
from .handlers import handle_key
from .builders import build_display, display_value

__all__ = [
    "FieldStatus",
    "FormField",
    "FormState",
    "FormResult",
    "contest_fields",
    "interactive_form",
    "handle_key",
    "build_display",
    "display_value",
]
