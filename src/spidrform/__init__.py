"""
SpidrForm - Formulario de participación del sorteo de la freidora de aire.

Formatea los campos mientras se escriben, valida el formulario al enviarlo
y reporta los datos del participante.
"""

__version__ = "1.0.0"

from spidrform.models import FormRecord, ErrorMap, SubmissionResult
from spidrform.core import apply_edit, type_keystrokes, validate_form
from spidrform.session import FormSession

__all__ = [
    "__version__",
    "FormRecord",
    "ErrorMap",
    "SubmissionResult",
    "FormSession",
    "apply_edit",
    "type_keystrokes",
    "validate_form",
]
