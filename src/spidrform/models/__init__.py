"""
Modelos de datos para SpidrForm.
"""

from spidrform.models.record import (
    FIELD_NAMES,
    FIELD_ALIASES,
    ErrorMap,
    FormRecord,
    SubmissionResult,
    resolve_field_name,
)

__all__ = [
    "FIELD_NAMES",
    "FIELD_ALIASES",
    "ErrorMap",
    "FormRecord",
    "SubmissionResult",
    "resolve_field_name",
]
