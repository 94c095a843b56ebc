"""Núcleo de formateo y validación del formulario."""

from spidrform.core.formatting import (
    FORMATTERS,
    MAX_LENGTHS,
    apply_edit,
    delete_last,
    digits_only,
    format_cost,
    format_phone,
    format_pin,
    format_plain,
    get_formatter,
    type_keystrokes,
)

from spidrform.core.validation import (
    is_valid_email,
    is_valid_phone_number,
    validate_field,
    validate_form,
)

__all__ = [
    # Formateo
    "FORMATTERS",
    "MAX_LENGTHS",
    "apply_edit",
    "delete_last",
    "digits_only",
    "format_cost",
    "format_phone",
    "format_pin",
    "format_plain",
    "get_formatter",
    "type_keystrokes",
    # Validación
    "is_valid_email",
    "is_valid_phone_number",
    "validate_field",
    "validate_form",
]
