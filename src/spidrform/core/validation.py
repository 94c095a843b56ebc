"""
Validación del formulario completo al momento del envío.

Evalúa todos los campos (sin cortar en el primer error) y retorna el
conjunto completo de errores. Un mapa vacío significa formulario válido.
"""

import re
from typing import Optional

from spidrform.models import FIELD_NAMES, ErrorMap, FormRecord, resolve_field_name
from spidrform.core.formatting import PHONE_DIGITS, PIN_DIGITS, digits_only


# Espacios que recorta un campo de formulario web (incluye BOM y separadores Zs)
BLANKS = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005"
    "\u2006\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)

_NOT_BLANK_OR_AT = f"[^@{BLANKS}]+"
EMAIL_PATTERN = re.compile(rf"{_NOT_BLANK_OR_AT}@{_NOT_BLANK_OR_AT}\.{_NOT_BLANK_OR_AT}")

# Mensajes de error por regla
MSG_FIRST_NAME_REQUIRED = "First name is required"
MSG_LAST_NAME_REQUIRED = "Last name is required"
MSG_PHONE_REQUIRED = "Phone number is required"
MSG_PHONE_INVALID = "Please enter a valid phone number (at least 10 digits)"
MSG_EMAIL_REQUIRED = "Email is required"
MSG_EMAIL_INVALID = "Please enter a valid email address"
MSG_COST_REQUIRED = "Air fryer cost guess is required"
MSG_PIN_REQUIRED = "Spidr PIN is required"
MSG_PIN_LENGTH = "Spidr PIN must be exactly 16 digits"


def trim(value: str) -> str:
    """Recorta BLANKS en ambos extremos; no toca \\x1c-\\x1f ni \\x85."""
    return value.strip(BLANKS)


def is_valid_email(email: str) -> bool:
    """Verifica el formato algo@algo.algo (sin espacios ni @ extra)."""
    return EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_phone_number(phone: str) -> bool:
    """Un teléfono es válido con al menos 10 dígitos."""
    return len(digits_only(phone)) >= PHONE_DIGITS


def _check_first_name(value: str) -> Optional[str]:
    if not trim(value):
        return MSG_FIRST_NAME_REQUIRED
    return None


def _check_last_name(value: str) -> Optional[str]:
    if not trim(value):
        return MSG_LAST_NAME_REQUIRED
    return None


def _check_phone_number(value: str) -> Optional[str]:
    if not trim(value):
        return MSG_PHONE_REQUIRED
    if not is_valid_phone_number(value):
        return MSG_PHONE_INVALID
    return None


def _check_email(value: str) -> Optional[str]:
    if not trim(value):
        return MSG_EMAIL_REQUIRED
    if not is_valid_email(value):
        return MSG_EMAIL_INVALID
    return None


def _check_air_fryer_cost(value: str) -> Optional[str]:
    # Sin validación numérica: "1.2.3" es aceptado
    if not trim(value):
        return MSG_COST_REQUIRED
    return None


def _check_spidr_pin(value: str) -> Optional[str]:
    if not trim(value):
        return MSG_PIN_REQUIRED
    if len(digits_only(value)) != PIN_DIGITS:
        return MSG_PIN_LENGTH
    return None


_RULES = {
    "first_name": _check_first_name,
    "last_name": _check_last_name,
    "phone_number": _check_phone_number,
    "email": _check_email,
    "air_fryer_cost": _check_air_fryer_cost,
    "spidr_pin": _check_spidr_pin,
}


def validate_field(record: FormRecord, field: str) -> Optional[str]:
    """
    Valida un solo campo del registro.

    Returns:
        Mensaje de error o None si el campo es válido
    """
    name = resolve_field_name(field)
    return _RULES[name](getattr(record, name))


def validate_form(record: FormRecord) -> ErrorMap:
    """
    Valida el registro completo.

    Args:
        record: Registro con los valores ya formateados

    Returns:
        Diccionario campo -> mensaje, solo con los campos que fallan,
        en el orden del formulario
    """
    errors: ErrorMap = {}
    for name in FIELD_NAMES:
        message = validate_field(record, name)
        if message is not None:
            errors[name] = message
    return errors
