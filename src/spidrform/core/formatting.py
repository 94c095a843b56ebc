"""
Formateo de campos mientras el usuario escribe.

Cada campo tiene un formateador puro que convierte la entrada cruda
en el valor canónico que se guarda y se muestra. Los formateadores
nunca fallan: los excesos de longitud se resuelven rechazando la
edición y conservando el valor previo.
"""

import re
from typing import Callable

from spidrform.models import resolve_field_name

_NON_DIGITS = re.compile(r"\D", re.ASCII)
_NON_COST = re.compile(r"[^0-9.]")
_PIN_GROUPS = re.compile(r"(\d{4})(?=\d)", re.ASCII)

PHONE_DIGITS = 10
PIN_DIGITS = 16


def digits_only(value: str) -> str:
    """Elimina todo lo que no sea dígito."""
    return _NON_DIGITS.sub("", value)


def format_phone(raw: str) -> str:
    """
    Formatea un teléfono como (XXX) XXX-XXXX.

    Los prefijos parciales se formatean a medida que se escriben:
        "123"        -> "123"
        "1234"       -> "(123) 4"
        "1234567"    -> "(123) 456-7"
    Los dígitos después del décimo se ignoran.
    """
    d = digits_only(raw)[:PHONE_DIGITS]

    if len(d) <= 3:
        return d
    elif len(d) <= 6:
        return f"({d[:3]}) {d[3:]}"
    return f"({d[:3]}) {d[3:6]}-{d[6:]}"


def format_pin(raw: str) -> str:
    """
    Agrupa los dígitos del PIN de a cuatro separados por guiones.

    Solo se inserta un guión si le sigue al menos un dígito, por lo que
    nunca queda un guión final. No trunca: el límite de 19 caracteres
    se aplica al guardar (ver apply_edit).
    """
    return _PIN_GROUPS.sub(r"\1-", digits_only(raw))


def format_cost(raw: str) -> str:
    """
    Deja solo dígitos y puntos decimales.

    No normaliza: "1.2.3" se conserva tal cual.
    """
    return _NON_COST.sub("", raw)


def format_plain(raw: str) -> str:
    """Texto libre, sin formato."""
    return raw


Formatter = Callable[[str], str]

# Tabla de estrategias: campo -> formateador
FORMATTERS: dict[str, Formatter] = {
    "first_name": format_plain,
    "last_name": format_plain,
    "phone_number": format_phone,
    "email": format_plain,
    "air_fryer_cost": format_cost,
    "spidr_pin": format_pin,
}

# Longitud máxima del valor formateado
MAX_LENGTHS: dict[str, int] = {
    "phone_number": 14,  # (XXX) XXX-XXXX
    "spidr_pin": 19,     # 16 dígitos + 3 guiones
}


def get_formatter(field: str) -> Formatter:
    """Obtiene el formateador de un campo (nombre o alias)."""
    return FORMATTERS[resolve_field_name(field)]


def apply_edit(field: str, raw: str, previous: str = "") -> str:
    """
    Calcula el nuevo valor almacenado para una edición.

    Args:
        field: Nombre del campo (o alias)
        raw: Valor crudo del input después de la tecla
        previous: Valor almacenado antes de la edición

    Returns:
        Valor formateado, o previous si el resultado excede el máximo
    """
    name = resolve_field_name(field)
    formatted = FORMATTERS[name](raw)

    max_length = MAX_LENGTHS.get(name)
    if max_length is not None and len(formatted) > max_length:
        return previous
    return formatted


def type_keystrokes(field: str, text: str, previous: str = "") -> str:
    """
    Simula escribir texto tecla por tecla en un campo.

    Cada tecla se agrega al valor almacenado actual y pasa por
    apply_edit, igual que en el formulario interactivo. Así, escribir
    más de 16 dígitos en el PIN satura en "1234-5678-9012-3456".
    """
    value = previous
    for char in text:
        value = apply_edit(field, value + char, value)
    return value


def delete_last(field: str, previous: str) -> str:
    """
    Borra el último caracter del valor almacenado y reformatea.

    Los valores formateados nunca terminan en separador, así que
    siempre se borra un caracter significativo.
    """
    return apply_edit(field, previous[:-1], previous)
