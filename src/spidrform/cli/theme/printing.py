"""
Salida directa a la consola con el tema activo.
"""

from spidrform.cli.theme.palette import get_console
from spidrform.cli.theme.styled import (
    styled_header, styled_success, styled_warning,
    styled_error, styled_info, styled_field_error,
)


def print_header(title: str, subtitle: str = None) -> None:
    get_console().print(styled_header(title, subtitle))


def print_success(message: str) -> None:
    get_console().print(styled_success(message))


def print_warning(message: str) -> None:
    get_console().print(styled_warning(message))


def print_error(message: str) -> None:
    get_console().print(styled_error(message))


def print_info(message: str) -> None:
    get_console().print(styled_info(message))


def print_errors(errors: dict[str, str], labels: dict[str, str] = None) -> None:
    """
    Imprime un ErrorMap, un campo por línea.

    Args:
        errors: Campo -> mensaje
        labels: Campo -> etiqueta visible (por defecto el nombre del campo)
    """
    console = get_console()
    labels = labels or {}
    for name, message in errors.items():
        console.print(styled_field_error(labels.get(name, name), message))
