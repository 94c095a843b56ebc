"""
Validadores de argumentos para la CLI.

Convierten los errores de programación (campos inexistentes) en un
mensaje de error y salida con código 1.
"""

import typer

from spidrform.cli.theme import print_error
from spidrform.models import FIELD_NAMES, resolve_field_name


def validate_field_name(name: str, exit_on_error: bool = True) -> str | None:
    """
    Valida y normaliza un nombre de campo.

    Args:
        name: Nombre del campo (spidr_pin, spidrPin o spidr-pin)
        exit_on_error: Si True, termina el programa con error

    Returns:
        Nombre normalizado, o None si no es válido
    """
    try:
        return resolve_field_name(name.replace("-", "_"))
    except ValueError as e:
        print_error(str(e))
        typer.echo(f"  Valid fields: {', '.join(FIELD_NAMES)}")
        if exit_on_error:
            raise typer.Exit(1)
        return None
