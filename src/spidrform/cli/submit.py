"""
Envío no interactivo del formulario desde opciones de línea de comandos.
"""

from typing import Optional

import typer

from spidrform.cli.theme import print_error, print_errors, print_success
from spidrform.cli.viewer.form_viewer.models import contest_fields
from spidrform.models import FIELD_NAMES, SubmissionResult
from spidrform.session import FormSession


def submit_values(values: dict[str, str], session: Optional[FormSession] = None) -> SubmissionResult:
    """
    Escribe cada valor como si se tecleara y envía el formulario.

    Args:
        values: Texto por campo (nombres snake_case); los ausentes quedan vacíos
        session: Sesión a usar (por defecto una nueva con ConsoleReporter)

    Returns:
        Resultado del envío
    """
    session = session or FormSession()
    for name in FIELD_NAMES:
        text = values.get(name)
        if text:
            session.type_text(name, text)
    return session.submit()


def run_submit(values: dict[str, str], session: Optional[FormSession] = None) -> SubmissionResult:
    """Envía y muestra el resultado; termina con código 1 si hay errores."""
    result = submit_values(values, session)
    if not result.success:
        labels = {f.key: f.label for f in contest_fields()}
        print_error(result.message)
        print_errors(result.errors, labels)
        raise typer.Exit(1)

    print_success(result.message)
    return result
