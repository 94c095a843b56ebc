"""
Modo de preguntas secuenciales con questionary.

Pregunta cada campo, lo formatea como texto escrito, y al enviar
vuelve a preguntar solo los campos con error.
"""

from typing import Optional

import questionary

from spidrform.cli.styles import get_prompt_style
from spidrform.cli.theme import print_error, print_errors, print_header, print_success
from spidrform.cli.viewer.form_viewer.models import FormField, contest_fields
from spidrform.models import SubmissionResult
from spidrform.session import FormSession


def _ask(fld: FormField, current: str) -> Optional[str]:
    """Pregunta un campo; None si el usuario cancela."""
    style = get_prompt_style()
    if fld.secret:
        return questionary.password(fld.label, style=style).ask()
    return questionary.text(
        fld.label,
        default=current,
        instruction=fld.placeholder or None,
        style=style,
    ).ask()


def prompt_form(session: Optional[FormSession] = None) -> Optional[SubmissionResult]:
    """
    Completa el formulario con preguntas sucesivas.

    Returns:
        SubmissionResult exitoso, o None si el usuario cancela
    """
    from spidrform.cli.viewer.form_viewer.main import FORM_TITLE, FORM_SUBTITLE

    session = session or FormSession()
    fields = contest_fields()
    labels = {f.key: f.label for f in fields}

    print_header(FORM_TITLE, FORM_SUBTITLE)

    pending = fields
    while True:
        for fld in pending:
            answer = _ask(fld, session.value(fld.key))
            if answer is None:
                return None
            session.clear_field(fld.key)
            session.type_text(fld.key, answer)

        result = session.submit()
        if result.success:
            print_success(result.message)
            return result

        print_error(result.message)
        print_errors(result.errors, labels)
        pending = [f for f in fields if f.key in result.errors]
