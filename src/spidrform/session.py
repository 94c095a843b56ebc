"""
Sesión de formulario: estado actual y controlador de envío.

Mantiene el registro y el mapa de errores de una sesión. Cada tecla
pasa por el formateador del campo antes de guardarse; al enviar se
valida el registro completo y, si no hay errores, se entrega al
Reporter.
"""

from typing import Optional

from spidrform.core.formatting import apply_edit, delete_last, type_keystrokes
from spidrform.core.validation import validate_form
from spidrform.models import ErrorMap, FormRecord, SubmissionResult, resolve_field_name
from spidrform.reporting import ConsoleReporter, Reporter


SUCCESS_MESSAGE = "Form submitted successfully! Check the console for your data."
FAILURE_MESSAGE = "Please fix the errors in the form before submitting."


class FormSession:
    """Estado de un formulario en curso."""

    def __init__(
        self,
        reporter: Optional[Reporter] = None,
        record: Optional[FormRecord] = None,
    ):
        self.reporter = reporter if reporter is not None else ConsoleReporter()
        self.record = record if record is not None else FormRecord()
        self.errors: ErrorMap = {}
        self.submitted = 0

    def _clear_error(self, name: str) -> None:
        # Al editar se borra el error del campo sin revalidar
        self.errors.pop(name, None)

    def _store(self, name: str, value: str) -> str:
        self.record = self.record.with_field(name, value)
        return value

    def value(self, field: str) -> str:
        """Valor almacenado de un campo."""
        return self.record.get(field)

    def set_field(self, field: str, raw: str) -> str:
        """
        Aplica el valor crudo del input a un campo.

        Args:
            field: Nombre del campo (o alias)
            raw: Contenido completo del input después de la edición

        Returns:
            Valor almacenado (el previo si la edición fue rechazada)
        """
        name = resolve_field_name(field)
        self._clear_error(name)
        return self._store(name, apply_edit(name, raw, getattr(self.record, name)))

    def type_text(self, field: str, text: str) -> str:
        """Escribe texto tecla por tecla al final del valor actual."""
        name = resolve_field_name(field)
        self._clear_error(name)
        return self._store(name, type_keystrokes(name, text, getattr(self.record, name)))

    def backspace(self, field: str) -> str:
        """Borra el último caracter de un campo."""
        name = resolve_field_name(field)
        self._clear_error(name)
        return self._store(name, delete_last(name, getattr(self.record, name)))

    def clear_field(self, field: str) -> str:
        """Vacía un campo."""
        name = resolve_field_name(field)
        self._clear_error(name)
        return self._store(name, "")

    def validate(self) -> ErrorMap:
        """Valida el registro actual y reemplaza el mapa de errores."""
        self.errors = validate_form(self.record)
        return dict(self.errors)

    def submit(self) -> SubmissionResult:
        """
        Envía el formulario.

        Si no hay errores, entrega el registro al Reporter una sola vez.
        No hay reintentos ni envíos parciales.
        """
        errors = self.validate()
        if errors:
            return SubmissionResult(success=False, message=FAILURE_MESSAGE, errors=errors)

        self.reporter.report(self.record)
        self.submitted += 1
        return SubmissionResult(success=True, message=SUCCESS_MESSAGE, record=self.record)

    def reset(self) -> None:
        """Vuelve a un formulario vacío."""
        self.record = FormRecord()
        self.errors = {}
