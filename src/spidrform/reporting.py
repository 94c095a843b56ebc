"""
Destinos de reporte para envíos válidos.

El controlador de envío entrega el registro completo a un Reporter;
no se espera respuesta.
"""

from typing import Protocol

from spidrform.models import FormRecord


class Reporter(Protocol):
    """Colaborador que recibe cada registro enviado con éxito."""

    def report(self, record: FormRecord) -> None: ...


class ConsoleReporter:
    """Imprime los datos del formulario en la consola con el tema activo."""

    def report(self, record: FormRecord) -> None:
        from rich.panel import Panel
        from rich.table import Table
        from rich import box
        from spidrform.cli.theme import get_console, get_palette

        console = get_console()
        p = get_palette()

        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Key", style=p.label)
        table.add_column("Value", style=f"bold {p.number}")
        for key, value in record.to_report().items():
            table.add_row(key, value)

        console.print("Form Data:", style=f"bold {p.primary}")
        console.print(Panel(table, border_style=p.border, box=box.ROUNDED, padding=(0, 1)))


class RecordingReporter:
    """Guarda los registros reportados en memoria."""

    def __init__(self):
        self.records: list[FormRecord] = []

    def report(self, record: FormRecord) -> None:
        self.records.append(record)

    @property
    def count(self) -> int:
        return len(self.records)
