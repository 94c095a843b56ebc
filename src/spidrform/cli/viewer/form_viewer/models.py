"""
Modelos de datos para el formulario interactivo.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from spidrform.core.effects import EffectSpawner, NullSpawner
from spidrform.session import FormSession


class FieldStatus(Enum):
    """Estado de un campo."""
    EMPTY = "empty"
    FILLED = "filled"
    INVALID = "invalid"


class FormResult:
    """Resultado de un formulario interactivo."""
    SUBMITTED = "submitted"  # Envío válido, registro reportado
    CANCEL = "cancel"  # Usuario salió sin enviar


@dataclass
class FormField:
    """Definición visual de un campo del formulario."""
    key: str
    label: str
    placeholder: str = ""
    hint: str = ""
    prefix: str = ""  # Ej: "$" para el costo
    secret: bool = False  # Se muestra enmascarado salvo que se pida


def contest_fields() -> List[FormField]:
    """Campos del formulario de participación, en orden."""
    return [
        FormField(key="first_name", label="First Name"),
        FormField(key="last_name", label="Last Name"),
        FormField(
            key="phone_number",
            label="Phone Number",
            placeholder="(123) 456-7890",
        ),
        FormField(
            key="email",
            label="Email Address",
            placeholder="example@email.com",
        ),
        FormField(
            key="air_fryer_cost",
            label="Guess the Air Fryer's Cost",
            placeholder="0.00",
            prefix="$",
        ),
        FormField(
            key="spidr_pin",
            label="Very, Very Secret 16-digit Spidr PIN",
            placeholder="####-####-####-####",
            hint="Enter your 16-digit PIN (formatted automatically)",
            secret=True,
        ),
    ]


@dataclass
class FormState:
    """Estado del formulario."""
    title: str
    session: FormSession
    fields: List[FormField] = field(default_factory=contest_fields)
    subtitle: str = ""
    footer: str = ""
    selected_idx: int = 0
    mode: str = "navigate"  # "navigate", "edit", "confirm_quit"
    message: str = ""
    message_kind: str = "info"  # "info", "success", "error"
    show_pin: bool = False
    effects: EffectSpawner = field(default_factory=NullSpawner)
    # Rectángulo del formulario en celdas (ancho, alto), calculado al dibujar
    form_size: tuple[int, int] = (0, 0)
    debug: bool = False

    @property
    def current_field(self) -> FormField:
        return self.fields[self.selected_idx]

    def value(self, fld: FormField) -> str:
        """Valor almacenado del campo."""
        return self.session.value(fld.key)

    def error(self, fld: FormField) -> Optional[str]:
        """Mensaje de error actual del campo, si hay."""
        return self.session.errors.get(fld.key)

    def status(self, fld: FormField) -> FieldStatus:
        """Estado visual de un campo."""
        if self.error(fld):
            return FieldStatus.INVALID
        if self.value(fld):
            return FieldStatus.FILLED
        return FieldStatus.EMPTY

    def count_filled(self) -> tuple[int, int]:
        """Retorna (campos_llenos, campos_totales)."""
        filled = sum(1 for f in self.fields if self.value(f))
        return filled, len(self.fields)

    def next_field(self) -> int:
        return (self.selected_idx + 1) % len(self.fields)

    def prev_field(self) -> int:
        return (self.selected_idx - 1) % len(self.fields)

    def select_first_error(self) -> None:
        """Mueve la selección al primer campo con error."""
        for idx, fld in enumerate(self.fields):
            if self.error(fld):
                self.selected_idx = idx
                return

    def set_message(self, message: str, kind: str = "info") -> None:
        self.message = message
        self.message_kind = kind
