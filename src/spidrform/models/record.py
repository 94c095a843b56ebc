"""
Registro del formulario de participación.

Un FormRecord por sesión de formulario. Es inmutable: cada edición
produce un registro nuevo con un solo campo reemplazado.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# Orden de los campos en el formulario (también orden de validación)
FIELD_NAMES: tuple[str, ...] = (
    "first_name",
    "last_name",
    "phone_number",
    "email",
    "air_fryer_cost",
    "spidr_pin",
)

# Claves camelCase usadas al reportar
FIELD_ALIASES: dict[str, str] = {
    "first_name": "firstName",
    "last_name": "lastName",
    "phone_number": "phoneNumber",
    "email": "email",
    "air_fryer_cost": "airFryerCost",
    "spidr_pin": "spidrPin",
}

_ALIAS_TO_NAME = {alias: name for name, alias in FIELD_ALIASES.items()}


def resolve_field_name(name: str) -> str:
    """
    Normaliza el nombre de un campo.

    Acepta tanto el nombre Python (spidr_pin) como el alias (spidrPin).

    Raises:
        ValueError: Si el campo no existe
    """
    if name in FIELD_ALIASES:
        return name
    resolved = _ALIAS_TO_NAME.get(name)
    if resolved is None:
        raise ValueError(f"Unknown field: {name}")
    return resolved


class FormRecord(BaseModel):
    """Datos del participante tal como se almacenan (ya formateados)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    phone_number: str = Field(default="", alias="phoneNumber", description="(XXX) XXX-XXXX")
    email: str = Field(default="", alias="email")
    air_fryer_cost: str = Field(default="", alias="airFryerCost", description="Solo dígitos y '.'")
    spidr_pin: str = Field(default="", alias="spidrPin", description="XXXX-XXXX-XXXX-XXXX")

    def get(self, field: str) -> str:
        """Obtiene el valor de un campo por nombre o alias."""
        return getattr(self, resolve_field_name(field))

    def with_field(self, field: str, value: str) -> "FormRecord":
        """Retorna un registro nuevo con un campo reemplazado."""
        return self.model_copy(update={resolve_field_name(field): value})

    def to_report(self) -> dict:
        """Diccionario con las claves camelCase."""
        return self.model_dump(by_alias=True)


# Mapa campo -> mensaje de error. Vacío significa formulario válido.
ErrorMap = dict[str, str]


class SubmissionResult(BaseModel):
    """Resultado de un intento de envío."""

    success: bool
    message: str
    errors: ErrorMap = Field(default_factory=dict)
    record: Optional[FormRecord] = None
