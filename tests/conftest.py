"""Configuración de pytest para tests de spidrform."""

import pytest
import numpy as np

from spidrform.config import EffectSettings
from spidrform.models import FormRecord
from spidrform.reporting import RecordingReporter
from spidrform.session import FormSession


class FakeClock:
    """Reloj manual en milisegundos."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def valid_record():
    """Registro completo y válido (valores ya formateados)."""
    return FormRecord(
        first_name="John",
        last_name="Doe",
        phone_number="(123) 456-7890",
        email="john.doe@example.com",
        air_fryer_cost="199.99",
        spidr_pin="1234-5678-9012-3456",
    )


@pytest.fixture
def reporter():
    """Reporter que guarda los registros en memoria."""
    return RecordingReporter()


@pytest.fixture
def session(reporter):
    """Sesión vacía con reporter en memoria."""
    return FormSession(reporter=reporter)


@pytest.fixture
def clock():
    """Reloj manual."""
    return FakeClock()


@pytest.fixture
def rng():
    """Generador aleatorio con semilla fija."""
    return np.random.default_rng(42)


@pytest.fixture
def always_trigger():
    """Configuración de efectos que dispara en cada movimiento."""
    return EffectSettings(trigger_chance=1.0)
