"""Modelos Pydantic para configuración de la aplicación."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class ThemeChoice(str, Enum):
    """Temas de color disponibles para la interfaz."""
    DEFAULT = "default"
    MONOKAI = "monokai"
    NORD = "nord"
    MINIMAL = "minimal"


class EffectSettings(BaseModel):
    """Parámetros del efecto decorativo de telarañas."""
    trigger_chance: float = Field(default=0.1, ge=0, le=1, description="Probabilidad por movimiento")
    throttle_ms: float = Field(default=200.0, ge=0, description="Intervalo mínimo entre telarañas")
    form_buffer_px: float = Field(default=30.0, ge=0, description="Margen alrededor del formulario")
    edge_margin_px: float = Field(default=10.0, ge=0, description="Margen a los bordes del contenedor")
    min_nodes: int = Field(default=3, ge=1, description="Nodos exteriores mínimos")
    max_nodes: int = Field(default=4, ge=1, description="Nodos exteriores máximos")
    min_radius_px: float = Field(default=40.0, gt=0, description="Radio mínimo")
    radius_spread_px: float = Field(default=30.0, ge=0, description="Variación del radio")
    lifetime_ms: float = Field(default=2000.0, gt=0, description="Tiempo visible")
    fade_ms: float = Field(default=400.0, ge=0, description="Tiempo de desvanecimiento")
    leave_fade_ms: float = Field(default=300.0, ge=0, description="Desvanecimiento al salir el puntero")
    seed: Optional[int] = Field(default=None, description="Semilla del generador aleatorio")

    @model_validator(mode="after")
    def check_node_range(self) -> "EffectSettings":
        if self.min_nodes > self.max_nodes:
            raise ValueError("min_nodes debe ser <= max_nodes")
        return self


class FormSettings(BaseModel):
    """Configuración completa del formulario."""
    theme: ThemeChoice = Field(default=ThemeChoice.DEFAULT, description="Tema de color")
    effects_enabled: bool = Field(default=True, description="Mostrar telarañas decorativas")
    effects: EffectSettings = Field(default_factory=EffectSettings)
    debug: bool = Field(default=False, description="Mostrar trazas de depuración")
