"""
Efecto decorativo de telarañas alrededor del formulario.

Cuando el puntero se mueve fuera del formulario se generan pequeñas
redes de nodos conectados que desaparecen solas. El generador es
independiente del formateo y la validación: el reloj y el generador
aleatorio se inyectan, de modo que los tests son deterministas.
"""

import math
import time
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

import numpy as np

from spidrform.config import EffectSettings


Clock = Callable[[], float]


def monotonic_ms() -> float:
    """Reloj por defecto en milisegundos."""
    return time.monotonic() * 1000.0


@dataclass(frozen=True)
class Bounds:
    """Rectángulo en coordenadas del contenedor (px)."""
    left: float
    top: float
    right: float
    bottom: float

    def contains(self, x: float, y: float, buffer: float = 0.0) -> bool:
        """Verifica si el punto cae dentro del rectángulo ampliado."""
        return (
            self.left - buffer <= x <= self.right + buffer
            and self.top - buffer <= y <= self.bottom + buffer
        )


@dataclass(frozen=True)
class Node:
    """Nodo de la red."""
    x: float
    y: float
    delay_s: float = 0.0


@dataclass(frozen=True)
class Connection:
    """Línea entre dos nodos (origen, largo y ángulo en grados)."""
    x: float
    y: float
    length: float
    angle_deg: float
    delay_s: float = 0.0

    @property
    def end(self) -> tuple[float, float]:
        rad = math.radians(self.angle_deg)
        return self.x + math.cos(rad) * self.length, self.y + math.sin(rad) * self.length


@dataclass
class NetworkPattern:
    """Una telaraña generada."""
    center: Node
    nodes: list[Node]
    connections: list[Connection]
    created_ms: float
    fade_at_ms: float
    remove_at_ms: float
    visible: bool = False


def _connect(a: Node, b: Node, delay_s: float) -> Connection:
    dx = b.x - a.x
    dy = b.y - a.y
    return Connection(
        x=a.x,
        y=a.y,
        length=math.hypot(dx, dy),
        angle_deg=math.degrees(math.atan2(dy, dx)),
        delay_s=delay_s,
    )


class EffectSpawner(Protocol):
    """Capacidad de efectos que la interfaz recibe inyectada."""

    @property
    def active(self) -> list[NetworkPattern]: ...

    def on_pointer_move(self, x: float, y: float) -> Optional[NetworkPattern]: ...

    def on_pointer_leave(self) -> None: ...

    def mark_visible(self) -> None: ...

    def tick(self) -> None: ...


class NullSpawner:
    """Spawner que no hace nada (efectos desactivados)."""

    @property
    def active(self) -> list[NetworkPattern]:
        return []

    def on_pointer_move(self, x: float, y: float) -> Optional[NetworkPattern]:
        return None

    def on_pointer_leave(self) -> None:
        pass

    def mark_visible(self) -> None:
        pass

    def tick(self) -> None:
        pass


class NetworkSpawner:
    """
    Genera telarañas cerca del puntero.

    - Cada movimiento dispara con probabilidad trigger_chance.
    - Como máximo una telaraña cada throttle_ms.
    - Mientras una telaraña no fue dibujada (mark_visible) se ignoran
      nuevos disparos.
    - No se genera nada dentro del formulario más form_buffer_px.
    """

    def __init__(
        self,
        width: float,
        height: float,
        form_bounds: Optional[Bounds] = None,
        settings: Optional[EffectSettings] = None,
        rng: Optional[np.random.Generator] = None,
        clock: Optional[Clock] = None,
    ):
        self.width = width
        self.height = height
        self.form_bounds = form_bounds
        self.settings = settings or EffectSettings()
        self.rng = rng if rng is not None else np.random.default_rng(self.settings.seed)
        self.clock = clock or monotonic_ms
        self.last_spawn_ms: float = -math.inf
        self.in_flight: bool = False
        self._patterns: list[NetworkPattern] = []

    @property
    def active(self) -> list[NetworkPattern]:
        return list(self._patterns)

    def resize(self, width: float, height: float, form_bounds: Optional[Bounds] = None) -> None:
        """Actualiza el tamaño del contenedor y la posición del formulario."""
        self.width = width
        self.height = height
        self.form_bounds = form_bounds

    def _throttled(self, now: float) -> bool:
        return now - self.last_spawn_ms < self.settings.throttle_ms

    def on_pointer_move(self, x: float, y: float) -> Optional[NetworkPattern]:
        """Procesa un movimiento del puntero; retorna la telaraña creada si hubo."""
        if self.rng.random() <= 1.0 - self.settings.trigger_chance:
            return None
        if self._throttled(self.clock()):
            return None
        if self.form_bounds is not None and self.form_bounds.contains(
            x, y, self.settings.form_buffer_px
        ):
            return None
        return self.spawn(x, y)

    def spawn(self, center_x: float, center_y: float) -> Optional[NetworkPattern]:
        """Crea una telaraña centrada en el punto dado."""
        now = self.clock()
        if self.in_flight or self._throttled(now):
            return None

        self.in_flight = True
        self.last_spawn_ms = now

        s = self.settings
        n = int(self.rng.integers(s.min_nodes, s.max_nodes + 1))
        radius = s.min_radius_px + self.rng.random() * s.radius_spread_px

        angles = np.arange(n) / n * 2 * np.pi + (self.rng.random(n) - 0.5) * 0.5
        distances = radius * (0.7 + self.rng.random(n) * 0.3)
        xs = center_x + np.cos(angles) * distances
        ys = center_y + np.sin(angles) * distances

        margin = s.edge_margin_px
        xs = np.maximum(margin, np.minimum(xs, self.width - margin))
        ys = np.maximum(margin, np.minimum(ys, self.height - margin))

        outer = [
            Node(x=float(x), y=float(y), delay_s=i * 0.08)
            for i, (x, y) in enumerate(zip(xs, ys))
        ]
        center = Node(x=center_x, y=center_y, delay_s=n * 0.08)
        nodes = outer + [center]

        # Conexiones del centro a cada nodo exterior
        connections = [_connect(center, node, i * 0.1 + 0.2) for i, node in enumerate(outer)]
        # Una línea extra entre nodos exteriores
        if len(nodes) > 3:
            connections.append(_connect(outer[0], outer[1], 0.5))

        pattern = NetworkPattern(
            center=center,
            nodes=nodes,
            connections=connections,
            created_ms=now,
            fade_at_ms=now + s.lifetime_ms,
            remove_at_ms=now + s.lifetime_ms + s.fade_ms,
        )
        self._patterns.append(pattern)
        return pattern

    def mark_visible(self) -> None:
        """Llamado por la interfaz después de dibujar; libera el disparo."""
        for pattern in self._patterns:
            if pattern.fade_at_ms > self.clock():
                pattern.visible = True
        self.in_flight = False

    def on_pointer_leave(self) -> None:
        """El puntero salió del contenedor: desvanecer todo."""
        now = self.clock()
        for pattern in self._patterns:
            pattern.visible = False
            pattern.fade_at_ms = min(pattern.fade_at_ms, now)
            pattern.remove_at_ms = min(pattern.remove_at_ms, now + self.settings.leave_fade_ms)

    def tick(self) -> None:
        """Avanza el ciclo de vida: oculta y elimina telarañas vencidas."""
        now = self.clock()
        remaining = []
        for pattern in self._patterns:
            if now >= pattern.fade_at_ms:
                pattern.visible = False
            if now < pattern.remove_at_ms:
                remaining.append(pattern)
        self._patterns = remaining
