"""
Lienzo de caracteres para las telarañas decorativas.

El spawner trabaja en píxeles; la terminal en celdas. Cada celda
equivale a CELL_W x CELL_H píxeles.
"""

from typing import Iterable

from rich.text import Text

from spidrform.cli.theme import get_icons, get_palette
from spidrform.core.effects import Bounds, NetworkPattern

CELL_W = 8
CELL_H = 16


def cell_to_px(col: int, row: int) -> tuple[float, float]:
    """Centro de una celda en píxeles."""
    return col * CELL_W + CELL_W / 2, row * CELL_H + CELL_H / 2


def px_to_cell(x: float, y: float) -> tuple[int, int]:
    return int(x // CELL_W), int(y // CELL_H)


def form_bounds_px(width_cells: int, height_cells: int) -> Bounds:
    """Rectángulo del formulario (anclado arriba a la izquierda) en píxeles."""
    return Bounds(left=0, top=0, right=width_cells * CELL_W, bottom=height_cells * CELL_H)


def rasterize(
    patterns: Iterable[NetworkPattern],
    origin_col: int,
    width: int,
    height: int,
) -> list[list[str]]:
    """
    Dibuja las telarañas visibles en una grilla de caracteres.

    Args:
        patterns: Telarañas activas
        origin_col: Columna de la terminal donde empieza el lienzo
        width: Ancho del lienzo en celdas
        height: Alto del lienzo en celdas

    Returns:
        Grilla [fila][columna] de caracteres
    """
    icons = get_icons()
    grid = [[" "] * width for _ in range(height)]

    def put(x: float, y: float, char: str) -> None:
        col, row = px_to_cell(x, y)
        col -= origin_col
        if 0 <= col < width and 0 <= row < height:
            grid[row][col] = char

    for pattern in patterns:
        if not pattern.visible:
            continue
        for conn in pattern.connections:
            x1, y1 = conn.end
            steps = max(int(abs(x1 - conn.x) / CELL_W), int(abs(y1 - conn.y) / CELL_H), 1)
            for i in range(steps + 1):
                t = i / steps
                put(conn.x + (x1 - conn.x) * t, conn.y + (y1 - conn.y) * t, icons.web_line)
        for node in pattern.nodes:
            put(node.x, node.y, icons.web_node)

    return grid


def build_web_canvas(
    patterns: Iterable[NetworkPattern],
    origin_col: int,
    width: int,
    height: int,
) -> Text:
    """Construye el lienzo como Text de rich."""
    p = get_palette()
    grid = rasterize(patterns, origin_col, width, height)
    return Text("\n".join("".join(row) for row in grid), style=p.web)
