"""
Definicion de paletas de colores y gestion de temas.
"""

from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.theme import Theme

from spidrform.config import ThemeChoice


@dataclass
class ColorPalette:
    """Paleta de colores para un tema."""
    # Colores principales
    primary: str      # Títulos, fila seleccionada
    secondary: str    # Subtítulos
    accent: str       # Valores ingresados

    # Colores semánticos
    success: str      # Envío exitoso, campo completo
    warning: str      # Campo pendiente
    error: str        # Errores de validación
    info: str         # Ayudas
    muted: str        # Texto secundario/atenuado

    # Datos
    number: str       # Valores en reportes
    label: str        # Etiquetas

    # Bordes
    border: str

    # Navegación interactiva
    nav_confirm: str  # Enter / enviar
    nav_cancel: str   # Esc / salir
    nav_key: str      # Flechas y atajos
    input_text: str   # Texto en edición

    # Telarañas decorativas
    web: str


# Tema por defecto - azul claro del formulario web
THEME_DEFAULT = ColorPalette(
    primary="#2596be",      # Azul Spidr
    secondary="#7cc4de",    # Celeste
    accent="#af87af",       # Púrpura suave
    success="#87af87",      # Verde suave
    warning="#d7af5f",      # Amarillo/naranja suave
    error="#d75f5f",        # Rojo suave
    info="#5f87af",         # Azul info
    muted="#808080",        # Gris
    number="#d7af5f",       # Amarillo
    label="#afafaf",        # Gris claro
    border="#5f5f5f",       # Gris oscuro
    nav_confirm="#87af87",  # Verde
    nav_cancel="#d75f5f",   # Rojo
    nav_key="#af87af",      # Púrpura
    input_text="#ffffff",   # Blanco
    web="#2596be",          # Azul Spidr
)

# Tema Monokai
THEME_MONOKAI = ColorPalette(
    primary="#66d9ef",
    secondary="#a6e22e",
    accent="#ae81ff",
    success="#a6e22e",
    warning="#e6db74",
    error="#f92672",
    info="#66d9ef",
    muted="#75715e",
    number="#fd971f",
    label="#f8f8f2",
    border="#49483e",
    nav_confirm="#a6e22e",
    nav_cancel="#f92672",
    nav_key="#ae81ff",
    input_text="#f8f8f2",
    web="#66d9ef",
)

# Tema Nord - colores fríos
THEME_NORD = ColorPalette(
    primary="#88c0d0",
    secondary="#81a1c1",
    accent="#b48ead",
    success="#a3be8c",
    warning="#ebcb8b",
    error="#bf616a",
    info="#5e81ac",
    muted="#4c566a",
    number="#d08770",
    label="#d8dee9",
    border="#3b4252",
    nav_confirm="#a3be8c",
    nav_cancel="#bf616a",
    nav_key="#b48ead",
    input_text="#eceff4",
    web="#88c0d0",
)

# Tema Minimal - grises y un acento
THEME_MINIMAL = ColorPalette(
    primary="#ffffff",
    secondary="#b0b0b0",
    accent="#5fafff",
    success="#87d787",
    warning="#ffd787",
    error="#ff8787",
    info="#5fafff",
    muted="#606060",
    number="#ffffff",
    label="#909090",
    border="#404040",
    nav_confirm="#87d787",
    nav_cancel="#ff8787",
    nav_key="#5fafff",
    input_text="#ffffff",
    web="#606060",
)

THEMES = {
    ThemeChoice.DEFAULT: THEME_DEFAULT,
    ThemeChoice.MONOKAI: THEME_MONOKAI,
    ThemeChoice.NORD: THEME_NORD,
    ThemeChoice.MINIMAL: THEME_MINIMAL,
}


class CLITheme:
    """Gestor de tema para la CLI."""

    _palette: ColorPalette = THEME_DEFAULT
    _console: Optional[Console] = None

    @classmethod
    def set_theme(cls, theme: ThemeChoice) -> None:
        """Establece el tema activo."""
        cls._palette = THEMES.get(theme, THEME_DEFAULT)
        cls._console = None  # Recrear console con el nuevo tema

    @classmethod
    def get_palette(cls) -> ColorPalette:
        """Obtiene la paleta de colores actual."""
        return cls._palette

    @classmethod
    def get_console(cls) -> Console:
        """Obtiene la consola Rich con el tema aplicado."""
        if cls._console is None:
            p = cls._palette
            custom_theme = Theme({
                "primary": p.primary,
                "secondary": p.secondary,
                "accent": p.accent,
                "success": p.success,
                "warning": p.warning,
                "error": p.error,
                "info": p.info,
                "muted": p.muted,
                "number": p.number,
                "label": p.label,
                "title": f"bold {p.primary}",
                "nav.confirm": f"bold {p.nav_confirm}",
                "nav.cancel": f"bold {p.nav_cancel}",
                "nav.key": f"bold {p.nav_key}",
                "input": f"bold {p.input_text}",
                "input.cursor": f"blink bold {p.input_text}",
                "web": p.web,
            })
            cls._console = Console(theme=custom_theme)
        return cls._console


def get_console() -> Console:
    """Obtiene la consola Rich con tema aplicado."""
    return CLITheme.get_console()


def get_palette() -> ColorPalette:
    """Obtiene la paleta de colores actual."""
    return CLITheme.get_palette()


def set_theme(theme: ThemeChoice) -> None:
    """Cambia el tema activo."""
    CLITheme.set_theme(theme)
