"""
Sistema de temas para la interfaz CLI de SpidrForm.

Proporciona una paleta de colores consistente y funciones de formato
para la salida en terminal.

El paquete esta organizado en modulos:
- palette: Definicion de paletas y gestion de temas (CLITheme, ColorPalette)
- icons: Iconos Unicode con fallback ASCII
- styled: Funciones que retornan objetos Text estilizados
- printing: Funciones que imprimen directamente a consola
"""

from spidrform.cli.theme.palette import (
    ColorPalette,
    THEME_DEFAULT,
    THEME_MONOKAI,
    THEME_NORD,
    THEME_MINIMAL,
    THEMES,
    CLITheme,
    get_console,
    get_palette,
    set_theme,
)

from spidrform.cli.theme.icons import get_icons

from spidrform.cli.theme.styled import (
    styled_header,
    styled_success,
    styled_warning,
    styled_error,
    styled_info,
    styled_field_error,
    styled_nav_key,
    styled_nav_bar,
)

from spidrform.cli.theme.printing import (
    print_header,
    print_success,
    print_warning,
    print_error,
    print_info,
    print_errors,
)

__all__ = [
    # palette
    "ColorPalette",
    "THEME_DEFAULT",
    "THEME_MONOKAI",
    "THEME_NORD",
    "THEME_MINIMAL",
    "THEMES",
    "CLITheme",
    "get_console",
    "get_palette",
    "set_theme",
    # icons
    "get_icons",
    # styled
    "styled_header",
    "styled_success",
    "styled_warning",
    "styled_error",
    "styled_info",
    "styled_field_error",
    "styled_nav_key",
    "styled_nav_bar",
    # printing
    "print_header",
    "print_success",
    "print_warning",
    "print_error",
    "print_info",
    "print_errors",
]
