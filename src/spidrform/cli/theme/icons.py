"""
Sistema de iconos para la CLI.

Proporciona iconos Unicode con fallback automático a ASCII
si el terminal no soporta Unicode.
"""

import sys
from dataclasses import dataclass
from typing import Optional


def _detect_unicode_support() -> bool:
    """Detecta si el terminal soporta caracteres Unicode."""
    try:
        encoding = getattr(sys.stdout, 'encoding', None) or 'ascii'
        test_chars = "❯✓✗⚠ℹ•·"
        test_chars.encode(encoding)
        return True
    except (UnicodeEncodeError, LookupError):
        return False


@dataclass
class IconSet:
    """Conjunto de iconos para la interfaz."""
    pointer: str          # Fila actual
    check: str            # Campo completo
    cross: str            # Campo con error
    warning: str          # Campo pendiente
    info: str             # Información
    mask: str             # Caracter para ocultar el PIN
    web_node: str         # Nodo de telaraña
    web_line: str         # Trazo de telaraña


ICONS_UNICODE = IconSet(
    pointer="❯",
    check="✓",
    cross="✗",
    warning="⚠",
    info="ℹ",
    mask="•",
    web_node="•",
    web_line="·",
)

ICONS_ASCII = IconSet(
    pointer=">",
    check="[+]",
    cross="[x]",
    warning="[!]",
    info="[i]",
    mask="*",
    web_node="o",
    web_line=".",
)


_active_icons: Optional[IconSet] = None


def get_icons() -> IconSet:
    """Obtiene el conjunto de iconos apropiado para el terminal."""
    global _active_icons

    if _active_icons is None:
        _active_icons = ICONS_UNICODE if _detect_unicode_support() else ICONS_ASCII

    return _active_icons

