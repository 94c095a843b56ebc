"""
Objetos Text y Panel estilizados para mensajes del formulario.

No imprimen nada; ver printing.py.
"""

from rich.panel import Panel
from rich.text import Text
from rich import box

from spidrform.cli.theme.icons import get_icons
from spidrform.cli.theme.palette import get_palette


def styled_header(title: str, subtitle: str = None) -> Panel:
    """Panel de título del formulario."""
    p = get_palette()
    body = Text(title, style=f"bold {p.primary}")
    if subtitle:
        body.append(f"\n{subtitle}", style=p.muted)
    return Panel(body, border_style=p.primary, box=box.HEAVY, padding=(0, 2))


def _banner(icon: str, message: str, color: str) -> Text:
    return Text(f"{icon} {message}", style=color)


def styled_success(message: str) -> Text:
    return _banner(get_icons().check, message, get_palette().success)


def styled_warning(message: str) -> Text:
    return _banner(get_icons().warning, message, get_palette().warning)


def styled_error(message: str) -> Text:
    return _banner(get_icons().cross, message, get_palette().error)


def styled_info(message: str) -> Text:
    return _banner(get_icons().info, message, get_palette().info)


def styled_field_error(label: str, message: str) -> Text:
    """Error de un campo: etiqueta en negrita y mensaje en itálica."""
    p = get_palette()
    line = Text(f"  {get_icons().cross} ", style=p.error)
    line.append(f"{label}: ", style=f"bold {p.label}")
    line.append(message, style=f"italic {p.error}")
    return line


# =============================================================================
# Barra de teclas
# =============================================================================

def styled_nav_key(key: str, action: str = "", color: str = None) -> Text:
    """
    Segmento "[tecla] acción" de la barra de teclas.

    Args:
        key: Tecla (ej: "Enter", "Esc", "↑↓")
        action: Qué hace la tecla
        color: Color de la tecla (por defecto nav_key)
    """
    p = get_palette()
    segment = Text.assemble(
        ("[", p.muted),
        (key, f"bold {color or p.nav_key}"),
        ("]", p.muted),
    )
    if action:
        segment.append(f" {action}", style=p.muted)
    return segment


def styled_nav_bar(
    items: list[tuple[str, str]],
    confirm: tuple[str, str] = None,
    cancel: tuple[str, str] = None,
) -> Text:
    """
    Barra de teclas del formulario.

    Example:
        styled_nav_bar([("↑↓", "Navigate")], confirm=("s", "Submit Entry"), cancel=("Esc", "Quit"))
        # "  [↑↓] Navigate  [s] Submit Entry  [Esc] Quit"
    """
    p = get_palette()
    segments = [styled_nav_key(key, action) for key, action in items]
    if confirm:
        segments.append(styled_nav_key(*confirm, color=p.nav_confirm))
    if cancel:
        segments.append(styled_nav_key(*cancel, color=p.nav_cancel))
    return Text("  ").append_text(Text("  ").join(segments))
