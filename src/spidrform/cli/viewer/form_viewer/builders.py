"""
Funciones para construir componentes visuales del formulario.
"""

from rich.console import Console, Group, RenderableType
from rich.table import Table
from rich.text import Text
from rich.panel import Panel
from rich import box

from spidrform.cli.theme import get_palette, get_icons, styled_header, styled_nav_bar

from .models import FormState, FormField, FieldStatus
from .canvas import build_web_canvas


def display_value(state: FormState, fld: FormField) -> str:
    """Valor tal como se muestra (PIN enmascarado si corresponde)."""
    icons = get_icons()
    value = state.value(fld)
    if fld.secret and not state.show_pin:
        return "".join(icons.mask if ch.isdigit() else ch for ch in value)
    return value


def display_placeholder(state: FormState, fld: FormField) -> str:
    icons = get_icons()
    if fld.secret and not state.show_pin:
        return fld.placeholder.replace("#", icons.mask)
    return fld.placeholder


def build_header(state: FormState) -> Panel:
    """Encabezado con título y subtítulo."""
    return styled_header(state.title, state.subtitle)


def build_form_table(state: FormState) -> Table:
    """Construye la tabla del formulario."""
    p = get_palette()
    icons = get_icons()

    table = Table(
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
        show_header=True,
        padding=(0, 1),
        expand=False,
    )

    table.add_column("#", justify="right", width=3)
    table.add_column("Field", justify="left", width=36)
    table.add_column("Value", justify="left", width=24)
    table.add_column("Status", justify="center", width=10)

    for idx, fld in enumerate(state.fields):
        is_selected = idx == state.selected_idx
        is_editing = is_selected and state.mode == "edit"
        status = state.status(fld)

        if status == FieldStatus.FILLED:
            status_icon, status_style, status_text = icons.check, p.success, "ok"
        elif status == FieldStatus.INVALID:
            status_icon, status_style, status_text = icons.cross, p.error, "invalid"
        else:
            status_icon, status_style, status_text = icons.warning, p.warning, "required"

        value = display_value(state, fld)
        if fld.prefix:
            value = f"{fld.prefix} {value}"

        if is_selected:
            row_style = f"bold reverse {p.primary}"
            idx_text = Text(f"{icons.pointer}{idx + 1}", style=row_style)
            label_text = Text(fld.label, style=row_style)
            value_text = Text(value, style=row_style)
            if is_editing:
                value_text.append("_", style=f"blink bold {p.input_text}")
            elif not state.value(fld) and fld.placeholder:
                value_text = Text(display_placeholder(state, fld), style=row_style)
            status_full = Text(f"{status_icon} {status_text}", style=row_style)
        else:
            idx_text = Text(str(idx + 1), style=p.muted)
            label_text = Text(fld.label, style="bold")
            if state.value(fld):
                value_text = Text(value, style=f"bold {p.accent}")
            else:
                value_text = Text(display_placeholder(state, fld), style=f"dim {p.muted}")
            status_full = Text(f"{status_icon} {status_text}", style=status_style)

        table.add_row(idx_text, label_text, value_text, status_full)

        # Error del campo debajo de la fila
        error = state.error(fld)
        if error:
            table.add_row(Text(""), Text(f"  {error}", style=f"italic {p.error}"), Text(""), Text(""))

    return table


def build_hint_text(state: FormState) -> Text:
    """Texto de ayuda para el campo actual."""
    p = get_palette()
    fld = state.current_field

    hint = Text()
    if fld.hint:
        hint.append(f"  {fld.hint}", style=p.info)
    if fld.secret:
        if hint:
            hint.append("  ")
        hint.append("[Tab] Hide PIN" if state.show_pin else "[Tab] Show PIN", style=p.muted)
    return hint


def build_progress_text(state: FormState) -> Text:
    """Progreso de llenado."""
    p = get_palette()
    filled, total = state.count_filled()

    text = Text()
    text.append("  Progress: ", style=p.muted)
    text.append(f"{filled}/{total}", style=f"bold {p.accent}")
    text.append(" fields", style=p.muted)
    return text


def build_nav_text(state: FormState) -> Text:
    """Construye el texto de navegación según el modo."""
    p = get_palette()

    if state.mode == "edit":
        return styled_nav_bar(
            [("Backspace", "Delete"), ("↑↓", "Move")],
            confirm=("Enter", "Done"),
            cancel=("Esc", "Stop editing"),
        )

    if state.mode == "confirm_quit":
        nav = Text()
        nav.append("  Quit without submitting? ", style=f"bold {p.warning}")
        nav.append("[", style=p.muted)
        nav.append("y", style=f"bold {p.nav_confirm}")
        nav.append("] Yes  ", style=p.muted)
        nav.append("[", style=p.muted)
        nav.append("n/Esc", style=f"bold {p.nav_cancel}")
        nav.append("] No", style=p.muted)
        return nav

    return styled_nav_bar(
        [("↑↓", "Navigate"), ("Enter", "Edit"), ("Tab/p", "Show/Hide PIN")],
        confirm=("s", "Submit Entry"),
        cancel=("Esc", "Quit"),
    )


def build_message_text(state: FormState) -> Text:
    """Construye el texto de mensaje (banner de éxito/error)."""
    p = get_palette()
    if not state.message:
        return Text("")

    styles = {
        "error": f"bold {p.error}",
        "success": f"bold {p.success}",
        "info": p.info,
    }
    return Text(f"  {state.message}", style=styles.get(state.message_kind, p.info))


def build_footer(state: FormState) -> Text:
    p = get_palette()
    if not state.footer:
        return Text("")
    return Text(f"  {state.footer}", style=f"italic {p.muted}")


def build_form(state: FormState) -> Group:
    """Formulario completo (sin lienzo decorativo)."""
    return Group(
        build_header(state),
        build_form_table(state),
        build_hint_text(state),
        build_progress_text(state),
        build_message_text(state),
        build_nav_text(state),
        build_footer(state),
    )


def measure_form(console: Console, state: FormState) -> tuple[int, int]:
    """Ancho y alto en celdas que ocupa el formulario."""
    form = build_form(state)
    width = min(console.measure(form).maximum, console.width)
    lines = console.render_lines(form, console.options.update_width(width), pad=False)
    return width, len(lines)


def build_display(state: FormState, canvas_width: int = 0) -> RenderableType:
    """
    Construye el display completo.

    Args:
        state: Estado del formulario
        canvas_width: Columnas disponibles a la derecha para las telarañas
    """
    form = build_form(state)
    form_width, form_height = state.form_size
    if canvas_width <= 0 or form_height <= 0:
        return form

    layout = Table.grid(padding=0)
    layout.add_column(width=form_width)
    layout.add_column(width=canvas_width)
    layout.add_row(
        form,
        build_web_canvas(state.effects.active, form_width, canvas_width, form_height),
    )
    return layout
