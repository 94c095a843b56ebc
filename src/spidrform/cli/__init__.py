"""
CLI de Spidr Form - Formulario de participación del sorteo.

Comandos:
- form: Formulario interactivo a pantalla completa
- prompt: Preguntas secuenciales campo por campo
- submit: Envío directo desde opciones
- format: Muestra cómo se formatea un valor para un campo
"""

from typing import Annotated, Optional

import typer

from spidrform.config import EffectSettings, FormSettings, ThemeChoice

# Crear aplicación principal
app = typer.Typer(
    name="spidrform",
    help="Formulario de participación del sorteo de la freidora de aire.",
    no_args_is_help=True,
)


def _apply_theme(theme: ThemeChoice) -> None:
    from spidrform.cli.theme import set_theme
    set_theme(theme)


@app.command()
def form(
    theme: Annotated[ThemeChoice, typer.Option(help="Tema de color")] = ThemeChoice.DEFAULT,
    webs: Annotated[bool, typer.Option("--webs/--no-webs", help="Telarañas decorativas")] = True,
    debug: Annotated[bool, typer.Option(help="Trazas de depuración del efecto")] = False,
    seed: Annotated[Optional[int], typer.Option(help="Semilla del generador aleatorio")] = None,
):
    """
    Abre el formulario interactivo.

    Ejemplo:
        spidrform form
        spidrform form --no-webs --theme nord
    """
    import os
    from spidrform.cli.theme import print_info, print_warning
    from spidrform.cli.viewer import interactive_form

    _apply_theme(theme)
    if webs and os.name == "nt":
        print_warning("Pointer effects need an xterm-compatible terminal; webs will not appear.")
    settings = FormSettings(
        theme=theme,
        effects_enabled=webs,
        effects=EffectSettings(seed=seed),
        debug=debug,
    )

    result = interactive_form(settings=settings)
    if result is None:
        print_info("Form closed without submitting.")


@app.command()
def prompt(
    theme: Annotated[ThemeChoice, typer.Option(help="Tema de color")] = ThemeChoice.DEFAULT,
):
    """
    Completa el formulario con preguntas sucesivas.

    Al enviar con errores solo se vuelven a preguntar los campos inválidos.
    """
    from spidrform.cli.prompt import prompt_form
    from spidrform.cli.theme import print_info

    _apply_theme(theme)
    if prompt_form() is None:
        print_info("Form closed without submitting.")


@app.command()
def submit(
    first_name: Annotated[str, typer.Option(help="Nombre")] = "",
    last_name: Annotated[str, typer.Option(help="Apellido")] = "",
    phone_number: Annotated[str, typer.Option(help="Teléfono (10 dígitos)")] = "",
    email: Annotated[str, typer.Option(help="Correo electrónico")] = "",
    air_fryer_cost: Annotated[str, typer.Option(help="Precio estimado")] = "",
    spidr_pin: Annotated[str, typer.Option(help="PIN de 16 dígitos")] = "",
):
    """
    Envía el formulario sin interacción.

    Cada valor se formatea como si se escribiera en el campo.

    Ejemplo:
        spidrform submit --first-name Ada --last-name Lovelace \\
            --phone-number 5551234567 --email ada@example.com \\
            --air-fryer-cost 99.99 --spidr-pin 1234567890123456
    """
    from spidrform.cli.submit import run_submit

    run_submit({
        "first_name": first_name,
        "last_name": last_name,
        "phone_number": phone_number,
        "email": email,
        "air_fryer_cost": air_fryer_cost,
        "spidr_pin": spidr_pin,
    })


@app.command("format")
def format_cmd(
    field: Annotated[str, typer.Argument(help="Campo: phone_number, spidr_pin, air_fryer_cost, ...")],
    value: Annotated[str, typer.Argument(help="Texto a escribir en el campo")],
):
    """
    Muestra el valor que quedaría en un campo al escribir el texto.

    Ejemplo:
        spidrform format phone_number 5551234567
        spidrform format spidrPin 12345678901234567890
    """
    from spidrform.cli.validators import validate_field_name
    from spidrform.core.formatting import type_keystrokes

    name = validate_field_name(field)
    typer.echo(type_keystrokes(name, value))


@app.callback()
def main():
    """
    Spidr Form - Sorteo de la freidora de aire.

    Formatea los campos mientras se escriben y valida todo al enviar.
    """
