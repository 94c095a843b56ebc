"""
Estilo de questionary integrado con el tema de la CLI.
"""

from questionary import Style

from spidrform.cli.theme import get_palette


def get_prompt_style() -> Style:
    """
    Obtiene el estilo de questionary basado en el tema actual.
    """
    p = get_palette()
    return Style([
        # Marcador de pregunta (?)
        ('qmark', f'fg:{p.primary} bold'),
        # Texto de la pregunta
        ('question', 'bold'),
        # Respuesta ingresada
        ('answer', f'fg:{p.success} bold'),
        # Instrucciones (placeholder)
        ('instruction', f'fg:{p.muted} italic'),
        ('text', ''),
    ])
