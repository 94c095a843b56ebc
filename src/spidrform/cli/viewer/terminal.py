"""
Utilidades de terminal para el formulario interactivo.

Funciones para limpiar pantalla, capturar teclas y recibir
movimientos del puntero (modo mouse SGR de xterm).
"""

import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Union


@dataclass(frozen=True)
class PointerEvent:
    """Movimiento del puntero en celdas (0-based) o salida de la ventana."""
    x: int = 0
    y: int = 0
    leave: bool = False


Key = Union[str, PointerEvent]

# any-event tracking + codificación SGR + eventos de foco
_MOUSE_ON = "\x1b[?1003h\x1b[?1006h\x1b[?1004h"
_MOUSE_OFF = "\x1b[?1004l\x1b[?1006l\x1b[?1003l"


def clear_screen() -> None:
    """Limpia la pantalla de la terminal."""
    os.system('cls' if os.name == 'nt' else 'clear')


@contextmanager
def mouse_tracking(enabled: bool = True) -> Iterator[None]:
    """Activa el reporte de movimientos del puntero mientras dura el bloque."""
    if not enabled or os.name == 'nt':
        yield
        return
    sys.stdout.write(_MOUSE_ON)
    sys.stdout.flush()
    try:
        yield
    finally:
        sys.stdout.write(_MOUSE_OFF)
        sys.stdout.flush()


def decode_escape(read: Callable[[], str]) -> Key:
    """
    Decodifica una secuencia de escape (después de '\\x1b').

    Args:
        read: Función que retorna el siguiente caracter ("" si no hay más)

    Returns:
        'up', 'down', 'left', 'right', 'esc' o un PointerEvent
    """
    key2 = read()
    if key2 != '[':
        return 'esc'

    key3 = read()
    arrows = {'A': 'up', 'B': 'down', 'C': 'right', 'D': 'left'}
    if key3 in arrows:
        return arrows[key3]
    if key3 == 'O':
        # Foco perdido: el puntero salió de la ventana
        return PointerEvent(leave=True)
    if key3 == 'I':
        return 'focus'
    if key3 == '<':
        # Mouse SGR: <b;x;y(M|m)
        body = ""
        while True:
            char = read()
            if char in ('M', 'm', ''):
                break
            body += char
        try:
            _, col, row = (int(part) for part in body.split(';'))
        except ValueError:
            return 'esc'
        return PointerEvent(x=col - 1, y=row - 1)

    return 'esc'


def _normalize(key: str) -> str:
    """Mapea caracteres de control a nombres de tecla."""
    if key in ('\r', '\n'):
        return 'enter'
    if key in ('\x7f', '\x08'):
        return 'backspace'
    if key == '\t':
        return 'tab'
    if key == '\x03':
        return 'ctrl_c'
    return key


def _read_char(fd: int) -> str:
    """Lee un caracter UTF-8 directamente del descriptor (sin buffer)."""
    first = os.read(fd, 1)
    if not first:
        return ""
    lead = first[0]
    if lead < 0x80:
        extra = 0
    elif lead >> 5 == 0b110:
        extra = 1
    elif lead >> 4 == 0b1110:
        extra = 2
    else:
        extra = 3
    data = first + (os.read(fd, extra) if extra else b"")
    return data.decode("utf-8", errors="ignore")


def _input_ready(fd: int, timeout: float) -> bool:
    """Espera hasta timeout segundos a que haya algo para leer en fd."""
    import select

    ready, _, _ = select.select([fd], [], [], timeout)
    return bool(ready)


def get_key(timeout: Optional[float] = None) -> Key:
    """
    Captura una tecla del usuario.

    Args:
        timeout: Segundos a esperar; None espera indefinidamente

    Returns:
        - 'up', 'down', 'left', 'right': flechas
        - 'esc', 'enter', 'backspace', 'tab'
        - PointerEvent: movimiento del puntero o salida de la ventana
        - el caracter escrito, tal cual (respetando mayúsculas)
        - "" si venció el timeout sin entrada
    """
    if os.name == 'nt':
        # Windows
        import msvcrt
        import time

        if timeout is not None:
            deadline = time.monotonic() + timeout
            while not msvcrt.kbhit():
                if time.monotonic() >= deadline:
                    return ''
                time.sleep(0.01)
        key = msvcrt.getwch()

        if key in ('\xe0', '\x00'):  # Tecla especial (flechas)
            key2 = msvcrt.getwch()
            return {'K': 'left', 'M': 'right', 'H': 'up', 'P': 'down'}.get(key2, '')
        if key == '\x1b':
            return 'esc'
        return _normalize(key)
    else:
        # Unix/Linux/Mac
        import termios
        import tty

        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            if timeout is not None and not _input_ready(fd, timeout):
                return ''
            key = _read_char(fd)

            if key == '\x1b':
                def read_next() -> str:
                    # Esc solo: no llega nada más en 50 ms
                    return _read_char(fd) if _input_ready(fd, 0.05) else ""

                return decode_escape(read_next)

            return _normalize(key)
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
