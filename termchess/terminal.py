"""ANSI escape sequences for colouring terminal output."""

from __future__ import annotations

from enum import IntEnum

CSI = "\x1b["


class Color(IntEnum):
    """Terminal colours; foreground colours may also be bright."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    DEFAULT_COLOR = 9


def color_fg(bright: bool, color: Color) -> str:
    """Sequence setting the foreground colour, leaving the background as is."""
    return f"{CSI}{30 + int(color)}{';1' if bright else ''}m"


def color_bg(color: Color) -> str:
    """Sequence setting the background colour, leaving the foreground as is."""
    return f"{CSI}{40 + int(color)}m"


def color_all(bright: bool, fore_color: Color, back_color: Color) -> str:
    """Sequence setting both foreground and background colours."""
    separator = ";1;" if bright else ";"
    return f"{CSI}{30 + int(fore_color)}{separator}{40 + int(back_color)}m"


def set_default() -> str:
    """Sequence resetting all colours to the terminal default."""
    return f"{CSI}0m"