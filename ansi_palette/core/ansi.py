"""ANSI truecolor escape sequences.

Only two codes are ever emitted: 48;2 (24-bit background) and 0 (reset).
"""

from ansi_palette.core.palette import unpack_rgb

ESC = '\x1b'
RESET = f'{ESC}[0m'

BLOCK_WIDTH = 3


def background(rgb: tuple[int, int, int]) -> str:
    r, g, b = rgb
    return f'{ESC}[48;2;{r};{g};{b}m'


def block(colour: int) -> str:
    """One swatch cell: truecolor background, blank cell, reset."""
    return background(unpack_rgb(colour)) + ' ' * BLOCK_WIDTH + RESET
