"""The 254-colour palette and packed-RGB helpers.

Layout of the generated palette:
  - a 6x6x6 RGB cube over CUBE_LEVELS (red outermost, blue innermost)
  - a grayscale ramp v = i * 255 // 25 for i in 1..24, skipping cube levels
  - EXTRAS, a hand-picked list of UI and skin-tone colours
  - black padding up to PALETTE_SIZE

Colours are packed as 0xRRGGBB integers.
"""

import math
import re

import numpy as np

from ansi_palette.core.types import Palette, Section

PALETTE_SIZE = 254

CUBE_LEVELS = (0x00, 0x33, 0x66, 0x99, 0xCC, 0xFF)

GRAYSCALE_STEPS = 24
GRAYSCALE_DIVISOR = 25

EXTRAS = (
    0xFF6B6B,
    0x4ECDC4,
    0x45B7D1,
    0x96CEB4,
    0xFFA07A,
    0xDDA0DD,
    0x20B2AA,
    0x778899,
    0xBC8F8F,
    0xF0E68C,
    0xE6E6FA,
    0xFFF0F5,
    0x2F4F4F,
    0x191970,
)

PADDING_COLOUR = 0x000000

_HEX_RE = re.compile(r'^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')


def pack_rgb(r: int, g: int, b: int) -> int:
    return ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


def unpack_rgb(colour: int) -> tuple[int, int, int]:
    return ((colour >> 16) & 0xFF, (colour >> 8) & 0xFF, colour & 0xFF)


def is_hex_colour(value: str) -> bool:
    """True for '#rgb', '#rrggbb', with or without the leading '#'."""
    return bool(_HEX_RE.match(value.strip()))


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """Parse a hex colour string. Returns black for anything malformed."""
    m = _HEX_RE.match(value.strip())
    if not m:
        return (0, 0, 0)
    digits = m.group(1)
    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex(rgb: tuple[int, int, int]) -> str:
    r, g, b = rgb
    return f'#{r:02x}{g:02x}{b:02x}'


def rgb_distance(a: tuple[int, int, int], b: tuple[int, int, int]) -> float:
    """Euclidean distance in RGB space."""
    return math.sqrt(sum((int(x) - int(y)) ** 2 for x, y in zip(a, b)))


def grayscale_values() -> list[int]:
    """Grayscale ramp values that are not already cube levels, in ramp order."""
    values = []
    for i in range(1, GRAYSCALE_STEPS + 1):
        v = (i * 255) // GRAYSCALE_DIVISOR
        if v in CUBE_LEVELS:
            continue
        values.append(v)
    return values


def generate_palette() -> Palette:
    """Build the palette. Deterministic; every call returns an equal Palette."""
    colours: list[int] = []

    for r in CUBE_LEVELS:
        for g in CUBE_LEVELS:
            for b in CUBE_LEVELS:
                colours.append(pack_rgb(r, g, b))
    cube = Section('cube', 0, len(colours))

    for v in grayscale_values():
        colours.append(pack_rgb(v, v, v))
    grayscale = Section('grayscale', cube.stop, len(colours))

    for colour in EXTRAS:
        if len(colours) >= PALETTE_SIZE:
            break
        colours.append(colour)
    extras = Section('extras', grayscale.stop, len(colours))

    colours.extend([PADDING_COLOUR] * (PALETTE_SIZE - len(colours)))
    padding = Section('padding', extras.stop, len(colours))

    return Palette(
        colours=tuple(colours),
        cube=cube,
        grayscale=grayscale,
        extras=extras,
        padding=padding,
    )


def nearest_colour(rgb: tuple[int, int, int], palette: Palette) -> tuple[int, float]:
    """Return (index, distance) of the closest assigned palette entry.

    Padding slots are never candidates. Ties go to the lowest index.
    """
    stop = palette.extras.stop
    entries = np.array([unpack_rgb(c) for c in palette.colours[:stop]], dtype=int)
    dists = np.linalg.norm(entries - np.array(rgb, dtype=int), axis=-1)
    index = int(np.argmin(dists))
    return index, float(dists[index])
