"""Render the palette as truecolor blocks in the terminal.

Default view: running ansi-palette with no arguments prints this.

Sections, in order:
  - RGB cube: one 6x6 grid per red level (rows = green, columns = blue)
  - Grayscale: a single row
  - Extras: rows of 7

Each block is ESC[48;2;R;G;Bm, three spaces, ESC[0m. Requires a terminal
with 24-bit colour support.

Example:
    uv run ansi-palette
    uv run ansi-palette blocks
"""

from ansi_palette.core.ansi import block
from ansi_palette.core.palette import CUBE_LEVELS
from ansi_palette.core.types import Palette, Report, View

view = View(
    name='blocks',
    help='Print the palette as 24-bit ANSI colour blocks (default).',
    prints_own_output=True,
)

EXTRAS_PER_ROW = 7


def _cube_lines(palette: Palette) -> list[str]:
    n = len(CUBE_LEVELS)
    lines = [f'RGB Cube ({len(palette.cube)} colors):']
    for r_idx in range(n):
        lines.append('')
        lines.append(f'Red level {r_idx + 1}/{n}:')
        for g_idx in range(n):
            row_start = palette.cube.start + r_idx * n * n + g_idx * n
            lines.append(''.join(block(palette[i]) for i in range(row_start, row_start + n)))
    return lines


def _grayscale_lines(palette: Palette) -> list[str]:
    section = palette.grayscale
    return [
        '',
        f'Grayscale ({section.start}–{section.last}):',
        ''.join(block(palette[i]) for i in section.range),
    ]


def _extras_lines(palette: Palette) -> list[str]:
    section = palette.extras
    lines = ['', f'Extra colors ({section.start}–{section.last}):']
    row = []
    for pos, i in enumerate(section.range, start=1):
        row.append(block(palette[i]))
        if pos % EXTRAS_PER_ROW == 0:
            lines.append(''.join(row))
            row = []
    # Trailing partial row (or the empty line after the last full row)
    lines.append(''.join(row))
    return lines


def render_blocks(palette: Palette) -> str:
    """Full terminal rendering, newline-terminated."""
    lines = [f'Color Palette ({len(palette)} colors arranged in gradient grid)', '']
    lines += _cube_lines(palette)
    lines += _grayscale_lines(palette)
    lines += _extras_lines(palette)
    return '\n'.join(lines) + '\n'


@view.run
def run(palette: Palette, report: Report, args) -> None:
    print(render_blocks(palette), end='')
