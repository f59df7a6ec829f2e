"""Save the palette as a PNG swatch sheet.

Laid out like the terminal view, one square cell per colour:
  - the six red-level cube grids side by side, one blank column apart
  - the grayscale ramp on one row below
  - the extras in rows of 7 below that

Padding slots are not drawn. Unused cells are white.

Writes <out>/palette.png (out defaults to the current directory).

Example:
    uv run ansi-palette swatch --out ./tmp
    uv run ansi-palette swatch --out ./tmp --cell 32 --json
"""

import os
import sys

import numpy as np
from PIL import Image

from ansi_palette.core.palette import CUBE_LEVELS, unpack_rgb
from ansi_palette.core.types import Palette, Report, View
from ansi_palette.views.blocks import EXTRAS_PER_ROW

view = View(
    name='swatch',
    help='Save the palette as a PNG swatch sheet (--out DIR, --cell PX).',
)

SWATCH_CELL = 16
SWATCH_NAME = 'palette.png'
BACKGROUND = (255, 255, 255)


def swatch_grid(palette: Palette) -> np.ndarray:
    """One pixel per cell, shape (rows, cols, 3), dtype uint8."""
    n = len(CUBE_LEVELS)
    extras_rows = -(-len(palette.extras) // EXTRAS_PER_ROW)
    cols = max(n * n + (n - 1), len(palette.grayscale), EXTRAS_PER_ROW)
    rows = n + 1 + 1 + 1 + extras_rows

    grid = np.empty((rows, cols, 3), dtype=np.uint8)
    grid[:, :] = BACKGROUND

    for r_idx in range(n):
        for g_idx in range(n):
            for b_idx in range(n):
                i = palette.cube.start + r_idx * n * n + g_idx * n + b_idx
                grid[g_idx, r_idx * (n + 1) + b_idx] = unpack_rgb(palette[i])

    gray_row = n + 1
    for col, i in enumerate(palette.grayscale.range):
        grid[gray_row, col] = unpack_rgb(palette[i])

    extras_top = gray_row + 2
    for pos, i in enumerate(palette.extras.range):
        grid[extras_top + pos // EXTRAS_PER_ROW, pos % EXTRAS_PER_ROW] = unpack_rgb(palette[i])

    return grid


@view.run
def run(palette: Palette, report: Report, args) -> None:
    out_dir = getattr(args, 'out', None) or '.'
    cell = getattr(args, 'cell', None)
    if cell is None:
        cell = SWATCH_CELL
    if cell < 1:
        print(f'Error: --cell must be a positive number of pixels, got {cell}', file=sys.stderr)
        sys.exit(1)

    grid = swatch_grid(palette)
    pixels = np.repeat(np.repeat(grid, cell, axis=0), cell, axis=1)
    image = Image.fromarray(pixels)

    path = os.path.join(out_dir, SWATCH_NAME)
    try:
        os.makedirs(out_dir, exist_ok=True)
        image.save(path)
    except OSError as e:
        print(f'Error: cannot write {path}: {e}', file=sys.stderr)
        sys.exit(1)

    report.set_span('palette', 0, len(palette) - 1)
    report.add(
        'palette',
        'swatch',
        {
            'file': path,
            'width': image.width,
            'height': image.height,
            'cell': cell,
        },
    )
