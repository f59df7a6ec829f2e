"""List every palette entry with its index, hex code and RGB channels.

Entries are grouped by section (cube, grayscale, extras, padding), in
palette order. Prints plain text, or JSON with --json.

Example:
    uv run ansi-palette table
    uv run ansi-palette table --json
"""

from ansi_palette.core.palette import rgb_to_hex, unpack_rgb
from ansi_palette.core.types import Palette, Report, View

view = View(
    name='table',
    help='List every palette entry (index, hex, rgb) grouped by section.',
)


@view.run
def run(palette: Palette, report: Report, args) -> None:
    for section in palette.sections:
        entries = []
        for i in section.range:
            rgb = unpack_rgb(palette[i])
            entries.append({'index': i, 'hex': rgb_to_hex(rgb), 'rgb': list(rgb)})
        report.set_span(section.name, section.start, section.last)
        report.add(section.name, 'table', {'entries': entries})
