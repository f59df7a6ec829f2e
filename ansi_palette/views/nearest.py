"""Find the palette entry closest to a given colour.

Requires --colour (#rgb or #rrggbb). Measures plain Euclidean distance in
RGB space against every assigned entry; black padding slots are never
returned. Ties resolve to the lowest index.

With --max-distance N the result is recorded as pass/fail, and the CLI
exits 1 when the nearest entry is farther than N (useful for checking that
a design colour survives quantization).

Example:
    uv run ansi-palette nearest --colour '#ff6b6a'
    uv run ansi-palette nearest --colour 2563eb --max-distance 20 --json
"""

import sys

from ansi_palette.core.palette import hex_to_rgb, is_hex_colour, nearest_colour, rgb_to_hex, unpack_rgb
from ansi_palette.core.types import Palette, Report, Section, View

view = View(
    name='nearest',
    help='Find the palette entry nearest to --colour. Optional --max-distance gate.',
)


def _section_of(palette: Palette, index: int) -> Section:
    return next(s for s in palette.sections if index in s.range)


@view.run
def run(palette: Palette, report: Report, args) -> None:
    query = getattr(args, 'colour', None)
    if not query or not is_hex_colour(query):
        print(f'Error: --colour must be a hex colour like #ff6b6b, got {query!r}', file=sys.stderr)
        sys.exit(1)

    rgb = hex_to_rgb(query)
    index, dist = nearest_colour(rgb, palette)
    section = _section_of(palette, index)

    data: dict = {
        'query': rgb_to_hex(rgb),
        'index': index,
        'hex': rgb_to_hex(unpack_rgb(palette[index])),
        'distance': round(dist, 1),
    }

    threshold = getattr(args, 'max_distance', None)
    if threshold is not None:
        passed = dist <= threshold
        data['max_distance'] = threshold
        data['pass'] = passed
        if passed:
            report.record_pass(section.name)
        else:
            report.record_fail(section.name)

    report.set_span(section.name, section.start, section.last)
    report.add(section.name, 'nearest', data)
