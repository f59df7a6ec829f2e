"""ansi-palette — A fixed 254-colour palette rendered with 24-bit ANSI colour.

Usage: uv run ansi-palette [view] [options]

With no arguments, prints the palette as truecolor blocks (the `blocks`
view). Views are auto-discovered from ansi_palette/views/.
Each view module's docstring is its documentation.
Run `ansi-palette help <view>` for full module docs.

The palette itself is fixed: no flag or environment variable changes it.
"""

import argparse
import importlib
import sys

from ansi_palette import registry
from ansi_palette.core.palette import generate_palette
from ansi_palette.core.report import format_json, format_text
from ansi_palette.core.types import Report


def _load_view_module(name: str) -> object:
    """Load the raw module for a view (for docstring access)."""
    return importlib.import_module(f'ansi_palette.views.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_view_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    views = registry.all_views()

    epilog = (
        'Examples:\n'
        '  ansi-palette\n'
        '  ansi-palette table --json\n'
        "  ansi-palette nearest --colour '#2563eb' --max-distance 20\n"
        '  ansi-palette swatch --out ./tmp --cell 24\n'
        '  ansi-palette help nearest\n'
    )
    parser = argparse.ArgumentParser(
        prog='ansi-palette',
        description='Print a fixed 254-colour palette using 24-bit ANSI colour.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    sub = parser.add_subparsers(dest='view', help='View to run (default: blocks)')

    # Auto-register each view as a subcommand using module docstring
    for name, v in sorted(views.items()):
        p = sub.add_parser(name, help=_short_help(name, v.help))
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument('-c', '--colour', help='Hex colour to match (nearest)')
        p.add_argument(
            '-d',
            '--max-distance',
            type=float,
            default=None,
            metavar='N',
            help='Exit 1 if the nearest entry is farther than N (nearest)',
        )
        p.add_argument('-o', '--out', metavar='DIR', default='.', help='Output directory (swatch)')
        p.add_argument('-s', '--cell', type=int, default=None, metavar='PX', help='Cell size in pixels (swatch)')

    # `help` subcommand — prints full module docstring for a view
    help_parser = sub.add_parser('help', help='Print full docs for a view')
    help_parser.add_argument('command', nargs='?', help='View name')

    return parser


def _print_help(command: str | None) -> None:
    """Print full module docstring for a view."""
    views = registry.all_views()

    if command is None:
        print('Available views:\n')
        for name, v in sorted(views.items()):
            print(f'  {name:<10} {_short_help(name, v.help)}')
        print('\nRun: ansi-palette help <view> for full docs.')
        return

    if command not in views:
        print(f'Unknown view: {command}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(views))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_view_module(command).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {command!r})')
        return
    print(doc)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.view == 'help':
        _print_help(getattr(args, 'command', None))
        return

    palette = generate_palette()
    report = Report(size=len(palette))

    view = registry.get(args.view or registry.DEFAULT_VIEW)
    view.execute(palette, report, args)

    if view.prints_own_output:
        return
    if getattr(args, 'json', False):
        print(format_json(report))
    else:
        print(format_text(report))

    # Gate check happens after output so the report is visible on failure
    if report.fail_count:
        sys.exit(1)


if __name__ == '__main__':
    main()
