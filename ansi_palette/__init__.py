"""ansi-palette — a fixed 254-colour palette and its truecolor terminal rendering."""

__version__ = '0.1.0'
