"""ansi_palette.core — Foundation layer.

Contains the palette generator, ANSI escape helpers, type definitions, and
report builder. This module has NO dependencies on ansi_palette.views or
ansi_palette.registry. Only stdlib, numpy, and PIL are allowed here.
"""
