"""Palette views.

Every .py file in this package that defines a `view` object is
auto-registered by ansi_palette.registry.discover() and exposed as a
CLI subcommand.
"""
