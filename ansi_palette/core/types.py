"""Shared types for ansi-palette: Section, Palette, View, Report."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Section:
    """A contiguous run of palette indices produced by one generation phase."""

    name: str
    start: int  # inclusive
    stop: int  # exclusive

    def __len__(self) -> int:
        return self.stop - self.start

    @property
    def range(self) -> range:
        return range(self.start, self.stop)

    @property
    def last(self) -> int:
        """Inclusive end index (start - 1 for an empty section)."""
        return self.stop - 1


@dataclass(frozen=True)
class Palette:
    """Generated palette: packed 0xRRGGBB colours plus the span of each phase."""

    colours: tuple[int, ...]
    cube: Section
    grayscale: Section
    extras: Section
    padding: Section

    def __len__(self) -> int:
        return len(self.colours)

    def __getitem__(self, index: int) -> int:
        return self.colours[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.colours)

    @property
    def sections(self) -> tuple[Section, ...]:
        return (self.cube, self.grayscale, self.extras, self.padding)


class View:
    """A self-registering palette view.

    Usage in a view module:

        view = View(name='table', help='List every palette entry')

        @view.run
        def run(palette, report, args):
            ...

    Views that print their own output set prints_own_output=True; the others
    fill the Report and leave formatting to the CLI.
    """

    def __init__(self, name: str, help: str = '', prints_own_output: bool = False):
        self.name = name
        self.help = help
        self.prints_own_output = prints_own_output
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, palette: Palette, report: Report, args: Any) -> None:
        """Execute the view's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'View {self.name} has no run function')
        self._run_fn(palette, report, args)


@dataclass
class Report:
    """Accumulates results from views for text/JSON output."""

    size: int = 0
    sections: dict[str, dict[str, Any]] = field(default_factory=dict)
    pass_count: int = 0
    fail_count: int = 0

    def add(self, section_name: str, view_name: str, data: dict[str, Any]) -> None:
        """Add view results for a section."""
        if section_name not in self.sections:
            self.sections[section_name] = {'span': None, 'views': {}}
        self.sections[section_name]['views'][view_name] = data

    def set_span(self, section_name: str, start: int, last: int) -> None:
        """Set the inclusive index span for a section in the report."""
        if section_name not in self.sections:
            self.sections[section_name] = {'span': None, 'views': {}}
        self.sections[section_name]['span'] = [start, last]

    def record_pass(self, section_name: str) -> None:
        self.pass_count += 1

    def record_fail(self, section_name: str) -> None:
        self.fail_count += 1
