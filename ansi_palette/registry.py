"""View auto-discovery and registration.

Scans ansi_palette/views/ for modules that define a `view` object of type
View. Collects them into a dict keyed by name.
"""

import importlib
import pkgutil

from ansi_palette.core.types import View

_registry: dict[str, View] = {}

DEFAULT_VIEW = 'blocks'


def discover() -> dict[str, View]:
    """Import all view modules and return the registry."""
    if _registry:
        return _registry

    import ansi_palette.views as pkg

    for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__):
        if modname.startswith('_'):
            continue
        module = importlib.import_module(f'ansi_palette.views.{modname}')
        view = getattr(module, 'view', None)
        if isinstance(view, View):
            _registry[view.name] = view

    return _registry


def get(name: str) -> View:
    """Get a view by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown view: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_views() -> dict[str, View]:
    """Return all registered views."""
    return discover()
