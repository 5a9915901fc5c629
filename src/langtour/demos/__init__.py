"""Built-in language-feature demonstrations.

Each module is independent and exposes a ``main`` entry point that prints
a single line, so any of them can be run directly::

    python -m langtour.demos.money

``load_builtin_demos`` imports every module listed in ``BUILTIN_MODULES``,
which registers its demo with ``langtour.registry.default_registry``.
To add a demo, create ``<topic>.py`` with a registered ``main`` and append
its module name here.
"""
from __future__ import annotations

from importlib import import_module

BUILTIN_MODULES: tuple[str, ...] = (
    "hello_world",
    "toplevel",
    "classes",
    "nullsafety",
    "expressions",
    "loops",
    "money",
    "lambdas",
    "higher_order",
)


def load_builtin_demos() -> None:
    """Import all built-in demo modules; repeated calls are no-ops."""
    for name in BUILTIN_MODULES:
        import_module(f"{__name__}.{name}")
