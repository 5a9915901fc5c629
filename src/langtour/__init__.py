"""langtour — a runnable catalog of small language-feature demonstrations.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.  The demo modules under
``langtour.demos`` are meant to be read; their contents are examples,
not API.

Example
-------
::

    import langtour

    # Names of all built-in demos
    langtour.list_demos()

    # Run one and capture its single output line
    result = langtour.run_demo("loops")
    print(result.output)

    # Run everything, failing on demos that print more than one line
    results = langtour.run_all(strict=True)

    # Export the catalog
    text = langtour.export_catalog(output_format="yaml")

    langtour.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from langtour.registry import Demo
    from langtour.runner import DemoResult


def list_demos(topic: str | None = None) -> list[str]:
    """Return the names of all registered demos, sorted.

    Parameters
    ----------
    topic:
        If given, only demos in this topic are listed.
    """
    from langtour.registry import get_default_registry

    registry = get_default_registry()
    if topic is None:
        return registry.list_names()
    return [d.name for d in registry.list_by_topic(topic)]


def get_demo(name: str) -> "Demo":
    """Return the ``Demo`` registered under ``name``.

    Raises
    ------
    langtour.errors.DemoNotFoundError
        If no demo is registered under ``name``.
    """
    from langtour.registry import get_default_registry

    return get_default_registry().get(name)


def run_demo(name: str, strict: bool = False) -> "DemoResult":
    """Run the demo registered under ``name`` and capture its output.

    Parameters
    ----------
    name:
        Registry name of the demo.
    strict:
        When ``True``, raise ``DemoContractError`` unless exactly one line
        was printed.
    """
    from langtour.runner import DemoRunner

    return DemoRunner(strict=strict).run(get_demo(name))


def run_all(strict: bool = False, topics: tuple[str, ...] = ()) -> list["DemoResult"]:
    """Run every registered demo, optionally restricted to ``topics``."""
    from langtour.registry import get_default_registry
    from langtour.runner import DemoRunner

    demos = get_default_registry().list_demos()
    if topics:
        wanted = {t.lower() for t in topics}
        demos = [d for d in demos if d.topic.lower() in wanted]
    return DemoRunner(strict=strict).run_all(demos)


def export_catalog(output_format: str = "json") -> str:
    """Export the demo catalog as ``"json"`` or ``"yaml"`` text."""
    from langtour.catalog import CatalogSerializer
    from langtour.registry import get_default_registry

    serializer = CatalogSerializer()
    registry = get_default_registry()
    if output_format == "yaml":
        return serializer.to_yaml(registry)
    if output_format == "json":
        return serializer.to_json(registry)
    raise ValueError(f"Unknown output format {output_format!r}; use 'json' or 'yaml'")


__all__ = [
    "__version__",
    "list_demos",
    "get_demo",
    "run_demo",
    "run_all",
    "export_catalog",
]
