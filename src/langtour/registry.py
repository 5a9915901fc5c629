"""Demo registry for langtour.

Every demonstration registers its ``main`` entry point through a
``DemoRegistry`` decorator, together with a little metadata used by the
CLI for listing and filtering.  Third-party packages can contribute demos
by declaring entry-points under the ``langtour.demos`` group.

Example
-------
Register a demo with the decorator::

    from langtour.registry import default_registry

    @default_registry.register(
        "hello-world",
        title="Hello World",
        topic="basics",
        tags=("entry-point",),
    )
    def main() -> None:
        print("Hello World")

Retrieve and run it::

    demo = default_registry.get("hello-world")
    demo.entry_point()

Load installed demo packages via entry-points::

    default_registry.load_entrypoints("langtour.demos")
"""
from __future__ import annotations

import importlib.metadata
import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from langtour.errors import DemoAlreadyRegisteredError, DemoNotFoundError

logger = logging.getLogger(__name__)

ENTRYPOINT_GROUP = "langtour.demos"

EntryPoint = Callable[[], None]


@dataclass(frozen=True)
class Demo:
    """A single registered demonstration.

    Parameters
    ----------
    name:
        Unique registry key, e.g. ``"money"``.
    title:
        Short human-readable title.
    topic:
        High-level category, e.g. ``"classes"`` or ``"functions"``.
    summary:
        One-sentence description of what the demo shows.
    tags:
        Free-form labels for search/filtering.
    entry_point:
        Zero-argument callable that prints the demo's single line.
    """

    name: str
    title: str
    topic: str
    entry_point: EntryPoint = field(compare=False, repr=False)
    summary: str = ""
    tags: tuple[str, ...] = ()

    @property
    def module(self) -> str:
        """Return the dotted module path that defines the entry point."""
        return getattr(self.entry_point, "__module__", "") or ""

    @property
    def source_path(self) -> Path | None:
        """Return the file defining the entry point, if it can be found."""
        module = sys.modules.get(self.module)
        path = getattr(module, "__file__", None)
        return Path(path) if path else None


class DemoRegistry:
    """Name-indexed registry of ``Demo`` records.

    Demos are registered either with the ``@register`` decorator at import
    time, or lazily via ``load_entrypoints`` for installed packages.
    """

    def __init__(self) -> None:
        self._demos: dict[str, Demo] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(
        self,
        name: str,
        *,
        title: str,
        topic: str,
        summary: str = "",
        tags: tuple[str, ...] = (),
    ) -> Callable[[EntryPoint], EntryPoint]:
        """Return a decorator that registers the decorated entry point.

        The decorated function is returned unchanged so that it stays
        callable as a module's ordinary ``main``.

        Raises
        ------
        DemoAlreadyRegisteredError
            If ``name`` is already in use in this registry.
        TypeError
            If the decorated object is not callable.
        """

        def decorator(func: EntryPoint) -> EntryPoint:
            self.register_demo(
                Demo(
                    name=name,
                    title=title,
                    topic=topic,
                    summary=summary,
                    tags=tags,
                    entry_point=func,
                )
            )
            return func

        return decorator

    def register_demo(self, demo: Demo) -> None:
        """Register a ``Demo`` record directly.

        Raises
        ------
        DemoAlreadyRegisteredError
            If ``demo.name`` is already registered.
        TypeError
            If ``demo.entry_point`` is not callable.
        """
        if demo.name in self._demos:
            raise DemoAlreadyRegisteredError(demo.name)
        if not callable(demo.entry_point):
            raise TypeError(
                f"Cannot register {demo.entry_point!r} under {demo.name!r}: "
                "entry point must be callable."
            )
        self._demos[demo.name] = demo
        logger.debug("Registered demo %r (topic %r)", demo.name, demo.topic)

    def deregister(self, name: str) -> None:
        """Remove a demo from the registry.

        Raises
        ------
        DemoNotFoundError
            If ``name`` is not currently registered.
        """
        if name not in self._demos:
            raise DemoNotFoundError(name, self.list_names())
        del self._demos[name]
        logger.debug("Deregistered demo %r", name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> Demo:
        """Return the demo registered under ``name``.

        Raises
        ------
        DemoNotFoundError
            If no demo is registered under ``name``.
        """
        try:
            return self._demos[name]
        except KeyError:
            raise DemoNotFoundError(name, self.list_names()) from None

    def list_names(self) -> list[str]:
        """Return all registered demo names in sorted order."""
        return sorted(self._demos)

    def list_demos(self) -> list[Demo]:
        """Return all registered demos, sorted by name."""
        return [self._demos[name] for name in self.list_names()]

    def list_topics(self) -> list[str]:
        """Return the distinct topics of all registered demos, sorted."""
        return sorted({demo.topic for demo in self._demos.values()})

    def list_by_topic(self, topic: str) -> list[Demo]:
        """Return demos whose topic matches ``topic`` (case-insensitive)."""
        topic_lower = topic.lower()
        return [d for d in self.list_demos() if d.topic.lower() == topic_lower]

    def search_by_tag(self, tag: str) -> list[Demo]:
        """Return demos that carry ``tag`` (case-insensitive)."""
        tag_lower = tag.lower()
        return [
            d for d in self.list_demos() if any(t.lower() == tag_lower for t in d.tags)
        ]

    def __contains__(self, name: object) -> bool:
        return name in self._demos

    def __len__(self) -> int:
        return len(self._demos)

    def __repr__(self) -> str:
        return f"DemoRegistry(demos={self.list_names()})"

    # ------------------------------------------------------------------
    # Entry-point loading
    # ------------------------------------------------------------------

    def load_entrypoints(self, group: str = ENTRYPOINT_GROUP) -> None:
        """Discover and register demos declared as package entry-points.

        An entry-point may resolve to a ``Demo`` record or to a bare
        callable; bare callables are registered under the entry-point name
        with the ``"external"`` topic.  Names that are already registered
        are skipped, which makes repeated calls idempotent.

        Example
        -------
        In a downstream package's ``pyproject.toml``::

            [project.entry-points."langtour.demos"]
            my-demo = "my_package.demo:main"
        """
        for ep in importlib.metadata.entry_points(group=group):
            if ep.name in self._demos:
                logger.debug("Entry-point %r already registered; skipping.", ep.name)
                continue
            try:
                loaded = ep.load()
            except Exception as exc:
                logger.debug("Entry-point %r traceback", ep.name, exc_info=True)
                logger.error(
                    "Failed to load entry-point %r from group %r; skipping: %s",
                    ep.name,
                    group,
                    exc,
                )
                continue
            if isinstance(loaded, Demo):
                demo = loaded
            else:
                demo = Demo(
                    name=ep.name,
                    title=ep.name,
                    topic="external",
                    summary=f"Provided by {ep.value}",
                    entry_point=loaded,
                )
            try:
                self.register_demo(demo)
            except (DemoAlreadyRegisteredError, TypeError):
                logger.warning(
                    "Entry-point %r loaded but could not be registered; skipping.",
                    ep.name,
                )


default_registry = DemoRegistry()


def get_default_registry() -> DemoRegistry:
    """Return the package-wide registry with all built-in demos loaded."""
    from langtour.demos import load_builtin_demos

    load_builtin_demos()

    return default_registry
