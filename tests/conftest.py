"""Shared test fixtures for langtour.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Keep demo-specific helpers close to the tests
that use them.
"""
from __future__ import annotations

from collections.abc import Callable

import pytest

from langtour.registry import Demo, DemoRegistry, get_default_registry


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string."""
    return "0.1.0"


@pytest.fixture()
def registry() -> DemoRegistry:
    """Return the default registry with all built-in demos loaded."""
    return get_default_registry()


@pytest.fixture()
def fresh_registry() -> DemoRegistry:
    """Return a new, empty registry for registration tests."""
    return DemoRegistry()


@pytest.fixture()
def make_demo() -> Callable[..., Demo]:
    """Return a factory for ``Demo`` records wrapping an arbitrary callable."""

    def _make(
        name: str = "sample",
        entry_point: Callable[[], None] = lambda: print("sample line"),
        topic: str = "basics",
        tags: tuple[str, ...] = (),
    ) -> Demo:
        return Demo(
            name=name,
            title=name.title(),
            topic=topic,
            tags=tags,
            entry_point=entry_point,
        )

    return _make
