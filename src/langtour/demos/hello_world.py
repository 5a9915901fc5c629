"""Hello World: the smallest possible entry point.

A module-level ``main`` function is all a program needs; there is no
enclosing class.
"""
from __future__ import annotations

from langtour.registry import default_registry


@default_registry.register(
    "hello-world",
    title="Hello World",
    topic="basics",
    summary="A top-level main function that prints a greeting.",
    tags=("entry-point",),
)
def main() -> None:
    print("Hello World")


if __name__ == "__main__":
    main()
