"""Top-level declarations: a constant, a value and a function.

Module attributes play the role of static members.  By convention an
UPPER_CASE name is a constant, a lower-case name is an ordinary
module-level value, and functions need no enclosing class.
"""
from __future__ import annotations

from typing import Final

from langtour.registry import default_registry

# Constant
HELLO: Final = "Hello World"

# Value derived from the constant
hello_value = HELLO


def hello() -> str:
    """Return the module-level greeting."""
    return hello_value


@default_registry.register(
    "toplevel",
    title="Top-level declarations",
    topic="basics",
    summary="Module-level constant, value and function without a class.",
    tags=("constants", "functions"),
)
def main() -> None:
    print(hello())


if __name__ == "__main__":
    main()
