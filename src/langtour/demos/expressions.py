"""If as an expression.

The same boolean-to-"Yes"/"No" conversion, refactored step by step from a
statement-heavy function down to a one-line conditional expression.
The last two forms extend the idea: a converter that treats a missing
flag as "No", and a small wrapper exposing the conversion as a property.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from langtour.registry import default_registry


def convert_to_yes_no_full(flag: bool) -> str:
    if flag:
        return "Yes"
    else:
        return "No"


def convert_to_yes_no_if_expression(flag: bool) -> str:
    result = "Yes" if flag else "No"
    return result


def convert_to_yes_no_expression(flag: bool) -> str:
    return "Yes" if flag else "No"


# Return type left to inference
def convert_to_yes_no_expression_inferred(flag: bool):
    return "Yes" if flag else "No"


# Lambdas are expressions too, so the function can be a single binding
convert_to_yes_no_short = lambda flag: "Yes" if flag else "No"  # noqa: E731


def to_yes_no(flag: Optional[bool]) -> str:
    """Return ``"Yes"`` only for ``True``; ``False`` and ``None`` give ``"No"``."""
    return "Yes" if flag is not None and flag else "No"


@dataclass(frozen=True)
class YesNo:
    """A boolean with a ``yes_no`` property attached."""

    flag: Optional[bool]

    @property
    def yes_no(self) -> str:
        return to_yes_no(self.flag)


@default_registry.register(
    "expressions",
    title="If as an expression",
    topic="control-flow",
    summary="Conditionals that produce values instead of only branching.",
    tags=("conditionals", "expressions"),
)
def main() -> None:
    print(", ".join(to_yes_no(flag) for flag in (True, False, None)))


if __name__ == "__main__":
    main()
