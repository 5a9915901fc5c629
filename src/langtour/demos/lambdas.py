"""Lambdas and filtering.

All of the spellings below select the even numbers from 1..20 and give
the same result; they differ only in how the predicate is written.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable

from langtour.registry import default_registry

NUMBERS = list(range(1, 21))


def evens_with_filter(numbers: Iterable[int] = NUMBERS) -> list[int]:
    return list(filter(lambda num: num % 2 == 0, numbers))


def evens_with_comprehension(numbers: Iterable[int] = NUMBERS) -> list[int]:
    return [num for num in numbers if num % 2 == 0]


def is_even(num: int) -> bool:
    return num % 2 == 0


def evens_with_predicate(
    predicate: Callable[[int], bool] = is_even,
    numbers: Iterable[int] = NUMBERS,
) -> list[int]:
    """Filter *numbers* with any callable: a lambda, a def, or a method."""
    return [num for num in numbers if predicate(num)]


ALL_SPELLINGS: dict[str, Callable[[], list[int]]] = {
    "filter": evens_with_filter,
    "comprehension": evens_with_comprehension,
    "named-function": evens_with_predicate,
    "lambda-argument": lambda: evens_with_predicate(lambda n: n % 2 == 0),
}


@default_registry.register(
    "lambdas",
    title="Lambdas",
    topic="functions",
    summary="Equivalent ways to pass a predicate when filtering a list.",
    tags=("lambdas", "collections"),
)
def main() -> None:
    print(" ".join(str(n) for n in evens_with_comprehension()))


if __name__ == "__main__":
    main()
