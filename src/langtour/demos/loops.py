"""Loops over collections, ranges and progressions.

There is no C-style ``for (i = 0; i < n; i++)`` loop; iteration always
goes over something.  ``Progression`` describes an arithmetic sequence
with inclusive bounds, a positive step size and a direction, and is
built with three helpers:

- ``closed_range(0, 10)`` is 0..10 including 10
- ``until(0, 10)`` stops before 10
- ``down_to(10, 1)`` counts backwards

Any of them accepts a ``step``, or ``.stepped(n)`` can be applied afterwards.
"""
from __future__ import annotations

from collections.abc import Iterator, Sized
from dataclasses import dataclass

from langtour.registry import default_registry

NUMBERS = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]


@dataclass(frozen=True)
class Progression:
    """An arithmetic progression from ``first`` towards ``last`` (inclusive).

    Parameters
    ----------
    first:
        First element.
    last:
        Bound that the progression may reach but never passes.
    step:
        Signed increment; negative for descending progressions.
    """

    first: int
    last: int
    step: int = 1

    def __post_init__(self) -> None:
        if self.step == 0:
            raise ValueError("Step must be non-zero.")

    def _as_range(self) -> range:
        if self.step > 0:
            return range(self.first, self.last + 1, self.step)
        return range(self.first, self.last - 1, self.step)

    def stepped(self, step: int) -> "Progression":
        """Return a copy that advances by *step*, keeping the direction.

        Raises
        ------
        ValueError
            If *step* is not positive.
        """
        if step <= 0:
            raise ValueError(f"Step must be positive, was: {step}.")
        return Progression(self.first, self.last, step if self.step > 0 else -step)

    @property
    def is_empty(self) -> bool:
        return len(self._as_range()) == 0

    def __iter__(self) -> Iterator[int]:
        return iter(self._as_range())

    def __len__(self) -> int:
        return len(self._as_range())

    def __contains__(self, value: object) -> bool:
        return value in self._as_range()

    def __str__(self) -> str:
        if self.step > 0:
            text = f"{self.first}..{self.last}"
        else:
            text = f"{self.first} down to {self.last}"
        if abs(self.step) != 1:
            text += f" step {abs(self.step)}"
        return text


def closed_range(start: int, end: int, step: int = 1) -> Progression:
    """Ascending progression from *start* to *end*, both inclusive."""
    return Progression(start, end).stepped(step)


def until(start: int, end: int, step: int = 1) -> Progression:
    """Ascending progression from *start* up to, but excluding, *end*."""
    return Progression(start, end - 1).stepped(step)


def down_to(start: int, end: int, step: int = 1) -> Progression:
    """Descending progression from *start* down to *end*, both inclusive."""
    return Progression(start, end, -1).stepped(step)


def indices(items: Sized) -> Progression:
    """Return ``0..len(items)``.

    Note the closed upper bound: this visits one index past the end, and
    ``until(0, len(items))`` is the form that matches the valid indices.
    """
    return closed_range(0, len(items))


def collect(progression: Progression) -> list[int]:
    values = []
    for number in progression:
        values.append(number)
    return values


@default_registry.register(
    "loops",
    title="Loops and ranges",
    topic="control-flow",
    summary="Iterating lists and inclusive, exclusive, stepped and descending ranges.",
    tags=("loops", "ranges"),
)
def main() -> None:
    ascending = closed_range(0, 10, step=2)
    descending = down_to(10, 1, step=3)
    print(
        f"{ascending}: {collect(ascending)}; {descending}: {collect(descending)}"
    )


if __name__ == "__main__":
    main()
