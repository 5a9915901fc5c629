"""Higher-order functions: functions that take other functions.

``execute`` calls the function it is given straight away.  ``repeat``
calls it a fixed number of times, counting ``1..times`` inclusive, so a
count of zero or less calls nothing.

Some languages can inline such a helper at the call site to avoid the
indirect call.  Python always makes the call, so ``inline_repeat`` is
simply the loop written out where it is used; it behaves exactly like
``repeat``.
"""
from __future__ import annotations

from collections.abc import Callable

from langtour.demos.loops import closed_range
from langtour.registry import default_registry

REPEAT_COUNT = 10


def execute(function: Callable[[], None]) -> None:
    function()


def repeat(function: Callable[[], None], times: int = 1) -> None:
    """Call *function* ``times`` times, in order, on the current thread."""
    for _ in closed_range(1, times):
        function()


def inline_repeat(function: Callable[[], None], times: int = 1) -> None:
    num = 1
    while num <= times:
        function()
        num += 1


def use_repeat(emit: Callable[[str], None] = print) -> None:
    repeat(lambda: emit("Repeat"), REPEAT_COUNT)


def use_inline_repeat(emit: Callable[[str], None] = print) -> None:
    inline_repeat(lambda: emit("Repeat"), REPEAT_COUNT)


@default_registry.register(
    "higher-order",
    title="Higher-order functions",
    topic="functions",
    summary="Passing a function as an argument, executing and repeating it.",
    tags=("functions", "callbacks"),
)
def main() -> None:
    collected: list[str] = []
    use_repeat(collected.append)
    print(f"{collected[0]} x{len(collected)}")


if __name__ == "__main__":
    main()
