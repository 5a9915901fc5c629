"""Run registered demos and capture what they print.

Every demo is expected to write exactly one line to stdout and return
normally.  ``DemoRunner`` calls the entry point with stdout redirected to
a buffer and packages the outcome as a ``DemoResult``.

Usage
-----
::

    from langtour.registry import get_default_registry
    from langtour.runner import DemoRunner

    runner = DemoRunner(strict=True)
    result = runner.run(get_default_registry().get("loops"))
    assert result.ok
    print(result.output)
"""
from __future__ import annotations

import contextlib
import io
import logging
from collections.abc import Iterable
from dataclasses import dataclass

from langtour.errors import DemoContractError
from langtour.registry import Demo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DemoResult:
    """The outcome of running a single demo.

    Parameters
    ----------
    name:
        Registry name of the demo.
    output:
        Captured stdout with the trailing newline removed, or the error
        text when the entry point raised.
    exit_code:
        ``0`` on success, ``1`` when the entry point raised.
    """

    name: str
    output: str
    exit_code: int = 0

    @property
    def ok(self) -> bool:
        return self.exit_code == 0

    @property
    def lines(self) -> list[str]:
        return self.output.splitlines()


class DemoRunner:
    """Executes demo entry points synchronously on the calling thread.

    Parameters
    ----------
    strict:
        When ``True``, a demo that prints anything other than exactly one
        line raises ``DemoContractError``.
    """

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict

    def run(self, demo: Demo) -> DemoResult:
        """Run *demo* and return its captured output.

        Exceptions raised by the entry point are logged and turned into a
        failed ``DemoResult``; they do not propagate.

        Raises
        ------
        DemoContractError
            In strict mode, if the demo did not print exactly one line.
        """
        buffer = io.StringIO()
        logger.debug("Running demo %r", demo.name)
        try:
            with contextlib.redirect_stdout(buffer):
                demo.entry_point()
        except Exception as exc:
            logger.debug("Demo %r traceback", demo.name, exc_info=True)
            logger.error("Demo %r raised %s: %s", demo.name, type(exc).__name__, exc)
            return DemoResult(
                name=demo.name,
                output=f"{type(exc).__name__}: {exc}",
                exit_code=1,
            )

        output = buffer.getvalue().rstrip("\n")
        line_count = len(output.splitlines())
        if self.strict and line_count != 1:
            raise DemoContractError(demo.name, line_count)
        return DemoResult(name=demo.name, output=output)

    def run_all(self, demos: Iterable[Demo]) -> list[DemoResult]:
        """Run every demo in *demos*, in order."""
        return [self.run(demo) for demo in demos]
