"""Exception types raised by langtour.

Demo-level errors (``NullReferenceError``, ``CurrencyMismatchError``) are
part of what the demos illustrate.  Registry, runner and configuration
errors carry enough context for the CLI to print a one-line message.
"""
from __future__ import annotations


class LangTourError(Exception):
    """Base class for all langtour errors."""


class NullReferenceError(LangTourError):
    """Raised when an absent value is forcibly unwrapped."""

    def __init__(self, what: str = "value") -> None:
        self.what = what
        super().__init__(f"Expected a {what} but found None")


class CurrencyMismatchError(LangTourError, ValueError):
    """Raised when two money amounts with different currencies are combined."""

    def __init__(self, left: str, right: str) -> None:
        self.left = left
        self.right = right
        super().__init__(f"Currency doesn't match: {left!r} vs {right!r}")


class DemoNotFoundError(KeyError):
    """Raised when a requested demo name is not in the registry."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.demo_name = name
        self.available = available
        super().__init__(
            f"Demo {name!r} is not registered. "
            f"Available demos: {', '.join(available) or '(none)'}"
        )

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class DemoAlreadyRegisteredError(ValueError):
    """Raised when attempting to register a demo name that already exists."""

    def __init__(self, name: str) -> None:
        self.demo_name = name
        super().__init__(
            f"Demo {name!r} is already registered. "
            "Use a unique name or deregister the existing entry first."
        )


class DemoContractError(LangTourError):
    """Raised in strict mode when a demo does not print exactly one line."""

    def __init__(self, name: str, line_count: int) -> None:
        self.demo_name = name
        self.line_count = line_count
        super().__init__(
            f"Demo {name!r} printed {line_count} line(s); expected exactly 1"
        )


class ConfigError(LangTourError):
    """Raised when a configuration file cannot be read or is malformed."""
