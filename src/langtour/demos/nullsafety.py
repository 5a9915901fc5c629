"""Variables and null safety.

Names are bound with plain assignment; ``Final`` marks a binding that
must not be reassigned.  An ``Optional`` annotation says a value may be
absent (``None``), and three helpers cover the usual ways to deal with
that:

``safe_call``
    Apply a function only when the receiver is present, otherwise
    propagate ``None``.
``elvis``
    Fall back to a default when the left-hand side is ``None``.
``require_value``
    Forced unwrap: return the value or raise ``NullReferenceError``.
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Final, Optional, TypeVar

from langtour.errors import NullReferenceError
from langtour.registry import default_registry

T = TypeVar("T")
R = TypeVar("R")

# Annotated and inferred bindings mean the same thing
a_string: str = "string"
a_string_too = "string"

mutable = "x"
immutable: Final = "y"

not_nullable: str = "notnull"
nullable: Optional[str] = None


def safe_call(value: Optional[T], func: Callable[[T], R]) -> Optional[R]:
    """Return ``func(value)``, or ``None`` when *value* is ``None``."""
    if value is None:
        return None
    return func(value)


def elvis(value: Optional[T], default: T) -> T:
    """Return *value* unless it is ``None``, in which case return *default*.

    Only ``None`` triggers the fallback; falsy values such as ``""`` or
    ``0`` are returned as-is, which is why this is not spelled
    ``value or default``.
    """
    return default if value is None else value


def require_value(value: Optional[T], what: str = "value") -> T:
    """Return *value*, raising ``NullReferenceError`` when it is ``None``."""
    if value is None:
        raise NullReferenceError(what)
    return value


def upper_or_none(text: Optional[str]) -> Optional[str]:
    return safe_call(text, str.upper)


def upper_or_default(text: Optional[str], default: str = "DEFAULT") -> str:
    return elvis(safe_call(text, str.upper), default)


def upper_or_raise(text: Optional[str]) -> str:
    return require_value(text, "string").upper()


@default_registry.register(
    "nullsafety",
    title="Variables and null safety",
    topic="types",
    summary="Safe calls, fallback defaults and forced unwraps of optional values.",
    tags=("optional", "errors"),
)
def main() -> None:
    print(f"safe={upper_or_none(nullable)} fallback={upper_or_default(nullable)}")


if __name__ == "__main__":
    main()
