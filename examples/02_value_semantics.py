#!/usr/bin/env python3
"""Example: Value semantics and optional values — langtour

Uses the demo modules directly rather than through the registry.

Usage:
    python examples/02_value_semantics.py
"""
from __future__ import annotations

from langtour.demos.loops import closed_range, down_to
from langtour.demos.money import CalcMoneyOperator, MoneyData
from langtour.demos.nullsafety import elvis, require_value, safe_call
from langtour.errors import CurrencyMismatchError, NullReferenceError


def main() -> None:
    # Equal fields, different objects
    first = MoneyData(value=10.0)
    second = MoneyData(value=10.0)
    print(f"{first} == {second}: {first == second}, is: {first is second}")
    print(f"copy with euros: {first.copy(currency='€')}")

    # Adding amounts
    dollars = CalcMoneyOperator(value=10.0)
    print(f"{dollars} + {dollars} = {dollars + dollars}")
    try:
        dollars + CalcMoneyOperator(value=10.0, currency="€")
    except CurrencyMismatchError as exc:
        print(f"mixing currencies: {exc}")

    # Optional values
    missing: str | None = None
    print(f"safe call: {safe_call(missing, str.upper)}")
    print(f"with fallback: {elvis(safe_call(missing, str.upper), 'DEFAULT')}")
    try:
        require_value(missing)
    except NullReferenceError as exc:
        print(f"forced unwrap: {exc}")

    # Progressions
    print(f"{closed_range(0, 10, 2)} -> {list(closed_range(0, 10, 2))}")
    print(f"{down_to(10, 1, 3)} -> {list(down_to(10, 1, 3))}")


if __name__ == "__main__":
    main()
