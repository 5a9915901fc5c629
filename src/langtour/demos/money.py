"""Classes, data classes and operator overloading, told with money.

Six versions of the same two-field value:

``Money``
    A plain class.  ``==`` falls back to identity, so two instances with
    the same fields are *not* equal.
``MoneyEquals``
    The same class with hand-written ``__eq__``, ``__hash__`` and
    ``__repr__``.  Equal fields now mean equal values, while ``is`` still
    compares identity.
``MoneyData``
    A frozen dataclass that generates all of the above, plus ``copy`` for
    changing selected fields.
``CalcMoney``
    Adds a ``plus`` method that refuses to mix currencies.
``CalcMoneyInfix``
    The same ``plus``.  Python has no infix call syntax, so
    ``a.plus(b)`` is the nearest spelling of ``a plus b``.
``CalcMoneyOperator``
    Same arithmetic, spelled ``a + b`` through ``__add__``.

The currency defaults to dollars, so ``MoneyData(10.0)`` and
``MoneyData(value=10.0, currency="$")`` are the same amount.
"""
from __future__ import annotations

from dataclasses import dataclass, replace

from langtour.errors import CurrencyMismatchError
from langtour.registry import default_registry

DEFAULT_CURRENCY = "$"


def _combine(left_currency: str, right_currency: str, left: float, right: float) -> float:
    if left_currency != right_currency:
        raise CurrencyMismatchError(left_currency, right_currency)
    return left + right


class Money:
    def __init__(self, value: float, currency: str = DEFAULT_CURRENCY) -> None:
        self.value = value
        self.currency = currency


class MoneyEquals:
    def __init__(self, value: float, currency: str = DEFAULT_CURRENCY) -> None:
        self.value = value
        self.currency = currency

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, MoneyEquals) or type(other) is not type(self):
            return NotImplemented
        return self.currency == other.currency and self.value == other.value

    def __hash__(self) -> int:
        result = hash(self.currency)
        result = 31 * result + hash(self.value)
        return result

    def __repr__(self) -> str:
        return f"MoneyEquals(currency={self.currency!r}, value={self.value})"


@dataclass(frozen=True)
class MoneyData:
    value: float
    currency: str = DEFAULT_CURRENCY

    def copy(self, **changes: object) -> "MoneyData":
        """Return a copy with the named fields replaced."""
        return replace(self, **changes)

    def __str__(self) -> str:
        return f"{self.currency} {self.value}"


@dataclass(frozen=True)
class CalcMoney:
    value: float
    currency: str = DEFAULT_CURRENCY

    def plus(self, that: "CalcMoney") -> "CalcMoney":
        """Return the sum of two amounts in the same currency.

        Raises
        ------
        CurrencyMismatchError
            If the currencies differ.
        """
        total = _combine(self.currency, that.currency, self.value, that.value)
        return CalcMoney(total, self.currency)

    def __str__(self) -> str:
        return f"{self.currency} {self.value}"


@dataclass(frozen=True)
class CalcMoneyInfix:
    value: float
    currency: str = DEFAULT_CURRENCY

    def plus(self, that: "CalcMoneyInfix") -> "CalcMoneyInfix":
        total = _combine(self.currency, that.currency, self.value, that.value)
        return CalcMoneyInfix(total, self.currency)

    def __str__(self) -> str:
        return f"{self.currency} {self.value}"


@dataclass(frozen=True)
class CalcMoneyOperator:
    value: float
    currency: str = DEFAULT_CURRENCY

    def __add__(self, that: object) -> "CalcMoneyOperator":
        if not isinstance(that, CalcMoneyOperator):
            return NotImplemented
        total = _combine(self.currency, that.currency, self.value, that.value)
        return CalcMoneyOperator(total, self.currency)

    def __str__(self) -> str:
        return f"{self.currency} {self.value}"


def compare_equality() -> dict[str, tuple[bool, bool]]:
    """Compare two same-field instances of each variant.

    Returns
    -------
    dict[str, tuple[bool, bool]]
        Class name mapped to ``(a == b, a is b)``.
    """
    results: dict[str, tuple[bool, bool]] = {}
    for cls in (Money, MoneyEquals, MoneyData):
        first = cls(value=10.0)
        second = cls(value=10.0)
        results[cls.__name__] = (first == second, first is second)
    return results


@default_registry.register(
    "money",
    title="Classes, data classes and operators",
    topic="classes",
    summary="Identity vs. value equality, copy, and a currency-checked plus operator.",
    tags=("equality", "dataclasses", "operators", "errors"),
)
def main() -> None:
    equality = ", ".join(
        f"{name} == {equal}" for name, (equal, _) in compare_equality().items()
    )
    amount = CalcMoneyOperator(value=10.0)
    print(f"{equality}; {amount} + {amount} = {amount + amount}")


if __name__ == "__main__":
    main()
