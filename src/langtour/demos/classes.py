"""Class and interface hierarchies.

Python classes are open for subclassing by default, so ``OpenAnimal``
needs nothing special.  ``Animal`` is abstract: it cannot be instantiated
directly, but its ``bla`` method has a default body that subclasses may
override.  Interfaces are abstract base classes; ``CanSwim`` mixes one
abstract method with one default implementation.

``Dog`` extends one base class and implements two interfaces with the
same syntax.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from langtour.registry import default_registry


class OpenAnimal:
    """A class with no body that anything may extend."""


class Animal(ABC):
    """Abstract base: not instantiable, methods overridable."""

    def __new__(cls, *args: object, **kwargs: object) -> "Animal":
        if cls is Animal:
            raise TypeError("Can't instantiate abstract class Animal")
        return super().__new__(cls)

    def bla(self) -> str:
        return "Animal.bla"


class CanWalk(ABC):
    """Marker interface."""


class CanSwim(ABC):
    @abstractmethod
    def implement_this(self) -> str:
        """Must be implemented by every swimmer."""

    def has_body(self) -> str:
        # Default method; implementers may override it
        return "CanSwim.has_body"


class Dog(Animal, CanWalk, CanSwim):
    def bla(self) -> str:
        return "Dog.bla"

    def implement_this(self) -> str:
        return "Dog.implement_this"


def describe(cls: type) -> str:
    """Return ``"<Name> is a <Base>, <Base>..."`` for the direct bases of *cls*."""
    bases = ", ".join(base.__name__ for base in cls.__bases__)
    return f"{cls.__name__} is a {bases}"


@default_registry.register(
    "classes",
    title="Classes and interfaces",
    topic="classes",
    summary="Open and abstract classes, interfaces with default methods.",
    tags=("inheritance", "interfaces", "abstract"),
)
def main() -> None:
    print(describe(Dog))


if __name__ == "__main__":
    main()
