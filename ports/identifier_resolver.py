"""
Port: IdentifierResolver
Odpowiedzialność: mapowanie nazw stałych (np. "pi") na dokładne wartości.
"""
from fractions import Fraction
from typing import Protocol, runtime_checkable


@runtime_checkable
class IdentifierResolver(Protocol):
    def resolve(self, name: str) -> Fraction:
        """
        Returns the exact value bound to name (case-sensitive, exact match).
        Raises UnknownIdentifierError carrying the name otherwise.
        """
        ...

    def names(self) -> list[str]:
        """Sorted list of resolvable names."""
        ...
