"""
Port: NumberType
Odpowiedzialność: dokładna arytmetyka wymierna. Ewaluator sam nie liczy —
tylko sekwencjonuje wywołania tego portu.
"""
from fractions import Fraction
from typing import Protocol, runtime_checkable


@runtime_checkable
class NumberType(Protocol):
    def neg(self, a: Fraction) -> Fraction: ...

    def add(self, a: Fraction, b: Fraction) -> Fraction: ...

    def sub(self, a: Fraction, b: Fraction) -> Fraction: ...

    def mul(self, a: Fraction, b: Fraction) -> Fraction: ...

    def div(self, a: Fraction, b: Fraction) -> Fraction:
        """Raises DivisionByZeroError when b is zero."""
        ...

    def pow(self, base: Fraction, exponent: Fraction) -> Fraction:
        """
        Exact power. Raises InvalidExponentError when the result is not an
        exact rational (or the exponent is out of the supported range), and
        DivisionByZeroError for zero raised to a negative power.
        """
        ...

    def approx_pi(self) -> Fraction:
        """Fixed rational approximation of π; identical on every call."""
        ...

    def to_text(self, a: Fraction) -> str:
        """Canonical text form, e.g. '5/6' or '-2'."""
        ...
