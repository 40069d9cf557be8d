"""
Adapter: FractionNumber
Implementuje port NumberType na fractions.Fraction.

Potęgowanie jest dokładne albo się nie udaje:
  - wykładnik całkowity  → base ** n (0 ** ujemny = dzielenie przez zero)
  - wykładnik p/q        → tylko gdy base jest dokładną q-tą potęgą liczby wymiernej
"""
from __future__ import annotations

import math
from fractions import Fraction

from contracts import DivisionByZeroError, InvalidExponentError, format_rational

# 35 cyfr po przecinku — stała, nie zależy od konfiguracji
PI_APPROX = Fraction("3.14159265358979323846264338327950288")

DEFAULT_MAX_EXPONENT = 100_000


def _iroot(x: int, k: int) -> int:
    """Floor of the k-th root of a non-negative integer (Newton's method)."""
    if x < 2:
        return x
    if k == 2:
        return math.isqrt(x)
    r = 1 << ((x.bit_length() + k - 1) // k)
    while True:
        s = ((k - 1) * r + x // r ** (k - 1)) // k
        if s >= r:
            return r
        r = s


def _exact_root(x: int, k: int) -> int | None:
    r = _iroot(x, k)
    return r if r ** k == x else None


class FractionNumber:
    """Exact rational arithmetic with a bounded exponent range."""

    def __init__(self, max_exponent: int = DEFAULT_MAX_EXPONENT) -> None:
        self._max_exponent = max_exponent

    def neg(self, a: Fraction) -> Fraction:
        return -a

    def add(self, a: Fraction, b: Fraction) -> Fraction:
        return a + b

    def sub(self, a: Fraction, b: Fraction) -> Fraction:
        return a - b

    def mul(self, a: Fraction, b: Fraction) -> Fraction:
        return a * b

    def div(self, a: Fraction, b: Fraction) -> Fraction:
        if b == 0:
            raise DivisionByZeroError()
        return a / b

    def pow(self, base: Fraction, exponent: Fraction) -> Fraction:
        p, q = exponent.numerator, exponent.denominator
        if abs(p) > self._max_exponent or q > self._max_exponent:
            raise InvalidExponentError(
                f"Exponent {format_rational(exponent)} is outside the supported range "
                f"(|numerator|, denominator <= {self._max_exponent})"
            )
        if base == 0 and p < 0:
            raise DivisionByZeroError()
        if q != 1:
            base = self._root(base, q, exponent)
        return base ** p

    def approx_pi(self) -> Fraction:
        return PI_APPROX

    def to_text(self, a: Fraction) -> str:
        return format_rational(a)

    # -- Prywatne ----------------------------------------------------------

    def _root(self, base: Fraction, q: int, exponent: Fraction) -> Fraction:
        if base < 0 and q % 2 == 0:
            raise InvalidExponentError(
                f"Cannot raise negative base {format_rational(base)} to {format_rational(exponent)}: "
                "even root of a negative number"
            )
        num = _exact_root(abs(base.numerator), q)
        den = _exact_root(base.denominator, q)
        if num is None or den is None:
            raise InvalidExponentError(
                f"{format_rational(base)} ^ {format_rational(exponent)} has no exact rational value"
            )
        root = Fraction(num, den)
        return -root if base < 0 else root
