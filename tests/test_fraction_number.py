from __future__ import annotations

from fractions import Fraction

import pytest

from adapters.number_type.fraction_number import PI_APPROX, FractionNumber
from contracts import DivisionByZeroError, InvalidExponentError
from ports.number_type import NumberType


@pytest.fixture
def number() -> FractionNumber:
    return FractionNumber()


def test_fraction_number_implements_port(number):
    assert isinstance(number, NumberType)


def test_basic_arithmetic_is_exact(number):
    a, b = Fraction(1, 2), Fraction(1, 3)

    assert number.add(a, b) == Fraction(5, 6)
    assert number.sub(a, b) == Fraction(1, 6)
    assert number.mul(a, b) == Fraction(1, 6)
    assert number.div(a, b) == Fraction(3, 2)
    assert number.neg(a) == Fraction(-1, 2)


def test_div_by_zero_raises(number):
    with pytest.raises(DivisionByZeroError, match="Division by zero"):
        number.div(Fraction(5), Fraction(0))


@pytest.mark.parametrize(
    "base, exponent, expected",
    [
        (Fraction(2), Fraction(10), Fraction(1024)),
        (Fraction(2, 3), Fraction(-2), Fraction(9, 4)),
        (Fraction(4), Fraction(1, 2), Fraction(2)),
        (Fraction(-8), Fraction(1, 3), Fraction(-2)),
        (Fraction(4, 9), Fraction(3, 2), Fraction(8, 27)),
        (Fraction(27), Fraction(-2, 3), Fraction(1, 9)),
        (Fraction(0), Fraction(0), Fraction(1)),
        (Fraction(0), Fraction(1, 2), Fraction(0)),
    ],
)
def test_pow_exact_results(number, base, exponent, expected):
    assert number.pow(base, exponent) == expected


def test_pow_irrational_result_raises(number):
    with pytest.raises(InvalidExponentError):
        number.pow(Fraction(2), Fraction(1, 2))


def test_pow_even_root_of_negative_raises(number):
    with pytest.raises(InvalidExponentError):
        number.pow(Fraction(-4), Fraction(1, 2))


def test_pow_zero_to_negative_is_division_by_zero(number):
    with pytest.raises(DivisionByZeroError):
        number.pow(Fraction(0), Fraction(-1))


def test_pow_exponent_above_limit_raises():
    number = FractionNumber(max_exponent=10)

    assert number.pow(Fraction(2), Fraction(10)) == 1024
    with pytest.raises(InvalidExponentError, match="outside the supported range"):
        number.pow(Fraction(2), Fraction(11))


def test_pow_large_perfect_root(number):
    base = Fraction(3 ** 40, 7 ** 20)

    assert number.pow(base, Fraction(1, 20)) == Fraction(9, 7)


def test_approx_pi_is_fixed(number):
    assert number.approx_pi() == PI_APPROX
    assert number.approx_pi() == FractionNumber(max_exponent=1).approx_pi()
    assert Fraction(314159, 100000) < PI_APPROX < Fraction(314160, 100000)


def test_to_text_is_canonical(number):
    assert number.to_text(Fraction(10, 12)) == "5/6"
    assert number.to_text(Fraction(-4, 2)) == "-2"


def test_square_root_of_large_perfect_square(number):
    base = Fraction((10 ** 40 + 3) ** 2, 49)

    assert number.pow(base, Fraction(1, 2)) == Fraction(10 ** 40 + 3, 7)


def test_to_text_beyond_int_str_digit_limit(number):
    assert number.to_text(Fraction(10 ** 5000, 3)) == "1" + "0" * 5000 + "/3"


def test_invalid_exponent_message_for_huge_base(number):
    base = Fraction(2 ** 20001)

    with pytest.raises(InvalidExponentError, match="has no exact rational value"):
        number.pow(base, Fraction(1, 2))


def test_out_of_range_message_for_huge_exponent(number):
    with pytest.raises(InvalidExponentError, match="outside the supported range"):
        number.pow(Fraction(2), Fraction(10 ** 5000))
