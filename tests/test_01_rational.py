"""Tests of the exact rational type."""
import math
from fractions import Fraction
from itertools import product

import numpy as np
import pytest
import sympy

from exactgauss import Rational, DivisionByZero, MalformedValue, ZERO, ONE

VALUES = [Rational(0), Rational(1), Rational(-3), Rational(1, 2), Rational(-2, 3), Rational(7, 12), Rational(-5, 18)]


def is_simplified(value: Rational) -> bool:
    return value.denominator > 0 and math.gcd(abs(value.numerator), value.denominator) == 1


def test_construct_simplifies():
    """Construction reduces by the gcd and keeps the denominator positive."""
    assert (Rational(2, 4).numerator, Rational(2, 4).denominator) == (1, 2)
    assert (Rational(1, -2).numerator, Rational(1, -2).denominator) == (-1, 2)
    assert (Rational(-6, -4).numerator, Rational(-6, -4).denominator) == (3, 2)
    assert (Rational(0, -5).numerator, Rational(0, -5).denominator) == (0, 1)
    assert Rational(7).denominator == 1


def test_construct_zero_denominator():
    with pytest.raises(DivisionByZero):
        Rational(3, 0)
    with pytest.raises(ZeroDivisionError):
        Rational(0, 0)


def test_construct_rejects_non_integers():
    with pytest.raises(TypeError):
        Rational(1.5)
    with pytest.raises(TypeError):
        Rational(1, "2")


@pytest.mark.parametrize("a,b,c,d", [(1, 2, 1, 3), (-3, 4, 5, 6), (2, -7, 3, 14), (0, 5, -1, 9), (10, 4, 6, 8)])
def test_add_matches_cross_multiplication(a, b, c, d):
    """a/b + c/d equals (a*d + c*b)/(b*d) after simplification."""
    assert Rational(a, b).add(Rational(c, d)) == Rational(a * d + c * b, b * d)
    assert Rational(a, b) + Rational(c, d) == Rational(a * d + c * b, b * d)


def test_add_and_multiply_commute_and_associate():
    for x, y in product(VALUES, repeat=2):
        assert x + y == y + x
        assert x * y == y * x
    for x, y, z in product(VALUES[:5], repeat=3):
        assert (x + y) + z == x + (y + z)
        assert (x * y) * z == x * (y * z)


def test_results_stay_simplified():
    for x, y in product(VALUES, repeat=2):
        results = [x.add(y), x.subtract(y), x.multiply(y), x.negate(), x.abs()]
        if not y.is_zero():
            results.append(x.divide(y))
        for r in results:
            assert is_simplified(r)
            # simplifying again is a no-op
            assert Rational(r.numerator, r.denominator) == r


def test_integer_operands():
    half = Rational(1, 2)
    assert half + 1 == Rational(3, 2)
    assert 1 + half == Rational(3, 2)
    assert half - 1 == Rational(-1, 2)
    assert 1 - half == half
    assert half * 4 == 2
    assert 3 * half == Rational(3, 2)
    assert half / 2 == Rational(1, 4)
    assert 2 / Rational(1, 3) == 6
    assert half.add(np.int64(2)) == Rational(5, 2)


def test_subtract_and_divide():
    assert Rational(1, 2) - Rational(1, 3) == Rational(1, 6)
    assert Rational(3, 4) / Rational(-3, 8) == Rational(-2)
    assert Rational(5, 6).invert() == Rational(6, 5)
    assert -Rational(1, 2) == Rational(-1, 2)
    assert abs(Rational(-4, 6)) == Rational(2, 3)


def test_division_by_zero_leaves_operands_unchanged():
    x = Rational(1, 2)
    zero = Rational(0, 7)
    with pytest.raises(DivisionByZero):
        x.divide(zero)
    with pytest.raises(DivisionByZero):
        x / 0
    with pytest.raises(DivisionByZero):
        ZERO.invert()
    assert (x.numerator, x.denominator) == (1, 2)
    assert (zero.numerator, zero.denominator) == (0, 1)


def test_augmented_assignment_rebinds():
    x = Rational(1, 2)
    y = x
    x += 1
    x *= 2
    assert x == 3
    assert y == Rational(1, 2)


def test_compare():
    assert Rational(1, 3) < Rational(1, 2)
    assert Rational(-1, 2) < 0
    assert Rational(5, 4) > 1
    assert Rational(2, 4) >= Rational(1, 2)
    assert Rational(2, 4) <= Rational(1, 2)
    assert Rational(1, 3).compare_to(Rational(1, 2)) == -1
    assert Rational(1, 2).compare_to(Rational(2, 4)) == 0
    assert Rational(7, 3).compare_to(2) == 1
    assert sorted([Rational(1, 2), Rational(-1), Rational(1, 3)]) == [Rational(-1), Rational(1, 3), Rational(1, 2)]


def test_equality_and_hash():
    assert Rational(2, 4) == Rational(1, 2)
    assert Rational(2, 4) != Rational(1, 3)
    assert Rational(6, 3) == 2
    assert Rational(1, 2) == Fraction(1, 2)
    assert hash(Rational(1, 2)) == hash(Fraction(1, 2))
    assert hash(Rational(3)) == hash(3)
    assert len({Rational(1, 2), Rational(2, 4), Rational(3, 6)}) == 1
    assert Rational(1, 2) != "1/2"


def test_predicates():
    assert ZERO.is_zero() and not ZERO
    assert ONE.is_one()
    assert Rational(4, 2).is_integer()
    assert not Rational(1, 2).is_integer()
    assert Rational(-1, 2).signum() == -1
    assert Rational(0).signum() == 0
    assert Rational(3, 2).signum() == 1


@pytest.mark.parametrize("text,expected", [
    ("3", Rational(3)),
    ("-3/6", Rational(-1, 2)),
    ("+4/8", Rational(1, 2)),
    (" 4 / -8 ", Rational(-1, 2)),
    ("0/5", ZERO),
])
def test_parse(text, expected):
    assert Rational.parse(text) == expected


@pytest.mark.parametrize("text", ["1/0", "abc", "1.5", "", "1/2/3", "/2", "2/"])
def test_parse_malformed(text):
    with pytest.raises(MalformedValue):
        Rational.parse(text)


def test_parse_zero_denominator_is_a_value_error():
    with pytest.raises(ValueError, match="denominator"):
        Rational.parse("1/0")


def test_format_parse_round_trip():
    assert str(Rational(4, 2)) == "2"
    assert str(Rational(-1, 3)) == "-1/3"
    for x in VALUES:
        assert Rational.parse(str(x)) == x


def test_double_value():
    assert Rational(1, 4).double_value() == 0.25
    assert float(Rational(-3, 2)) == -1.5


def test_value_of():
    assert Rational.value_of(Fraction(3, 6)) == Rational(1, 2)
    assert Rational.value_of(sympy.Rational(2, 6)) == Rational(1, 3)
    assert Rational.value_of(np.int64(5)) == 5
    assert Rational.value_of(0.5) == Rational(1, 2)
    assert Rational.value_of("7/14") == Rational(1, 2)
    half = Rational(1, 2)
    assert Rational.value_of(half) is half
    with pytest.raises(MalformedValue):
        Rational.value_of(float("nan"))
    with pytest.raises(TypeError):
        Rational.value_of(object())


def test_conversions():
    assert Rational(-2, 6).to_fraction() == Fraction(-1, 3)
    assert Rational(-2, 6).to_sympy() == sympy.Rational(-1, 3)
    assert repr(Rational(2, 4)) == "Rational(1, 2)"
