#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""
Exact rational numbers p/q.

A Rational is always stored in lowest terms with a positive denominator, so
two equal values have identical (numerator, denominator) pairs. Additive
operations combine over the least common multiple of the denominators instead
of the plain product. Numerator and denominator are Python ints and therefore
never overflow.

Values are immutable. Augmented assignment (``x += y``) rebinds ``x`` to a new
simplified value.
"""

import math
import numbers
import re
from fractions import Fraction
from typing import Union

from sympy import Rational as SympyRational

from .errors import DivisionByZero, MalformedValue
from .names import FRACTION_SEP

_RATIONAL_RE = re.compile(r"^\s*([+-]?\d+)\s*(?:" + re.escape(FRACTION_SEP) + r"\s*([+-]?\d+)\s*)?$")


def _reduced(numerator: int, denominator: int):
    """Divide out the gcd and move the sign to the numerator"""
    greatest_div = math.gcd(numerator, denominator)
    numerator //= greatest_div
    denominator //= greatest_div
    if denominator < 0:
        numerator = -numerator
        denominator = -denominator
    return numerator, denominator


class Rational:
    """
    Exact fraction with full arithmetic, comparison and simplification.

    Args:
        numerator: Integer numerator (default 0)
        denominator: Integer denominator (default 1)

    Raises:
        DivisionByZero: If denominator is 0
        TypeError: If an argument is not an integer
    """

    __slots__ = ('_numerator', '_denominator')

    def __init__(self, numerator: int = 0, denominator: int = 1):
        if not isinstance(numerator, numbers.Integral) or not isinstance(denominator, numbers.Integral):
            raise TypeError(f"Rational expects integer arguments, got {type(numerator).__name__} "
                            f"and {type(denominator).__name__}")
        if denominator == 0:
            raise DivisionByZero("denominator cannot be 0")
        self._numerator, self._denominator = _reduced(int(numerator), int(denominator))

    @classmethod
    def _from_parts(cls, numerator: int, denominator: int) -> 'Rational':
        # denominator is known to be non-zero here
        result = object.__new__(cls)
        result._numerator, result._denominator = _reduced(numerator, denominator)
        return result

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    # Conversion
    def double_value(self) -> float:
        """Numerator divided by denominator. For display only."""
        return self._numerator / self._denominator

    def to_fraction(self) -> Fraction:
        return Fraction(self._numerator, self._denominator)

    def to_sympy(self) -> SympyRational:
        return SympyRational(self._numerator, self._denominator)

    def __float__(self) -> float:
        return self.double_value()

    # Predicates
    def is_zero(self) -> bool:
        return self._numerator == 0

    def is_one(self) -> bool:
        return self._numerator == 1 and self._denominator == 1

    def is_integer(self) -> bool:
        return self._denominator == 1

    def signum(self) -> int:
        """Return sign: -1, 0, or 1"""
        return (self._numerator > 0) - (self._numerator < 0)

    def __bool__(self) -> bool:
        return self._numerator != 0

    # Arithmetic
    def negate(self) -> 'Rational':
        return Rational._from_parts(-self._numerator, self._denominator)

    def abs(self) -> 'Rational':
        return Rational._from_parts(abs(self._numerator), self._denominator)

    def invert(self) -> 'Rational':
        """Return 1/this"""
        if self._numerator == 0:
            raise DivisionByZero("Division by 0")
        return Rational._from_parts(self._denominator, self._numerator)

    def add(self, other: Union['Rational', int]) -> 'Rational':
        other = _coerce(other)
        common_denom = math.lcm(self._denominator, other._denominator)
        numerator = (self._numerator * (common_denom // self._denominator) +
                     other._numerator * (common_denom // other._denominator))
        return Rational._from_parts(numerator, common_denom)

    def subtract(self, other: Union['Rational', int]) -> 'Rational':
        other = _coerce(other)
        common_denom = math.lcm(self._denominator, other._denominator)
        numerator = (self._numerator * (common_denom // self._denominator) -
                     other._numerator * (common_denom // other._denominator))
        return Rational._from_parts(numerator, common_denom)

    def multiply(self, other: Union['Rational', int]) -> 'Rational':
        other = _coerce(other)
        return Rational._from_parts(self._numerator * other._numerator, self._denominator * other._denominator)

    def divide(self, other: Union['Rational', int]) -> 'Rational':
        """
        Divide by a rational or an integer.

        Raises:
            DivisionByZero: If other is zero. Neither operand is modified.
        """
        other = _coerce(other)
        if other._numerator == 0:
            raise DivisionByZero("Division by 0")
        return Rational._from_parts(self._numerator * other._denominator, self._denominator * other._numerator)

    # Comparison
    def compare_to(self, other: Union['Rational', int]) -> int:
        """Compare exactly over a common denominator: -1 if less, 0 if equal, 1 if greater"""
        other = _coerce(other)
        common_denom = math.lcm(self._denominator, other._denominator)
        l_val = self._numerator * (common_denom // self._denominator)
        r_val = other._numerator * (common_denom // other._denominator)
        return (l_val > r_val) - (l_val < r_val)

    def __eq__(self, other) -> bool:
        if isinstance(other, Rational):
            return self._numerator == other._numerator and self._denominator == other._denominator
        if isinstance(other, numbers.Integral):
            return self._denominator == 1 and self._numerator == other
        if isinstance(other, Fraction):
            return self._numerator == other.numerator and self._denominator == other.denominator
        return NotImplemented

    def __lt__(self, other) -> bool:
        if not _is_coercible(other):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other) -> bool:
        if not _is_coercible(other):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other) -> bool:
        if not _is_coercible(other):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other) -> bool:
        if not _is_coercible(other):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        # consistent with int and Fraction hashing
        if self._denominator == 1:
            return hash(self._numerator)
        return hash(Fraction(self._numerator, self._denominator))

    # Text
    def __str__(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}{FRACTION_SEP}{self._denominator}"

    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"

    @classmethod
    def parse(cls, text: str) -> 'Rational':
        """
        Parse the textual form "p" or "p/q".

        Raises:
            MalformedValue: If text is not an integer or p/q pair, or q is 0
        """
        match = _RATIONAL_RE.match(text) if isinstance(text, str) else None
        if match is None:
            raise MalformedValue(text)
        numer = int(match.group(1))
        denom = 1 if match.group(2) is None else int(match.group(2))
        if denom == 0:
            raise MalformedValue(text, "denominator cannot be 0")
        return cls._from_parts(numer, denom)

    @staticmethod
    def value_of(value) -> 'Rational':
        """
        Factory method to create a Rational from various types.

        Accepts Rational, int (including numpy integers), str ("p" or "p/q"),
        fractions.Fraction, sympy.Rational and float. Floats are converted
        via Fraction.limit_denominator().
        """
        if isinstance(value, Rational):
            return value
        if isinstance(value, str):
            return Rational.parse(value)
        if isinstance(value, numbers.Integral):
            return Rational(int(value))
        if isinstance(value, Fraction):
            return Rational._from_parts(value.numerator, value.denominator)
        if isinstance(value, SympyRational):
            return Rational._from_parts(int(value.p), int(value.q))
        if isinstance(value, numbers.Real):
            if not math.isfinite(value):
                raise MalformedValue(str(value), "not a finite number")
            frac = Fraction(float(value)).limit_denominator()
            return Rational._from_parts(frac.numerator, frac.denominator)
        raise TypeError(f"Cannot convert {type(value)} to Rational")

    # Python operator overloading for convenience
    def __add__(self, other):
        if not _is_coercible(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        if not _is_coercible(other):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not _is_coercible(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if not _is_coercible(other):
            return NotImplemented
        return _coerce(other).subtract(self)

    def __mul__(self, other):
        if not _is_coercible(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        if not _is_coercible(other):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        if not _is_coercible(other):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        if not _is_coercible(other):
            return NotImplemented
        return _coerce(other).divide(self)

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __abs__(self):
        return self.abs()


def _is_coercible(value) -> bool:
    return isinstance(value, (Rational, numbers.Integral))


def _coerce(value) -> Rational:
    """Operands of arithmetic: Rational or plain integer"""
    if isinstance(value, Rational):
        return value
    if isinstance(value, numbers.Integral):
        return Rational(int(value))
    raise TypeError(f"unsupported operand type for Rational arithmetic: {type(value).__name__}")


ZERO = Rational(0)
ONE = Rational(1)
MINUS_ONE = Rational(-1)
