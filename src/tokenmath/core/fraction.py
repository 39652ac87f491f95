"""
Fraction: exact numerator/denominator pair over Python ints.

- No gcd reduction: magnitudes grow with each operation and the stored pair is
  exactly what the formulas produce (after normalisation).
- Zero denominators encode sentinels: 0/0 is NaN, +1/0 is +Infinity and
  -1/0 is -Infinity. Construction collapses any n/0 to +-1/0 and any 0/d to 0/1.
- Sentinel results fall out of the ordinary formulas. The only special case is
  NaN absorbing in add/subtract: NaN + Infinity shares the zero denominator
  and would otherwise come out as Infinity.
- multiply has no special case: Infinity * 0 is (1*0)/(0*1), i.e. NaN.

`==` compares the stored pair (Fraction(1, 2) != Fraction(2, 4)); use
`equal_to` for value equality.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .constants import BigintIsh, Rounding, DEFAULT_FRACTION_ROUNDING
from .exc import ParseFailure
from .fmt import (
    DEFAULT_FORMAT,
    DecimalText,
    NumberFormat,
    format_fixed,
    format_significant,
    parse_decimal,
)

_INT_RE = re.compile(r"^[+-]?\d+$")


def _to_int(x, what: str) -> int:
    if isinstance(x, bool):
        raise ParseFailure(f"Fraction {what}: bool is not an integer")
    if isinstance(x, int):
        return x
    if isinstance(x, str) and _INT_RE.match(x.strip()):
        return int(x.strip())
    raise ParseFailure(f"Fraction {what}: cannot parse {x!r} as an integer")


class _Operators:
    """Python operators routed through the named arithmetic/comparison methods.

    Reflected forms accept a plain operand on the left (`1 - Fraction(1, 2)`);
    `_reflect` turns that operand into the same kind of value as `self`.
    """

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)

    def __mul__(self, other):
        return self.multiply(other)

    def __truediv__(self, other):
        return self.divide(other)

    def __radd__(self, other):
        return self.add(other)

    def __rsub__(self, other):
        return self._reflect(other).subtract(self)

    def __rmul__(self, other):
        return self.multiply(other)

    def __rtruediv__(self, other):
        return self._reflect(other).divide(self)

    def __lt__(self, other) -> bool:
        return self.less_than(other)

    def __gt__(self, other) -> bool:
        return self.greater_than(other)

    def __le__(self, other) -> bool:
        return self.less_than(other) or self.equal_to(other)

    def __ge__(self, other) -> bool:
        return self.greater_than(other) or self.equal_to(other)


@dataclass(frozen=True)
class Fraction(_Operators):
    """Exact rational numerator/denominator with NaN/Infinity sentinels.

    Both fields accept an int or a base-10 integer string.
    """

    numerator: int
    denominator: int = 1

    def __post_init__(self):
        n = _to_int(self.numerator, "numerator")
        d = _to_int(self.denominator, "denominator")
        if d == 0 and n != 0:
            n = 1 if n > 0 else -1
        elif n == 0 and d != 0:
            d = 1
        object.__setattr__(self, "numerator", n)
        object.__setattr__(self, "denominator", d)

    # ------------- constructors -------------

    @classmethod
    def of(cls, numerator: BigintIsh, denominator: BigintIsh = 1) -> "Fraction":
        return cls(numerator, denominator)

    @classmethod
    def from_decimal_string(cls, text: DecimalText, shift: int = 0) -> "Fraction":
        """Exact fraction from decimal text; '1.25' -> 125/100, 'NaN' -> 0/0.

        `shift` moves the decimal point right by that many places before
        building the pair (negative moves it left).
        """
        n, d = parse_decimal(text, shift)
        return cls(n, d)

    @classmethod
    def parse(cls, fractionish) -> "Fraction":
        """Coerce an operand: Fraction, wrapper, int-like, or numerator/denominator object."""
        if isinstance(fractionish, Fraction):
            return fractionish
        if isinstance(fractionish, FractionWrapper):
            return fractionish.as_canonical()
        if isinstance(fractionish, bool):
            raise ParseFailure("Could not parse fraction from bool")
        if isinstance(fractionish, (int, str)):
            return cls(fractionish)
        num = getattr(fractionish, "numerator", None)
        den = getattr(fractionish, "denominator", None)
        if isinstance(num, int) and isinstance(den, int):
            return cls(num, den)
        raise ParseFailure(f"Could not parse fraction from {type(fractionish).__name__}")

    def _reflect(self, other) -> "Fraction":
        return Fraction.parse(other)

    # ------------- predicates -------------

    def is_nan(self) -> bool:
        return self.numerator == 0 and self.denominator == 0

    def is_infinite(self) -> bool:
        return self.denominator == 0 and self.numerator != 0

    def is_zero(self) -> bool:
        return self.numerator == 0 and self.denominator != 0

    # ------------- derived values -------------

    def floor_quotient(self) -> int:
        """Floor division numerator // denominator. Sentinels raise ZeroDivisionError."""
        return self.numerator // self.denominator

    def remainder_fraction(self) -> "Fraction":
        """Remainder after floor division, over the same denominator."""
        return Fraction(self.numerator % self.denominator, self.denominator)

    def reciprocal(self) -> "Fraction":
        return Fraction(self.denominator, self.numerator)

    def as_canonical(self) -> "Fraction":
        """Equal pair as a new plain Fraction (never `self`, never a wrapper)."""
        return Fraction(self.numerator, self.denominator)

    # ------------- arithmetic -------------

    def add(self, other) -> "Fraction":
        o = Fraction.parse(other)
        if self.is_nan() or o.is_nan():
            return Fraction(0, 0)
        if self.denominator == o.denominator:
            return Fraction(self.numerator + o.numerator, self.denominator)
        return Fraction(
            self.numerator * o.denominator + o.numerator * self.denominator,
            self.denominator * o.denominator,
        )

    def subtract(self, other) -> "Fraction":
        o = Fraction.parse(other)
        if self.is_nan() or o.is_nan():
            return Fraction(0, 0)
        if self.denominator == o.denominator:
            return Fraction(self.numerator - o.numerator, self.denominator)
        return Fraction(
            self.numerator * o.denominator - o.numerator * self.denominator,
            self.denominator * o.denominator,
        )

    def multiply(self, other) -> "Fraction":
        o = Fraction.parse(other)
        return Fraction(self.numerator * o.numerator, self.denominator * o.denominator)

    def divide(self, other) -> "Fraction":
        o = Fraction.parse(other)
        return Fraction(self.numerator * o.denominator, self.denominator * o.numerator)

    # ------------- comparisons -------------

    # Differences may carry the sign in either component; 0/0 answers False everywhere.

    def less_than(self, other) -> bool:
        d = self.as_canonical().subtract(Fraction.parse(other))
        return (d.numerator < 0 and d.denominator >= 0) or (d.numerator > 0 and d.denominator < 0)

    def equal_to(self, other) -> bool:
        o = Fraction.parse(other)
        if self.denominator == 0 and o.denominator == 0:
            # NaN equal_to NaN is True on this path.
            return self.numerator == o.numerator
        d = self.as_canonical().subtract(o)
        return d.numerator == 0 and d.denominator != 0

    def greater_than(self, other) -> bool:
        d = self.as_canonical().subtract(Fraction.parse(other))
        return (d.numerator > 0 and d.denominator >= 0) or (d.numerator < 0 and d.denominator < 0)

    # ------------- formatting -------------

    def to_significant_digits(
        self,
        significant_digits: int,
        rounding: Rounding = DEFAULT_FRACTION_ROUNDING,
        fmt: NumberFormat = DEFAULT_FORMAT,
    ) -> str:
        return format_significant(self.numerator, self.denominator, significant_digits, rounding, fmt)

    def to_fixed_decimals(
        self,
        places: int,
        rounding: Rounding = DEFAULT_FRACTION_ROUNDING,
        fmt: NumberFormat = DEFAULT_FORMAT,
    ) -> str:
        return format_fixed(self.numerator, self.denominator, places, rounding, fmt)


class FractionWrapper(_Operators):
    """Shared surface of types that hold a `fraction` and re-wrap arithmetic results.

    Subclasses are frozen dataclasses with a `fraction: Fraction` field and
    implement `_rewrap`, which builds a new instance of the subclass around a
    plain Fraction. Arithmetic delegates to Fraction; comparisons return bools.
    """

    fraction: Fraction

    def _rewrap(self, fraction: Fraction):
        """Hook: new instance of the subclass holding `fraction`. Subclasses must override."""
        raise NotImplementedError

    def _reflect(self, other):
        return self._rewrap(Fraction.parse(other))

    @property
    def numerator(self) -> int:
        return self.fraction.numerator

    @property
    def denominator(self) -> int:
        return self.fraction.denominator

    def as_canonical(self) -> Fraction:
        return self.fraction.as_canonical()

    def is_nan(self) -> bool:
        return self.fraction.is_nan()

    def is_infinite(self) -> bool:
        return self.fraction.is_infinite()

    def is_zero(self) -> bool:
        return self.fraction.is_zero()

    def add(self, other):
        return self._rewrap(self.fraction.add(other))

    def subtract(self, other):
        return self._rewrap(self.fraction.subtract(other))

    def multiply(self, other):
        return self._rewrap(self.fraction.multiply(other))

    def divide(self, other):
        return self._rewrap(self.fraction.divide(other))

    def less_than(self, other) -> bool:
        return self.fraction.less_than(other)

    def equal_to(self, other) -> bool:
        return self.fraction.equal_to(other)

    def greater_than(self, other) -> bool:
        return self.fraction.greater_than(other)


__all__ = [
    "Fraction",
    "FractionWrapper",
]
