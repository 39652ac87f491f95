"""
Percent: a Fraction rendered in percentage units.

The stored value is the plain ratio (12.5% is kept as 125/1000); only the
text produced by the formatters is scaled by 100. Arithmetic results are
re-wrapped so a Percent stays a Percent through chained operations.
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    BigintIsh,
    Rounding,
    DEFAULT_FRACTION_ROUNDING,
    DEFAULT_PERCENT_SIGNIFICANT_DIGITS,
)
from .fmt import DEFAULT_FORMAT, DecimalText, NumberFormat
from .fraction import Fraction, FractionWrapper

ONE_HUNDRED = Fraction(100)


@dataclass(frozen=True)
class Percent(FractionWrapper):
    """Ratio tagged for percentage rendering."""

    fraction: Fraction

    def __post_init__(self):
        object.__setattr__(self, "fraction", Fraction.parse(self.fraction))

    # ------------- constructors -------------

    @classmethod
    def of(cls, numerator: BigintIsh, denominator: BigintIsh = 1) -> "Percent":
        return cls(Fraction(numerator, denominator))

    @classmethod
    def from_decimal_string(cls, text: DecimalText) -> "Percent":
        """Read percentage text: '12.5' is 12.5%, stored as 125/1000."""
        return cls(Fraction.from_decimal_string(text, shift=-2))

    def _rewrap(self, fraction: Fraction) -> "Percent":
        return Percent(fraction)

    # ------------- formatting (percentage units) -------------

    def to_significant_digits(
        self,
        significant_digits: int = DEFAULT_PERCENT_SIGNIFICANT_DIGITS,
        rounding: Rounding = DEFAULT_FRACTION_ROUNDING,
        fmt: NumberFormat = DEFAULT_FORMAT,
    ) -> str:
        return self.fraction.multiply(ONE_HUNDRED).to_significant_digits(significant_digits, rounding, fmt)

    def to_fixed_decimals(
        self,
        places: int,
        rounding: Rounding = DEFAULT_FRACTION_ROUNDING,
        fmt: NumberFormat = DEFAULT_FORMAT,
    ) -> str:
        return self.fraction.multiply(ONE_HUNDRED).to_fixed_decimals(places, rounding, fmt)

    def limit_decimals(self, places: int, rounding: Rounding = DEFAULT_FRACTION_ROUNDING) -> "Percent":
        """New Percent truncated to `places` percentage decimals (lossy)."""
        text = self.to_fixed_decimals(places, rounding)
        return Percent.from_decimal_string(text)


__all__ = [
    "ONE_HUNDRED",
    "Percent",
]
