"""
CurrencyAmount: a Fraction of raw smallest units tied to a currency.

- The stored fraction is in raw units (1.5 of a 6-decimal token is 1500000/1).
- Rendering divides by decimal_scale = 10**currency.decimals first.
- add/subtract require equal currencies; multiply/divide take bare ratios.
- Every arithmetic result keeps the original currency.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .constants import (
    BigintIsh,
    Rounding,
    DEFAULT_AMOUNT_ROUNDING,
    DEFAULT_AMOUNT_SIGNIFICANT_DIGITS,
    SENTINEL_LITERALS,
)
from .datatypes import Currency
from .exc import CurrencyMismatch, InvalidArgument
from .fmt import DEFAULT_FORMAT, DecimalText, NumberFormat, format_exact, sentinel_literal
from .fraction import Fraction, FractionWrapper

# Debug printing control
DEBUG_AMOUNTS = False

def _dbg(msg: str) -> None:
    if DEBUG_AMOUNTS:
        print(f"[amount] {msg}")


@dataclass(frozen=True)
class CurrencyAmount(FractionWrapper):
    """Raw-unit amount of `currency`."""

    currency: Currency
    fraction: Fraction

    def __post_init__(self):
        object.__setattr__(self, "fraction", Fraction.parse(self.fraction))

    # ------------- constructors -------------

    @classmethod
    def from_raw_amount(cls, currency: Currency, raw_amount: BigintIsh) -> "CurrencyAmount":
        """Amount from an integer count of smallest units ('NaN'/'Infinity'/'-Infinity' allowed)."""
        if isinstance(raw_amount, str) and raw_amount in SENTINEL_LITERALS:
            return cls(currency, Fraction.from_decimal_string(raw_amount))
        return cls(currency, Fraction(raw_amount))

    @classmethod
    def from_fractional_amount(
        cls, currency: Currency, numerator: BigintIsh, denominator: BigintIsh
    ) -> "CurrencyAmount":
        """Amount whose raw value is numerator/denominator smallest units."""
        return cls(currency, Fraction(numerator, denominator))

    @classmethod
    def from_decimal_amount(cls, currency: Currency, decimal: DecimalText) -> "CurrencyAmount":
        """Amount from human-readable text, e.g. '1.5' of a 6-decimal token -> 1500000 raw."""
        f = Fraction.from_decimal_string(decimal, shift=currency.decimals)
        return cls.from_fractional_amount(currency, f.numerator, f.denominator)

    def _rewrap(self, fraction: Fraction) -> "CurrencyAmount":
        return CurrencyAmount(self.currency, fraction)

    # ------------- derived -------------

    @property
    def decimal_scale(self) -> int:
        return 10 ** self.currency.decimals

    @property
    def raw_amount(self) -> str:
        """Raw units rounded half-up to an integer string."""
        return self.fraction.to_fixed_decimals(0)

    @property
    def wrapped(self) -> "CurrencyAmount":
        """Same amount on the currency's wrapped form (self if already canonical)."""
        target = self.currency.wrapped
        if self.currency.equals(target):
            return self
        return CurrencyAmount(target, self.fraction)

    # ------------- arithmetic -------------

    def _check_currency(self, other) -> None:
        if not isinstance(other, CurrencyAmount):
            raise CurrencyMismatch(self.currency, other)
        if not self.currency.equals(other.currency):
            _dbg(f"mismatch: {self.currency!r} vs {other.currency!r}")
            raise CurrencyMismatch(self.currency, other.currency)

    def add(self, other: "CurrencyAmount") -> "CurrencyAmount":
        self._check_currency(other)
        return self._rewrap(self.fraction.add(other.fraction))

    def subtract(self, other: "CurrencyAmount") -> "CurrencyAmount":
        self._check_currency(other)
        return self._rewrap(self.fraction.subtract(other.fraction))

    def __rsub__(self, other):
        self._check_currency(other)
        return other.subtract(self)

    # ------------- formatting (human units) -------------

    def to_significant_digits(
        self,
        significant_digits: int = DEFAULT_AMOUNT_SIGNIFICANT_DIGITS,
        rounding: Rounding = DEFAULT_AMOUNT_ROUNDING,
        fmt: NumberFormat = DEFAULT_FORMAT,
    ) -> str:
        return self.fraction.divide(self.decimal_scale).to_significant_digits(significant_digits, rounding, fmt)

    def to_fixed_decimals(
        self,
        places: Optional[int] = None,
        rounding: Rounding = DEFAULT_AMOUNT_ROUNDING,
        fmt: NumberFormat = DEFAULT_FORMAT,
    ) -> str:
        if places is None:
            places = self.currency.decimals
        if isinstance(places, int) and places > self.currency.decimals:
            raise InvalidArgument(
                f"to_fixed_decimals: {places} places exceeds currency decimals {self.currency.decimals}"
            )
        return self.fraction.divide(self.decimal_scale).to_fixed_decimals(places, rounding, fmt)

    def to_exact_decimal_string(self, fmt: NumberFormat = DEFAULT_FORMAT) -> str:
        """Whole raw units shown in human units with no rounding beyond the currency's decimals.

        Fractional raw units are floored away; trailing zeros are dropped.
        """
        if self.denominator == 0:
            return sentinel_literal(self.numerator)
        return format_exact(self.fraction.floor_quotient(), self.currency.decimals, fmt)

    def limit_decimals(
        self, places: Optional[int] = None, rounding: Rounding = DEFAULT_AMOUNT_ROUNDING
    ) -> "CurrencyAmount":
        """New amount truncated to `places` human decimals (lossy)."""
        return CurrencyAmount.from_decimal_amount(self.currency, self.to_fixed_decimals(places, rounding))


__all__ = ["CurrencyAmount"]
