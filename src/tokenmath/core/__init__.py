"""
tokenmath core
==============

Unified exports for the exact-rational primitives.
All arithmetic is on integer numerator/denominator pairs; Decimal is used
only when rendering text.

Core exposes Fraction, Percent and CurrencyAmount as public API.
"""

# NOTE:
#   Zero-denominator fractions are values (NaN, +Infinity, -Infinity), not
#   errors. Only malformed input and invalid formatting parameters raise.

# Enums, bounds and defaults
from .constants import (
    Rounding,
    TradeType,
    BigintIsh,
    MAX_SAFE_INTEGER,
    MAX_UINT256,
    DEFAULT_FRACTION_ROUNDING,
    DEFAULT_AMOUNT_ROUNDING,
    DEFAULT_AMOUNT_SIGNIFICANT_DIGITS,
    DEFAULT_PERCENT_SIGNIFICANT_DIGITS,
)

# Formatting / parsing helpers
from .fmt import (
    NumberFormat,
    DEFAULT_FORMAT,
    integer_to_decimal,
    decimal_to_integer,
)

# Integer square root
from .sqrt import floor_sqrt

# Rational value and adapters
from .fraction import Fraction, FractionWrapper
from .percent import Percent
from .currency_amount import CurrencyAmount

# Currency collaborators
from .datatypes import Currency, Token, NativeCurrency

# Core exceptions
from .exc import InvalidArgument, CurrencyMismatch, ParseFailure

__all__ = [
    # constants
    "Rounding",
    "TradeType",
    "BigintIsh",
    "MAX_SAFE_INTEGER",
    "MAX_UINT256",
    "DEFAULT_FRACTION_ROUNDING",
    "DEFAULT_AMOUNT_ROUNDING",
    "DEFAULT_AMOUNT_SIGNIFICANT_DIGITS",
    "DEFAULT_PERCENT_SIGNIFICANT_DIGITS",
    # fmt
    "NumberFormat",
    "DEFAULT_FORMAT",
    "integer_to_decimal",
    "decimal_to_integer",
    # sqrt
    "floor_sqrt",
    # fractions
    "Fraction",
    "FractionWrapper",
    "Percent",
    "CurrencyAmount",
    # datatypes
    "Currency",
    "Token",
    "NativeCurrency",
    # exceptions
    "InvalidArgument",
    "CurrencyMismatch",
    "ParseFailure",
]
