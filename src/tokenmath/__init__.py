# Top-level API for tokenmath (exact rational arithmetic).
"""
Top-level API for tokenmath.

Exact, sentinel-aware rational arithmetic for token quantities and ratios:
  - Fraction: numerator/denominator pair with NaN/Infinity sentinels
  - CurrencyAmount: raw-unit amount tied to a currency's decimal scale
  - Percent: ratio rendered in percentage units
  - floor_sqrt: integer square root

Everything here is re-exported from `tokenmath.core`.
"""

from __future__ import annotations

from .core import (
    Fraction,
    Percent,
    CurrencyAmount,
    floor_sqrt,
    Rounding,
    TradeType,
    NumberFormat,
    Currency,
    Token,
    NativeCurrency,
    MAX_SAFE_INTEGER,
    MAX_UINT256,
    integer_to_decimal,
    decimal_to_integer,
    InvalidArgument,
    CurrencyMismatch,
    ParseFailure,
)

__all__ = [
    # values
    "Fraction",
    "Percent",
    "CurrencyAmount",
    "floor_sqrt",
    # enums / config
    "Rounding",
    "TradeType",
    "NumberFormat",
    # currencies
    "Currency",
    "Token",
    "NativeCurrency",
    # bounds and conversions
    "MAX_SAFE_INTEGER",
    "MAX_UINT256",
    "integer_to_decimal",
    "decimal_to_integer",
    # exceptions
    "InvalidArgument",
    "CurrencyMismatch",
    "ParseFailure",
]
