"""
Core constants (integer domain)
===============================

Rounding/trade enums, integer bounds and the static defaults used by the
formatters. Nothing here depends on Decimal; the mapping from `Rounding` to
decimal rounding constants lives in `fmt.py`.
"""

from enum import Enum
from typing import Final, Tuple, Union

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class TradeType(Enum):
    """Which side of a trade is fixed. Declared here for downstream sizing code."""

    EXACT_INPUT = 0
    EXACT_OUTPUT = 1


class Rounding(Enum):
    """Rounding modes understood by the formatters."""

    ROUND_DOWN = 0      # toward zero
    ROUND_HALF_UP = 1   # nearest, ties away from zero
    ROUND_UP = 2        # away from zero


# ---------------------------------------------------------------------------
# Integer bounds
# ---------------------------------------------------------------------------

#: Anything accepted where an integer is expected: an int or its base-10 string.
BigintIsh = Union[int, str]

#: Largest integer a binary64 float holds exactly (2**53 - 1).
MAX_SAFE_INTEGER: Final[int] = 2 ** 53 - 1

MAX_UINT256: Final[int] = 2 ** 256 - 1


# ---------------------------------------------------------------------------
# Formatting defaults
# ---------------------------------------------------------------------------

#: Plain fractions and percents round half-up unless told otherwise.
DEFAULT_FRACTION_ROUNDING: Final[Rounding] = Rounding.ROUND_HALF_UP

#: Currency amounts never display more than is held.
DEFAULT_AMOUNT_ROUNDING: Final[Rounding] = Rounding.ROUND_DOWN

DEFAULT_AMOUNT_SIGNIFICANT_DIGITS: Final[int] = 6
DEFAULT_PERCENT_SIGNIFICANT_DIGITS: Final[int] = 5

#: Literal renderings of the zero-denominator sentinels (NaN, +Inf, -Inf).
NAN_LITERAL: Final[str] = "NaN"
INFINITY_LITERAL: Final[str] = "Infinity"
NEG_INFINITY_LITERAL: Final[str] = "-Infinity"
SENTINEL_LITERALS: Final[Tuple[str, ...]] = (NAN_LITERAL, INFINITY_LITERAL, NEG_INFINITY_LITERAL)

#: Valid range for a currency's decimal count: [0, MAX_CURRENCY_DECIMALS).
MAX_CURRENCY_DECIMALS: Final[int] = 255

#: Allowed power-of-ten range when parsing decimal text (exponent, and exponent plus shift).
DECIMAL_EXP_MIN: Final[int] = -1000
DECIMAL_EXP_MAX: Final[int] = 1000


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "TradeType",
    "Rounding",
    "BigintIsh",
    "MAX_SAFE_INTEGER",
    "MAX_UINT256",
    "DEFAULT_FRACTION_ROUNDING",
    "DEFAULT_AMOUNT_ROUNDING",
    "DEFAULT_AMOUNT_SIGNIFICANT_DIGITS",
    "DEFAULT_PERCENT_SIGNIFICANT_DIGITS",
    "NAN_LITERAL",
    "INFINITY_LITERAL",
    "NEG_INFINITY_LITERAL",
    "SENTINEL_LITERALS",
    "MAX_CURRENCY_DECIMALS",
    "DECIMAL_EXP_MIN",
    "DECIMAL_EXP_MAX",
]
