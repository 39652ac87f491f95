"""
Formatting and parsing helpers (I/O boundary).

Core arithmetic stays on integer pairs. This module turns a
numerator/denominator pair into text and decimal text back into a pair:

- Significant-digit rendering uses `decimal` under a local context
  (never the global one), so concurrent callers may use different precisions.
- Fixed-decimal and exact rendering are computed in the integer domain
  without Decimal round-trips.
- Zero-denominator pairs render as the literals "NaN", "Infinity", "-Infinity".
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import (
    Decimal,
    MAX_EMAX,
    MIN_EMIN,
    ROUND_DOWN,
    ROUND_HALF_UP,
    ROUND_UP,
    localcontext,
)
from typing import Tuple, Union

from .constants import (
    DECIMAL_EXP_MAX,
    DECIMAL_EXP_MIN,
    INFINITY_LITERAL,
    NAN_LITERAL,
    NEG_INFINITY_LITERAL,
    Rounding,
)
from .exc import InvalidArgument, ParseFailure

# Debug printing control (formatting layer)
DEBUG_FMT = False

def _dbg(msg: str) -> None:
    if DEBUG_FMT:
        print(f"[fmt] {msg}")


# ---------------------------------------------------------------------------
# Output format
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class NumberFormat:
    """How the integer and fractional parts of a rendered number are laid out.

    Fields:
    - group_separator: inserted between digit groups of the integer part ("" disables grouping).
    - group_size: digits per group, counted from the decimal point.
    - decimal_separator: placed between integer and fractional digits.
    """

    group_separator: str = ""
    group_size: int = 3
    decimal_separator: str = "."

    def __post_init__(self):
        if isinstance(self.group_size, bool) or not isinstance(self.group_size, int) or self.group_size <= 0:
            raise InvalidArgument(f"NumberFormat.group_size must be a positive int, got {self.group_size!r}")


#: Plain rendering: no grouping, "." as decimal point.
DEFAULT_FORMAT = NumberFormat()

_DECIMAL_ROUNDING = {
    Rounding.ROUND_DOWN: ROUND_DOWN,
    Rounding.ROUND_HALF_UP: ROUND_HALF_UP,
    Rounding.ROUND_UP: ROUND_UP,
}

DecimalText = Union[str, int, Decimal]


# ---------------------------------------------------------------------------
# Argument checks
# ---------------------------------------------------------------------------

def _is_int(x) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def _require_rounding(rounding) -> Rounding:
    if not isinstance(rounding, Rounding):
        raise InvalidArgument(f"unsupported rounding mode: {rounding!r}")
    return rounding


# ---------------------------------------------------------------------------
# Integer rounding helpers (centralised)
# ---------------------------------------------------------------------------

def div_round(n: int, d: int, rounding: Rounding) -> int:
    """Divide two signed ints, rounding the quotient per `rounding`.

    ROUND_DOWN truncates toward zero, ROUND_UP moves away from zero and
    ROUND_HALF_UP picks the nearest integer with ties away from zero.
    """
    if d == 0:
        raise ZeroDivisionError("div_round: division by zero")
    _require_rounding(rounding)
    if d < 0:
        n, d = -n, -d
    q, r = divmod(abs(n), d)
    if r:
        if rounding is Rounding.ROUND_UP:
            q += 1
        elif rounding is Rounding.ROUND_HALF_UP and 2 * r >= d:
            q += 1
    return -q if n < 0 else q


def sentinel_literal(numerator: int) -> str:
    """Literal for a zero-denominator pair with the given numerator."""
    if numerator > 0:
        return INFINITY_LITERAL
    if numerator < 0:
        return NEG_INFINITY_LITERAL
    return NAN_LITERAL


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

def _group(int_digits: str, fmt: NumberFormat) -> str:
    if not fmt.group_separator or len(int_digits) <= fmt.group_size:
        return int_digits
    head = len(int_digits) % fmt.group_size
    groups = [int_digits[:head]] if head else []
    groups.extend(int_digits[i:i + fmt.group_size] for i in range(head, len(int_digits), fmt.group_size))
    return fmt.group_separator.join(groups)


def _layout(negative: bool, int_digits: str, frac_digits: str, fmt: NumberFormat) -> str:
    out = _group(int_digits, fmt)
    if frac_digits:
        out = f"{out}{fmt.decimal_separator}{frac_digits}"
    return f"-{out}" if negative else out


def _split_scaled(magnitude: int, places: int) -> Tuple[str, str]:
    """Split |value| * 10**places (as an int) into integer and fractional digit strings."""
    digits = str(magnitude).rjust(places + 1, "0")
    if places == 0:
        return digits, ""
    return digits[:-places], digits[-places:]


# ---------------------------------------------------------------------------
# Renderers
# ---------------------------------------------------------------------------

def format_significant(
    numerator: int,
    denominator: int,
    significant_digits: int,
    rounding: Rounding = Rounding.ROUND_HALF_UP,
    fmt: NumberFormat = DEFAULT_FORMAT,
) -> str:
    """Render numerator/denominator to `significant_digits` significant digits.

    The quotient is first taken at significant_digits + 1 digits of precision
    and then rounded to significant_digits, both under `rounding`. Output is in
    plain notation without trailing fractional zeros:
      (1, 3), 4      -> '0.3333'
      (123456, 1), 2 -> '120000'
      (1, 2), 5      -> '0.5'
    """
    if not _is_int(significant_digits):
        raise InvalidArgument(f"{significant_digits!r} is not an integer.")
    if significant_digits <= 0:
        raise InvalidArgument(f"{significant_digits} is not positive.")
    mode = _DECIMAL_ROUNDING[_require_rounding(rounding)]

    if denominator == 0:
        return sentinel_literal(numerator)

    with localcontext() as ctx:
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        ctx.rounding = mode
        ctx.prec = significant_digits + 1
        q = Decimal(numerator) / Decimal(denominator)
        _dbg(f"significant: {numerator}/{denominator} @prec={ctx.prec} -> {q}")
        ctx.prec = significant_digits
        q = ctx.plus(q).normalize(ctx)
        text = format(q, "f")

    negative = text.startswith("-")
    int_digits, _, frac_digits = text.lstrip("-").partition(".")
    return _layout(negative, int_digits, frac_digits, fmt)


def format_fixed(
    numerator: int,
    denominator: int,
    places: int,
    rounding: Rounding = Rounding.ROUND_HALF_UP,
    fmt: NumberFormat = DEFAULT_FORMAT,
) -> str:
    """Render numerator/denominator with exactly `places` fractional digits.

    Rounding happens once, in the integer domain. A negative value that
    rounds to zero keeps its sign ('-0.00').
    """
    if not _is_int(places):
        raise InvalidArgument(f"{places!r} is not an integer.")
    if places < 0:
        raise InvalidArgument(f"{places} is negative.")
    _require_rounding(rounding)

    if denominator == 0:
        return sentinel_literal(numerator)

    scaled = div_round(numerator * 10 ** places, denominator, rounding)
    negative = numerator != 0 and ((numerator < 0) != (denominator < 0))
    _dbg(f"fixed: {numerator}/{denominator} @places={places} -> scaled={scaled}")
    int_digits, frac_digits = _split_scaled(abs(scaled), places)
    return _layout(negative, int_digits, frac_digits, fmt)


def format_exact(integer: int, places: int, fmt: NumberFormat = DEFAULT_FORMAT) -> str:
    """Render integer / 10**places exactly, dropping trailing fractional zeros.

      (1500000, 6) -> '1.5'
      (7, 0)       -> '7'
    """
    if not _is_int(places) or places < 0:
        raise InvalidArgument(f"format_exact: places must be a non-negative int, got {places!r}")
    int_digits, frac_digits = _split_scaled(abs(integer), places)
    return _layout(integer < 0, int_digits, frac_digits.rstrip("0"), fmt)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

_DECIMAL_RE = re.compile(r"^([+-])?(\d*)(?:\.(\d*))?(?:[eE]([+-]?\d+))?$")


def parse_decimal(text: DecimalText, shift: int = 0) -> Tuple[int, int]:
    """Parse base-10 decimal text into an exact (numerator, denominator) pair.

    The denominator is 10**k, k being the fractional digit count after the
    exponent and `shift` are applied (shift=2 multiplies by 100). The result
    is not reduced: '1.50' -> (150, 100). The sentinel literals map to
    (0, 0), (1, 0) and (-1, 0).
    An exponent, or exponent plus shift, outside
    [DECIMAL_EXP_MIN, DECIMAL_EXP_MAX] raises ParseFailure.
    """
    if not _is_int(shift):
        raise InvalidArgument(f"parse_decimal: shift must be an int, got {shift!r}")
    if isinstance(text, bool) or not isinstance(text, (str, int, Decimal)):
        raise ParseFailure(f"parse_decimal: cannot parse {type(text).__name__}")

    s = str(text).strip()
    if s == NAN_LITERAL:
        return 0, 0
    if s == INFINITY_LITERAL:
        return 1, 0
    if s == NEG_INFINITY_LITERAL:
        return -1, 0

    m = _DECIMAL_RE.match(s)
    if m is None:
        raise ParseFailure(f"parse_decimal: malformed decimal {text!r}")
    sign, int_digits, frac_digits, exp = m.groups()
    int_digits = int_digits or ""
    frac_digits = frac_digits or ""
    if not int_digits and not frac_digits:
        raise ParseFailure(f"parse_decimal: no digits in {text!r}")

    try:
        exponent = int(exp or 0)
        digits = int(int_digits + frac_digits)
    except ValueError as e:
        # int() refuses digit strings past sys.get_int_max_str_digits()
        raise ParseFailure(f"parse_decimal: too many digits in {text!r}") from e
    if not DECIMAL_EXP_MIN <= exponent <= DECIMAL_EXP_MAX:
        raise ParseFailure(f"parse_decimal: exponent out of range [{DECIMAL_EXP_MIN}, {DECIMAL_EXP_MAX}]: {text!r}")
    if not DECIMAL_EXP_MIN <= exponent + shift <= DECIMAL_EXP_MAX:
        raise ParseFailure(f"parse_decimal: exponent {exponent} with shift {shift} out of range")

    if sign == "-":
        digits = -digits
    scale = len(frac_digits) - exponent - shift
    if scale <= 0:
        return digits * 10 ** (-scale), 1
    return digits, 10 ** scale


def _parse_finite(text: DecimalText, shift: int, caller: str) -> Tuple[int, int]:
    num, den = parse_decimal(text, shift)
    if den == 0:
        raise ParseFailure(f"{caller}: non-finite input {text!r}")
    return num, den


# ---------------------------------------------------------------------------
# Raw-unit conversions
# ---------------------------------------------------------------------------

def integer_to_decimal(integer: DecimalText, unit: int) -> str:
    """Raw smallest-unit quantity -> human decimal text.

    The input is truncated toward zero first, then shifted left by `unit`:
      ('1500000', 6) -> '1.5'
      ('12.9', 1)    -> '1.2'
    """
    if not _is_int(unit) or unit < 0:
        raise InvalidArgument(f"integer_to_decimal: unit must be a non-negative int, got {unit!r}")
    num, den = _parse_finite(integer, 0, "integer_to_decimal")
    return format_exact(div_round(num, den, Rounding.ROUND_DOWN), unit)


def decimal_to_integer(decimal: DecimalText, unit: int) -> str:
    """Human decimal text -> raw smallest-unit integer text, truncated toward zero.

      ('1.5', 6)       -> '1500000'
      ('0.0000001', 6) -> '0'
    """
    if not _is_int(unit) or unit < 0:
        raise InvalidArgument(f"decimal_to_integer: unit must be a non-negative int, got {unit!r}")
    num, den = _parse_finite(decimal, unit, "decimal_to_integer")
    return str(div_round(num, den, Rounding.ROUND_DOWN))


__all__ = [
    "NumberFormat",
    "DEFAULT_FORMAT",
    "div_round",
    "sentinel_literal",
    "format_significant",
    "format_fixed",
    "format_exact",
    "parse_decimal",
    "integer_to_decimal",
    "decimal_to_integer",
]
