import pytest

from tokenmath.core.constants import Rounding
from tokenmath.core.currency_amount import CurrencyAmount
from tokenmath.core.datatypes import Currency, NativeCurrency, Token
from tokenmath.core.exc import CurrencyMismatch, InvalidArgument, ParseFailure
from tokenmath.core.fmt import NumberFormat
from tokenmath.core.fraction import Fraction
from tokenmath.core.percent import Percent


# -----------------------------
# Construction
# -----------------------------

def test_from_decimal_amount_round_trip(usdc):
    print("[amount-decimal] 1.5 USDC (6 decimals) -> raw 1500000/1, fixed '1.500000', exact '1.5'")
    a = CurrencyAmount.from_decimal_amount(usdc, "1.5")
    assert a.fraction == Fraction(1500000, 1)
    assert a.to_fixed_decimals(6) == "1.500000"
    assert a.to_exact_decimal_string() == "1.5"
    assert a.raw_amount == "1500000"


def test_from_decimal_amount_with_more_digits_than_decimals(usdc):
    print("[amount-decimal-subunit] 0.0000015 USDC keeps the sub-unit remainder exactly")
    a = CurrencyAmount.from_decimal_amount(usdc, "0.0000015")
    assert a.fraction == Fraction(15, 10)
    assert a.raw_amount == "2"
    assert a.to_exact_decimal_string() == "0.000001"


def test_from_raw_amount_integer_and_string(usdc):
    assert CurrencyAmount.from_raw_amount(usdc, 1234567).fraction == Fraction(1234567, 1)
    assert CurrencyAmount.from_raw_amount(usdc, "1234567").fraction == Fraction(1234567, 1)
    with pytest.raises(ParseFailure):
        CurrencyAmount.from_raw_amount(usdc, "1.5")


@pytest.mark.parametrize(
    "literal,pair",
    [("NaN", (0, 0)), ("Infinity", (1, 0)), ("-Infinity", (-1, 0))],
)
def test_from_raw_amount_sentinel_literals(usdc, literal, pair):
    print(f"[amount-raw-sentinel] {literal} -> {pair}, renders literally")
    a = CurrencyAmount.from_raw_amount(usdc, literal)
    assert (a.numerator, a.denominator) == pair
    assert a.to_fixed_decimals() == literal
    assert a.to_significant_digits() == literal
    assert a.to_exact_decimal_string() == literal


def test_from_fractional_amount(usdc):
    a = CurrencyAmount.from_fractional_amount(usdc, 1, 3)
    assert a.fraction == Fraction(1, 3)
    assert a.to_exact_decimal_string() == "0"


def test_decimal_scale(usdc, dai):
    assert CurrencyAmount.from_raw_amount(usdc, 1).decimal_scale == 10 ** 6
    assert CurrencyAmount.from_raw_amount(dai, 1).decimal_scale == 10 ** 18


# -----------------------------
# Arithmetic
# -----------------------------

def test_add_and_subtract_same_currency(usdc):
    print("[amount-add] 100 + 50 raw USDC -> 150; 100 - 50 -> 50")
    a = CurrencyAmount.from_raw_amount(usdc, 100)
    b = CurrencyAmount.from_raw_amount(usdc, 50)
    s = a.add(b)
    assert isinstance(s, CurrencyAmount)
    assert s.currency == usdc
    assert s.fraction == Fraction(150, 1)
    assert a.subtract(b).fraction == Fraction(50, 1)
    assert (a + b).fraction == Fraction(150, 1)


def test_add_uses_currency_equality_not_identity(usdc):
    print("[amount-add-equals] same token with lower-case address is the same currency")
    same = Token(1, usdc.address.lower(), 6)
    a = CurrencyAmount.from_raw_amount(usdc, 1)
    b = CurrencyAmount.from_raw_amount(same, 2)
    assert a.add(b).fraction == Fraction(3, 1)


def test_add_different_currency_raises(usdc, dai):
    print("[amount-add-mismatch] USDC + DAI -> CurrencyMismatch")
    a = CurrencyAmount.from_raw_amount(usdc, 1)
    b = CurrencyAmount.from_raw_amount(dai, 1)
    with pytest.raises(CurrencyMismatch):
        a.add(b)
    with pytest.raises(CurrencyMismatch):
        a.subtract(b)


def test_add_bare_fraction_raises(usdc):
    a = CurrencyAmount.from_raw_amount(usdc, 1)
    with pytest.raises(CurrencyMismatch):
        a.add(Fraction(1))


def test_reflected_operators(usdc):
    print("[amount-reflected] 2 * amount keeps currency; 1 + amount and 1 - amount -> CurrencyMismatch")
    a = CurrencyAmount.from_raw_amount(usdc, 100)
    doubled = 2 * a
    assert isinstance(doubled, CurrencyAmount)
    assert doubled.currency == usdc
    assert doubled.fraction == Fraction(200, 1)
    with pytest.raises(CurrencyMismatch):
        1 + a
    with pytest.raises(CurrencyMismatch):
        1 - a


def test_multiply_and_divide_keep_currency(usdc):
    print("[amount-mul-div] 1 USDC * 50% -> 0.5 USDC; 10 raw / 4 -> 2.5 raw")
    one = CurrencyAmount.from_raw_amount(usdc, 1000000)
    half = one.multiply(Percent.from_decimal_string("50"))
    assert isinstance(half, CurrencyAmount)
    assert half.currency == usdc
    assert half.to_exact_decimal_string() == "0.5"

    q = CurrencyAmount.from_raw_amount(usdc, 10).divide(4)
    assert q.currency == usdc
    assert q.fraction == Fraction(10, 4)
    assert q.to_exact_decimal_string() == "0.000002"
    assert q.to_fixed_decimals(6, Rounding.ROUND_HALF_UP) == "0.000003"


def test_divide_by_zero_amount_is_infinite(usdc):
    a = CurrencyAmount.from_raw_amount(usdc, 5).divide(0)
    assert a.is_infinite()
    assert a.to_significant_digits() == "Infinity"


def test_comparisons(usdc):
    a = CurrencyAmount.from_decimal_amount(usdc, "1.5")
    b = CurrencyAmount.from_decimal_amount(usdc, "1.2")
    assert a.greater_than(b)
    assert b.less_than(a)
    assert a.equal_to(CurrencyAmount.from_raw_amount(usdc, 1500000))
    assert a > b


# -----------------------------
# Rendering
# -----------------------------

def test_to_fixed_decimals_defaults(usdc):
    print("[amount-fixed] raw 1234567 USDC -> '1.234567'; 2 places rounds down -> '1.23'")
    a = CurrencyAmount.from_raw_amount(usdc, 1234567)
    assert a.to_fixed_decimals() == "1.234567"
    assert a.to_fixed_decimals(2) == "1.23"
    assert a.to_fixed_decimals(2, Rounding.ROUND_UP) == "1.24"


def test_to_fixed_decimals_above_currency_decimals_raises(usdc):
    print("[amount-fixed-too-many] 7 places on a 6-decimal token -> InvalidArgument")
    with pytest.raises(InvalidArgument):
        CurrencyAmount.from_raw_amount(usdc, 1).to_fixed_decimals(7)


def test_to_significant_digits_defaults(usdc):
    print("[amount-significant] raw 1234567 USDC -> 6 digits rounding down -> '1.23456'")
    a = CurrencyAmount.from_raw_amount(usdc, 1234567)
    assert a.to_significant_digits() == "1.23456"
    assert a.to_significant_digits(3) == "1.23"
    assert a.to_significant_digits(3, Rounding.ROUND_UP) == "1.24"


def test_to_exact_decimal_string_grouped(dai):
    a = CurrencyAmount.from_decimal_amount(dai, "1234.5678")
    assert a.to_exact_decimal_string() == "1234.5678"
    assert a.to_exact_decimal_string(NumberFormat(group_separator=",")) == "1,234.5678"


def test_to_exact_decimal_string_large_value(dai):
    a = CurrencyAmount.from_raw_amount(dai, 10 ** 30 + 1)
    assert a.to_exact_decimal_string() == "1000000000000.000000000000000001"


def test_limit_decimals(usdc):
    print("[amount-limit] 1.234567 USDC limited to 2 decimals -> raw 1230000")
    a = CurrencyAmount.from_decimal_amount(usdc, "1.234567")
    limited = a.limit_decimals(2)
    assert isinstance(limited, CurrencyAmount)
    assert limited.fraction == Fraction(1230000, 1)
    assert a.limit_decimals(2, Rounding.ROUND_UP).fraction == Fraction(1240000, 1)
    assert a.limit_decimals().fraction == Fraction(1234567, 1)


# -----------------------------
# Wrapped currency
# -----------------------------

def test_wrapped_native_amount(ether, weth):
    print("[amount-wrapped] 1 ETH -> 1 WETH, token amount wraps to itself")
    eth_amount = CurrencyAmount.from_decimal_amount(ether, "1")
    w = eth_amount.wrapped
    assert w.currency == weth
    assert w.fraction == eth_amount.fraction

    weth_amount = CurrencyAmount.from_raw_amount(weth, 42)
    assert weth_amount.wrapped is weth_amount


def test_native_and_wrapped_do_not_add(ether, weth):
    with pytest.raises(CurrencyMismatch):
        CurrencyAmount.from_raw_amount(ether, 1).add(CurrencyAmount.from_raw_amount(weth, 1))


# -----------------------------
# Currency datatypes
# -----------------------------

@pytest.mark.parametrize("bad", [-1, 255, 1.5, True])
def test_token_rejects_bad_decimals(bad):
    print(f"[token-decimals] decimals={bad!r} -> InvalidArgument")
    with pytest.raises(InvalidArgument):
        Token(1, "0x0000000000000000000000000000000000000001", bad)


def test_token_and_native_equality(usdc, ether, weth):
    assert usdc.equals(Token(1, usdc.address.upper().replace("0X", "0x"), 6))
    assert not usdc.equals(Token(5, usdc.address, 6))
    assert not usdc.equals(ether)
    assert ether.equals(NativeCurrency(1, 18, weth))
    assert not ether.equals(weth)
    assert not ether.equals(NativeCurrency(10, 18, Token(10, weth.address, 18)))


def test_native_wrapped_token_decimals_must_match(weth):
    with pytest.raises(InvalidArgument):
        NativeCurrency(1, 6, weth)


def test_currencies_satisfy_protocol(usdc, ether):
    assert isinstance(usdc, Currency)
    assert isinstance(ether, Currency)
