"""
Currency datatypes used by CurrencyAmount.

CurrencyAmount only needs three things from a currency: its decimal count,
an equality predicate, and its canonical (wrapped) form. `Currency` states
that contract; `Token` and `NativeCurrency` are minimal immutable
implementations of it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable

from .constants import MAX_CURRENCY_DECIMALS
from .exc import InvalidArgument


def _check_decimals(decimals) -> None:
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise InvalidArgument(f"currency decimals must be an int, got {decimals!r}")
    if not 0 <= decimals < MAX_CURRENCY_DECIMALS:
        raise InvalidArgument(f"currency decimals out of range [0, {MAX_CURRENCY_DECIMALS}): {decimals}")


@runtime_checkable
class Currency(Protocol):
    """Anything CurrencyAmount can be denominated in."""

    decimals: int

    def equals(self, other: "Currency") -> bool:
        ...

    @property
    def wrapped(self) -> "Currency":
        ...


# ---------------------------------------------------------------------------
# Token
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Token:
    """Contract-issued asset.

    Fields:
    - chain_id: chain the contract lives on.
    - address: contract address; compared case-insensitively by `equals`.
    - decimals: number of decimal places in one whole unit.
    - symbol / name: display only, ignored by `equals`.
    """

    chain_id: int
    address: str
    decimals: int
    symbol: Optional[str] = None
    name: Optional[str] = None

    is_native = False
    is_token = True

    def __post_init__(self):
        _check_decimals(self.decimals)

    def equals(self, other: Currency) -> bool:
        return (
            getattr(other, "is_token", False)
            and self.chain_id == other.chain_id
            and self.address.lower() == other.address.lower()
        )

    @property
    def wrapped(self) -> "Token":
        return self


# ---------------------------------------------------------------------------
# Native currency
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class NativeCurrency:
    """Chain-native asset, represented on-chain by `wrapped_token`."""

    chain_id: int
    decimals: int
    wrapped_token: Token
    symbol: Optional[str] = None
    name: Optional[str] = None

    is_native = True
    is_token = False

    def __post_init__(self):
        _check_decimals(self.decimals)
        if self.wrapped_token.decimals != self.decimals:
            raise InvalidArgument(
                f"wrapped token decimals {self.wrapped_token.decimals} != native decimals {self.decimals}"
            )

    def equals(self, other: Currency) -> bool:
        return getattr(other, "is_native", False) and self.chain_id == other.chain_id

    @property
    def wrapped(self) -> Token:
        return self.wrapped_token


__all__ = [
    "Currency",
    "Token",
    "NativeCurrency",
]
