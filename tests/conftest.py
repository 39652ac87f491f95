from __future__ import annotations

import pytest

# Import project primitives
from tokenmath.core import NativeCurrency, Token


# -----------------------------
# Currencies (mainnet-style fixtures)
# -----------------------------

USDC_ADDRESS = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
DAI_ADDRESS = "0x6B175474E89094C44Da98b954EedeAC495271d0F"
WETH_ADDRESS = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"


@pytest.fixture()
def usdc() -> Token:
    return Token(1, USDC_ADDRESS, 6, "USDC", "USD Coin")


@pytest.fixture()
def dai() -> Token:
    return Token(1, DAI_ADDRESS, 18, "DAI", "Dai Stablecoin")


@pytest.fixture()
def weth() -> Token:
    return Token(1, WETH_ADDRESS, 18, "WETH", "Wrapped Ether")


@pytest.fixture()
def ether(weth: Token) -> NativeCurrency:
    return NativeCurrency(1, 18, weth, "ETH", "Ether")
