"""
Integer square root (floor) over arbitrary-precision ints.

Used by geometric-mean price math, where an off-by-one root moves a price.
"""

from __future__ import annotations

import math

from .constants import MAX_SAFE_INTEGER
from .exc import InvalidArgument

# Debug printing control
DEBUG_SQRT = False

def _dbg(msg: str) -> None:
    if DEBUG_SQRT:
        print(f"[sqrt] {msg}")


def floor_sqrt(value: int) -> int:
    """Return floor(sqrt(value)) for a non-negative integer.

    Small inputs go through the float square root; a single correction step
    keeps the result exact where the float rounds up near 2**53.
    Larger inputs use Newton's iteration, which decreases monotonically from
    value // 2 + 1 and stops at the floor root.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"floor_sqrt: expected int, got {type(value).__name__}")
    if value < 0:
        raise InvalidArgument(f"floor_sqrt: negative input {value}")

    if value < MAX_SAFE_INTEGER:
        r = int(math.sqrt(value))
        if r * r > value:
            r -= 1
        return r

    z = value
    x = value // 2 + 1
    steps = 0
    while x < z:
        z = x
        x = (value // x + x) // 2
        steps += 1
    _dbg(f"newton: value bits={value.bit_length()}, steps={steps}, root={z}")
    return z


__all__ = ["floor_sqrt"]
