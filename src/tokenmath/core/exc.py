"""
Core exception types for tokenmath.core.

These are dependency-free and may be imported by all core modules.
Sentinel results (NaN, +/-Infinity) are values, not errors, and never raise.
"""

__all__ = [
    "InvalidArgument",
    "CurrencyMismatch",
    "ParseFailure",
]


class InvalidArgument(Exception):
    """Raised when a parameter is not an integer or lies outside its allowed range."""
    pass


class CurrencyMismatch(Exception):
    """Raised when two amounts of different currencies are added or subtracted.

    Attributes
    ----------
    left : Any
        Currency of the left-hand amount.
    right : Any
        Currency (or operand) on the right-hand side.
    """

    def __init__(self, left, right):
        super().__init__(f"currency mismatch: {left!r} vs {right!r}")
        self.left = left
        self.right = right


class ParseFailure(Exception):
    """Raised when text or an operand cannot be read as a number."""
    pass
