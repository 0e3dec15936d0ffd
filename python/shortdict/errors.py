"""Error types for shortdict.

All errors derive from ShortDictError so callers can catch the whole
family at once.
"""

from typing import Optional


class ShortDictError(Exception):
    """Base class for shortdict errors."""


class InvalidDictionary(ShortDictError, ValueError):
    """Dictionary cannot be used as a numeral system (empty or duplicated)."""


class UnknownSymbol(ShortDictError, ValueError):
    """A symbol is not present in the dictionary."""

    def __init__(self, symbol: str, position: Optional[int] = None):
        self.symbol = symbol
        self.position = position
        if position is None:
            message = f"Unknown symbol {symbol!r}"
        else:
            message = f"Unknown symbol {symbol!r} at position {position}"
        super().__init__(message)


class RearrangeAborted(ShortDictError):
    """A substitution strategy requested that rearranging stop."""

    def __init__(self, strategy: str, symbol: str):
        self.strategy = strategy
        self.symbol = symbol
        super().__init__(
            f"Rearrange aborted by strategy {strategy!r} on {symbol!r}"
        )
