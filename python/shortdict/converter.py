"""Integer/string conversion over a dictionary.

The dictionary length is the base. Digits are written least-significant
first, so the first character of a shortened string is the lowest digit:

    base 10, "0123456789": 120 → "021"
"""

from .dictionary import Dictionary
from .errors import InvalidDictionary, UnknownSymbol


def shorten(dictionary: Dictionary, value: int) -> str:
    """Convert a non-negative integer to a string.

    Args:
        dictionary: Dictionary supplying the digits.
        value: Integer to convert.

    Returns:
        Digits, least significant first. Zero is the first symbol.

    Raises:
        InvalidDictionary: If the dictionary has no symbols.
        TypeError: If value is not an integer.
        ValueError: If value is negative.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"Cannot shorten negative value: {value}")

    base = dictionary.base
    if base == 0:
        raise InvalidDictionary("Cannot shorten with an empty dictionary")

    if value == 0:
        return dictionary.symbols[0]

    digits = []
    while value:
        value, remainder = divmod(value, base)
        digits.append(dictionary.symbols[remainder])
    return "".join(digits)


def lengthen(dictionary: Dictionary, text: str) -> int:
    """Convert a shortened string back to an integer.

    Args:
        dictionary: Dictionary used to shorten.
        text: Digits, least significant first.

    Returns:
        Decoded integer (0 for an empty string).

    Raises:
        UnknownSymbol: If a character is not in the dictionary.
    """
    base = dictionary.base
    total = 0
    for position, char in enumerate(text):
        try:
            index = dictionary.index_of(char)
        except UnknownSymbol:
            raise UnknownSymbol(char, position) from None
        total += index * base ** position
    return total
