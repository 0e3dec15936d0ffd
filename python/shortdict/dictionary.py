"""Dictionary value type for shortdict.

A dictionary is an ordered sequence of symbols used as the digits of a
positional numeral system. Its length is the base.

Example:
    make_dictionary("0123456789abcdef")  → base 16
    Dictionary.symbols[0] is the zero digit

Dictionaries are immutable; rearranging builds a new one.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional
import json

from .errors import InvalidDictionary, UnknownSymbol


@dataclass(frozen=True)
class Dictionary:
    """An ordered, immutable alphabet."""

    symbols: str                            # Digit symbols, index = digit value
    name: Optional[str] = field(default=None, compare=False)  # e.g., "alnum"
    base: int = field(init=False, compare=False)

    def __post_init__(self):
        """Cache the base."""
        object.__setattr__(self, "base", len(self.symbols))

    def __str__(self) -> str:
        return self.symbols

    def __len__(self) -> int:
        return self.base

    def __iter__(self) -> Iterator[str]:
        return iter(self.symbols)

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and len(symbol) == 1 and symbol in self.symbols

    def index_of(self, symbol: str) -> int:
        """Get the digit value of a symbol.

        Duplicated symbols resolve to their first occurrence.

        Args:
            symbol: Single character.

        Returns:
            Index of the first occurrence.

        Raises:
            UnknownSymbol: If the symbol is not in the dictionary.
        """
        if symbol not in self:
            raise UnknownSymbol(symbol)
        return self.symbols.index(symbol)

    def duplicates(self) -> list[str]:
        """Get symbols that occur more than once, in first-seen order."""
        seen: set[str] = set()
        repeated: list[str] = []
        for symbol in self.symbols:
            if symbol in seen and symbol not in repeated:
                repeated.append(symbol)
            seen.add(symbol)
        return repeated

    def is_unique(self) -> bool:
        """Check that every symbol occurs once."""
        return len(set(self.symbols)) == self.base

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "symbols": self.symbols,
            "base": self.base,
            "generated_at": datetime.now(timezone.utc).isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Dictionary":
        """Create from dictionary.

        Raises:
            InvalidDictionary: If "symbols" is missing or not a string.
        """
        symbols = data.get("symbols") if isinstance(data, dict) else None
        if not isinstance(symbols, str):
            raise InvalidDictionary(
                f"Dictionary data needs a \"symbols\" string, got {symbols!r}"
            )
        return cls(symbols=symbols, name=data.get("name"))

    def save(self, filepath: Path) -> None:
        """Save dictionary to JSON file."""
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    @classmethod
    def load(cls, filepath: Path) -> "Dictionary":
        """Load dictionary from JSON file."""
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)
        return cls.from_dict(data)


def make_dictionary(
    symbols: str | Iterable[str],
    name: Optional[str] = None,
    strict: bool = False,
) -> Dictionary:
    """Construct a dictionary from an alphabet.

    Symbols are code points, so non-ASCII alphabets work as expected.
    Without strict checking nothing is validated: an empty dictionary
    fails later in shorten(), and duplicated symbols decode to their
    first occurrence.

    Args:
        symbols: Alphabet string, or an iterable of single characters.
        name: Optional label carried into saved files.
        strict: Reject empty alphabets and duplicated symbols.

    Returns:
        New Dictionary.

    Raises:
        InvalidDictionary: If an iterable item is not a single character,
            or in strict mode, if the alphabet is unusable.
    """
    if not isinstance(symbols, str):
        items = list(symbols)
        for item in items:
            if not isinstance(item, str) or len(item) != 1:
                raise InvalidDictionary(f"Symbols must be single characters, got {item!r}")
        symbols = "".join(items)

    dictionary = Dictionary(symbols=symbols, name=name)

    if strict:
        if dictionary.base == 0:
            raise InvalidDictionary("Dictionary has no symbols")
        if not dictionary.is_unique():
            raise InvalidDictionary(
                f"Dictionary has duplicate symbols: {''.join(dictionary.duplicates())!r}"
            )

    return dictionary
