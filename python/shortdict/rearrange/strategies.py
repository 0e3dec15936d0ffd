"""Pluggable substitution strategies for rearranging dictionaries.

When a phrase character is missing from a dictionary, a strategy proposes
replacements for it, one per attempt:

    LeetSubstitution: "e" → "Σ", then "£", then "3"
    CaseFlip:         "e" → "E"

Each proposal is a Substitution tagged with a SubstitutionStatus telling
the rearranger whether to ask again, move to the next strategy, or stop.

Usage:
    from shortdict.rearrange import get_rearranger, register_rearranger

    leet = get_rearranger("leet")
    leet.substitute("e", 0)   # Substitution("Σ", MORE_AVAILABLE)

    # Register custom strategy
    register_rearranger("custom", MyRearrangerClass)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, Optional


class SubstitutionStatus(Enum):
    """Outcome of a single substitution attempt."""

    MORE_AVAILABLE = "more_available"   # Replacement given, ask again with attempt + 1
    EXHAUSTED = "exhausted"             # Replacement given, it is the last one
    NOT_APPLICABLE = "not_applicable"   # Character not handled by this strategy
    FAIL = "fail"                       # Abort the whole rearrangement


@dataclass(frozen=True)
class Substitution:
    """A proposed replacement character and its status."""

    replacement: Optional[str]
    status: SubstitutionStatus

    @classmethod
    def more(cls, replacement: str) -> "Substitution":
        return cls(replacement, SubstitutionStatus.MORE_AVAILABLE)

    @classmethod
    def exhausted(cls, replacement: str) -> "Substitution":
        return cls(replacement, SubstitutionStatus.EXHAUSTED)

    @classmethod
    def not_applicable(cls) -> "Substitution":
        return cls(None, SubstitutionStatus.NOT_APPLICABLE)

    @classmethod
    def fail(cls) -> "Substitution":
        return cls(None, SubstitutionStatus.FAIL)

    @property
    def has_replacement(self) -> bool:
        """Check if this attempt produced a replacement."""
        return self.status in (
            SubstitutionStatus.MORE_AVAILABLE,
            SubstitutionStatus.EXHAUSTED,
        )


SubstituteFunc = Callable[[str, int], Substitution]


class Rearranger(ABC):
    """Base class for substitution strategies."""

    name: str = "base"

    @abstractmethod
    def substitute(self, char: str, attempt: int) -> Substitution:
        """Propose a replacement for a character.

        Args:
            char: Phrase character missing from the dictionary.
            attempt: Zero-based attempt number for this character.

        Returns:
            Substitution for this attempt.
        """
        pass

    def __call__(self, char: str, attempt: int) -> Substitution:
        return self.substitute(char, attempt)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


# =============================================================================
# Built-in Strategies
# =============================================================================

class CaseFlip(Rearranger):
    """Swaps letter case: "a" → "A", "A" → "a".

    Offers a single replacement. Characters without case are not handled.
    """

    name = "case"

    def substitute(self, char: str, attempt: int) -> Substitution:
        if not char.isalpha():
            return Substitution.not_applicable()

        if char.isupper():
            flipped = char.lower()
        elif char.islower():
            flipped = char.upper()
        else:
            return Substitution.not_applicable()

        # Multi-character results (e.g. "ß" → "SS") are not symbols
        if flipped == char or len(flipped) != 1:
            return Substitution.not_applicable()

        return Substitution.exhausted(flipped)


LEET_MAP: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "a": ("4", "@"),
    "b": ("8",),
    "c": ("(",),
    "e": ("Σ", "£", "3"),
    "g": ("9",),
    "i": ("1", "!", "|"),
    "l": ("1", "|"),
    "o": ("0", "ϴ"),
    "s": ("5",),
    "t": ("7",),
    " ": ("_", "-", ".", ",", "=", "+"),
})


class LeetSubstitution(Rearranger):
    """Replaces characters with look-alikes: "e" → "Σ", "£", "3".

    Alternatives are offered in order, one per attempt.
    """

    name = "leet"

    def __init__(self, mapping: Optional[Mapping[str, tuple[str, ...]]] = None):
        """Initialize strategy.

        Args:
            mapping: Character → ordered alternatives (default: LEET_MAP).
        """
        if mapping is None:
            self.mapping = LEET_MAP
        else:
            self.mapping = MappingProxyType(
                {char: tuple(alts) for char, alts in mapping.items()}
            )

    def substitute(self, char: str, attempt: int) -> Substitution:
        alternatives = self.mapping.get(char)
        if not alternatives or attempt >= len(alternatives):
            return Substitution.not_applicable()

        replacement = alternatives[attempt]
        if attempt == len(alternatives) - 1:
            return Substitution.exhausted(replacement)
        return Substitution.more(replacement)


class Abort(Rearranger):
    """Stops rearranging as soon as any character needs substituting.

    Placed last, it turns "skip unplaceable characters" into
    "leave the dictionary untouched".
    """

    name = "fail"

    def substitute(self, char: str, attempt: int) -> Substitution:
        return Substitution.fail()


class FunctionRearranger(Rearranger):
    """Adapts a plain (char, attempt) -> Substitution function."""

    def __init__(self, func: SubstituteFunc, name: Optional[str] = None):
        self.func = func
        self.name = name or getattr(func, "__name__", "function")

    def substitute(self, char: str, attempt: int) -> Substitution:
        return self.func(char, attempt)


# =============================================================================
# Registry Functions
# =============================================================================

_REARRANGERS: dict[str, type[Rearranger]] = {}


def _init_registry():
    """Initialize the registry with built-in strategies."""
    global _REARRANGERS
    _REARRANGERS = {
        "case": CaseFlip,
        "leet": LeetSubstitution,
        "fail": Abort,
    }


_init_registry()


def get_rearranger(name: str) -> Rearranger:
    """Get a new strategy instance by name.

    Args:
        name: Registered strategy name.

    Returns:
        Rearranger instance.
    """
    if name not in _REARRANGERS:
        raise ValueError(
            f"Unknown rearranger: {name}. "
            f"Available: {list(_REARRANGERS.keys())}"
        )
    return _REARRANGERS[name]()


def register_rearranger(name: str, cls: type[Rearranger]) -> None:
    """Register a custom strategy.

    Args:
        name: Name to register under.
        cls: Rearranger class, constructible without arguments.
    """
    _REARRANGERS[name] = cls


def list_rearrangers() -> list[str]:
    """List available strategy names."""
    return list(_REARRANGERS.keys())


def as_rearranger(strategy: "Rearranger | SubstituteFunc | str") -> Rearranger:
    """Coerce a strategy instance, function, or registered name."""
    if isinstance(strategy, Rearranger):
        return strategy
    if isinstance(strategy, str):
        return get_rearranger(strategy)
    if callable(strategy):
        return FunctionRearranger(strategy)
    raise TypeError(f"Not a rearranger: {strategy!r}")
