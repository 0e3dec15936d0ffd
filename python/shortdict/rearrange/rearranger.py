"""Rearrange a dictionary so its leading symbols spell a phrase.

Each phrase character is taken from the dictionary directly when still
available, otherwise from the first strategy that proposes an available
replacement. Characters nothing can place are skipped.

Example:
    dictionary "abcdefghijklmnopqrstuvwxyz0123456789_"
    phrase "hello world", strategies [CaseFlip(), LeetSubstitution()]
    → "hel1o_w0rdabcfgijkmnpqstuvxyz23456789"

The result is always a permutation of the input symbols. A strategy that
returns FAIL leaves the input dictionary untouched.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

from ..dictionary import Dictionary
from ..errors import RearrangeAborted
from .strategies import (
    Rearranger,
    SubstituteFunc,
    SubstitutionStatus,
    as_rearranger,
)


class RearrangeStatus(Enum):
    """Overall outcome of a rearrangement."""

    OK = "ok"
    ABORTED = "aborted"


@dataclass
class RearrangeResult:
    """Result of rearranging a dictionary."""

    dictionary: Dictionary
    status: RearrangeStatus = RearrangeStatus.OK
    skipped: list[str] = field(default_factory=list)   # Phrase chars not placed
    aborted_by: Optional[str] = None                    # Strategy name on abort
    aborted_on: Optional[str] = None                    # Phrase char on abort

    @property
    def ok(self) -> bool:
        return self.status is RearrangeStatus.OK

    def raise_for_status(self) -> None:
        """Raise RearrangeAborted if a strategy aborted."""
        if not self.ok:
            raise RearrangeAborted(self.aborted_by or "unknown", self.aborted_on or "")

    def __repr__(self) -> str:
        return (
            f"RearrangeResult({self.status.value}: "
            f"{self.dictionary.symbols!r}, {len(self.skipped)} skipped)"
        )


class _Abort(Exception):
    """Internal signal carrying the aborting strategy."""

    def __init__(self, strategy: Rearranger, char: str):
        self.strategy = strategy
        self.char = char


def _find_replacement(
    strategies: list[Rearranger],
    char: str,
    available: list[str],
) -> Optional[str]:
    """Ask each strategy in turn for an available replacement."""
    for strategy in strategies:
        attempt = 0
        while True:
            proposal = strategy.substitute(char, attempt)
            if proposal.status is SubstitutionStatus.FAIL:
                raise _Abort(strategy, char)
            if not proposal.has_replacement:
                break
            if proposal.replacement in available:
                return proposal.replacement
            if proposal.status is SubstitutionStatus.EXHAUSTED:
                break
            attempt += 1
    return None


def rearrange(
    dictionary: Dictionary,
    phrase: str,
    strategies: Iterable["Rearranger | SubstituteFunc | str"] = (),
) -> RearrangeResult:
    """Build a dictionary whose prefix spells phrase as closely as possible.

    Args:
        dictionary: Source dictionary (not modified).
        phrase: Target phrase.
        strategies: Ordered fallbacks: Rearranger instances, functions
            (char, attempt) -> Substitution, or registered names.

    Returns:
        RearrangeResult. On abort its dictionary is the input dictionary.
    """
    chain = [as_rearranger(s) for s in strategies]

    prefix: list[str] = []
    remainder = list(dictionary.symbols)
    skipped: list[str] = []

    for char in phrase:
        if char in remainder:
            chosen: Optional[str] = char
        else:
            try:
                chosen = _find_replacement(chain, char, remainder)
            except _Abort as abort:
                return RearrangeResult(
                    dictionary=dictionary,
                    status=RearrangeStatus.ABORTED,
                    aborted_by=abort.strategy.name,
                    aborted_on=abort.char,
                )

        if chosen is None:
            skipped.append(char)
            continue

        prefix.append(chosen)
        remainder.remove(chosen)

    return RearrangeResult(
        dictionary=Dictionary(
            symbols="".join(prefix) + "".join(remainder),
            name=dictionary.name,
        ),
        skipped=skipped,
    )
