"""Dictionary rearrangement module.

Reorders a dictionary so that reading it left to right spells a phrase,
using pluggable substitution strategies for missing characters:
- CaseFlip: swap letter case
- LeetSubstitution: look-alike characters (e → 3, space → _)
- Abort: give up and keep the original dictionary

Usage:
    from shortdict.rearrange import rearrange, CaseFlip, LeetSubstitution

    result = rearrange(dictionary, "Lorem ipsum", [CaseFlip(), LeetSubstitution()])
    if result.ok:
        print(result.dictionary)
"""

from .strategies import (
    Substitution,
    SubstitutionStatus,
    Rearranger,
    CaseFlip,
    LeetSubstitution,
    Abort,
    FunctionRearranger,
    LEET_MAP,
    get_rearranger,
    register_rearranger,
    list_rearrangers,
    as_rearranger,
)
from .rearranger import RearrangeResult, RearrangeStatus, rearrange

__all__ = [
    "Substitution",
    "SubstitutionStatus",
    "Rearranger",
    "CaseFlip",
    "LeetSubstitution",
    "Abort",
    "FunctionRearranger",
    "LEET_MAP",
    "get_rearranger",
    "register_rearranger",
    "list_rearrangers",
    "as_rearranger",
    "RearrangeResult",
    "RearrangeStatus",
    "rearrange",
]
