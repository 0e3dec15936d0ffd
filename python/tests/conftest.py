"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from shortdict.dictionary import make_dictionary


# Alphabet as written in an escaped source literal, escape backslashes kept
# as symbols: 94 code points, "$" at index 40 and "d" at index 50
PUNCTUATED = r"""ABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890!\"£$%^&*()abcdefghijklmnopqrstuvwxyz[]{};:@'~#?/<>,.\\|`¬"""

# Same alphabet with escapes resolved: 92 unique code points
SYMBOLS_92 = "ABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890!\"£$%^&*()abcdefghijklmnopqrstuvwxyz[]{};:@'~#?/<>,.\\|`¬"

ALNUM_62 = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"


@pytest.fixture
def punctuated_dict():
    """94-symbol dictionary with punctuation and non-ASCII symbols."""
    return make_dictionary(PUNCTUATED)


@pytest.fixture
def alnum_dict():
    """62-symbol alphanumeric dictionary."""
    return make_dictionary(ALNUM_62)


@pytest.fixture
def lower_dict():
    """Lowercase letters, digits and underscore."""
    return make_dictionary("abcdefghijklmnopqrstuvwxyz0123456789_")


@pytest.fixture
def symbols_dict():
    """92-symbol dictionary with punctuation and unique symbols."""
    return make_dictionary(SYMBOLS_92)
