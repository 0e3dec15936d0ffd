"""Tests for the converter module."""

import pytest

from shortdict.converter import shorten, lengthen
from shortdict.dictionary import make_dictionary
from shortdict.errors import InvalidDictionary, UnknownSymbol


class TestShorten:
    """Tests for shorten function."""

    def test_known_value(self, punctuated_dict):
        """Test the documented punctuated example."""
        assert punctuated_dict.base == 94
        assert shorten(punctuated_dict, 14794393443) == "2dD)BC"

    def test_zero_is_first_symbol(self, alnum_dict, punctuated_dict):
        """Test zero maps to the first symbol."""
        assert shorten(alnum_dict, 0) == "A"
        assert shorten(punctuated_dict, 0) == "A"
        assert shorten(make_dictionary("£x"), 0) == "£"

    def test_least_significant_first(self):
        """Test digits are written lowest first."""
        decimal = make_dictionary("0123456789")
        assert shorten(decimal, 120) == "021"
        assert shorten(decimal, 7) == "7"

    def test_binary(self):
        """Test base 2."""
        binary = make_dictionary("01")
        assert shorten(binary, 6) == "011"

    def test_single_symbol_base(self):
        """Test base 1 of zero."""
        assert shorten(make_dictionary("x"), 0) == "x"

    def test_large_value(self, alnum_dict):
        """Test values beyond 64 bits."""
        value = 2 ** 200 + 12345
        assert lengthen(alnum_dict, shorten(alnum_dict, value)) == value

    def test_empty_dictionary(self):
        """Test empty dictionary raises InvalidDictionary."""
        with pytest.raises(InvalidDictionary):
            shorten(make_dictionary(""), 5)
        with pytest.raises(InvalidDictionary):
            shorten(make_dictionary(""), 0)

    def test_negative_value(self, alnum_dict):
        """Test negative values are rejected."""
        with pytest.raises(ValueError):
            shorten(alnum_dict, -1)

    def test_non_integer(self, alnum_dict):
        """Test non-integers are rejected."""
        with pytest.raises(TypeError):
            shorten(alnum_dict, 1.5)
        with pytest.raises(TypeError):
            shorten(alnum_dict, True)

    def test_deterministic(self, punctuated_dict):
        """Test repeated calls agree."""
        assert shorten(punctuated_dict, 987654321) == shorten(punctuated_dict, 987654321)


class TestLengthen:
    """Tests for lengthen function."""

    def test_known_value(self, punctuated_dict):
        """Test the documented punctuated example."""
        assert lengthen(punctuated_dict, "2dD)BC") == 14794393443

    def test_least_significant_first(self):
        """Test first character is the lowest digit."""
        decimal = make_dictionary("0123456789")
        assert lengthen(decimal, "021") == 120

    def test_empty_string(self, alnum_dict):
        """Test empty string is zero."""
        assert lengthen(alnum_dict, "") == 0

    def test_unknown_symbol(self, alnum_dict):
        """Test unknown symbol raises with its position."""
        with pytest.raises(UnknownSymbol) as exc_info:
            lengthen(alnum_dict, "AB-C")
        assert exc_info.value.symbol == "-"
        assert exc_info.value.position == 2
        assert "position 2" in str(exc_info.value)

    def test_unknown_first_symbol_position(self, alnum_dict):
        """Test position is reported for the first character."""
        with pytest.raises(UnknownSymbol) as exc_info:
            lengthen(alnum_dict, "£A")
        assert exc_info.value.position == 0
        assert exc_info.value.__cause__ is None

    def test_unknown_symbol_is_value_error(self, alnum_dict):
        """Test UnknownSymbol can be caught as ValueError."""
        with pytest.raises(ValueError):
            lengthen(alnum_dict, "£")

    def test_duplicate_symbols_use_first_index(self):
        """Test duplicated symbols decode to their first occurrence."""
        d = make_dictionary("abca")
        assert shorten(d, 3) == "a"
        assert lengthen(d, "a") == 0


class TestRoundTrip:
    """Tests for shorten/lengthen inverse property."""

    def test_alnum_first_500(self, alnum_dict):
        """Test 0..499 over 62 alphanumerics."""
        for i in range(500):
            assert lengthen(alnum_dict, shorten(alnum_dict, i)) == i

    def test_sixty_symbols(self):
        """Test 0..499 over a shuffled 60-symbol alphabet."""
        d = make_dictionary("ABCDEFHIJLKMNOPQRSTUVWXYZ1234567890abcefghijklmnopqrstuvwxyz")
        assert d.is_unique()
        for i in range(500):
            assert lengthen(d, shorten(d, i)) == i

    def test_small_bases(self):
        """Test base 2 and 3 across a range."""
        for symbols in ("01", "xyz"):
            d = make_dictionary(symbols)
            for i in range(200):
                assert lengthen(d, shorten(d, i)) == i

    def test_punctuated_samples(self, symbols_dict):
        """Test sampled values over a unique punctuated dictionary."""
        assert symbols_dict.base == 92
        assert symbols_dict.is_unique()
        for value in (1, 91, 92, 8835, 2 ** 32, 2 ** 64 - 1, 14794393443):
            assert lengthen(symbols_dict, shorten(symbols_dict, value)) == value

    def test_punctuated_known_value_round_trip(self, punctuated_dict):
        """Test the documented value round-trips despite repeated backslashes."""
        assert punctuated_dict.duplicates() == ["\\"]
        assert lengthen(punctuated_dict, shorten(punctuated_dict, 14794393443)) == 14794393443
