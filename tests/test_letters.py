"""Tests for character classification and exception-table lookups."""

import pytest

from greek_stemmer.exception_tables import EXC4, EXC5, EXC20A, EXC23B, in_table
from greek_stemmer.letters import (
    ends_with,
    ends_with_any,
    ends_with_vowel,
    ends_with_vowel_no_upsilon,
    is_vowel,
    is_vowel_no_upsilon,
)


class TestVowels:
    """Test vowel predicates."""

    @pytest.mark.parametrize("ch", list("αεηιουω"))
    def test_vowels(self, ch):
        assert is_vowel(ch)

    @pytest.mark.parametrize("ch", list("βγδζθκλμνξπρστφχψ"))
    def test_consonants(self, ch):
        assert not is_vowel(ch)
        assert not is_vowel_no_upsilon(ch)

    def test_upsilon_excluded(self):
        assert is_vowel("υ")
        assert not is_vowel_no_upsilon("υ")

    def test_accented_letters_are_not_vowels(self):
        """Input is expected without diacritics."""
        assert not is_vowel("ά")

    def test_ends_with_vowel(self):
        buffer = list("αγριοσ")
        assert ends_with_vowel(buffer, 4)
        assert not ends_with_vowel(buffer, 6)
        assert not ends_with_vowel(buffer, 0)

    def test_ends_with_vowel_no_upsilon(self):
        buffer = list("διχτυα")
        assert ends_with_vowel(buffer, 5)
        assert not ends_with_vowel_no_upsilon(buffer, 5)
        assert ends_with_vowel_no_upsilon(buffer, 6)


class TestEndsWith:
    """Test suffix matching against the live stem."""

    def test_match_at_length(self):
        buffer = list("γραμματα")
        assert ends_with(buffer, 8, "ματα")
        assert ends_with(buffer, 5, "γραμμ")

    def test_ignores_letters_past_length(self):
        buffer = list("γραμματα")
        assert not ends_with(buffer, 5, "ματα")

    def test_suffix_longer_than_stem(self):
        buffer = list("φωσ")
        assert not ends_with(buffer, 3, "καθεστωσ")
        assert not ends_with(buffer, 2, "φωσ")

    def test_empty_suffix(self):
        assert ends_with(list("αβ"), 2, "")

    def test_ends_with_any(self):
        buffer = list("κουρεασ")
        assert ends_with_any(buffer, 7, ("εωσ", "εασ"))
        assert not ends_with_any(buffer, 7, ("εων",))


class TestExceptionTables:
    """Exception tables are immutable and matched exactly."""

    def test_tables_are_frozen(self):
        assert isinstance(EXC5, frozenset)
        with pytest.raises(AttributeError):
            EXC5.add("ξ")  # type: ignore[attr-defined]

    def test_exact_prefix_match(self):
        assert in_table(list("αγριοσ"), 3, EXC5)

    def test_suffix_of_stem_does_not_match(self):
        """Tables compare the whole stem, not its ending."""
        assert not in_table(list("ξαγρ"), 4, EXC5)

    def test_length_selects_prefix(self):
        buffer = list("παρεα")
        assert in_table(buffer, 3, EXC4)
        assert not in_table(buffer, 4, EXC4)

    def test_single_entry_tables(self):
        assert in_table(list("γραμμ"), 5, EXC20A)
        assert in_table(list("ελε"), 3, EXC23B)
