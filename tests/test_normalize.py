"""Tests for folding raw Greek into stemmer input form."""

from greek_stemmer.normalize import (
    fold_final_sigma,
    fold_greek_text,
    fold_greek_token,
    normalize_text_nfc,
    strip_accents,
)


class TestNormalizeTextNFC:
    """Test Unicode NFC normalization."""

    def test_combining_characters(self):
        """Test that a combining accent composes with its base letter."""
        assert normalize_text_nfc("\u03b1\u0301") == "\u03ac"

    def test_none_input(self):
        assert normalize_text_nfc(None) == ""


class TestStripAccents:
    """Test accent stripping functionality."""

    def test_strip_tonos(self):
        assert strip_accents("ρολόγια") == "ρολογια"

    def test_strip_diaeresis(self):
        assert strip_accents("προϊόν") == "προιον"
        assert strip_accents("ΐ") == "ι"

    def test_strip_polytonic_marks(self):
        assert strip_accents("ἀγρῷ") == "αγρω"


class TestFoldGreekToken:
    """Test complete token folding."""

    def test_final_sigma(self):
        assert fold_final_sigma("λόγος") == "λόγοσ"

    def test_full_folding(self):
        assert fold_greek_token("Άγριος") == "αγριοσ"

    def test_uppercase(self):
        """Uppercase final sigma lowercases to ς, then folds to σ."""
        assert fold_greek_token("ΓΡΑΜΜΑΤΑ") == "γραμματα"
        assert fold_greek_token("ΑΓΡΙΟΣ") == "αγριοσ"

    def test_empty(self):
        assert fold_greek_token("") == ""


class TestFoldGreekText:
    """Test folding of running text."""

    def test_whitespace_collapse(self):
        assert fold_greek_text("  Τα   ρολόγια ") == "τα ρολογια"

    def test_empty(self):
        assert fold_greek_text("") == ""
