"""
Unit tests for Arabic text normalization.
"""

import pytest
from wiqayah.core.arabic import normalize_arabic


class TestArabicNormalization:
    """Test Arabic text normalization functions."""

    def test_normalize_known_phrases(self, normalization_test_cases):
        """Test normalization of the catalog phrases."""
        for text, expected in normalization_test_cases:
            assert normalize_arabic(text) == expected

    @pytest.mark.parametrize("variant", ["أ", "إ", "آ", "ٱ"])
    def test_normalize_hamza_to_alif(self, variant):
        """Test normalization of alef variants to bare alef."""
        assert normalize_arabic(variant) == "ا"

    def test_normalize_ta_marbuta(self):
        """Test normalization of ta marbuta to ha."""
        assert normalize_arabic("رَحِيمَة") == "رحيمه"

    def test_normalize_alef_maqsura_and_hamza_carriers(self):
        """Test alef maqsura and hamza carriers map to their base letters."""
        assert normalize_arabic("عَلَى") == "علي"
        assert normalize_arabic("مُؤْمِن") == "مومن"
        assert normalize_arabic("شَيْئ") == "شيي"

    def test_normalize_empty_string(self):
        """Test normalization of empty string."""
        assert normalize_arabic("") == ""

    def test_verse_markers_removed(self):
        """Test that verse-number ornaments are dropped."""
        assert normalize_arabic("قَيِّمًا ﴿٢﴾ لِّيُنذِرَ") == "قيما لينذر"

    def test_punctuation_and_spacing(self):
        """Test punctuation removal and whitespace collapsing."""
        assert normalize_arabic("  سُبْحَانَ،   ٱللَّٰهِ!  ") == "سبحان الله"

    def test_latin_is_lowercased(self):
        """Test that transliterated input is lowercased and underscores removed."""
        assert normalize_arabic("Subhan_Allah") == "subhanallah"

    def test_normalize_is_idempotent(self, normalization_test_cases):
        """Test that normalizing twice changes nothing."""
        for text, _ in normalization_test_cases:
            once = normalize_arabic(text)
            assert normalize_arabic(once) == once

    def test_normalize_preserves_word_count(self, normalization_test_cases):
        """Test that normalization keeps word boundaries for text without verse markers."""
        for text, _ in normalization_test_cases[:3]:
            assert len(text.split()) == len(normalize_arabic(text).split())
