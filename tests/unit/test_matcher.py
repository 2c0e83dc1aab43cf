"""
Unit tests for similarity matching.
"""

import pytest
from wiqayah.core.matcher import edit_distance, similarity


class TestEditDistance:
    """Test Levenshtein distance."""

    @pytest.mark.parametrize("a,b,expected", [
        ("", "", 0),
        ("abc", "", 3),
        ("kitten", "sitting", 3),
        ("سبحان", "سبحن", 1),
    ])
    def test_edit_distance(self, a, b, expected):
        """Test unit-cost edit distance."""
        assert edit_distance(a, b) == expected


class TestSimilarity:
    """Test edit-distance similarity."""

    def test_identical_strings(self):
        """Test similarity of identical strings."""
        assert similarity("سبحان الله", "سبحان الله") == 1.0

    def test_both_empty(self):
        """Test that two empty strings are identical."""
        assert similarity("", "") == 1.0

    @pytest.mark.parametrize("a,b", [("سبحان", ""), ("", "سبحان")])
    def test_one_empty(self, a, b):
        """Test that exactly one empty string scores zero."""
        assert similarity(a, b) == 0.0

    def test_uses_longest_length(self):
        """Test the distance is divided by the longer length."""
        # 7 substitutions over 25 characters
        assert similarity("zzzzzzzhijklmnopqrstuvwxy", "abcdefghijklmnopqrstuvwxy") == pytest.approx(0.72)

    def test_symmetric(self):
        """Test that argument order does not matter."""
        a, b = "سبحن الله", "سبحان الله"
        assert similarity(a, b) == similarity(b, a)

    def test_normalize_flag(self):
        """Test normalization before comparison."""
        assert similarity("سُبْحَانَ ٱللَّٰهِ", "سبحان الله") < 1.0
        assert similarity("سُبْحَانَ ٱللَّٰهِ", "سبحان الله", normalize=True) == 1.0

    def test_bounded(self):
        """Test that similarity stays within [0, 1]."""
        score = similarity("abc", "xyz1234")
        assert 0.0 <= score <= 1.0
