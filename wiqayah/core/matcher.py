"""
Similarity matching algorithms for Arabic text.

This module provides functions for computing similarity between a
transcribed recitation and the reference dhikr text.

Uses SIMD-accelerated rapidfuzz for the edit distance.
"""

from rapidfuzz.distance import Levenshtein as _rapidfuzz_levenshtein

from wiqayah.core.arabic import normalize_arabic


def edit_distance(text1: str, text2: str) -> int:
    """
    Levenshtein distance (unit cost insert, delete, substitute) between two strings.

    Args:
        text1: First string
        text2: Second string

    Returns:
        Number of single-character edits turning text1 into text2
    """
    return _rapidfuzz_levenshtein.distance(text1, text2)


def similarity(text1: str, text2: str, normalize: bool = False) -> float:
    """
    Compute edit-distance similarity between two strings.

    Returns ``1 - distance / max(len(text1), len(text2))``. Acceptance
    thresholds are tuned against this exact formula, so it must not be
    replaced with another normalization (e.g. Indel ratio).

    Args:
        text1: First string to compare
        text2: Second string to compare
        normalize: Whether to normalize Arabic text before comparison

    Returns:
        Similarity ratio between 0.0 and 1.0

    Examples:
        >>> similarity("سبحان الله", "سبحان الله")
        1.0
        >>> similarity("", "")
        1.0
        >>> similarity("سبحان", "")
        0.0
    """
    if normalize:
        text1 = normalize_arabic(text1)
        text2 = normalize_arabic(text2)

    longest = max(len(text1), len(text2))
    if longest == 0:
        return 1.0
    if not text1 or not text2:
        return 0.0

    return 1.0 - edit_distance(text1, text2) / longest
