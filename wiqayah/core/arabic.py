"""
Arabic text normalization utilities.

This module provides functions for normalizing Arabic text, which is essential
for accurate comparison between a speech transcript and the reference dhikr text.
"""

import re

# Vowel-pointing (tashkeel), superscript alef, Quranic annotation marks and tatweel
DIACRITICS_PATTERN = re.compile(r"[\u0610-\u061A\u064B-\u065F\u0670\u06D6-\u06ED\u0640]")

# Verse-number ornaments such as ﴿١﴾ and stray Arabic-Indic digits
VERSE_MARKER_PATTERN = re.compile(r"[\uFD3E\uFD3F\u0660-\u0669\u06F0-\u06F9]")


def normalize_arabic(text: str) -> str:
    """
    Normalize Arabic text for comparison.

    Performs the following normalizations:
    - Lowercase (affects transliterated or Latin input)
    - Remove diacritics, Quranic annotation marks and tatweel
    - Replace all alef variants (أ إ آ ا ٱ) with plain alef (ا)
    - Replace alef maqsura (ى) with ya (ي)
    - Replace ta marbuta (ة) with ha (ه)
    - Replace hamza carriers (ؤ ئ) with their base letters
    - Remove punctuation and verse-number markers
    - Collapse multiple spaces

    The result is stable: normalizing it again returns it unchanged.

    Args:
        text: Arabic text to normalize

    Returns:
        Normalized text string

    Examples:
        >>> normalize_arabic("سُبْحَانَ ٱللَّٰهِ")
        'سبحان الله'
        >>> normalize_arabic("أَكْبَرُ")
        'اكبر'
    """
    if not text:
        return ""

    text = text.lower()

    # Remove diacritics first so that marks sitting on alef do not block the mapping
    text = DIACRITICS_PATTERN.sub("", text)

    # Normalize alef variants (including alef wasla ٱ U+0671)
    text = re.sub(r"[أإآاٱ]", "ا", text)

    # Normalize alef maqsura to ya
    text = re.sub(r"ى", "ي", text)

    # Normalize ta marbuta to ha
    text = re.sub(r"ة", "ه", text)

    # Normalize hamza carriers: ؤ → و, ئ → ي
    text = re.sub(r"ؤ", "و", text)
    text = re.sub(r"ئ", "ي", text)

    text = VERSE_MARKER_PATTERN.sub(" ", text)

    # Remove punctuation (keeping letters and spaces)
    text = re.sub(r"[^\w\s]", "", text)
    text = text.replace("_", "")

    # Collapse multiple spaces and strip
    text = re.sub(r"\s+", " ", text).strip()

    return text
