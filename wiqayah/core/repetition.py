"""
Repetition counting for multi-repetition dhikr.

Counts how many times an expected phrase was recited in a transcript.
An exact pass looks for literal occurrences; when none are found, a fuzzy
pass slides a phrase-sized word window over the transcript and scores each
window with ``similarity``.
"""

from wiqayah.core.matcher import similarity

# Minimum window similarity for the fuzzy pass
DEFAULT_WINDOW_THRESHOLD = 0.7


def count_exact(transcript: str, phrase: str) -> int:
    """
    Count literal, non-overlapping occurrences of phrase, scanning left to right.

    Args:
        transcript: Normalized transcript
        phrase: Normalized phrase

    Returns:
        Number of occurrences (0 for an empty phrase)
    """
    if not phrase:
        return 0
    # str.count resumes the search just past each match
    return transcript.count(phrase)


def iter_word_windows(transcript: str, size: int):
    """
    Yield every run of ``size`` consecutive words, joined with single spaces.

    Args:
        transcript: Normalized transcript
        size: Window length in words

    Yields:
        Window text for each valid start offset, left to right
    """
    words = transcript.split()
    if size <= 0 or len(words) < size:
        return
    for start in range(len(words) - size + 1):
        yield " ".join(words[start:start + size])


def count_fuzzy(
    transcript: str,
    phrase: str,
    window_threshold: float = DEFAULT_WINDOW_THRESHOLD,
) -> int:
    """
    Count word windows of the transcript that resemble the phrase.

    Windows are scored independently; overlapping windows that both pass
    the threshold are both counted, so short phrases can be over-counted.

    Args:
        transcript: Normalized transcript
        phrase: Normalized phrase
        window_threshold: Minimum similarity for a window to count

    Returns:
        Number of matching windows
    """
    size = len(phrase.split())
    return sum(
        1
        for window in iter_word_windows(transcript, size)
        if similarity(window, phrase) >= window_threshold
    )


def count_repetitions(
    transcript: str,
    phrase: str,
    window_threshold: float = DEFAULT_WINDOW_THRESHOLD,
) -> int:
    """
    Count how many times phrase was recited in transcript.

    Both arguments must already be normalized with ``normalize_arabic``.
    The fuzzy pass only runs when the exact pass finds nothing.

    Args:
        transcript: Normalized transcript
        phrase: Normalized phrase
        window_threshold: Minimum similarity for a fuzzy window to count

    Returns:
        Exact occurrence count, or the fuzzy window count if that is zero

    Examples:
        >>> count_repetitions("سبحان الله سبحان الله", "سبحان الله")
        2
        >>> count_repetitions("a a a", "a")
        3
    """
    count = count_exact(transcript, phrase)
    if count == 0:
        count = count_fuzzy(transcript, phrase, window_threshold)
    return count
