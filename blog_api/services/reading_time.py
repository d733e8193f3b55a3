"""Reading time estimation for post content."""

from math import ceil

from blog_api.configs import WORDS_PER_MINUTE


def count_words(content: str) -> int:
    """
    Count words in ``content``.

    A word is a maximal run of non-whitespace characters.
    """
    return len(content.split())


def estimate_reading_time(content: str | None) -> int:
    """
    Estimate reading time in whole minutes.

    Args:
        content: Post body text

    Returns:
        int: ``ceil(words / WORDS_PER_MINUTE)``, or 0 for empty or blank content

    Example:
        >>> estimate_reading_time("word " * 201)
        2
    """
    if not content or not content.strip():
        return 0
    return ceil(count_words(content) / WORDS_PER_MINUTE)
