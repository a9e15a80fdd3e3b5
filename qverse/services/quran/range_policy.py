# qverse/services/quran/range_policy.py
"""
Verse-count policy.

A request may cover between MIN_VERSES and MAX_VERSES verses inclusive.
The check runs before any upstream request and applies to any object with
from_verse/to_verse, so callers that skip the parser are still bounded.
"""

from .errors import RangeInvalidError, RangeTooLargeError

MIN_VERSES = 1
MAX_VERSES = 5


def span_of(from_verse: int, to_verse: int) -> int:
    """Number of verses between two verse numbers, inclusive."""
    return to_verse - from_verse + 1


def is_span_allowed(from_verse: int, to_verse: int) -> bool:
    """Return True if the range covers 1-5 verses."""
    return MIN_VERSES <= span_of(from_verse, to_verse) <= MAX_VERSES


def check_span(verse_range) -> int:
    """
    Enforce the verse-count window on a range.

    Args:
        verse_range: VerseRange (or anything with from_verse and to_verse)

    Returns:
        The span, when allowed

    Raises:
        RangeInvalidError: span < 1
        RangeTooLargeError: span > 5
    """
    span = span_of(verse_range.from_verse, verse_range.to_verse)
    if span < MIN_VERSES:
        raise RangeInvalidError(span)
    if span > MAX_VERSES:
        raise RangeTooLargeError(span, MAX_VERSES)
    return span
