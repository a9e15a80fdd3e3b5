# tests/test_range_policy.py
"""
Tests for range_policy.py - the 1-5 verse window.
"""

import os
import sys
from collections import namedtuple

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from qverse.services.quran import (
    RangeInvalidError,
    RangeTooLargeError,
    VerseRange,
    check_span,
    is_span_allowed,
    parse_reference,
)


def test_accepts_one_to_five():
    for span in range(1, 6):
        assert check_span(VerseRange(2, 10, 10 + span - 1)) == span
        assert is_span_allowed(10, 10 + span - 1)


def test_rejects_six():
    with pytest.raises(RangeTooLargeError) as exc:
        check_span(VerseRange(2, 1, 6))
    assert exc.value.span == 6
    assert exc.value.code == "range_too_large"
    assert not is_span_allowed(1, 6)


def test_rejects_zero():
    with pytest.raises(RangeInvalidError) as exc:
        check_span(VerseRange(2, 5, 4))
    assert exc.value.span == 0
    assert exc.value.code == "range_invalid"
    assert not is_span_allowed(5, 4)


def test_parsed_range_too_large():
    """2:1-10 parses but is over the limit."""
    with pytest.raises(RangeTooLargeError) as exc:
        check_span(parse_reference("2:1-10"))
    assert exc.value.span == 10
    assert exc.value.to_dict() == {
        "error": "range_too_large",
        "detail": "Please request between 1 and 5 verses only. You requested 10 verses.",
        "span": 10,
    }


def test_parsed_range_within_limit():
    assert check_span(parse_reference("2:255-257")) == 3


def test_applies_to_ranges_built_without_parser():
    Loose = namedtuple("Loose", "chapter from_verse to_verse")
    with pytest.raises(RangeTooLargeError):
        check_span(Loose(2, 1, 50))
    with pytest.raises(RangeInvalidError):
        check_span(Loose(2, 9, 1))
