# tests/test_assembler.py
"""
Tests for assembler.py - record shape, ordering and translation fallback.
"""

import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from qverse.services.quran import (
    TRANSLATION_PLACEHOLDER,
    ChapterInfo,
    RawVerse,
    VerseRecord,
    assemble_verses,
)

BAQARAH = ChapterInfo(id=2, name_simple="Al-Baqarah", name_arabic="البقرة")


def make_verses(numbers, translations=("Allah - there is no deity except Him",)):
    return [
        RawVerse(
            chapter_id=2,
            verse_number=n,
            text=f"arabic {n}",
            translations=translations,
            position=i,
            total=len(numbers),
        )
        for i, n in enumerate(numbers, start=1)
    ]


def test_single_verse_record():
    records = assemble_verses(make_verses([255]), BAQARAH)

    assert records == [
        VerseRecord(
            reference="Al-Baqarah 2:255",
            arabic="arabic 255",
            translation="Allah - there is no deity except Him",
            chapter_name="Al-Baqarah",
            verse_number=255,
            position=1,
            total=1,
        )
    ]


def test_positions_and_total():
    records = assemble_verses(make_verses([255, 256, 257]), BAQARAH)

    assert [r.position for r in records] == [1, 2, 3]
    assert all(r.total == 3 for r in records)
    assert [r.reference for r in records] == [
        "Al-Baqarah 2:255",
        "Al-Baqarah 2:256",
        "Al-Baqarah 2:257",
    ]


def test_first_translation_wins():
    records = assemble_verses(make_verses([1], translations=("first", "second")), BAQARAH)
    assert records[0].translation == "first"


def test_missing_translation_uses_placeholder():
    for candidates in [(), ("",)]:
        records = assemble_verses(make_verses([1, 2], translations=candidates), BAQARAH)
        assert [r.translation for r in records] == [TRANSLATION_PLACEHOLDER] * 2
        assert all(r.translation for r in records)


def test_idempotent():
    verses = make_verses([255, 256, 257])
    assert assemble_verses(verses, BAQARAH) == assemble_verses(verses, BAQARAH)


def test_reversed_input_reverses_output():
    verses = make_verses([255, 256, 257])
    forward = assemble_verses(verses, BAQARAH)
    backward = assemble_verses(list(reversed(verses)), BAQARAH)

    assert [r.verse_number for r in backward] == [257, 256, 255]
    assert [r.position for r in backward] == [1, 2, 3]
    assert [r.verse_number for r in backward] == [r.verse_number for r in reversed(forward)]


def test_positions_ignore_upstream_numbering():
    """position/total come from the sequence handed to the assembler."""
    verses = make_verses([10, 11, 12])[1:]
    records = assemble_verses(verses, BAQARAH)
    assert [(r.position, r.total) for r in records] == [(1, 2), (2, 2)]


def test_empty_input():
    assert assemble_verses([], BAQARAH) == []


def test_to_dict_keys():
    record = assemble_verses(make_verses([255]), BAQARAH)[0]
    assert record.to_dict() == {
        "position": 1,
        "total": 1,
        "reference": "Al-Baqarah 2:255",
        "arabic": "arabic 255",
        "translation": "Allah - there is no deity except Him",
        "chapterName": "Al-Baqarah",
        "verseNumber": 255,
    }
