# qverse/services/quran/assembler.py
"""
Verse record assembly.

Turns raw verses plus chapter metadata into the uniform VerseRecord shape
consumed by tools, workflows and the HTTP API.
"""

from dataclasses import dataclass
from typing import List, Sequence

from .quran_client import ChapterInfo, RawVerse

TRANSLATION_PLACEHOLDER = "Translation not available"


@dataclass(frozen=True)
class VerseRecord:
    """
    One verse ready for display.

    Attributes:
        reference: "Al-Baqarah 2:255"
        arabic: Original Arabic text
        translation: First available translation, never empty
        chapter_name: Simple (Latin-script) surah name
        verse_number: Verse number within the surah
        position: 1-based position in the result
        total: Number of verses in the result
    """
    reference: str
    arabic: str
    translation: str
    chapter_name: str
    verse_number: int
    position: int
    total: int

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "position": self.position,
            "total": self.total,
            "reference": self.reference,
            "arabic": self.arabic,
            "translation": self.translation,
            "chapterName": self.chapter_name,
            "verseNumber": self.verse_number,
        }


def pick_translation(candidates: Sequence[str]) -> str:
    """First translation candidate, or the placeholder when there is none."""
    if candidates and candidates[0]:
        return candidates[0]
    return TRANSLATION_PLACEHOLDER


def assemble_verses(raw_verses: Sequence[RawVerse], chapter_info: ChapterInfo) -> List[VerseRecord]:
    """
    Build VerseRecords from raw verses, preserving input order.

    position/total are recomputed from the sequence itself.

    Args:
        raw_verses: Verses in display order
        chapter_info: Metadata of the surah the verses belong to

    Returns:
        One VerseRecord per input verse
    """
    total = len(raw_verses)
    return [
        VerseRecord(
            reference=f"{chapter_info.name_simple} {verse.chapter_id}:{verse.verse_number}",
            arabic=verse.text,
            translation=pick_translation(verse.translations),
            chapter_name=chapter_info.name_simple,
            verse_number=verse.verse_number,
            position=index,
            total=total,
        )
        for index, verse in enumerate(raw_verses, start=1)
    ]
