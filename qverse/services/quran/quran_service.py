# qverse/services/quran/quran_service.py
"""
Quran verse resolution service.

Single entry point for consumers (agent tools, workflows, HTTP routes):
parse a loose reference, enforce the verse-count policy, fetch the verses
and assemble uniform records.
"""

import logging
from typing import List, Optional

from .aliases import AliasTables
from .assembler import VerseRecord, assemble_verses
from .config_loader import get_tables
from .errors import QuranReferenceError, UpstreamError
from .presentation import build_tool_error, build_tool_result, render_explanation
from .quran_client import QuranClient, VerseFetcher
from .range_policy import check_span
from .reference_parser import ReferenceParser, VerseRange

logger = logging.getLogger(__name__)


class QuranService:
    """
    Resolve Quran references into verse records.

    Usage:
        service = QuranService()

        records = service.resolve_and_assemble("ayat al-kursi")
        for record in records:
            print(record.reference, record.translation)

        # Tool-style envelope, never raises for user errors
        result = service.explain_reference("2:255-257")
        print(result["message"])

    Args:
        fetcher: Verse data source (defaults to QuranClient)
        tables: Alias tables (defaults to built-ins plus the alias file)
    """

    def __init__(self, fetcher: Optional[VerseFetcher] = None, tables: Optional[AliasTables] = None):
        self.fetcher = fetcher or QuranClient()
        self.parser = ReferenceParser(tables or get_tables())

    def parse(self, reference) -> VerseRange:
        """Parse a reference without applying the verse-count policy."""
        return self.parser.parse(reference)

    def resolve(self, reference) -> VerseRange:
        """
        Parse a reference and enforce the verse-count policy.

        Raises:
            InvalidInputError, UnresolvedReferenceError,
            RangeTooLargeError, RangeInvalidError
        """
        verse_range = self.parser.parse(reference)
        check_span(verse_range)
        return verse_range

    def resolve_and_assemble(self, reference) -> List[VerseRecord]:
        """
        Resolve a reference and return its verses.

        Args:
            reference: e.g. "2:255", "ayat al-kursi", "surah yasin"

        Returns:
            VerseRecords in verse order

        Raises:
            InvalidInputError, UnresolvedReferenceError,
            RangeTooLargeError, RangeInvalidError, UpstreamError
        """
        verse_range = self.resolve(reference)
        logger.info(f"Resolved {reference!r} to {verse_range.canonical}")

        result = self.fetcher.fetch_verses(
            verse_range.chapter, verse_range.from_verse, verse_range.to_verse
        )
        if not result.verses:
            raise UpstreamError("No verses found for the provided reference.")
        if result.chapter_info is None:
            raise UpstreamError("Failed to fetch chapter info.")

        return assemble_verses(result.verses, result.chapter_info)

    def explain_reference(self, reference) -> dict:
        """
        Resolve a reference into the tool result envelope.

        Returns:
            {"success": True, "verses": [...], "totalVerses": n, "message": ...}
            or {"success": False, "message": ..., "error": code}
        """
        try:
            records = self.resolve_and_assemble(reference)
        except QuranReferenceError as e:
            logger.info(f"Could not resolve {reference!r}: {e.code}")
            return build_tool_error(e)
        return build_tool_result(records)

    def render(self, reference) -> str:
        """
        Resolve a reference and render it as Markdown.

        Raises:
            Same as resolve_and_assemble
        """
        return render_explanation(self.resolve_and_assemble(reference))


def resolve_and_assemble(reference, fetcher: Optional[VerseFetcher] = None) -> List[VerseRecord]:
    """Resolve a reference with a one-off QuranService."""
    return QuranService(fetcher=fetcher).resolve_and_assemble(reference)
