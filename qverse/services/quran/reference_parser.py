# qverse/services/quran/reference_parser.py
"""
Quran reference parser.

Handles the common ways people cite verses:
- Canonical: "2:255"
- Canonical range: "2:255-257"
- Named verses: "ayat al-kursi", "throne verse"
- Surah names: "surah yasin", "al-kahf 10", "surah al-baqarah 2:255"

Strategies are tried in a fixed order (alias -> canonical -> surah name)
and the first one that produces a valid range wins. Ranges are only
recognised in canonical form; the surah-name form always yields a single
verse.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from .aliases import DEFAULT_TABLES, MAX_CHAPTER, MIN_CHAPTER, AliasTables, normalize_alias_key
from .errors import InvalidInputError, UnresolvedReferenceError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VerseRange:
    """
    A resolved chapter and verse range.

    The 1-5 verse limit is not enforced here; see range_policy.check_span.

    Attributes:
        chapter: Surah number (1-114)
        from_verse: First verse (>= 1)
        to_verse: Last verse (>= from_verse)
    """
    chapter: int
    from_verse: int
    to_verse: int

    @property
    def span(self) -> int:
        """Number of verses in the range."""
        return self.to_verse - self.from_verse + 1

    @property
    def canonical(self) -> str:
        """Return canonical reference string: 2:255 or 2:255-257."""
        if self.to_verse != self.from_verse:
            return f"{self.chapter}:{self.from_verse}-{self.to_verse}"
        return f"{self.chapter}:{self.from_verse}"

    def to_dict(self) -> dict:
        return {
            "chapter": self.chapter,
            "from_verse": self.from_verse,
            "to_verse": self.to_verse,
            "span": self.span,
            "canonical": self.canonical,
        }


class AliasSubstitution:
    """Replace a named verse ("throne verse") with its canonical reference."""

    name = "alias"

    def rewrite(self, text: str, tables: AliasTables) -> str:
        return tables.named_verses.get(text, text)


class CanonicalForm:
    """Match chapter:verse with an optional -verse range end."""

    name = "canonical"
    pattern = re.compile(r'(\d+):(\d+)(?:-(\d+))?')

    def resolve(self, text: str, tables: AliasTables) -> Optional[VerseRange]:
        match = self.pattern.search(text)
        if not match:
            return None

        chapter = int(match.group(1))
        from_verse = int(match.group(2))
        to_verse = int(match.group(3)) if match.group(3) else from_verse

        if MIN_CHAPTER <= chapter <= MAX_CHAPTER and from_verse >= 1 and to_verse >= from_verse:
            return VerseRange(chapter, from_verse, to_verse)

        logger.debug(f"Canonical match {match.group(0)!r} failed validation")
        return None


class SurahNameForm:
    """
    Match a surah name with an optional verse number.

    "yasin" -> 36:1, "surah kahf 10" -> 18:10, "al-baqarah 2:255" -> 2:255.
    When both numbers of "n:m" are given, m is the verse. The chapter
    always comes from the alias table.
    """

    name = "surah_name"
    pattern = re.compile(r"(?:surah\s+)?([a-z][a-z\s'\-]*?)\s*(?:(\d+)(?::(\d+))?)?")

    def resolve(self, text: str, tables: AliasTables) -> Optional[VerseRange]:
        match = self.pattern.fullmatch(text)
        if not match:
            return None

        surah_name = match.group(1).strip().lower()
        chapter = tables.surahs.get(surah_name)
        if not chapter:
            logger.debug(f"Unknown surah name {surah_name!r}")
            return None

        verse_digits = match.group(3) or match.group(2)
        from_verse = int(verse_digits) if verse_digits else 1
        if from_verse < 1:
            return None
        return VerseRange(chapter, from_verse, from_verse)


class ReferenceParser:
    """
    Parse free-form Quran references into VerseRange objects.

    Usage:
        parser = ReferenceParser()
        parser.parse("ayat al-kursi")   # VerseRange(2, 255, 255)
        parser.parse("2:255-257")       # VerseRange(2, 255, 257)

    Args:
        tables: Alias tables to resolve names against (defaults to the
                built-in tables)
    """

    rewriters = (AliasSubstitution(),)
    strategies = (CanonicalForm(), SurahNameForm())

    def __init__(self, tables: AliasTables = DEFAULT_TABLES):
        self.tables = tables

    def parse(self, reference) -> VerseRange:
        """
        Parse a reference string.

        Args:
            reference: Raw user input

        Returns:
            VerseRange

        Raises:
            InvalidInputError: If reference is not a non-empty string
            UnresolvedReferenceError: If no strategy matches
        """
        if not isinstance(reference, str) or not reference.strip():
            raise InvalidInputError()

        text = normalize_alias_key(reference)
        for rewriter in self.rewriters:
            text = rewriter.rewrite(text, self.tables)

        for strategy in self.strategies:
            parsed = strategy.resolve(text, self.tables)
            if parsed:
                logger.debug(f"Parsed {reference!r} as {parsed.canonical} via {strategy.name}")
                return parsed

        raise UnresolvedReferenceError(reference)


_default_parser = ReferenceParser()


def parse_reference(reference, tables: Optional[AliasTables] = None) -> VerseRange:
    """
    Parse a Quran reference string.

    Handles:
    - "2:255"
    - "2:255-257"
    - "ayat al-kursi"
    - "surah yasin"
    - "al-kahf 10"

    Args:
        reference: The reference string to parse
        tables: Alternative alias tables (defaults to built-in tables)

    Returns:
        VerseRange

    Raises:
        InvalidInputError, UnresolvedReferenceError
    """
    parser = ReferenceParser(tables) if tables is not None else _default_parser
    return parser.parse(reference)


def is_valid_reference(reference, tables: Optional[AliasTables] = None) -> bool:
    """Check if a string parses as a Quran reference."""
    try:
        parse_reference(reference, tables)
    except (InvalidInputError, UnresolvedReferenceError):
        return False
    return True


def surah_name_to_number(name: str, tables: AliasTables = DEFAULT_TABLES) -> Optional[int]:
    """Return the chapter number for a surah name, or None if unknown."""
    if not isinstance(name, str):
        return None
    return tables.surah_number(name)

