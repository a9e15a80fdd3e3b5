# qverse/services/quran/__init__.py
"""
Quran reference resolution for QVerse.

This package provides:
- QuranService: Parse, bound, fetch and assemble verses in one call
- parse_reference: Parse loose references ("ayat al-kursi", "2:255-257")
- check_span: Enforce the 1-5 verse window
- QuranClient: quran.com API client (VerseFetcher implementation)
- assemble_verses: Build VerseRecords from raw verse data
- AliasTables: Named-verse and surah-name lookups
"""

from .errors import (
    QuranReferenceError,
    InvalidInputError,
    UnresolvedReferenceError,
    RangePolicyError,
    RangeTooLargeError,
    RangeInvalidError,
    UpstreamError,
)
from .aliases import (
    AliasTables,
    AliasTableError,
    DEFAULT_TABLES,
    NAMED_VERSES,
    SURAH_NAMES,
)
from .reference_parser import (
    VerseRange,
    ReferenceParser,
    parse_reference,
    is_valid_reference,
    surah_name_to_number,
)
from .range_policy import (
    MAX_VERSES,
    check_span,
    is_span_allowed,
)
from .quran_client import (
    VerseFetcher,
    QuranClient,
    RawVerse,
    ChapterInfo,
    FetchResult,
)
from .assembler import (
    VerseRecord,
    TRANSLATION_PLACEHOLDER,
    assemble_verses,
)
from .presentation import (
    build_tool_result,
    build_tool_error,
    render_explanation,
)
from .quran_service import (
    QuranService,
    resolve_and_assemble,
)

__all__ = [
    # Service (primary interface)
    "QuranService",
    "resolve_and_assemble",
    # Errors
    "QuranReferenceError",
    "InvalidInputError",
    "UnresolvedReferenceError",
    "RangePolicyError",
    "RangeTooLargeError",
    "RangeInvalidError",
    "UpstreamError",
    # Aliases
    "AliasTables",
    "AliasTableError",
    "DEFAULT_TABLES",
    "NAMED_VERSES",
    "SURAH_NAMES",
    # Parsing
    "VerseRange",
    "ReferenceParser",
    "parse_reference",
    "is_valid_reference",
    "surah_name_to_number",
    # Range policy
    "MAX_VERSES",
    "check_span",
    "is_span_allowed",
    # Fetching
    "VerseFetcher",
    "QuranClient",
    "RawVerse",
    "ChapterInfo",
    "FetchResult",
    # Assembly
    "VerseRecord",
    "TRANSLATION_PLACEHOLDER",
    "assemble_verses",
    # Presentation
    "build_tool_result",
    "build_tool_error",
    "render_explanation",
]
