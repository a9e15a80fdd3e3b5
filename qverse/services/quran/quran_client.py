# qverse/services/quran/quran_client.py
"""
Verse data source.

VerseFetcher is the interface the resolution service depends on.
QuranClient implements it against the quran.com v4 REST API, asking for
the Uthmani script plus a fixed, pre-ordered list of translations.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import requests

from ...core import config
from ...utils.http_retry import get_with_retry
from .errors import UpstreamError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawVerse:
    """
    One verse as returned by the data source.

    Attributes:
        chapter_id: Surah number
        verse_number: Verse number within the surah
        text: Original Arabic (Uthmani) text
        translations: Translation texts, in preference order (may be empty)
        position: 1-based position within the requested range
        total: Number of verses in the requested range
        verse_id: Upstream verse id (global)
        verse_key: Upstream key, e.g. "2:255"
    """
    chapter_id: int
    verse_number: int
    text: str
    translations: Tuple[str, ...] = ()
    position: int = 1
    total: int = 1
    verse_id: Optional[int] = None
    verse_key: str = ""


@dataclass(frozen=True)
class ChapterInfo:
    """Display metadata for a surah."""
    id: int
    name_simple: str
    name_arabic: str = ""


@dataclass(frozen=True)
class FetchResult:
    """Verses for a range plus the metadata of their surah."""
    verses: List[RawVerse] = field(default_factory=list)
    chapter_info: Optional[ChapterInfo] = None


class VerseFetcher(ABC):
    """
    Source of raw verse data.

    Implementations must return the verses of one surah in ascending
    order and raise UpstreamError when the source is unavailable or has
    no verses for the range.
    """

    @abstractmethod
    def fetch_verses(self, chapter: int, from_verse: int, to_verse: int) -> FetchResult:
        """Fetch verses from_verse..to_verse of a chapter."""
        pass


class QuranClient(VerseFetcher):
    """
    Client for the quran.com API.

    Usage:
        client = QuranClient()
        result = client.fetch_verses(2, 255, 257)
        for verse in result.verses:
            print(verse.verse_key, verse.translations[:1])
        print(result.chapter_info.name_simple)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        translation_ids: Optional[List[int]] = None,
        timeout: Optional[int] = None,
        max_retries: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or config.QURAN_API_BASE_URL).rstrip("/")
        self.translation_ids = list(translation_ids or config.QURAN_TRANSLATION_IDS)
        self._request_timeout = timeout or config.QURAN_REQUEST_TIMEOUT
        self._max_retries = max_retries or config.QURAN_MAX_RETRIES
        self.session = session

    def _get_json(self, path: str, params: dict, what: str) -> dict:
        """
        GET an API path and decode the JSON body.

        Raises:
            UpstreamError: On network failure, non-2xx status, or bad JSON
        """
        url = f"{self.base_url}{path}"
        logger.debug(f"Fetching {url} {params}")

        try:
            response = get_with_retry(
                url,
                params=params,
                timeout=self._request_timeout,
                max_retries=self._max_retries,
                session=self.session,
            )
        except RuntimeError as e:
            logger.warning(f"Network error fetching {what}: {e}")
            raise UpstreamError("Failed to fetch Quran verses.")

        if not response.ok:
            logger.warning(f"Quran API returned {response.status_code} for {what}")
            raise UpstreamError(f"Quran API error: {response.status_code}", status=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON from Quran API for {what}: {e}")
            raise UpstreamError("Quran API returned an invalid response.")

    def get_chapter(self, chapter: int) -> ChapterInfo:
        """
        Get display names for a surah.

        Args:
            chapter: Surah number

        Returns:
            ChapterInfo
        """
        data = self._get_json(f"/chapters/{chapter}", {"language": "en"}, f"chapter {chapter}")
        info = data.get("chapter") or {}
        return ChapterInfo(
            id=info.get("id", chapter),
            name_simple=info.get("name_simple", ""),
            name_arabic=info.get("name_arabic", ""),
        )

    def fetch_verses(self, chapter: int, from_verse: int, to_verse: int) -> FetchResult:
        """
        Fetch a verse range with translations and chapter metadata.

        Args:
            chapter: Surah number
            from_verse: First verse
            to_verse: Last verse

        Returns:
            FetchResult with verses in ascending order

        Raises:
            UpstreamError: If the API fails or returns no verses
        """
        logger.info(f"Fetching chapter {chapter}, verses {from_verse} to {to_verse}")

        params = {
            "from": from_verse,
            "to": to_verse,
            "per_page": max(to_verse - from_verse + 1, 1),
            "words": "false",
            "translations": ",".join(str(t) for t in self.translation_ids),
            "fields": "text_uthmani,chapter_id",
        }
        data = self._get_json(
            f"/verses/by_chapter/{chapter}", params, f"{chapter}:{from_verse}-{to_verse}"
        )

        items = data.get("verses") or []
        if not items:
            raise UpstreamError("No verses found for the provided reference.")

        verses = [
            self._to_raw_verse(item, chapter, index + 1, len(items))
            for index, item in enumerate(items)
        ]

        return FetchResult(verses=verses, chapter_info=self.get_chapter(chapter))

    def _to_raw_verse(self, item: dict, chapter: int, position: int, total: int) -> RawVerse:
        """Convert one API verse object to a RawVerse."""
        translations = tuple(
            t.get("text", "")
            for t in (item.get("translations") or [])
            if isinstance(t, dict)
        )
        return RawVerse(
            chapter_id=item.get("chapter_id") or chapter,
            verse_number=item.get("verse_number", 0),
            text=item.get("text_uthmani", ""),
            translations=translations,
            position=position,
            total=total,
            verse_id=item.get("id"),
            verse_key=item.get("verse_key", ""),
        )
