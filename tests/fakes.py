# tests/fakes.py
"""
In-memory stand-ins for the verse data source and HTTP layer.
"""

import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from qverse.services.quran import ChapterInfo, FetchResult, RawVerse, UpstreamError, VerseFetcher

CHAPTER_NAMES = {
    1: ("Al-Fatihah", "الفاتحة"),
    2: ("Al-Baqarah", "البقرة"),
    18: ("Al-Kahf", "الكهف"),
    36: ("Ya-Sin", "يس"),
}


class FakeFetcher(VerseFetcher):
    """
    Generates predictable verses for any range.

    Args:
        untranslated: Verse numbers returned with no translation candidates
        fail: Raise UpstreamError on every call
        empty: Return no verses
    """

    def __init__(self, untranslated=(), fail=False, empty=False):
        self.untranslated = set(untranslated)
        self.fail = fail
        self.empty = empty
        self.calls = []

    def fetch_verses(self, chapter, from_verse, to_verse):
        self.calls.append((chapter, from_verse, to_verse))
        if self.fail:
            raise UpstreamError("Quran API error: 503", status=503)

        name, arabic_name = CHAPTER_NAMES.get(chapter, (f"Surah {chapter}", ""))
        info = ChapterInfo(id=chapter, name_simple=name, name_arabic=arabic_name)
        if self.empty:
            return FetchResult(verses=[], chapter_info=info)

        numbers = list(range(from_verse, to_verse + 1))
        verses = [
            RawVerse(
                chapter_id=chapter,
                verse_number=n,
                text=f"arabic {chapter}:{n}",
                translations=() if n in self.untranslated else (f"translation {chapter}:{n}", "second choice"),
                position=i,
                total=len(numbers),
                verse_key=f"{chapter}:{n}",
            )
            for i, n in enumerate(numbers, start=1)
        ]
        return FetchResult(verses=verses, chapter_info=info)


class FakeResponse:
    """Minimal requests.Response lookalike."""

    def __init__(self, status_code=200, payload=None, headers=None, invalid_json=False):
        self.status_code = status_code
        self._payload = payload if payload is not None else {}
        self.headers = headers or {}
        self.invalid_json = invalid_json

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self.invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class FakeSession:
    """
    Replays queued responses (or exceptions) and records each GET.

    Queue entries are matched by URL substring so verse and chapter
    requests can be scripted independently.
    """

    def __init__(self, routes):
        self.routes = {key: list(items) for key, items in routes.items()}
        self.requests = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.requests.append({"url": url, "params": params, "timeout": timeout})
        for key, queue in self.routes.items():
            if key in url and queue:
                item = queue.pop(0) if len(queue) > 1 else queue[0]
                if isinstance(item, Exception):
                    raise item
                return item
        raise AssertionError(f"Unexpected request to {url}")
