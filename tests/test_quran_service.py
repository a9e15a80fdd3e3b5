# tests/test_quran_service.py
"""
Tests for quran_service.py - end-to-end resolution with a fake fetcher.
"""

import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from fakes import FakeFetcher
from qverse.services.quran import (
    DEFAULT_TABLES,
    TRANSLATION_PLACEHOLDER,
    InvalidInputError,
    QuranService,
    RangeTooLargeError,
    UnresolvedReferenceError,
    UpstreamError,
    VerseRange,
    resolve_and_assemble,
)


def make_service(**fetcher_kwargs):
    fetcher = FakeFetcher(**fetcher_kwargs)
    return QuranService(fetcher=fetcher, tables=DEFAULT_TABLES), fetcher


def test_named_verse_end_to_end():
    service, fetcher = make_service()

    records = service.resolve_and_assemble("ayat al-kursi")

    assert fetcher.calls == [(2, 255, 255)]
    assert len(records) == 1
    record = records[0]
    assert record.reference == "Al-Baqarah 2:255"
    assert record.arabic == "arabic 2:255"
    assert record.translation == "translation 2:255"
    assert record.chapter_name == "Al-Baqarah"
    assert (record.position, record.total) == (1, 1)


def test_range_end_to_end():
    service, fetcher = make_service(untranslated={256})

    records = service.resolve_and_assemble("2:255-257")

    assert fetcher.calls == [(2, 255, 257)]
    assert [r.verse_number for r in records] == [255, 256, 257]
    assert [r.position for r in records] == [1, 2, 3]
    assert records[1].translation == TRANSLATION_PLACEHOLDER


def test_surah_name_end_to_end():
    service, fetcher = make_service()
    records = service.resolve_and_assemble("surah yasin")
    assert fetcher.calls == [(36, 1, 1)]
    assert records[0].reference == "Ya-Sin 36:1"


def test_range_too_large_never_reaches_fetcher():
    service, fetcher = make_service()

    with pytest.raises(RangeTooLargeError) as exc:
        service.resolve_and_assemble("2:1-10")

    assert exc.value.span == 10
    assert fetcher.calls == []


def test_parse_failures_never_reach_fetcher():
    service, fetcher = make_service()

    with pytest.raises(UnresolvedReferenceError):
        service.resolve_and_assemble("not a reference")
    with pytest.raises(InvalidInputError):
        service.resolve_and_assemble("")
    assert fetcher.calls == []


def test_upstream_failure_propagates():
    service, fetcher = make_service(fail=True)
    with pytest.raises(UpstreamError):
        service.resolve_and_assemble("2:255")


def test_empty_fetch_is_upstream_error():
    service, fetcher = make_service(empty=True)
    with pytest.raises(UpstreamError) as exc:
        service.resolve_and_assemble("2:255")
    assert "No verses found" in exc.value.message


def test_resolve_only():
    service, fetcher = make_service()
    assert service.resolve("throne verse") == VerseRange(2, 255, 255)
    assert fetcher.calls == []


def test_explain_reference_success():
    service, fetcher = make_service()

    result = service.explain_reference("2:255-256")

    assert result["success"] is True
    assert result["totalVerses"] == 2
    assert result["message"] == "Retrieved 2 verses from Al-Baqarah"
    assert result["verses"][0]["reference"] == "Al-Baqarah 2:255"
    assert result["verses"][1]["verseNumber"] == 256


def test_explain_reference_errors_are_results():
    service, fetcher = make_service()

    too_many = service.explain_reference("2:1-10")
    assert too_many["success"] is False
    assert too_many["error"] == "range_too_large"
    assert "You requested 10 verses" in too_many["message"]

    unresolved = service.explain_reference("not a reference")
    assert unresolved["success"] is False
    assert unresolved["error"] == "unresolved_reference"
    assert unresolved["reference"] == "not a reference"

    failing, _ = make_service(fail=True)
    upstream = failing.explain_reference("2:255")
    assert upstream == {
        "success": False,
        "message": "Failed to fetch verses: Quran API error: 503",
        "error": "upstream_error",
    }


def test_render():
    service, fetcher = make_service()
    markdown = service.render("al-kahf 10")
    assert markdown.startswith("# Quran Verse Explanation")
    assert "## 1. Al-Kahf 18:10" in markdown


def test_module_level_helper():
    fetcher = FakeFetcher()
    records = resolve_and_assemble("1:1-5", fetcher=fetcher)
    assert fetcher.calls == [(1, 1, 5)]
    assert [r.reference for r in records][-1] == "Al-Fatihah 1:5"


def test_parse_skips_range_policy():
    service, fetcher = make_service()
    assert service.parse("2:1-10") == VerseRange(2, 1, 10)
    with pytest.raises(RangeTooLargeError):
        service.resolve("2:1-10")
    assert fetcher.calls == []
