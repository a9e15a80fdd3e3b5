# qverse/routes/quran_api.py
"""
API endpoints for Quran verse lookup.

Provides access to:
- Verse lookup with translation and chapter metadata
- Reference parsing (no upstream call)
- Markdown explanation of a verse set
"""

from flask import Blueprint, jsonify, request

from ..services.quran import (
    QuranReferenceError,
    QuranService,
    build_tool_result,
)
from ..utils.errors import missing_field, resolution_error

quran_bp = Blueprint("quran_api", __name__, url_prefix="/api/quran")

# Lazily initialized service instance
_service = None


def get_service() -> QuranService:
    """Get or create QuranService instance."""
    global _service
    if _service is None:
        _service = QuranService()
    return _service


def set_service(service: QuranService):
    """Replace the service instance (used by the app factory and tests)."""
    global _service
    _service = service


@quran_bp.get("/verses")
def get_verses():
    """
    Look up verses for a reference.

    Query params:
        ref: Reference string (required) e.g., "2:255-257", "ayat al-kursi"

    Returns:
        {
            "success": true,
            "verses": [
                {
                    "position": 1,
                    "total": 3,
                    "reference": "Al-Baqarah 2:255",
                    "arabic": "...",
                    "translation": "...",
                    "chapterName": "Al-Baqarah",
                    "verseNumber": 255
                }
            ],
            "totalVerses": 3,
            "message": "Retrieved 3 verses from Al-Baqarah"
        }
    """
    ref = request.args.get("ref")
    if not ref:
        return missing_field("ref")

    try:
        records = get_service().resolve_and_assemble(ref)
    except QuranReferenceError as e:
        return resolution_error(e)

    return jsonify(build_tool_result(records))


@quran_bp.get("/parse")
def parse_verses():
    """
    Parse a reference without fetching verses.

    The verse-count limit is not applied here; "span" reports the size
    so callers can check it before asking /verses.

    Query params:
        ref: Reference string (required)

    Returns:
        {"ref": "throne verse", "chapter": 2, "from_verse": 255,
         "to_verse": 255, "span": 1, "canonical": "2:255"}
    """
    ref = request.args.get("ref")
    if not ref:
        return missing_field("ref")

    try:
        verse_range = get_service().parse(ref)
    except QuranReferenceError as e:
        return resolution_error(e)

    return jsonify({"ref": ref, **verse_range.to_dict()})


@quran_bp.get("/explain")
def explain_verses():
    """
    Render verses for a reference as Markdown.

    Query params:
        ref: Reference string (required)

    Returns:
        {"ref": "2:255", "explanation": "# Quran Verse Explanation ..."}
    """
    ref = request.args.get("ref")
    if not ref:
        return missing_field("ref")

    try:
        explanation = get_service().render(ref)
    except QuranReferenceError as e:
        return resolution_error(e)

    return jsonify({"ref": ref, "explanation": explanation})
