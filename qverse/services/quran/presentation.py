# qverse/services/quran/presentation.py
"""
Output shaping for verse records.

- build_tool_result / build_tool_error: the JSON-able result returned to
  agent tools and the HTTP API
- render_explanation: Markdown rendering of a verse set
"""

from typing import List, Sequence

from .assembler import VerseRecord
from .errors import QuranReferenceError, RangeTooLargeError


def _plural(count: int) -> str:
    return "" if count == 1 else "s"


def build_tool_result(records: Sequence[VerseRecord]) -> dict:
    """
    Wrap assembled records in the tool result envelope.

    Returns:
        {
            "success": True,
            "verses": [...],
            "totalVerses": 3,
            "message": "Retrieved 3 verses from Al-Baqarah"
        }
    """
    if not records:
        return {"success": False, "message": "No verses found for the provided reference."}

    count = len(records)
    return {
        "success": True,
        "verses": [r.to_dict() for r in records],
        "totalVerses": count,
        "message": f"Retrieved {count} verse{_plural(count)} from {records[0].chapter_name}",
    }


def build_tool_error(error: QuranReferenceError) -> dict:
    """Convert a resolution failure into a tool result with success=False."""
    if isinstance(error, RangeTooLargeError):
        message = (
            f"Please request {error.max_verses} or fewer verses at a time for detailed "
            f"explanations. You requested {error.span} verses."
        )
    else:
        message = f"Failed to fetch verses: {error.message}"

    result = {"success": False, "message": message, "error": error.code}
    reference = getattr(error, "reference", None)
    if reference is not None:
        result["reference"] = reference
    return result


def render_explanation(records: Sequence[VerseRecord]) -> str:
    """
    Render verses as a Markdown explanation.

    Each verse gets a numbered heading with its Arabic text and English
    translation, followed by a summary line.
    """
    if not records:
        return ""

    total = len(records)
    parts: List[str] = [f"# Quran Verse{_plural(total)} Explanation\n\n"]

    for index, record in enumerate(records, start=1):
        parts.append(f"## {index}. {record.reference}\n\n")
        parts.append(f"**Arabic Text:**\n{record.arabic}\n\n")
        parts.append(f"**English Translation:**\n{record.translation}\n\n")
        parts.append("---\n\n")

    parts.append(f"*Retrieved {total} verse{_plural(total)} from {records[0].chapter_name}*")
    return "".join(parts)
