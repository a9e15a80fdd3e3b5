# qverse/utils/errors.py
"""
JSON error responses for the HTTP API.

Every error body is {"error": "<snake_case code>", "detail": "..."} plus
any structured fields the failure carries (span, reference, status).
Resolution failures keep the code they were raised with; only the HTTP
status is chosen here.
"""

from typing import Optional

from flask import jsonify

from ..services.quran.errors import QuranReferenceError


# Resolution error code -> HTTP status
STATUS_BY_CODE = {
    "invalid_input": 400,
    "unresolved_reference": 404,
    "range_too_large": 400,
    "range_invalid": 400,
    "upstream_error": 502,
}


def error_response(code: str, status: int = 400, detail: Optional[str] = None, **extra):
    """Build a (response, status) pair for a Flask view to return."""
    body = {"error": code}
    if detail:
        body["detail"] = detail
    body.update(extra)
    return jsonify(body), status


def missing_field(field: str):
    """400 for an absent query parameter, e.g. {"error": "ref_required"}."""
    return error_response(f"{field}_required", 400, f"Missing required field: {field}")


def resolution_error(error: QuranReferenceError):
    """Map a reference resolution failure to its HTTP response."""
    body = error.to_dict()
    code = body.pop("error")
    detail = body.pop("detail", None)
    return error_response(code, STATUS_BY_CODE.get(code, 500), detail, **body)
