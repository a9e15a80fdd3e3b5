# qverse/services/quran/errors.py
"""
Error taxonomy for Quran reference resolution.

Every failure raised by the parser, the range policy and the verse
fetcher derives from QuranReferenceError and carries a machine-readable
``code`` (snake_case) plus a message that is safe to show to the user.
Callers decide the final phrasing.
"""

from typing import Optional


class QuranReferenceError(Exception):
    """Base exception for reference resolution failures."""

    code = "quran_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON error payloads."""
        return {"error": self.code, "detail": self.message}


class InvalidInputError(QuranReferenceError):
    """Raised when the reference is not a non-empty string."""

    code = "invalid_input"

    def __init__(self, message: str = "Reference must be a non-empty string."):
        super().__init__(message)


class UnresolvedReferenceError(QuranReferenceError):
    """Raised when no parsing strategy recognises the reference."""

    code = "unresolved_reference"

    def __init__(self, reference: str):
        super().__init__(f"Invalid Quran reference: {reference}")
        self.reference = reference

    def to_dict(self) -> dict:
        payload = super().to_dict()
        payload["reference"] = self.reference
        return payload


class RangePolicyError(QuranReferenceError):
    """Base for verse-count policy violations. Carries the requested span."""

    def __init__(self, span: int, message: str):
        super().__init__(message)
        self.span = span

    def to_dict(self) -> dict:
        payload = super().to_dict()
        payload["span"] = self.span
        return payload


class RangeTooLargeError(RangePolicyError):
    """Raised when more verses are requested than the policy allows."""

    code = "range_too_large"

    def __init__(self, span: int, max_verses: int = 5):
        super().__init__(
            span,
            f"Please request between 1 and {max_verses} verses only. "
            f"You requested {span} verses.",
        )
        self.max_verses = max_verses


class RangeInvalidError(RangePolicyError):
    """Raised for a malformed range (end verse before start verse)."""

    code = "range_invalid"

    def __init__(self, span: int):
        super().__init__(span, f"Invalid verse range (span {span}).")


class UpstreamError(QuranReferenceError):
    """
    Raised when the verse data source fails.

    The message stays short; transport details are logged, not surfaced.
    """

    code = "upstream_error"

    def __init__(self, message: str = "Failed to fetch Quran verses.", status: Optional[int] = None):
        super().__init__(message)
        self.status = status

    def to_dict(self) -> dict:
        payload = super().to_dict()
        if self.status is not None:
            payload["upstream_status"] = self.status
        return payload
