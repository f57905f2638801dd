"""
Typed failures raised while ingesting a resume.

Every fatal outcome of a parse is one of the classes below, so callers can
tell an unreadable upload from an empty one without inspecting messages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .shared import DocumentFormat


class CVIngestError(Exception):
    """Base class for all resume ingestion failures."""


class UnsupportedFormat(CVIngestError):
    """The upload is neither a PDF nor a DOCX file."""

    def __init__(self, filename: str, content_type: Optional[str] = None):
        self.filename = filename
        self.content_type = content_type
        super().__init__("Only PDF and DOCX files are supported")


class DocumentTooLarge(CVIngestError):
    """The buffer exceeds the configured size bound."""

    def __init__(self, size: int, max_size: int):
        self.size = size
        self.max_size = max_size
        limit_mb = max_size / (1024 * 1024)
        super().__init__(f"File size must be less than {limit_mb:g}MB")


class ExtractionFailure(CVIngestError):
    """
    The PDF or DOCX backend could not produce text.

    ``kind`` is the DocumentFormat that was being extracted; the backend's
    own exception is chained as ``__cause__``.
    """

    def __init__(self, kind: DocumentFormat, detail: str = ""):
        self.kind = kind
        self.detail = detail
        message = f"Failed to parse {kind.value.upper()} file"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class EmptyOrCorruptDocument(CVIngestError):
    """Normalized text is too short to be a resume."""

    def __init__(self, length: int, min_length: int):
        self.length = length
        self.min_length = min_length
        super().__init__(
            "Could not extract meaningful text from the file. Please ensure "
            "the file is not corrupted or password-protected."
        )


__all__ = [
    "CVIngestError",
    "UnsupportedFormat",
    "DocumentTooLarge",
    "ExtractionFailure",
    "EmptyOrCorruptDocument",
]
