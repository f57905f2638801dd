"""
Upload checks and format routing.

``validate_upload`` is the thin guard run before parsing; ``detect_format``
decides which extractor a buffer goes to.
"""

from __future__ import annotations

from typing import Optional

from .errors import DocumentTooLarge, UnsupportedFormat
from .shared import MAX_FILE_SIZE, DocumentFormat

ALLOWED_CONTENT_TYPES = (
    "application/pdf",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
)
ALLOWED_EXTENSIONS = (".pdf", ".docx")


def detect_format(filename: str) -> DocumentFormat:
    """
    Route by filename: ``.pdf`` (any case) is PDF, everything else is DOCX.

    Files with other extensions are not rejected here; they reach the DOCX
    extractor and fail there with ExtractionFailure.
    """
    if filename.lower().endswith(".pdf"):
        return DocumentFormat.PDF
    return DocumentFormat.DOCX


def validate_upload(
    filename: str,
    size: int,
    content_type: Optional[str] = None,
    max_size: int = MAX_FILE_SIZE,
) -> None:
    """
    Reject uploads that are too large or clearly not a resume document.

    A file passes the type check when either its content type or its
    extension is recognised.

    Raises:
        DocumentTooLarge: size is above max_size
        UnsupportedFormat: neither content type nor extension is PDF/DOCX
    """
    if size > max_size:
        raise DocumentTooLarge(size, max_size)

    has_valid_type = content_type in ALLOWED_CONTENT_TYPES
    has_valid_extension = filename.lower().endswith(ALLOWED_EXTENSIONS)
    if not has_valid_type and not has_valid_extension:
        raise UnsupportedFormat(filename, content_type)
