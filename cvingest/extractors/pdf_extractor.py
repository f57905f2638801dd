"""
PDF text extractor.

Text comes from pdfplumber, page by page. PDF text alone carries no reliable
table/column/image information, so metadata is always all-false.
"""

from __future__ import annotations

import io
import re
from functools import lru_cache
from typing import List

from ..errors import ExtractionFailure
from ..logging_utils import LOG, quiet_third_party_loggers
from ..shared import DocumentFormat, ExtractionMetadata, ExtractionResult, normalize_text
from .base import DocumentExtractor

# glyphs without a unicode mapping come out as "(cid:123)"
_CID_RE = re.compile(r"\(cid:\d+\)")

# pdf-parse style separator between pages
PAGE_SEPARATOR = "\n\n"


@lru_cache(maxsize=None)
def _load_pdfplumber():
    """Import pdfplumber on first use and reuse the module afterwards."""
    import pdfplumber

    quiet_third_party_loggers()
    return pdfplumber


class PdfTextExtractor(DocumentExtractor):
    """Extracts plain text from every page of a PDF using pdfplumber."""

    format = DocumentFormat.PDF

    def extract(self, data: bytes) -> ExtractionResult:
        backend = _load_pdfplumber()
        try:
            pages: List[str] = []
            with backend.open(io.BytesIO(data)) as pdf:
                for page in pdf.pages:
                    pages.append(page.extract_text() or "")
        except Exception as e:
            LOG.error("Error parsing PDF: %s", e)
            raise ExtractionFailure(DocumentFormat.PDF, str(e)) from e

        text = _CID_RE.sub("", PAGE_SEPARATOR.join(pages))
        LOG.debug("PDF: extracted %d page(s), %d chars", len(pages), len(text))
        return ExtractionResult(text=normalize_text(text), metadata=ExtractionMetadata())
