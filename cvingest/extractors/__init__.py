"""
Document extraction interfaces and implementations.

One extractor class per DocumentFormat; the pipeline asks for the one
matching the format detect_format() picked.
"""

from __future__ import annotations

from typing import Dict, Type

from ..shared import DocumentFormat
from .base import DocumentExtractor
from .docx_extractor import DocxStructuralExtractor
from .docx_utils import detect_layout, scan_docx_structure
from .pdf_extractor import PdfTextExtractor

EXTRACTORS: Dict[DocumentFormat, Type[DocumentExtractor]] = {
    DocumentFormat.PDF: PdfTextExtractor,
    DocumentFormat.DOCX: DocxStructuralExtractor,
}


def get_extractor(file_type: DocumentFormat) -> DocumentExtractor:
    """A fresh extractor for ``file_type``; every DocumentFormat has one."""
    return EXTRACTORS[file_type]()


__all__ = [
    "DocumentExtractor",
    "DocxStructuralExtractor",
    "PdfTextExtractor",
    "EXTRACTORS",
    "get_extractor",
    "detect_layout",
    "scan_docx_structure",
]
