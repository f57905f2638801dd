# cvingest/__init__.py

from .errors import (
    CVIngestError,
    DocumentTooLarge,
    EmptyOrCorruptDocument,
    ExtractionFailure,
    UnsupportedFormat,
)
from .pipeline import parse_raw_document, parse_resume, parse_resume_file, process_single_file
from .reorder import reorder_extracted_text
from .section_parser import detect_sections
from .shared import (
    DocumentFormat,
    ExtractionMetadata,
    IngestConfig,
    RawDocument,
    ResumeDocument,
    SectionKind,
    normalize_text,
)
from .validation import detect_format, validate_upload

__all__ = [
    "CVIngestError",
    "DocumentTooLarge",
    "EmptyOrCorruptDocument",
    "ExtractionFailure",
    "UnsupportedFormat",
    "DocumentFormat",
    "ExtractionMetadata",
    "IngestConfig",
    "RawDocument",
    "ResumeDocument",
    "SectionKind",
    "detect_format",
    "validate_upload",
    "normalize_text",
    "reorder_extracted_text",
    "detect_sections",
    "parse_raw_document",
    "parse_resume",
    "parse_resume_file",
    "process_single_file",
]
