"""
High-level resume ingestion pipeline.

Routes a document to its extractor, normalizes the text, repairs PDF line
order, and segments the result into sections.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import DocumentTooLarge
from .extractors import get_extractor
from .logging_utils import LOG
from .reorder import reorder_extracted_text
from .section_parser import detect_sections
from .shared import (
    DocumentFormat,
    IngestConfig,
    RawDocument,
    ResumeDocument,
    normalize_text,
    require_meaningful_text,
)
from .validation import detect_format

DEFAULT_CONFIG = IngestConfig()

# ------------------------- High-level pipeline -------------------------


def parse_raw_document(raw: RawDocument, config: Optional[IngestConfig] = None) -> ResumeDocument:
    """
    Parse one in-memory resume.

    Raises:
        DocumentTooLarge: the buffer is above config.max_file_size
        ExtractionFailure: the PDF/DOCX backend could not read the buffer
        EmptyOrCorruptDocument: fewer than config.min_text_length characters
            survived normalization
    """
    config = config or DEFAULT_CONFIG

    actual_size = max(len(raw.data), raw.size or 0)
    if actual_size > config.max_file_size:
        raise DocumentTooLarge(actual_size, config.max_file_size)

    file_type = detect_format(raw.filename)
    LOG.debug("Parsing %s as %s (%d bytes)", raw.filename, file_type.value, len(raw.data))

    result = get_extractor(file_type).extract(raw.data)

    text = normalize_text(result.text)
    if file_type == DocumentFormat.PDF:
        text = normalize_text(reorder_extracted_text(text, config.reorder_scan_lines))
    require_meaningful_text(text, config.min_text_length)

    return ResumeDocument(
        text=text,
        sections=detect_sections(text),
        filename=raw.filename,
        file_size=raw.size,
        file_type=file_type,
        metadata=result.metadata,
    )


def parse_resume(
    data: bytes,
    filename: str,
    size: Optional[int] = None,
    config: Optional[IngestConfig] = None,
) -> ResumeDocument:
    """Parse resume bytes uploaded under ``filename``."""
    return parse_raw_document(RawDocument(data=data, filename=filename, size=size), config)


def parse_resume_file(path: Path, config: Optional[IngestConfig] = None) -> ResumeDocument:
    """Read a resume from disk and parse it."""
    if not path.exists():
        raise FileNotFoundError(f"Source file not found: {path}")
    if not path.is_file():
        raise ValueError(f"Source must be a file: {path}")

    config = config or DEFAULT_CONFIG
    size = path.stat().st_size
    if size > config.max_file_size:
        raise DocumentTooLarge(size, config.max_file_size)

    return parse_resume(path.read_bytes(), path.name, size=size, config=config)


def process_single_file(
    path: Path,
    out: Optional[Path] = None,
    config: Optional[IngestConfig] = None,
) -> Dict[str, Any]:
    """Parse a resume and optionally write it to JSON. Returns the parsed data dict."""
    data = parse_resume_file(path, config).as_dict()

    if out is not None:
        out.parent.mkdir(parents=True, exist_ok=True)
        with out.open("w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

    return data
