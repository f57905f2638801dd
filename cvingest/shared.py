"""
Shared models and text utilities.

Defines the document models passed between the extraction, reordering and
segmentation stages, the ingestion settings, and the text normalization
helpers every extraction path goes through.
"""

from __future__ import annotations

import re

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from .errors import EmptyOrCorruptDocument

# ------------------------- Constants -------------------------

MAX_FILE_SIZE = 10 * 1024 * 1024
MIN_TEXT_LENGTH = 50
REORDER_SCAN_LINES = 30

# ------------------------- Models -------------------------


class DocumentFormat(str, Enum):
    PDF = "pdf"
    DOCX = "docx"


class SectionKind(str, Enum):
    CONTACT = "contact"
    SUMMARY = "summary"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"


@dataclass(frozen=True)
class IngestConfig:
    """Tunables for a single parse; the defaults match the upload contract."""
    max_file_size: int = MAX_FILE_SIZE
    min_text_length: int = MIN_TEXT_LENGTH
    reorder_scan_lines: int = REORDER_SCAN_LINES


@dataclass(frozen=True)
class RawDocument:
    data: bytes
    filename: str
    size: Optional[int] = None

    def __post_init__(self) -> None:
        if self.size is None:
            object.__setattr__(self, "size", len(self.data))


@dataclass(frozen=True)
class ExtractionMetadata:
    has_tables: bool = False
    has_columns: bool = False
    has_images: bool = False

    def as_dict(self) -> Dict[str, bool]:
        return {
            "hasTables": self.has_tables,
            "hasColumns": self.has_columns,
            "hasImages": self.has_images,
        }


@dataclass(frozen=True)
class ExtractionResult:
    """Raw text and layout flags produced by one extractor."""
    text: str
    metadata: ExtractionMetadata = field(default_factory=ExtractionMetadata)


@dataclass(frozen=True)
class ResumeDocument:
    """
    The normalized, segmented resume.

    ``sections`` is read-only and keeps the order in which each section
    was first seen in the text.
    """
    text: str
    sections: Mapping[SectionKind, str]
    filename: str
    file_size: int
    file_type: DocumentFormat
    metadata: ExtractionMetadata = field(default_factory=ExtractionMetadata)

    def __post_init__(self) -> None:
        if not isinstance(self.sections, MappingProxyType):
            object.__setattr__(self, "sections", MappingProxyType(dict(self.sections)))

    def as_dict(self) -> Dict[str, Any]:
        metadata: Dict[str, Any] = self.metadata.as_dict()
        metadata["fileSize"] = self.file_size
        return {
            "text": self.text,
            "fileName": self.filename,
            "fileType": self.file_type.value,
            "sections": {kind.value: content for kind, content in self.sections.items()},
            "metadata": metadata,
        }

# ------------------------- Text helpers -------------------------

_BLANK_RUN_RE = re.compile(r"\n{3,}")


def normalize_text_for_processing(s: str) -> str:
    """
    Normalize what we consider "text" inside a single paragraph:
    - convert NBSP to normal space
    - replace soft hyphen with real hyphen
    - normalize newlines
    """
    s = s.replace("\u00A0", " ")
    s = s.replace("\u00AD", "-")  # preserve "high-quality"
    s = s.replace("\r\n", "\n").replace("\r", "\n")
    return s


def normalize_text(text: str) -> str:
    """
    Canonicalize extracted text.

    CRLF becomes LF, runs of three or more newlines collapse to a single
    blank line, and surrounding whitespace is trimmed. Applying it twice
    gives the same result as applying it once.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _BLANK_RUN_RE.sub("\n\n", text)
    return text.strip()


def require_meaningful_text(text: str, min_length: int = MIN_TEXT_LENGTH) -> str:
    if not text or len(text) < min_length:
        raise EmptyOrCorruptDocument(len(text or ""), min_length)
    return text
