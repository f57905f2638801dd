"""
Split normalized resume text into named sections.

A single pass over the lines: a line that starts with a known section
heading opens that section, every other non-empty line is appended to the
open section. Lines before the first heading belong to no section and are
dropped.
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Tuple

from .logging_utils import LOG
from .shared import SectionKind

# ------------------------- Patterns / section titles -------------------------

# Evaluated top to bottom; the first match wins. "Professional Summary"
# must resolve to SUMMARY before EXPERIENCE is tried, and so on.
SECTION_PATTERNS: Tuple[Tuple[SectionKind, "re.Pattern[str]"], ...] = (
    (SectionKind.CONTACT, re.compile(
        r"^(contact|personal\s+information|contact\s+information)",
        re.IGNORECASE,
    )),
    (SectionKind.SUMMARY, re.compile(
        r"^(summary|professional\s+summary|profile|objective|about\s+me)",
        re.IGNORECASE,
    )),
    (SectionKind.EXPERIENCE, re.compile(
        r"^(experience|work\s+experience|employment|professional\s+experience|work\s+history)",
        re.IGNORECASE,
    )),
    (SectionKind.EDUCATION, re.compile(
        r"^(education|academic\s+background|qualifications)",
        re.IGNORECASE,
    )),
    (SectionKind.SKILLS, re.compile(
        r"^(skills|technical\s+skills|core\s+competencies|expertise)",
        re.IGNORECASE,
    )),
)


def match_section_heading(line: str) -> Optional[SectionKind]:
    """The section a (trimmed) line opens, or None for ordinary lines."""
    for kind, pattern in SECTION_PATTERNS:
        if pattern.match(line):
            return kind
    return None


def detect_sections(text: str) -> Dict[SectionKind, str]:
    """
    Returns: mapping of SectionKind to section text, in order of first
    appearance. Sections with no content lines are left out.
    """
    sections: Dict[SectionKind, str] = {}

    current: Optional[SectionKind] = None
    buffer: List[str] = []

    def flush_current() -> None:
        if current is not None and buffer:
            sections[current] = "\n".join(buffer).strip()

    for raw_line in text.split("\n"):
        line = raw_line.strip()

        kind = match_section_heading(line)
        if kind is not None:
            flush_current()
            current = kind
            buffer = []
            continue

        if current is not None and line:
            buffer.append(line)

    flush_current()
    LOG.debug("Detected sections: %s", ", ".join(k.value for k in sections) or "none")
    return sections
