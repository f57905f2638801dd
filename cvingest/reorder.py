"""
Repair the line order of text extracted from a PDF.

Some PDF layouts make the extractor emit resume sections before the
name/contact block. When a section keyword shows up before any contact
detail near the top of the text, the lines are rearranged so the header
block comes first, followed by one blank line and the body.

Running the repair on its own output leaves it unchanged.
"""

from __future__ import annotations

import re
from typing import List, Tuple

from .logging_utils import LOG
from .shared import REORDER_SCAN_LINES

SECTION_KEYWORDS = (
    "PROFESSIONAL EXPERIENCE",
    "WORK EXPERIENCE",
    "EXPERIENCE",
    "EDUCATION",
    "SKILLS",
    "PROFESSIONAL SUMMARY",
)

CONTACT_PATTERNS = (
    re.compile(r"mobile:|phone:|email:|linkedin:", re.IGNORECASE),
    re.compile(r"\+?\d{2,3}[\s-]?\d{3,4}[\s-]?\d{4,}"),
    re.compile(r"[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}", re.IGNORECASE),
    re.compile(r"linkedin\.com", re.IGNORECASE),
)

# "Jane Doe", "Mary-Ann O'Neil": one to four capitalised words
_NAME_RE = re.compile(r"^[A-Z][\w'.-]*(?:\s+[A-Z][\w'.-]*){0,3}$")


def is_section_line(line: str) -> bool:
    upper = line.strip().upper()
    return any(keyword in upper for keyword in SECTION_KEYWORDS)


def is_contact_line(line: str) -> bool:
    stripped = line.strip()
    return any(pattern.search(stripped) for pattern in CONTACT_PATTERNS)


def _looks_like_name(line: str) -> bool:
    stripped = line.strip()
    return bool(_NAME_RE.match(stripped)) and not is_section_line(stripped)


def _is_blank(line: str) -> bool:
    return not line.strip()


def find_anchors(lines: List[str], scan_lines: int = REORDER_SCAN_LINES) -> Tuple[int, int]:
    """
    Index of the first section-keyword line and of the first contact line
    within the first ``scan_lines`` lines; -1 where none was found.
    """
    first_section = -1
    first_contact = -1
    for i, line in enumerate(lines[:scan_lines]):
        if first_section == -1 and is_section_line(line):
            first_section = i
        if first_contact == -1 and is_contact_line(line):
            first_contact = i
        if first_section != -1 and first_contact != -1:
            break
    return first_section, first_contact


def _lift_contact_block(body: List[str], contact: int) -> Tuple[List[str], List[str]]:
    """
    Cut the contact block out of ``body``: the contact line at ``contact``,
    a name line right above it, and the contact lines right below it.
    body[0] is always the first section line and is never lifted.
    """
    start = contact
    if contact - 1 > 0 and _looks_like_name(body[contact - 1]):
        start = contact - 1

    end = contact + 1
    while end < len(body) and is_contact_line(body[end]) and not is_section_line(body[end]):
        end += 1

    block = body[start:end]
    rest = body[:start] + body[end:]

    if 0 < start < len(rest) and _is_blank(rest[start - 1]) and _is_blank(rest[start]):
        del rest[start]
    while rest and _is_blank(rest[-1]):
        rest.pop()
    return block, rest


def reorder_extracted_text(text: str, scan_lines: int = REORDER_SCAN_LINES) -> str:
    lines = text.split("\n")
    first_section, first_contact = find_anchors(lines, scan_lines)

    if first_section == -1 or first_contact == -1 or first_section >= first_contact:
        return text

    header = lines[:first_section]
    while header and _is_blank(header[-1]):
        header.pop()
    body = lines[first_section:]

    if not any(line.strip() for line in header):
        header, body = _lift_contact_block(body, first_contact - first_section)

    LOG.info(
        "Fixing extraction order: section at line %d precedes contact at line %d",
        first_section, first_contact,
    )
    return "\n".join(header + [""] + body)
