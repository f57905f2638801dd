"""
Low-level DOCX / WordprocessingML helpers.

This module handles direct access to the parts of a DOCX container:
- reading word/document.xml out of the zip
- iterating body paragraphs and converting Word runs into plain text
- scanning the raw markup for tables, multi-column sections and images

It contains no resume-specific logic; sectioning is handled elsewhere.
"""

from __future__ import annotations

import io
import re
from functools import lru_cache
from typing import TYPE_CHECKING, Iterator, List
from zipfile import ZipFile

from ..logging_utils import LOG
from ..shared import ExtractionMetadata, normalize_text_for_processing

if TYPE_CHECKING:
    from lxml import etree

DOCUMENT_PART = "word/document.xml"

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
MC_NS = "http://schemas.openxmlformats.org/markup-compatibility/2006"
DOCX_NS = {"w": W_NS, "mc": MC_NS}

_TXBX_TAG = f"{{{W_NS}}}txbxContent"
_FALLBACK_TAG = f"{{{MC_NS}}}Fallback"

# ------------------------- Markup signatures -------------------------

_IMAGE_RES = (
    re.compile(r"<w:drawing[\s>]"),
    re.compile(r"<w:pict[\s>]"),
    re.compile(r"<a:blip[\s>]"),
)
_TABLE_RE = re.compile(r"<w:tbl[\s>]")
_COLS_RE = re.compile(r'<w:cols\s+w:num="(\d+)"')


@lru_cache(maxsize=None)
def _load_etree():
    """Import lxml.etree on first use and reuse the module afterwards."""
    from lxml import etree

    return etree


def _xml_parser() -> etree.XMLParser:
    # lxml parsers must not be shared between threads
    return _load_etree().XMLParser(recover=True, huge_tree=True)


def read_document_xml(data: bytes) -> bytes:
    """Return the raw bytes of the main document part."""
    with ZipFile(io.BytesIO(data)) as z:
        return z.read(DOCUMENT_PART)


def iter_document_paragraphs(data: bytes) -> Iterator[str]:
    """
    Yield the text of each non-empty paragraph in word/document.xml body,
    in document order. Table cells and text boxes are included; the
    compatibility fallback copy of a text box is skipped.
    """
    root = _load_etree().fromstring(read_document_xml(data), _xml_parser())
    if root is None:
        raise ValueError(f"{DOCUMENT_PART} is not parseable XML")

    for p in root.iterfind(".//w:body//w:p", DOCX_NS):
        if _has_ancestor(p, _FALLBACK_TAG):
            continue
        text = extract_text_from_w_p(p)
        if text:
            yield text


def extract_text_from_w_p(p: etree._Element) -> str:
    etree = _load_etree()
    parts: List[str] = []
    for node in p.iter():
        if not isinstance(node.tag, str) or _in_text_box_of(node, p):
            continue
        tag = etree.QName(node).localname
        if tag == "t" and node.text:
            parts.append(node.text)
        elif tag in ("noBreakHyphen", "softHyphen"):
            parts.append("-")
        elif tag in ("br", "cr"):
            parts.append("\n")
        elif tag == "tab":
            parts.append("\t")
    return normalize_text_for_processing("".join(parts)).strip()


def _has_ancestor(node: etree._Element, tag: str) -> bool:
    parent = node.getparent()
    while parent is not None:
        if parent.tag == tag:
            return True
        parent = parent.getparent()
    return False


def _in_text_box_of(node: etree._Element, p: etree._Element) -> bool:
    # text box paragraphs nested in p are yielded on their own
    parent = node.getparent()
    while parent is not None and parent is not p:
        if parent.tag == _TXBX_TAG:
            return True
        parent = parent.getparent()
    return False

# ------------------------- Structure scan -------------------------


def detect_layout(document_xml: str) -> ExtractionMetadata:
    """
    Look for layout markup in the text of word/document.xml.

    A plain substring/regex scan; the XML is never parsed here.
    """
    has_images = any(pattern.search(document_xml) for pattern in _IMAGE_RES)
    has_tables = _TABLE_RE.search(document_xml) is not None

    has_columns = False
    for match in _COLS_RE.finditer(document_xml):
        if int(match.group(1)) > 1:
            has_columns = True
            break

    return ExtractionMetadata(
        has_tables=has_tables,
        has_columns=has_columns,
        has_images=has_images,
    )


def scan_docx_structure(data: bytes) -> ExtractionMetadata:
    """
    Layout flags for a DOCX buffer. Never raises: an unreadable container
    is logged and reported as having no tables, columns or images.
    """
    try:
        document_xml = read_document_xml(data).decode("utf-8")
        return detect_layout(document_xml)
    except Exception as e:
        LOG.warning("Could not analyze DOCX XML structure: %s", e)
        return ExtractionMetadata()
