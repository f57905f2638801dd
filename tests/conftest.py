import io
import sys
import zipfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"

SAMPLE_RESUME_TEXT = (
    "Jane Doe\n"
    "jane.doe@example.com | +1 555-123-4567\n"
    "\n"
    "SUMMARY\n"
    "Backend engineer with eight years of Python experience.\n"
    "\n"
    "EXPERIENCE\n"
    "Acme Corp - Senior Engineer\n"
    "Built the billing platform.\n"
    "\n"
    "EDUCATION\n"
    "BSc Computer Science, State University\n"
    "\n"
    "SKILLS\n"
    "Python, PostgreSQL, Kubernetes"
)


def document_xml(body: str) -> str:
    """Wrap WordprocessingML body content in a w:document root."""
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        f'<w:document xmlns:w="{W_NS}" '
        'xmlns:a="http://schemas.openxmlformats.org/drawingml/2006/main">'
        f"<w:body>{body}</w:body></w:document>"
    )


def paragraphs_xml(*lines: str) -> str:
    return "".join(f"<w:p><w:r><w:t>{line}</w:t></w:r></w:p>" for line in lines)


@pytest.fixture
def make_docx_bytes():
    """Build an in-memory DOCX container from body XML."""

    def _make(body: str, document: str = None) -> bytes:
        buf = io.BytesIO()
        with zipfile.ZipFile(buf, "w") as zf:
            zf.writestr("[Content_Types].xml", "<?xml version='1.0'?><Types/>")
            zf.writestr("word/document.xml", document if document is not None else document_xml(body))
        return buf.getvalue()

    return _make


@pytest.fixture
def resume_docx(tmp_path: Path):
    """A real resume .docx written by python-docx, with one table."""
    from docx import Document

    doc = Document()
    for line in SAMPLE_RESUME_TEXT.split("\n"):
        if line:
            doc.add_paragraph(line)
    table = doc.add_table(rows=1, cols=2)
    table.cell(0, 0).text = "Languages"
    table.cell(0, 1).text = "English, German"

    path = tmp_path / "jane_doe.docx"
    doc.save(str(path))
    return path


@pytest.fixture
def mock_pdf_backend(monkeypatch):
    """
    Replace pdfplumber with a mock; call the returned function with the
    text of each page.
    """
    from cvingest.extractors import pdf_extractor

    backend = MagicMock()

    def _set_pages(*texts):
        pdf = MagicMock()
        pages = []
        for text in texts:
            page = MagicMock()
            page.extract_text.return_value = text
            pages.append(page)
        pdf.pages = pages
        backend.open.return_value.__enter__.return_value = pdf
        return backend

    monkeypatch.setattr(pdf_extractor, "_load_pdfplumber", lambda: backend)
    return _set_pages
