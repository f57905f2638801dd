"""Tests for the PDF and DOCX extractors and the format-to-extractor lookup."""

import io
import zipfile

import pytest

from conftest import paragraphs_xml
from cvingest.errors import ExtractionFailure
from cvingest.extractors import (
    EXTRACTORS,
    DocumentExtractor,
    DocxStructuralExtractor,
    PdfTextExtractor,
    get_extractor,
)
from cvingest.pipeline import parse_resume
from cvingest.shared import DocumentFormat, ExtractionMetadata, ExtractionResult, SectionKind


class TestPdfTextExtractor:
    """Tests for PdfTextExtractor with a mocked pdfplumber."""

    def test_joins_all_pages(self, mock_pdf_backend):
        """Every page is extracted; pages are separated by a blank line."""
        backend = mock_pdf_backend("Page one", "Page two", "Page three")
        result = PdfTextExtractor().extract(b"%PDF-1.7")

        assert result.text == "Page one\n\nPage two\n\nPage three"
        backend.open.assert_called_once()

    def test_metadata_is_always_all_false(self, mock_pdf_backend):
        """PDF extraction never reports layout features."""
        mock_pdf_backend("Some text")
        assert PdfTextExtractor().extract(b"%PDF").metadata == ExtractionMetadata()

    def test_text_is_normalized(self, mock_pdf_backend):
        """CRLF and long blank runs are cleaned up."""
        mock_pdf_backend("  Line one\r\nLine two\n\n\n\nLine three  ")
        assert PdfTextExtractor().extract(b"%PDF").text == "Line one\nLine two\n\nLine three"

    def test_empty_pages_and_cid_glyphs(self, mock_pdf_backend):
        """Pages without text count as empty; (cid:N) artifacts are removed."""
        mock_pdf_backend(None, "Jane(cid:127) Doe")
        assert PdfTextExtractor().extract(b"%PDF").text == "Jane Doe"

    def test_backend_failure_becomes_extraction_failure(self, mock_pdf_backend):
        """A pdfplumber error is raised as ExtractionFailure(kind=PDF)."""
        backend = mock_pdf_backend()
        backend.open.side_effect = ValueError("No /Root object! - Is this really a PDF?")

        with pytest.raises(ExtractionFailure) as exc_info:
            PdfTextExtractor().extract(b"garbage")

        assert exc_info.value.kind == DocumentFormat.PDF
        assert isinstance(exc_info.value.__cause__, ValueError)
        assert "Failed to parse PDF file" in str(exc_info.value)


class TestDocxStructuralExtractor:
    """Tests for DocxStructuralExtractor."""

    def test_paragraphs_separated_by_blank_lines(self, make_docx_bytes):
        """Visible paragraph text is joined with blank lines."""
        data = make_docx_bytes(paragraphs_xml("Jane Doe", "EDUCATION", "BA Math"))
        result = DocxStructuralExtractor().extract(data)
        assert result.text == "Jane Doe\n\nEDUCATION\n\nBA Math"

    def test_metadata_from_markup(self, make_docx_bytes):
        """Layout flags come from the structure scan."""
        body = (
            paragraphs_xml("Hello")
            + '<w:p><w:r><w:drawing><a:blip cstate="print"/></w:drawing></w:r></w:p>'
            + '<w:sectPr><w:cols w:num="3"/></w:sectPr>'
        )
        metadata = DocxStructuralExtractor().extract(make_docx_bytes(body)).metadata
        assert metadata == ExtractionMetadata(has_tables=False, has_columns=True, has_images=True)

    def test_not_a_zip_is_extraction_failure(self):
        """Unreadable containers raise ExtractionFailure(kind=DOCX)."""
        with pytest.raises(ExtractionFailure) as exc_info:
            DocxStructuralExtractor().extract(b"plain text, not a docx")
        assert exc_info.value.kind == DocumentFormat.DOCX
        assert exc_info.value.__cause__ is not None

    def test_missing_document_part_is_extraction_failure(self):
        """A zip without word/document.xml cannot be read."""
        buf = io.BytesIO()
        with zipfile.ZipFile(buf, "w") as zf:
            zf.writestr("[Content_Types].xml", "<?xml version='1.0'?><Types/>")

        with pytest.raises(ExtractionFailure):
            DocxStructuralExtractor().extract(buf.getvalue())

    def test_structure_scan_failure_is_not_fatal(self, make_docx_bytes, caplog):
        """Text survives when only the markup scan fails."""
        document = (
            '<?xml version="1.0" encoding="ISO-8859-1"?>'
            '<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">'
            "<w:body><w:p><w:r><w:t>Caf\xe9 owner</w:t></w:r></w:p><w:tbl/></w:body></w:document>"
        ).encode("latin-1")
        buf = io.BytesIO()
        with zipfile.ZipFile(buf, "w") as zf:
            zf.writestr("word/document.xml", document)

        with caplog.at_level("WARNING", logger="cvingest"):
            result = DocxStructuralExtractor().extract(buf.getvalue())

        assert result.text == "Caf\xe9 owner"
        assert result.metadata == ExtractionMetadata()
        assert "Could not analyze DOCX XML structure" in caplog.text


class TestGetExtractor:
    """Tests for the format-to-extractor lookup."""

    def test_every_format_has_an_extractor(self):
        """Each DocumentFormat maps to an extractor declaring that format."""
        assert set(EXTRACTORS) == set(DocumentFormat)
        for file_type, extractor_class in EXTRACTORS.items():
            assert extractor_class.format == file_type

    def test_get_extractor_returns_instances(self):
        """get_extractor() builds the extractor for a format."""
        assert isinstance(get_extractor(DocumentFormat.PDF), PdfTextExtractor)
        assert isinstance(get_extractor(DocumentFormat.DOCX), DocxStructuralExtractor)

    def test_pipeline_uses_the_mapping(self, monkeypatch):
        """parse_resume() extracts with the class mapped to the detected format."""

        class StaticExtractor(DocumentExtractor):
            """Returns fixed text for any input."""

            format = DocumentFormat.PDF

            def extract(self, data: bytes) -> ExtractionResult:
                return ExtractionResult(text="EDUCATION\nBSc Mathematics, University of Somewhere, 2015")

        monkeypatch.setitem(EXTRACTORS, DocumentFormat.PDF, StaticExtractor)

        doc = parse_resume(b"ignored", "cv.pdf")
        assert doc.sections == {SectionKind.EDUCATION: "BSc Mathematics, University of Somewhere, 2015"}

    def test_base_class_is_abstract(self):
        """DocumentExtractor cannot be instantiated directly."""
        with pytest.raises(TypeError):
            DocumentExtractor()
