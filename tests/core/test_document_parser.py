"""
Test suite for context document text extraction.

System role: Verification of upload validation and parsing
"""

from unittest.mock import MagicMock, patch

import pytest
from langchain_core.documents import Document

from coachdesk.application.document_parser import (
    ensure_allowed_file,
    extract_text,
    file_extension,
)
from coachdesk.core.exceptions import ParsingError, ValidationError


class TestEnsureAllowedFile:
    """Test suite for ensure_allowed_file()."""

    @pytest.mark.parametrize(
        "filename, content_type",
        [
            ("notes.txt", "text/plain"),
            ("values.md", "text/markdown"),
            ("values.md", "application/octet-stream"),
            ("deck", "application/pdf"),
        ],
    )
    def test_should_accept_by_type_or_extension(self, filename, content_type) -> None:
        ensure_allowed_file(filename, content_type)

    def test_should_reject_other_files(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ensure_allowed_file("report.docx", "application/msword")

        assert exc_info.value.message == "Invalid file type. Only PDF, TXT, and MD files are allowed."

    def test_file_extension_should_lowercase(self) -> None:
        assert file_extension("Deck.PDF") == "pdf"
        assert file_extension("README") == ""


class TestExtractText:
    """Test suite for extract_text()."""

    def test_should_decode_text_files(self) -> None:
        assert extract_text("Café values".encode("utf-8"), "v.txt", "text/plain") == "Café values"

    def test_should_replace_invalid_utf8(self) -> None:
        assert extract_text(b"ok \xff", "v.md", "text/markdown") == "ok �"

    def test_should_join_pdf_pages(self) -> None:
        loader = MagicMock()
        loader.load.return_value = [
            Document(page_content="Page one"),
            Document(page_content="Page two"),
        ]

        with patch("coachdesk.application.document_parser.PyPDFLoader", return_value=loader):
            text = extract_text(b"%PDF-1.4", "deck.pdf", "application/pdf")

        assert text == "Page one\n\nPage two"

    def test_should_raise_parsing_error_for_bad_pdf(self) -> None:
        loader = MagicMock()
        loader.load.side_effect = ValueError("EOF marker not found")

        with patch("coachdesk.application.document_parser.PyPDFLoader", return_value=loader):
            with pytest.raises(ParsingError) as exc_info:
                extract_text(b"garbage", "deck.pdf", "application/pdf")

        assert exc_info.value.message == "Failed to parse PDF content"
