"""
Text extraction for uploaded context documents.

PDFs go through LangChain's PyPDFLoader; text and markdown files are
decoded as UTF-8.

Dependencies: langchain_community.document_loaders, pypdf
System role: Context document ingestion
"""

import logging
import os
import tempfile
from pathlib import PurePath

from langchain_community.document_loaders import PyPDFLoader

from coachdesk.core.exceptions import ParsingError, ValidationError

logger = logging.getLogger(__name__)

ALLOWED_CONTENT_TYPES = frozenset({
    "text/plain",
    "text/markdown",
    "text/x-markdown",
    "application/pdf",
})
ALLOWED_EXTENSIONS = frozenset({"txt", "md", "pdf"})


def file_extension(filename: str) -> str:
    """Lower-cased extension without the dot ("" if none)."""
    return PurePath(filename).suffix.lstrip(".").lower()


def ensure_allowed_file(filename: str, content_type: str | None) -> None:
    """
    Accept a file if either its MIME type or its extension is allowed.

    Raises:
        ValidationError: For any other file
    """
    if content_type in ALLOWED_CONTENT_TYPES or file_extension(filename) in ALLOWED_EXTENSIONS:
        return
    raise ValidationError(
        "Invalid file type. Only PDF, TXT, and MD files are allowed.",
        field="file",
        details={"content_type": content_type, "filename": filename},
    )


def is_pdf(filename: str, content_type: str | None) -> bool:
    return content_type == "application/pdf" or file_extension(filename) == "pdf"


def extract_pdf_text(data: bytes) -> str:
    """
    Extract text from PDF bytes, one page per paragraph.

    Raises:
        ParsingError: If the PDF cannot be read
    """
    fd, path = tempfile.mkstemp(suffix=".pdf")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        pages = PyPDFLoader(path).load()
    except Exception as e:
        logger.warning("PDF parsing failed", extra={"error": str(e)})
        raise ParsingError("Failed to parse PDF content", file_type="pdf") from e
    finally:
        os.unlink(path)
    return "\n\n".join(page.page_content for page in pages).strip()


def extract_text(data: bytes, filename: str, content_type: str | None) -> str:
    """
    Extract the text of an uploaded context document.

    Args:
        data: File bytes
        filename: Original file name
        content_type: MIME type reported by the client

    Returns:
        str: Extracted text

    Raises:
        ParsingError: If a PDF cannot be parsed
    """
    if is_pdf(filename, content_type):
        return extract_pdf_text(data)
    return data.decode("utf-8", errors="replace")
