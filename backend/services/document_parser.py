"""Resume document text extraction (PDF and DOCX)."""

import io
import logging
from pathlib import PurePath

import pdfplumber
from docx import Document

from services.errors import ExtractionFailed, UnsupportedFormat

logger = logging.getLogger(__name__)

PDF = "pdf"
DOCX = "docx"

MIME_TYPES = {
    "application/pdf": PDF,
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": DOCX,
}
EXTENSIONS = {".pdf": PDF, ".docx": DOCX}


def extract_text_pdf(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract all paragraph text from a DOCX file."""
    doc = Document(io.BytesIO(docx_bytes))
    return "\n".join(p.text for p in doc.paragraphs).strip()


def sniff_format(content: bytes) -> str:
    """Guess the format from magic numbers; DOCX is a zip archive."""
    if content[:4] == b"%PDF":
        return PDF
    if content[:2] == b"PK":
        return DOCX
    return PDF


def detect_format(content: bytes, hint: str | None = None) -> str:
    """Resolve the document format from a MIME type or filename, else sniff it.

    Raises UnsupportedFormat when the hint names anything but PDF or DOCX.
    """
    if not hint:
        return sniff_format(content)

    hint = hint.strip().lower()
    if hint in MIME_TYPES:
        return MIME_TYPES[hint]

    suffix = PurePath(hint).suffix or (hint if hint.startswith(".") else f".{hint}")
    if suffix in EXTENSIONS:
        return EXTENSIONS[suffix]
    raise UnsupportedFormat(f"Unsupported file type: {hint}")


_EXTRACTORS = {PDF: extract_text_pdf, DOCX: extract_text_docx}


def extract_text(content: bytes, hint: str | None = None) -> str:
    """Extract plain text from a resume document."""
    fmt = detect_format(content, hint)
    try:
        return _EXTRACTORS[fmt](content)
    except Exception as e:
        logger.warning("Failed to extract %s text: %s", fmt, e)
        raise ExtractionFailed(f"Failed to extract {fmt.upper()} text") from e
