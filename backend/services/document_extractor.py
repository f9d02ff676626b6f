"""Plain-text extraction from uploaded resume files.

Dispatch is by lower-cased file extension:
    .pdf          -> pdfplumber page text
    .docx / .doc  -> python-docx paragraphs and table cells
    anything else -> UTF-8 decode with replacement characters

Format-specific parse failures degrade to an empty string. Only an
unreadable backing file raises ExtractionError. The backing file is
always removed once extraction finishes.
"""

import io
import logging
import os
import tempfile
from pathlib import Path

import docx
import pdfplumber

from models.requests import UploadedDocument

logger = logging.getLogger(__name__)

PDF_EXTENSIONS = frozenset({".pdf"})
WORD_EXTENSIONS = frozenset({".docx", ".doc"})


class ExtractionError(Exception):
    """The uploaded document's bytes could not be read."""


def save_upload(filename: str, content: bytes) -> UploadedDocument:
    """Spool uploaded bytes to a temporary file keeping the original extension."""
    suffix = Path(filename).suffix.lower()
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix, prefix="resume-") as tmp:
        tmp.write(content)
    return UploadedDocument(filename=filename, path=Path(tmp.name))


def extract_text_pdf(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract all text from a DOCX file, including table cells."""
    doc = docx.Document(io.BytesIO(docx_bytes))
    lines = [p.text for p in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            cells = [cell.text for cell in row.cells if cell.text.strip()]
            if cells:
                lines.append(" | ".join(cells))
    return "\n".join(lines).strip()


def extract_text_plain(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")


def _read_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        raise ExtractionError(f"Could not read uploaded file: {e}") from e


def _discard(path: Path) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("Failed to delete temporary upload %s: %s", path, e)


def extract(document: UploadedDocument) -> str:
    """Return best-effort plain text for ``document`` and delete its backing file."""
    try:
        raw = _read_bytes(document.path)
        ext = document.extension

        if ext in PDF_EXTENSIONS:
            parser = extract_text_pdf
        elif ext in WORD_EXTENSIONS:
            parser = extract_text_docx
        else:
            return extract_text_plain(raw)

        try:
            return parser(raw)
        except Exception as e:
            logger.warning("Could not parse %s as %s: %s", document.filename, ext, e)
            return ""
    finally:
        _discard(document.path)
