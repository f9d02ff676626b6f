import io

import docx
import pytest

from models.requests import UploadedDocument
from services import document_extractor
from services.document_extractor import ExtractionError, extract, save_upload


def _make_docx_bytes() -> bytes:
    doc = docx.Document()
    doc.add_paragraph("Jane Roe")
    doc.add_paragraph("Senior Python Engineer")
    table = doc.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Skills"
    table.rows[0].cells[1].text = "Docker, Kubernetes"
    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()


def _make_pdf_bytes(text: str) -> bytes:
    """Single-page PDF drawing ``text`` in Helvetica, with a valid xref table."""
    content = f"BT /F1 24 Tf 72 720 Td ({text}) Tj ET".encode("latin-1")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d >>\nstream\n" % len(content) + content + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"
    xref_at = len(out)
    out += b"xref\n0 %d\n0000000000 65535 f \n" % (len(objects) + 1)
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (
        len(objects) + 1,
        xref_at,
    )
    return bytes(out)


def test_save_upload_keeps_extension():
    document = save_upload("My Resume.PDF", b"%PDF-1.4")
    try:
        assert document.path.exists()
        assert document.path.suffix == ".pdf"
        assert document.path.read_bytes() == b"%PDF-1.4"
        assert document.extension == ".pdf"
    finally:
        document.path.unlink(missing_ok=True)


def test_plain_text_passthrough():
    document = save_upload("resume.txt", "Python developer\nDocker".encode("utf-8"))
    assert extract(document) == "Python developer\nDocker"
    assert not document.path.exists()


def test_unknown_extension_decoded_as_text():
    document = save_upload("resume.md", b"# Jane Roe")
    assert extract(document) == "# Jane Roe"


def test_invalid_utf8_uses_replacement_chars():
    document = save_upload("resume.txt", b"caf\xe9 latte")
    assert extract(document) == "caf\ufffd latte"


def test_docx_paragraphs_and_tables():
    document = save_upload("resume.docx", _make_docx_bytes())
    text = extract(document)
    assert "Jane Roe" in text
    assert "Senior Python Engineer" in text
    assert "Skills | Docker, Kubernetes" in text
    assert not document.path.exists()


def test_uppercase_docx_extension_dispatches_to_docx():
    document = save_upload("RESUME.DOCX", _make_docx_bytes())
    assert "Jane Roe" in extract(document)


def test_corrupt_docx_returns_empty():
    document = save_upload("resume.docx", b"definitely not a zip archive")
    assert extract(document) == ""
    assert not document.path.exists()


def test_legacy_doc_unparsable_returns_empty():
    document = save_upload("resume.doc", b"\xd0\xcf\x11\xe0 legacy binary")
    assert extract(document) == ""


def test_corrupt_pdf_returns_empty():
    document = save_upload("resume.pdf", b"this is not a pdf")
    assert extract(document) == ""
    assert not document.path.exists()


def test_pdf_text_extracted():
    document = save_upload("resume.pdf", _make_pdf_bytes("Jane Roe Python Engineer"))
    text = extract(document)
    assert "Jane" in text
    assert "Python" in text
    assert not document.path.exists()


def test_pdf_dispatch(monkeypatch):
    seen = {}

    def fake_pdf(raw):
        seen["raw"] = raw
        return "pdf text"

    monkeypatch.setattr(document_extractor, "extract_text_pdf", fake_pdf)
    document = save_upload("cv.pdf", b"%PDF-bytes")
    assert extract(document) == "pdf text"
    assert seen["raw"] == b"%PDF-bytes"


def test_parser_crash_degrades_and_cleans_up(monkeypatch):
    def boom(raw):
        raise RuntimeError("parser exploded")

    monkeypatch.setattr(document_extractor, "extract_text_pdf", boom)
    document = save_upload("cv.pdf", b"%PDF-bytes")
    assert extract(document) == ""
    assert not document.path.exists()


def test_unreadable_file_raises(tmp_path):
    document = UploadedDocument(filename="resume.txt", path=tmp_path / "missing.txt")
    with pytest.raises(ExtractionError):
        extract(document)


def test_directory_path_raises(tmp_path):
    target = tmp_path / "resume.txt"
    target.mkdir()
    document = UploadedDocument(filename="resume.txt", path=target)
    with pytest.raises(ExtractionError):
        extract(document)


def test_delete_failure_is_swallowed(monkeypatch):
    document = save_upload("resume.txt", b"still returned")

    def deny(path):
        raise PermissionError("read-only filesystem")

    monkeypatch.setattr(document_extractor.os, "remove", deny)
    try:
        assert extract(document) == "still returned"
    finally:
        monkeypatch.undo()
        document.path.unlink(missing_ok=True)
