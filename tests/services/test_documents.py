"""
Unit tests for PDF/DOCX text extraction.
"""
import io
import unittest
from unittest.mock import patch

import docx
from pypdf import PdfWriter

from tuitility.core.errors import DocumentError, ExternalCollaboratorError
from tuitility.services.capabilities import Capability
from tuitility.services.documents import extract_text


def _docx_bytes(*paragraphs):
    document = docx.Document()
    for text in paragraphs:
        document.add_paragraph(text)
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


class TestExtractText(unittest.TestCase):

    def test_docx_paragraphs_joined(self):
        payload = _docx_bytes("First paragraph.", "Second one.")
        self.assertEqual(extract_text("notes.docx", io.BytesIO(payload)), "First paragraph.\nSecond one.")

    def test_extension_is_case_insensitive(self):
        payload = _docx_bytes("Hello")
        self.assertEqual(extract_text("NOTES.DOCX", io.BytesIO(payload)), "Hello")

    def test_blank_pdf_has_no_text(self):
        writer = PdfWriter()
        writer.add_blank_page(width=200, height=200)
        buffer = io.BytesIO()
        writer.write(buffer)
        self.assertEqual(extract_text("blank.pdf", io.BytesIO(buffer.getvalue())).strip(), "")

    def test_unsupported_type(self):
        with self.assertRaises(DocumentError) as ctx:
            extract_text("notes.txt", io.BytesIO(b"text"))
        self.assertEqual(ctx.exception.kind, DocumentError.UNSUPPORTED)

    def test_too_large(self):
        with self.assertRaises(DocumentError) as ctx:
            extract_text("big.pdf", io.BytesIO(b"x" * 2048), max_bytes=1024)
        self.assertEqual(ctx.exception.kind, DocumentError.TOO_LARGE)

    def test_empty_file(self):
        with self.assertRaises(DocumentError) as ctx:
            extract_text("empty.docx", io.BytesIO(b""))
        self.assertEqual(str(ctx.exception), "The uploaded file is empty.")

    def test_corrupt_files(self):
        for filename, message in (
            ("broken.pdf", "The PDF file could not be read."),
            ("broken.docx", "The DOCX file could not be read."),
        ):
            with self.subTest(filename=filename):
                with self.assertRaises(DocumentError) as ctx:
                    extract_text(filename, io.BytesIO(b"definitely not a document"))
                self.assertEqual(ctx.exception.kind, DocumentError.CORRUPT)
                self.assertEqual(str(ctx.exception), message)

    def test_missing_parser_reported(self):
        payload = _docx_bytes("Hello")
        missing = Capability("docx", "docx", "DOCX text extraction")
        with patch("tuitility.services.capabilities.importlib.util.find_spec", return_value=None):
            with patch("tuitility.services.documents.DOCX", missing):
                with self.assertRaises(ExternalCollaboratorError) as ctx:
                    extract_text("notes.docx", io.BytesIO(payload))
        self.assertEqual(str(ctx.exception), "DOCX text extraction is not available right now.")


if __name__ == "__main__":
    unittest.main()
