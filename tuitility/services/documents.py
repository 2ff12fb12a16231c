"""
Plain-text extraction from uploaded PDF and DOCX files.
"""
import io
import logging
import os
import zipfile

from tuitility.core.errors import DocumentError
from tuitility.services.capabilities import DOCX, PDF

logger = logging.getLogger(__name__)

DEFAULT_MAX_BYTES = 50 * 1024 * 1024

SUPPORTED_EXTENSIONS = {".pdf", ".docx"}


def extract_text(filename, stream, max_bytes=DEFAULT_MAX_BYTES):
    """
    Read a PDF or DOCX upload and return its text.

    Args:
        filename (str): Original file name, used to pick the parser
        stream: Binary file-like object
        max_bytes (int): Size ceiling

    Returns:
        str: Extracted text

    Raises:
        DocumentError: unsupported format, size exceeded or unreadable file
    """
    ext = os.path.splitext(filename or "")[1].lower()
    if ext not in SUPPORTED_EXTENSIONS:
        raise DocumentError(
            DocumentError.UNSUPPORTED,
            "Unsupported file type. Please upload a PDF or DOCX file.",
        )

    # Read one byte past the ceiling to detect oversized files without loading all of them
    payload = stream.read(max_bytes + 1)
    if len(payload) > max_bytes:
        raise DocumentError(
            DocumentError.TOO_LARGE,
            f"File is too large. The limit is {max_bytes // (1024 * 1024)} MB.",
        )
    if not payload:
        raise DocumentError(DocumentError.CORRUPT, "The uploaded file is empty.")

    if ext == ".pdf":
        return _extract_pdf(payload, filename)
    return _extract_docx(payload, filename)


def _extract_pdf(payload, filename):
    PDF.require()
    from pypdf import PdfReader
    from pypdf.errors import PdfReadError

    try:
        reader = PdfReader(io.BytesIO(payload))
        pages = [page.extract_text() or "" for page in reader.pages]
    except (PdfReadError, ValueError, KeyError, TypeError) as e:
        logger.warning(f"Could not read PDF {filename}: {e}")
        raise DocumentError(DocumentError.CORRUPT, "The PDF file could not be read.") from e
    return "\n".join(pages)


def _extract_docx(payload, filename):
    DOCX.require()
    import docx
    from docx.opc.exceptions import PackageNotFoundError

    try:
        document = docx.Document(io.BytesIO(payload))
    except (PackageNotFoundError, zipfile.BadZipFile, ValueError, KeyError) as e:
        logger.warning(f"Could not read DOCX {filename}: {e}")
        raise DocumentError(DocumentError.CORRUPT, "The DOCX file could not be read.") from e
    return "\n".join(paragraph.text for paragraph in document.paragraphs)
