# app/services/resume_parser.py

import os
import logging
import tempfile
from contextlib import contextmanager
from typing import Iterator, Optional

import fitz  # PyMuPDF
from docx import Document as DocxDocument

from ..exceptions import ExtractionError, UnsupportedFormatError

logger = logging.getLogger(__name__)

PDF_EXTENSION = ".pdf"
DOCX_EXTENSION = ".docx"
SUPPORTED_EXTENSIONS = (PDF_EXTENSION, DOCX_EXTENSION)


def file_extension(filename: str) -> str:
    return os.path.splitext(filename or "")[1].lower()


@contextmanager
def staged_upload(
    data: bytes, suffix: str = "", upload_dir: Optional[str] = None
) -> Iterator[str]:
    """
    Write an upload to a temporary file and yield its path.
    The file is removed when the block exits, however it exits.
    """
    if upload_dir:
        os.makedirs(upload_dir, exist_ok=True)
    fd, path = tempfile.mkstemp(suffix=suffix, dir=upload_dir)
    try:
        with os.fdopen(fd, "wb") as tmp:
            tmp.write(data)
        yield path
    finally:
        os.unlink(path)


def extract_text_from_pdf(path: str) -> str:
    try:
        with fitz.open(path) as doc:
            return "\n".join(page.get_text("text") for page in doc) or ""
    except Exception as e:
        raise ExtractionError("Error processing PDF with PyMuPDF", cause=e) from e


def extract_text_from_docx(path: str) -> str:
    try:
        doc = DocxDocument(path)
        return "\n".join(paragraph.text for paragraph in doc.paragraphs) or ""
    except Exception as e:
        raise ExtractionError("Error processing DOCX", cause=e) from e


def extract_text(
    data: bytes, filename: str, upload_dir: Optional[str] = None
) -> str:
    """Return the plain text of a PDF or DOCX upload."""
    extension = file_extension(filename)
    with staged_upload(data, suffix=extension, upload_dir=upload_dir) as path:
        if extension not in SUPPORTED_EXTENSIONS:
            logger.warning("Rejected upload %r with extension %r", filename, extension)
            raise UnsupportedFormatError(
                f"Unsupported file type {extension or '(none)'!r}; expected PDF or DOCX"
            )
        if extension == PDF_EXTENSION:
            return extract_text_from_pdf(path)
        return extract_text_from_docx(path)
