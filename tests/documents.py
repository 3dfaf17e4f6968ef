"""Build small real PDF/DOCX files for the extractor tests."""

from __future__ import annotations

import io
from typing import List

import fitz  # PyMuPDF
from docx import Document


def make_pdf(lines: List[str]) -> bytes:
    doc = fitz.open()
    page = doc.new_page()
    y = 72
    for line in lines:
        page.insert_text((72, y), line)
        y += 18
    data = doc.tobytes()
    doc.close()
    return data


def make_docx(lines: List[str]) -> bytes:
    document = Document()
    for line in lines:
        document.add_paragraph(line)
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()
