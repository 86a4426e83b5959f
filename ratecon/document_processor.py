"""
Document Processing Module
Handles: reading the text layer of uploaded PDF, DOCX and TXT files.
"""

import io
import logging
import os
from typing import BinaryIO, Union

from PyPDF2 import PdfReader
from docx import Document as DocxDocument

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".pdf", ".docx", ".txt"}

Source = Union[str, BinaryIO]


# ── Text Extraction ─────────────────────────────────────────────────

def extract_text_from_pdf(source: Source) -> str:
    """Concatenate page text, one page per line group."""
    reader = PdfReader(source)
    pages = []
    for page in reader.pages:
        text = page.extract_text()
        if text:
            pages.append(text)
    return "\n".join(pages)


def extract_text_from_docx(source: Source) -> str:
    doc = DocxDocument(source)
    paragraphs = [p.text for p in doc.paragraphs if p.text.strip()]
    # Rate confirmations often carry stops in tables
    for table in doc.tables:
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
            if cells:
                paragraphs.append(" | ".join(cells))
    return "\n".join(paragraphs)


def extract_text_from_txt(source: Source) -> str:
    if isinstance(source, str):
        with open(source, "r", encoding="utf-8", errors="ignore") as f:
            return f.read()
    return source.read().decode("utf-8", errors="ignore")


def extract_text(source: Source, filename: str = "") -> str:
    """
    Read the text layer of a document.
    `source` is a path or a binary stream; the type comes from `filename`
    (or from the path when no filename is given).
    """
    name = filename or (source if isinstance(source, str) else "")
    ext = os.path.splitext(name)[1].lower()
    if ext == ".pdf":
        text = extract_text_from_pdf(source)
    elif ext == ".docx":
        text = extract_text_from_docx(source)
    elif ext == ".txt":
        text = extract_text_from_txt(source)
    else:
        raise ValueError(f"Unsupported file type: {ext or 'unknown'}")

    logger.info("[DocProcessor] Read %d chars from %s", len(text), name or "stream")
    return text


def extract_text_from_bytes(data: bytes, filename: str) -> str:
    """Same as extract_text, for an upload already held in memory."""
    text = extract_text(io.BytesIO(data), filename)
    if not text.strip():
        raise ValueError("No text could be extracted from the document.")
    return text
