"""Extract raw text from uploaded resume files (PDF, DOCX, TXT). In-memory only."""

import re
import unicodedata
from io import BytesIO
from typing import Optional

import pdfplumber
from docx import Document

from career_readiness.utils.logger import get_logger

logger = get_logger(__name__)

SUPPORTED_EXTENSIONS = (".pdf", ".docx", ".txt")
MAX_RESUME_CHARS = 50000


def clean_resume_text(text: str, max_chars: int = MAX_RESUME_CHARS) -> str:
    """NFC-normalize, collapse runs of blanks and blank lines, truncate."""
    if not text or not text.strip():
        return ""
    t = unicodedata.normalize("NFC", text)
    t = re.sub(r"[ \t]+", " ", t)
    t = re.sub(r"\n\s*\n\s*\n", "\n\n", t)
    t = t.strip()
    if len(t) > max_chars:
        t = t[:max_chars]
    return t


def _extract_pdf(bytes_io: BytesIO) -> Optional[str]:
    try:
        with pdfplumber.open(bytes_io) as pdf:
            parts = [p.extract_text() for p in pdf.pages]
    except Exception as e:
        logger.warning("PDF extraction failed: %s", e)
        return None
    text = "\n\n".join(p for p in parts if p)
    return text or None


def _extract_docx(bytes_io: BytesIO) -> Optional[str]:
    try:
        doc = Document(bytes_io)
    except Exception as e:
        logger.warning("DOCX extraction failed: %s", e)
        return None
    text = "\n\n".join(p.text for p in doc.paragraphs if p.text.strip())
    return text or None


def extract_resume_text(file_bytes: bytes, filename: str) -> Optional[str]:
    """
    Extract and clean resume text from file bytes.
    Returns None for unsupported types or unreadable files.
    """
    name_lower = (filename or "").lower().strip()
    if not name_lower.endswith(SUPPORTED_EXTENSIONS):
        logger.warning("Unsupported resume file type: %s", filename)
        return None

    if name_lower.endswith(".txt"):
        raw: Optional[str] = file_bytes.decode("utf-8", errors="replace")
    elif name_lower.endswith(".pdf"):
        raw = _extract_pdf(BytesIO(file_bytes))
    else:
        raw = _extract_docx(BytesIO(file_bytes))

    if not raw or not raw.strip():
        return None
    return clean_resume_text(raw)
