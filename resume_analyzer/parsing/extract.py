from __future__ import annotations

import logging
import re
from io import BytesIO
from typing import Callable

from docx import Document
from pypdf import PdfReader

from resume_analyzer.core.errors import (
    EmptyOrCorruptDocumentError,
    ExtractionFailedError,
    UnsupportedFormatError,
)

from .models import DocumentKind, ExtractedDocument

logger = logging.getLogger(__name__)

LEGACY_DOC_MESSAGE = "Legacy .doc format is not supported. Please convert to .docx or PDF."
UNSUPPORTED_MESSAGE = "Unsupported file format. Please upload a PDF or Word document (.docx)."

_SUFFIX_KINDS = {
    ".pdf": DocumentKind.PDF,
    ".docx": DocumentKind.WORD,
    ".doc": DocumentKind.LEGACY_WORD,
}

_WHITESPACE_RUN = re.compile(r"\s+")
_BLANK_LINES = re.compile(r"\n\s*\n")


def classify_document(filename: str) -> DocumentKind:
    """Map a filename to a document kind by its suffix only; content is never sniffed."""
    name = (filename or "").strip().lower()
    for suffix, kind in _SUFFIX_KINDS.items():
        if name.endswith(suffix):
            return kind
    return DocumentKind.UNSUPPORTED


def normalize_whitespace(text: str) -> str:
    text = _WHITESPACE_RUN.sub(" ", text or "")
    text = _BLANK_LINES.sub("\n\n", text)
    return text.strip()


def _extract_pdf(content: bytes) -> tuple[str, int | None]:
    reader = PdfReader(BytesIO(content))
    page_texts = [page.extract_text() or "" for page in reader.pages]
    return "\n".join(page_texts), len(reader.pages)


def _extract_docx(content: bytes) -> tuple[str, int | None]:
    document = Document(BytesIO(content))
    chunks = [paragraph.text for paragraph in document.paragraphs]
    for table in document.tables:
        for row in table.rows:
            for cell in row.cells:
                chunks.extend(paragraph.text for paragraph in cell.paragraphs)
    return "\n".join(chunks), None


_EXTRACTORS: dict[DocumentKind, Callable[[bytes], tuple[str, int | None]]] = {
    DocumentKind.PDF: _extract_pdf,
    DocumentKind.WORD: _extract_docx,
}


def extract_text(filename: str, content: bytes) -> ExtractedDocument:
    kind = classify_document(filename)
    if kind is DocumentKind.LEGACY_WORD:
        raise UnsupportedFormatError(LEGACY_DOC_MESSAGE)
    if not kind.extractable:
        raise UnsupportedFormatError(UNSUPPORTED_MESSAGE)
    extractor = _EXTRACTORS[kind]

    try:
        raw_text, page_count = extractor(content)
    except Exception as exc:  # noqa: BLE001 - parser errors vary by library version
        logger.warning("document_extraction_failed file=%s kind=%s", filename, kind.value, exc_info=True)
        raise ExtractionFailedError(details=str(exc) or exc.__class__.__name__) from exc

    text = normalize_whitespace(raw_text)
    if not text:
        raise EmptyOrCorruptDocumentError()

    logger.info(
        "document_extracted file=%s kind=%s chars=%s pages=%s",
        filename,
        kind.value,
        len(text),
        page_count,
    )
    return ExtractedDocument(filename=filename, kind=kind, text=text, page_count=page_count)
