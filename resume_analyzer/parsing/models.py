from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class DocumentKind(str, Enum):
    PDF = "pdf"
    WORD = "docx"
    LEGACY_WORD = "doc"
    UNSUPPORTED = "unsupported"

    @property
    def extractable(self) -> bool:
        return self in (DocumentKind.PDF, DocumentKind.WORD)


class ExtractedDocument(BaseModel):
    filename: str
    kind: DocumentKind
    text: str
    page_count: int | None = Field(default=None, ge=0)
