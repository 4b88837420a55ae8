"""Domain entities for documents and their pages."""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class Page:
    """A contiguous slice of a document's content.

    `document_id` is a plain reference to the owning document, not a pointer
    back to the Document object.
    """
    id: str
    document_id: Optional[str]
    page_number: int
    content: str

    @property
    def length(self) -> int:
        return len(self.content)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Page ID cannot be empty")
        if self.page_number < 1:
            raise ValueError("Page number must be positive")


@dataclass
class Document:
    """Represents a document and the pages it exclusively owns."""
    id: str
    name: str
    content_hash: str
    created_at: datetime
    last_modified: datetime
    pages: List[Page] = field(default_factory=list)
    # Fingerprint of the content at creation/import; content updates leave it alone
    import_hash: Optional[str] = None

    @property
    def content(self) -> str:
        return "".join(page.content for page in self.pages)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Document ID cannot be empty")
        if not self.name:
            raise ValueError("Document name cannot be empty")
        if self.import_hash is None:
            self.import_hash = self.content_hash


@dataclass
class SearchResult:
    """A single keyword occurrence inside a document page."""
    document_name: str
    context: str
    keyword: str
    document_id: Optional[str] = None
    page_number: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.document_name} - {self.context} {self.keyword}..."


@dataclass(frozen=True)
class TextStatistics:
    """Word, line and average word length figures for a piece of text."""
    word_count: int
    line_count: int
    average_word_length: float
