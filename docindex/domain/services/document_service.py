"""Document lifecycle domain service."""

import re
import uuid
from datetime import datetime
from typing import Optional

from ..entities import Document, TextStatistics
from ...config import AUTOSAVE_WORD_THRESHOLD, PAGE_SIZE
from ...exceptions import InvalidArgumentError
from ...hashing import content_changed, fingerprint
from ...pagination import paginate
from ...logging_config import get_logger

logger = get_logger(__name__)

_re_line_break = re.compile(r"\r?\n")


class DocumentService:
    """Keeps a document's fingerprint and pages in step with its content."""

    def __init__(self, page_size: int = PAGE_SIZE, autosave_threshold: int = AUTOSAVE_WORD_THRESHOLD):
        if page_size < 1:
            raise InvalidArgumentError(
                message=f"Page size must be a positive integer, got {page_size}",
                details={"page_size": page_size},
            )
        self._page_size = page_size
        self._autosave_threshold = autosave_threshold

    @property
    def page_size(self) -> int:
        return self._page_size

    def create_document(self, name: str, content: Optional[str], document_id: Optional[str] = None) -> Document:
        """Build a new document, fingerprinting and paginating its content."""
        document_id = document_id or uuid.uuid4().hex
        now = datetime.now()
        content_hash = fingerprint(content)
        document = Document(
            id=document_id,
            name=name,
            content_hash=content_hash,
            created_at=now,
            last_modified=now,
            pages=paginate(content, self._page_size, document_id),
            import_hash=content_hash,
        )
        logger.debug(f"Built document {document.id} ({name}) with {document.page_count} pages")
        return document

    def update_content(self, document: Document, content: Optional[str]) -> Document:
        """Replace the content of `document`; hash and pages are re-derived together."""
        # Paginate first so a rejected call leaves the document untouched
        pages = paginate(content, self._page_size, document.id)
        document.content_hash = fingerprint(content)
        document.pages = pages
        document.last_modified = datetime.now()
        return document

    def has_unsaved_changes(self, document: Document, edited_content: Optional[str]) -> bool:
        return content_changed(document.content_hash, edited_content)

    def modified_since_import(self, document: Document) -> bool:
        return document.content_hash != document.import_hash

    def word_count(self, text: Optional[str]) -> int:
        if not text:
            return 0
        return len(text.split())

    def line_count(self, text: Optional[str]) -> int:
        if not text:
            return 0
        lines = _re_line_break.split(text)
        # Trailing empty lines are not counted
        while lines and not lines[-1]:
            lines.pop()
        return len(lines)

    def statistics(self, text: Optional[str]) -> TextStatistics:
        words = (text or "").split()
        average = sum(len(w) for w in words) / len(words) if words else 0.0
        return TextStatistics(
            word_count=len(words),
            line_count=self.line_count(text),
            average_word_length=average,
        )

    def should_autosave(self, text: Optional[str]) -> bool:
        """True once the text holds strictly more words than the auto-save threshold."""
        return self.word_count(text) > self._autosave_threshold
