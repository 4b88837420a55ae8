from __future__ import annotations
import uuid
from typing import List, Optional

from .config import PAGE_SIZE
from .domain.entities import Page
from .exceptions import InvalidArgumentError


def split_pages(content: Optional[str], page_size: int = PAGE_SIZE) -> List[str]:
    """Slice content into consecutive chunks of `page_size` characters.

    Slicing is positional, so a word can straddle two pages. Empty or None
    content gives a single empty chunk.
    """
    if page_size < 1:
        raise InvalidArgumentError(
            message=f"Page size must be a positive integer, got {page_size}",
            details={"page_size": page_size},
        )
    if not content:
        return [""]
    return [content[i:i + page_size] for i in range(0, len(content), page_size)]


def _page_id(document_id: Optional[str], page_number: int) -> str:
    if document_id:
        return f"{document_id}::page_{page_number}"
    return uuid.uuid4().hex


def paginate(
    content: Optional[str],
    page_size: int = PAGE_SIZE,
    document_id: Optional[str] = None,
) -> List[Page]:
    """Split content into Pages numbered from 1; joining them gives back `content`."""
    return [
        Page(
            id=_page_id(document_id, number),
            document_id=document_id,
            page_number=number,
            content=chunk,
        )
        for number, chunk in enumerate(split_pages(content, page_size), start=1)
    ]
