"""Keyword search domain service."""

from typing import Iterable, List, Optional

from ..entities import Document, SearchResult
from ...config import MIN_KEYWORD_LENGTH
from ...exceptions import InvalidArgumentError
from ...text_processing import remove_diacritics
from ...logging_config import get_logger

logger = get_logger(__name__)


class KeywordSearchService:
    """Whole-word, case-insensitive keyword search over document pages."""

    def __init__(self, min_keyword_length: int = MIN_KEYWORD_LENGTH, ignore_diacritics: bool = False):
        self._min_keyword_length = min_keyword_length
        self._ignore_diacritics = ignore_diacritics

    def _fold(self, word: str) -> str:
        if self._ignore_diacritics:
            word = remove_diacritics(word)
        return word.casefold()

    def search(self, keyword: Optional[str], documents: Iterable[Document]) -> List[SearchResult]:
        """Report every occurrence of `keyword` as a whole word.

        Results come in document order, then page order, then left to right
        within a page. Each carries the word just before the match, or "" when
        the match opens the page.
        """
        keyword = (keyword or "").strip()
        if len(keyword) < self._min_keyword_length:
            raise InvalidArgumentError(
                message=f"Keyword must be at least {self._min_keyword_length} characters long",
                details={"keyword": keyword, "min_length": self._min_keyword_length},
            )

        target = self._fold(keyword)
        results: List[SearchResult] = []
        scanned = 0

        for document in documents:
            scanned += 1
            for page in document.pages:
                words = page.content.split()
                for index, word in enumerate(words):
                    if self._fold(word) != target:
                        continue
                    results.append(SearchResult(
                        document_name=document.name,
                        context=words[index - 1] if index > 0 else "",
                        keyword=keyword,
                        document_id=document.id,
                        page_number=page.page_number,
                    ))

        logger.debug(f"Keyword '{keyword}': {len(results)} matches in {scanned} documents")
        return results


def search_keyword(keyword: Optional[str], documents: Iterable[Document]) -> List[SearchResult]:
    """Search `documents` for `keyword` with the default settings."""
    return KeywordSearchService().search(keyword, documents)
