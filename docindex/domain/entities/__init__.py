"""Domain entities package."""

from .document import Document, Page, SearchResult, TextStatistics
from .corpus import Corpus

__all__ = [
    'Document',
    'Page',
    'SearchResult',
    'TextStatistics',
    'Corpus'
]
