"""Domain services package."""

from .tfidf_service import TfIdfEngine
from .search_service import KeywordSearchService, search_keyword
from .document_service import DocumentService

__all__ = [
    'TfIdfEngine',
    'KeywordSearchService',
    'search_keyword',
    'DocumentService'
]
