"""Storage infrastructure module."""

from .memory_document_store import InMemoryDocumentRepository

__all__ = ['InMemoryDocumentRepository']
