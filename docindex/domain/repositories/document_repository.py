"""Document repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities import Document


class DocumentRepository(ABC):
    """Abstract interface for whoever stores documents on behalf of the core."""

    @abstractmethod
    def save_document(self, document: Document) -> str:
        """Save a new document and return its ID."""
        pass

    @abstractmethod
    def get_document(self, document_id: str) -> Optional[Document]:
        """Get document by ID."""
        pass

    @abstractmethod
    def list_documents(self) -> List[Document]:
        """List all documents in insertion order."""
        pass

    @abstractmethod
    def update_document(self, document: Document) -> bool:
        """Replace a stored document; False if its ID is unknown."""
        pass

    @abstractmethod
    def delete_document(self, document_id: str) -> bool:
        """Delete document and return success status."""
        pass
