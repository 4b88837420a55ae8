"""In-memory document repository."""

import copy
from typing import Dict, List, Optional

from ...domain.entities import Document
from ...domain.repositories import DocumentRepository
from ...exceptions import DocumentError
from ...logging_config import get_logger

logger = get_logger(__name__)


class InMemoryDocumentRepository(DocumentRepository):
    """Keeps documents in a dict keyed by ID. Nothing outlives the process.

    Documents are copied on the way in and out, so callers never share page
    lists with the store.
    """

    def __init__(self):
        self._documents: Dict[str, Document] = {}

    def save_document(self, document: Document) -> str:
        if document.id in self._documents:
            raise DocumentError(
                message=f"Document already exists: {document.id}",
                details={"document_id": document.id},
            )
        self._documents[document.id] = copy.deepcopy(document)
        logger.info(f"Saved document: {document.id}")
        return document.id

    def get_document(self, document_id: str) -> Optional[Document]:
        document = self._documents.get(document_id)
        return copy.deepcopy(document) if document is not None else None

    def list_documents(self) -> List[Document]:
        return [copy.deepcopy(doc) for doc in self._documents.values()]

    def update_document(self, document: Document) -> bool:
        if document.id not in self._documents:
            return False
        self._documents[document.id] = copy.deepcopy(document)
        logger.info(f"Updated document: {document.id}")
        return True

    def delete_document(self, document_id: str) -> bool:
        if document_id not in self._documents:
            return False
        del self._documents[document_id]
        logger.info(f"Deleted document: {document_id}")
        return True
