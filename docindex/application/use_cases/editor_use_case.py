"""Editor use case implementation."""

import logging
import os
from typing import Callable, List, Optional

from ...domain.entities import Document, SearchResult, TextStatistics
from ...domain.repositories import DocumentRepository
from ...domain.services import DocumentService, KeywordSearchService, TfIdfEngine
from ...infrastructure.files import TextFileReader, get_file_extension
from ...error_handler import handle_errors
from ...exceptions import DocumentError, DocumentImportError
from ...logging_config import get_logger

logger = get_logger(__name__)


class EditorUseCase:
    """Facade the presentation layer talks to: documents in, search results and scores out."""

    def __init__(
        self,
        document_repository: DocumentRepository,
        document_service: DocumentService,
        search_service: KeywordSearchService,
        file_reader: TextFileReader,
        engine_factory: Callable[[], TfIdfEngine] = TfIdfEngine,
    ):
        self._document_repo = document_repository
        self._document_service = document_service
        self._search_service = search_service
        self._file_reader = file_reader
        self._engine_factory = engine_factory

    @handle_errors(default_return=None, exception_type=DocumentError)
    def create_document(self, name: str, content: Optional[str]) -> Optional[Document]:
        """Create and store a document; None if it could not be created."""
        document = self._document_service.create_document(name, content)
        self._document_repo.save_document(document)
        logger.info(f"Created document {document.id} ({name}, {document.page_count} pages)")
        return document

    @handle_errors(default_return=None, exception_type=DocumentImportError, log_level=logging.WARNING)
    def import_text_file(self, path: str, name: Optional[str] = None) -> Optional[Document]:
        """Import a .txt/.md file as a new document; None on failure."""
        content = self._file_reader.read(path, name)
        document = self._document_service.create_document(name or os.path.basename(path), content)
        self._document_repo.save_document(document)
        logger.info(f"Imported {path} as document {document.id}")
        return document

    def get_document(self, document_id: str) -> Optional[Document]:
        return self._document_repo.get_document(document_id)

    def list_documents(self) -> List[Document]:
        return self._document_repo.list_documents()

    def update_document(self, document_id: str, content: Optional[str], name: Optional[str] = None) -> bool:
        document = self._document_repo.get_document(document_id)
        if document is None:
            logger.warning(f"Cannot update unknown document: {document_id}")
            return False
        if name:
            document.name = name
        self._document_service.update_content(document, content)
        return self._document_repo.update_document(document)

    def delete_document(self, document_id: str) -> bool:
        return self._document_repo.delete_document(document_id)

    def search_keyword(self, keyword: str) -> List[SearchResult]:
        """Search every stored document. Raises InvalidArgumentError for short keywords."""
        return self._search_service.search(keyword, self._document_repo.list_documents())

    def calculate_tfidf(self, document_id: str) -> Optional[float]:
        """Score a stored document against a fresh corpus built from all stored documents."""
        documents = self._document_repo.list_documents()
        target = next((doc for doc in documents if doc.id == document_id), None)
        if target is None:
            return None

        engine = self._engine_factory()
        for document in documents:
            engine.add_document_to_corpus(document.content)
        return engine.calculate_document_tfidf(target.content)

    def has_unsaved_changes(self, document_id: str, edited_content: Optional[str]) -> bool:
        document = self._document_repo.get_document(document_id)
        if document is None:
            return False
        return self._document_service.has_unsaved_changes(document, edited_content)

    def modified_since_import(self, document_id: str) -> bool:
        """True when the stored content no longer matches what was created or imported."""
        document = self._document_repo.get_document(document_id)
        if document is None:
            return False
        return self._document_service.modified_since_import(document)

    def statistics(self, content: Optional[str]) -> TextStatistics:
        return self._document_service.statistics(content)

    def should_autosave(self, content: Optional[str]) -> bool:
        return self._document_service.should_autosave(content)

    def get_file_extension(self, filename: str) -> str:
        return get_file_extension(filename)
