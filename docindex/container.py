"""Dependency injection container."""

from typing import Optional

from .domain.repositories import DocumentRepository
from .domain.services import DocumentService, KeywordSearchService, TfIdfEngine
from .infrastructure.storage import InMemoryDocumentRepository
from .infrastructure.files import TextFileReader
from .application.use_cases import EditorUseCase
from .config import AUTOSAVE_WORD_THRESHOLD, MIN_KEYWORD_LENGTH, PAGE_SIZE, validate_settings
from .logging_config import get_logger

logger = get_logger(__name__)


class Container:
    """Dependency injection container."""

    def __init__(self):
        validate_settings()
        self._document_repository: Optional[DocumentRepository] = None
        self._document_service: Optional[DocumentService] = None
        self._search_service: Optional[KeywordSearchService] = None
        self._file_reader: Optional[TextFileReader] = None
        self._editor_use_case: Optional[EditorUseCase] = None

    def document_repository(self) -> DocumentRepository:
        """Get document repository instance."""
        if self._document_repository is None:
            logger.info("Creating InMemoryDocumentRepository instance")
            self._document_repository = InMemoryDocumentRepository()
        return self._document_repository

    def document_service(self) -> DocumentService:
        if self._document_service is None:
            self._document_service = DocumentService(
                page_size=PAGE_SIZE,
                autosave_threshold=AUTOSAVE_WORD_THRESHOLD
            )
        return self._document_service

    def search_service(self) -> KeywordSearchService:
        if self._search_service is None:
            self._search_service = KeywordSearchService(min_keyword_length=MIN_KEYWORD_LENGTH)
        return self._search_service

    def file_reader(self) -> TextFileReader:
        if self._file_reader is None:
            self._file_reader = TextFileReader()
        return self._file_reader

    def tfidf_engine(self) -> TfIdfEngine:
        """A new engine with an empty corpus on every call; corpora are never shared."""
        return TfIdfEngine()

    def editor_use_case(self) -> EditorUseCase:
        """Get editor use case instance."""
        if self._editor_use_case is None:
            self._editor_use_case = EditorUseCase(
                document_repository=self.document_repository(),
                document_service=self.document_service(),
                search_service=self.search_service(),
                file_reader=self.file_reader(),
                engine_factory=self.tfidf_engine
            )
        return self._editor_use_case

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._document_repository = None
        self._document_service = None
        self._search_service = None
        self._file_reader = None
        self._editor_use_case = None
        logger.info("Container reset")
