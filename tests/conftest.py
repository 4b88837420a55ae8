"""Test configuration and fixtures."""

import pytest
from datetime import datetime

from docindex.container import Container
from docindex.domain.entities import Document, Page
from docindex.domain.services import DocumentService, KeywordSearchService, TfIdfEngine
from docindex.infrastructure.storage import InMemoryDocumentRepository
from docindex.hashing import fingerprint


def make_document(doc_id: str, name: str, page_contents: list) -> Document:
    """Build a Document from literal page contents."""
    pages = [
        Page(id=f"{doc_id}::page_{i}", document_id=doc_id, page_number=i, content=content)
        for i, content in enumerate(page_contents, start=1)
    ]
    now = datetime(2026, 1, 1)
    return Document(
        id=doc_id,
        name=name,
        content_hash=fingerprint("".join(page_contents)),
        created_at=now,
        last_modified=now,
        pages=pages,
    )


@pytest.fixture
def sample_documents():
    """Three documents: one English page, two English pages, one Arabic page."""
    return [
        make_document("1", "doc1.txt", ["the quick brown fox jumps over the lazy dog"]),
        make_document("2", "doc2.txt", [
            "hello world this is a test document",
            "second page with more content here",
        ]),
        make_document("3", "doc3.txt", ["بسم الله الرحمن الرحيم"]),
    ]


@pytest.fixture
def document_service():
    return DocumentService(page_size=100, autosave_threshold=500)


@pytest.fixture
def search_service():
    return KeywordSearchService()


@pytest.fixture
def engine():
    return TfIdfEngine()


@pytest.fixture
def memory_repository():
    return InMemoryDocumentRepository()


@pytest.fixture
def test_container(memory_repository):
    """Provide container wired with a fresh in-memory repository."""
    container = Container()
    container._document_repository = memory_repository
    return container


@pytest.fixture
def editor(test_container):
    return test_container.editor_use_case()
