"""TF-IDF relevance scoring domain service."""

from collections import Counter
from typing import Optional

import numpy as np

from ..entities import Corpus
from ...text_processing import tokenize
from ...logging_config import get_logger

logger = get_logger(__name__)


class TfIdfEngine:
    """Scores text against a corpus of normalized terms.

    Each engine owns its Corpus; separate indexing sessions use separate
    engines. No internal locking: do not add documents while another thread
    is scoring against the same engine.
    """

    def __init__(self, corpus: Optional[Corpus] = None):
        self._corpus = corpus if corpus is not None else Corpus()

    @property
    def corpus(self) -> Corpus:
        return self._corpus

    @property
    def document_count(self) -> int:
        return self._corpus.document_count

    def add_document_to_corpus(self, text: Optional[str]) -> None:
        """Count each distinct term of `text` once and bump the document count."""
        terms = tokenize(text)
        self._corpus.add_terms(terms)
        logger.debug(
            f"Added document to corpus: {len(set(terms))} distinct terms, "
            f"{self._corpus.document_count} documents, {self._corpus.vocabulary_size} terms total"
        )

    def document_frequency(self, term: str) -> int:
        return self._corpus.frequency(term)

    def idf(self, term: str) -> float:
        """Smoothed inverse document frequency, ln((1 + N) / (1 + df))."""
        n = self._corpus.document_count
        return float(np.log((1.0 + n) / (1.0 + self._corpus.frequency(term))))

    def calculate_document_tfidf(self, text: Optional[str]) -> float:
        """Sum of raw term frequency times smoothed idf over the distinct terms of `text`.

        Always finite and non-negative; text that normalizes to nothing scores 0.0.
        """
        term_counts = Counter(tokenize(text))
        if not term_counts:
            return 0.0

        terms = list(term_counts)
        tf = np.array([term_counts[t] for t in terms], dtype=np.float64)
        df = np.array([self._corpus.frequency(t) for t in terms], dtype=np.float64)
        idf = np.log((1.0 + self._corpus.document_count) / (1.0 + df))

        score = float(np.dot(tf, idf))
        logger.debug(
            f"TF-IDF score {score:.4f} for {len(terms)} distinct terms "
            f"against {self._corpus.document_count} documents"
        )
        return score
