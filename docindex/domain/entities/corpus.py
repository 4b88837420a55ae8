"""Corpus state for TF-IDF scoring."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable


@dataclass
class Corpus:
    """Document frequencies of normalized terms plus the number of documents added.

    A term's document frequency never exceeds `document_count`.
    """
    document_frequency: Dict[str, int] = field(default_factory=dict)
    document_count: int = 0

    def add_terms(self, terms: Iterable[str]) -> None:
        """Register one document given the terms it contains."""
        for term in set(terms):
            self.document_frequency[term] = self.document_frequency.get(term, 0) + 1
        self.document_count += 1

    def frequency(self, term: str) -> int:
        return self.document_frequency.get(term, 0)

    @property
    def vocabulary_size(self) -> int:
        return len(self.document_frequency)
