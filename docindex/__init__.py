"""Document indexing and retrieval core.

Normalizes text, splits documents into fixed-size pages, fingerprints
content for change detection, and answers keyword and TF-IDF queries.
"""

__version__ = "0.1.0"
