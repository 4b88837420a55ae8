"""Custom exceptions for the document indexing core."""

from typing import Optional


class DocIndexError(Exception):
    """Base exception for all docindex errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class InvalidArgumentError(DocIndexError, ValueError):
    """Raised when a caller violates a documented precondition."""
    pass


class DocumentError(DocIndexError):
    """Raised when document storage operations fail."""
    pass


class DocumentImportError(DocumentError):
    """Raised when a file cannot be imported as a document."""
    pass


class ConfigurationError(DocIndexError):
    """Raised when configuration is invalid."""
    pass
