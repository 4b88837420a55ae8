"""Plain-text file reading for document import."""

from __future__ import annotations
import os
from typing import Iterable, Optional

from ...config import SUPPORTED_IMPORT_EXTENSIONS
from ...exceptions import DocumentImportError
from ...logging_config import get_logger

logger = get_logger(__name__)


def get_file_extension(filename: Optional[str]) -> str:
    """Return the text after the last dot: "a.tar.gz" -> "gz", ".gitignore" -> "gitignore", "name" -> ""."""
    if not filename:
        return ""
    _, dot, extension = filename.rpartition(".")
    return extension if dot else ""


class TextFileReader:
    """Reads UTF-8 text files whose extension is on the import allow-list."""

    def __init__(self, supported_extensions: Optional[Iterable[str]] = None):
        extensions = SUPPORTED_IMPORT_EXTENSIONS if supported_extensions is None else supported_extensions
        self._supported = {ext.lower().lstrip(".") for ext in extensions}

    @property
    def supported_extensions(self) -> set:
        return set(self._supported)

    def is_supported(self, filename: str) -> bool:
        return get_file_extension(filename).lower() in self._supported

    def read(self, path: str, name: Optional[str] = None) -> str:
        """Return the file's text, or raise DocumentImportError."""
        name = name or os.path.basename(path)
        if not self.is_supported(name):
            raise DocumentImportError(
                message=f"Unsupported file type: {name}",
                details={"path": path, "extension": get_file_extension(name),
                         "supported": sorted(self._supported)},
            )
        if not os.path.isfile(path):
            raise DocumentImportError(
                message=f"File not found: {path}",
                details={"path": path},
            )

        try:
            with open(path, 'r', encoding='utf-8') as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentImportError(
                message=f"Could not read {path}: {e}",
                details={"path": path, "original_error": str(e)},
            ) from e

        logger.debug(f"Read {len(content)} characters from {path}")
        return content
