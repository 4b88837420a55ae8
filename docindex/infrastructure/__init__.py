"""Infrastructure layer module."""

from . import storage
from . import files

__all__ = ['storage', 'files']
