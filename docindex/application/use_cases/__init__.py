"""Application use cases."""

from .editor_use_case import EditorUseCase

__all__ = ['EditorUseCase']
