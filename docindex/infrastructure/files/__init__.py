"""File infrastructure module."""

from .text_file_reader import TextFileReader, get_file_extension

__all__ = ['TextFileReader', 'get_file_extension']
