"""
Utility functions - Pure functions with no dependencies.
These can be used across all layers.
"""
from .text_utils import count_words, file_extension

__all__ = [
    "count_words",
    "file_extension",
]
