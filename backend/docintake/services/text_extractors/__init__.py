"""
Text Extractors Module - One extractor per extraction category.

This module provides a plug-and-play architecture for text extraction
using the Strategy pattern: the factory classifies a file by extension
and returns the extractor for its category.

To add a category:
1. Create a new extractor class inheriting from BaseTextExtractor
2. Implement the extract() method
3. Add its extensions to the supported type table and pass it to TextExtractorFactory
"""
from .base import BaseTextExtractor
from .factory import TextExtractorFactory
from .pdf_extractor import PDFExtractor
from .image_extractor import ImageExtractor
from .text_extractor import TextExtractor

__all__ = [
    "BaseTextExtractor",
    "TextExtractorFactory",
    "PDFExtractor",
    "ImageExtractor",
    "TextExtractor",
]
