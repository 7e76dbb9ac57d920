"""
Domain layer - extraction results and value objects.
"""
from .entities import (
    ExtractionResult,
    ExtractionMetadata,
    PdfMetadata,
    ImageMetadata,
    TextMetadata,
)
from .value_objects import ExtractionCategory, RemotePath

__all__ = [
    "ExtractionResult",
    "ExtractionMetadata",
    "PdfMetadata",
    "ImageMetadata",
    "TextMetadata",
    "ExtractionCategory",
    "RemotePath",
]
