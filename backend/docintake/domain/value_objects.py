"""
Value Objects - Immutable objects that represent domain concepts.
These have no identity and are compared by value.
"""
from enum import Enum
from typing import NewType


class ExtractionCategory(str, Enum):
    """Extraction category, determined by file extension."""
    PDF = "pdf"
    IMAGE = "image"
    TEXT = "text"


# Opaque identifier of a file on the hosting platform (not a local path)
RemotePath = NewType("RemotePath", str)

# Fixed name given to inline image uploads that arrive without one
TELEGRAM_IMAGE_FILENAME = "telegram_image.jpg"

# Literal confidence marker; the engine's real score is not surfaced
OCR_CONFIDENCE_PROCESSED = "processed"
