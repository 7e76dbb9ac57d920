"""
Domain entities - the uniform extraction result and its per-category metadata.
These are plain domain objects, independent of the HTTP layer.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

from .value_objects import ExtractionCategory, OCR_CONFIDENCE_PROCESSED


def utc_timestamp() -> str:
    """ISO-8601 timestamp of the current moment, millisecond precision, UTC."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class ExtractionMetadata:
    """Fields every category shares."""
    word_count: int
    extracted_at: str = field(default_factory=utc_timestamp)

    def to_dict(self) -> Dict[str, Any]:
        return {"wordCount": self.word_count, "extractedAt": self.extracted_at}


@dataclass(frozen=True)
class PdfMetadata(ExtractionMetadata):
    pages: int = 0
    info: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = {"pages": self.pages, "info": dict(self.info)}
        data.update(super().to_dict())
        return data


@dataclass(frozen=True)
class ImageMetadata(ExtractionMetadata):
    ocr_confidence: str = OCR_CONFIDENCE_PROCESSED
    source: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {"ocrConfidence": self.ocr_confidence}
        data.update(super().to_dict())
        if self.source is not None:
            data["source"] = self.source
        return data


@dataclass(frozen=True)
class TextMetadata(ExtractionMetadata):
    encoding: str = "utf-8"

    def to_dict(self) -> Dict[str, Any]:
        data = {"encoding": self.encoding}
        data.update(super().to_dict())
        return data


Metadata = Union[PdfMetadata, ImageMetadata, TextMetadata]


@dataclass(frozen=True)
class ExtractionResult:
    """
    Uniform output of every extractor.

    Lives only for the duration of one processing call; nothing is persisted.
    """
    type: ExtractionCategory
    file_name: str
    text: str
    metadata: Metadata

    @property
    def word_count(self) -> int:
        return self.metadata.word_count

    def to_dict(self) -> Dict[str, Any]:
        """Render the camelCase shape handed to chat-bot handlers."""
        return {
            "type": self.type.value,
            "fileName": self.file_name,
            "text": self.text,
            "metadata": self.metadata.to_dict(),
        }
