"""
Plain Text Extractor.

Extracts text from plain text files (TXT, MD, CSV).
"""
from .base import BaseTextExtractor
from ...api.exceptions import TextProcessingFailed
from ...domain.entities import ExtractionResult, TextMetadata
from ...domain.value_objects import ExtractionCategory
from ...utils.text_utils import count_words
from ...core.logging_config import get_logger

logger = get_logger(__name__)

ENCODING = "utf-8"


class TextExtractor(BaseTextExtractor):
    """
    Extractor for plain text files.

    Bytes are decoded as UTF-8; malformed sequences become U+FFFD.
    No BOM stripping, no line-ending normalization.
    """
    
    def __init__(self):
        super().__init__(ExtractionCategory.TEXT, "Text")
    
    def extract(self, file_bytes: bytes, file_name: str) -> ExtractionResult:
        logger.info(f"📝 Processing text file: {file_name}")
        try:
            text_content = bytes(file_bytes).decode(ENCODING, errors="replace")
        except Exception as e:
            logger.error(f"❌ Text processing error for {file_name}: {e}", exc_info=True)
            raise TextProcessingFailed() from e
        
        return ExtractionResult(
            type=self.category,
            file_name=file_name,
            text=text_content,
            metadata=TextMetadata(word_count=count_words(text_content), encoding=ENCODING),
        )
