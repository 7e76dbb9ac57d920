"""
PDF Text Extractor.

Extracts text from PDF files using pypdf library.
"""
import io
from typing import Any, Dict
from pypdf import PdfReader
from .base import BaseTextExtractor
from ...api.exceptions import PdfProcessingFailed
from ...domain.entities import ExtractionResult, PdfMetadata
from ...domain.value_objects import ExtractionCategory
from ...utils.text_utils import count_words
from ...core.logging_config import get_logger

logger = get_logger(__name__)


def _document_info(reader: PdfReader) -> Dict[str, Any]:
    """Document-info dictionary with the PDF name prefix dropped from keys."""
    metadata = reader.metadata
    if not metadata:
        return {}
    return {str(key).lstrip("/"): str(value) for key, value in metadata.items()}


class PDFExtractor(BaseTextExtractor):
    """Extractor for PDF files."""
    
    def __init__(self):
        super().__init__(ExtractionCategory.PDF, "PDF")
    
    def extract(self, file_bytes: bytes, file_name: str) -> ExtractionResult:
        """
        Extract text from PDF file.
        
        Args:
            file_bytes: PDF file content as bytes
            file_name: Original file name
            
        Returns:
            Result with page count and document info
            
        Raises:
            PdfProcessingFailed: If the PDF cannot be parsed
        """
        logger.info(f"📄 Processing PDF: {file_name}")
        try:
            reader = PdfReader(io.BytesIO(file_bytes))
            if reader.is_encrypted:
                raise ValueError("encrypted PDF documents are not supported")
            
            text_content = ""
            for page in reader.pages:
                page_text = page.extract_text()
                if page_text:
                    text_content += page_text + "\n"
            
            metadata = PdfMetadata(
                word_count=count_words(text_content),
                pages=len(reader.pages),
                info=_document_info(reader),
            )
        except Exception as e:
            logger.error(f"❌ PDF processing error for {file_name}: {e}", exc_info=True)
            raise PdfProcessingFailed() from e
        
        return ExtractionResult(
            type=self.category,
            file_name=file_name,
            text=text_content,
            metadata=metadata,
        )
