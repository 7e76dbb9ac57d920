"""
Image Text Extractor.

Extracts text from images with the Tesseract OCR engine (pytesseract + Pillow).
"""
import io
import shutil
from typing import Any, Callable, Dict, Optional
import pytesseract
from PIL import Image
from .base import BaseTextExtractor
from ...api.exceptions import OcrProcessingFailed
from ...domain.entities import ExtractionResult, ImageMetadata
from ...domain.value_objects import ExtractionCategory, OCR_CONFIDENCE_PROCESSED
from ...utils.text_utils import count_words
from ...core.logging_config import get_logger

logger = get_logger(__name__)

ProgressCallback = Callable[[Dict[str, Any]], None]


def log_progress(event: Dict[str, Any]) -> None:
    """Default progress observer: write the event to the log."""
    logger.debug(f"OCR progress: {event}")


def _emit(notify: ProgressCallback, event: Dict[str, Any]) -> None:
    # Observers never influence the extraction outcome
    try:
        notify(event)
    except Exception:
        logger.warning(f"OCR progress observer failed on {event}", exc_info=True)


class ImageExtractor(BaseTextExtractor):
    """Extractor for raster images (JPEG, PNG, WebP, TIFF)."""
    
    def __init__(self, lang: str = "eng"):
        """
        Initialize image extractor.
        
        Args:
            lang: OCR language (English only)
        """
        self.lang = lang
        super().__init__(ExtractionCategory.IMAGE, "Image")
    
    def _check_availability(self) -> bool:
        """Check if the tesseract binary can be found."""
        available = shutil.which(pytesseract.pytesseract.tesseract_cmd) is not None
        if not available:
            logger.warning("tesseract binary not found. Image OCR will fail until it is installed.")
        return available
    
    def extract(
            self,
            file_bytes: bytes,
            file_name: str,
            progress_callback: Optional[ProgressCallback] = None,
            source: Optional[str] = None
    ) -> ExtractionResult:
        """
        Run OCR over an image.
        
        Args:
            file_bytes: Image content as bytes
            file_name: Original file name
            progress_callback: Observer receiving {"status", "progress"} events
            source: Optional origin tag added to the metadata
            
        Returns:
            Result with whitespace-trimmed recognized text
            
        Raises:
            OcrProcessingFailed: If the image cannot be read or OCR fails
        """
        notify = progress_callback or log_progress
        logger.info(f"🖼️ Processing image with OCR: {file_name}")
        
        try:
            _emit(notify, {"status": "loading image", "progress": 0.0})
            with Image.open(io.BytesIO(file_bytes)) as image:
                image.load()
                _emit(notify, {"status": "recognizing text", "progress": 0.5})
                raw_text = pytesseract.image_to_string(image, lang=self.lang)
            _emit(notify, {"status": "recognized text", "progress": 1.0})
        except Exception as e:
            logger.error(f"❌ OCR processing error for {file_name}: {e}", exc_info=True)
            raise OcrProcessingFailed() from e
        
        return ExtractionResult(
            type=self.category,
            file_name=file_name,
            text=raw_text.strip(),
            metadata=ImageMetadata(
                word_count=count_words(raw_text),
                ocr_confidence=OCR_CONFIDENCE_PROCESSED,
                source=source,
            ),
        )
