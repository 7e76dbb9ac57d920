"""
Base Text Extractor Interface.

All text extractors must inherit from this base class and implement
the extract() method.
"""
from abc import ABC, abstractmethod
from ...domain.entities import ExtractionResult
from ...domain.value_objects import ExtractionCategory
from ...core.logging_config import get_logger

logger = get_logger(__name__)


class BaseTextExtractor(ABC):
    """
    Abstract base class for text extractors.
    
    Each extraction category has its own extractor class that inherits
    from this base class and implements the extract() method. Extractors
    are stateless after construction and safe to share between calls.
    """
    
    def __init__(self, category: ExtractionCategory, format_name: str):
        """
        Initialize the extractor.
        
        Args:
            category: Extraction category this extractor produces
            format_name: Human-readable format name (e.g., 'PDF', 'Image')
        """
        self.category = category
        self.format_name = format_name
        self._available = self._check_availability()
    
    @abstractmethod
    def extract(self, file_bytes: bytes, file_name: str) -> ExtractionResult:
        """
        Extract text from file bytes.
        
        Args:
            file_bytes: Raw file content as bytes
            file_name: File name as supplied by the caller
            
        Returns:
            Extraction result with text and category metadata
            
        Raises:
            DocumentProcessingError: If extraction fails
        """
        pass
    
    def _check_availability(self) -> bool:
        """
        Check if the backing engine is available for this extractor.
        
        Override this method in subclasses that depend on system binaries.
        
        Returns:
            True if the extractor is available, False otherwise
        """
        return True
    
    def is_available(self) -> bool:
        """
        Check if this extractor is available (engine installed).
        
        Returns:
            True if available, False otherwise
        """
        return self._available
