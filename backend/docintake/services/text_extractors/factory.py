"""
Text Extractor Factory.

Classifies files by extension and hands back the extractor for their
category. Built from an immutable ProcessorConfig, so every instance is
read-only after construction and safe to share between concurrent calls.
"""
from typing import Dict, List, Mapping, FrozenSet, Optional
from .base import BaseTextExtractor
from .pdf_extractor import PDFExtractor
from .image_extractor import ImageExtractor
from .text_extractor import TextExtractor
from ...api.exceptions import UnsupportedFileType
from ...core.config import ProcessorConfig
from ...domain.value_objects import ExtractionCategory
from ...utils.text_utils import file_extension
from ...core.logging_config import get_logger

logger = get_logger(__name__)

# Dispatch order: first category whose extension set matches wins
CATEGORY_ORDER = (ExtractionCategory.PDF, ExtractionCategory.IMAGE, ExtractionCategory.TEXT)


class TextExtractorFactory:
    """
    Registry of extractors keyed by extraction category.
    
    Provides extension-based classification and a single place to look up
    the extractor for a file.
    """
    
    def __init__(self, config: ProcessorConfig, extractors: Optional[List[BaseTextExtractor]] = None):
        """
        Initialize the factory.
        
        Args:
            config: Processor configuration holding the supported type table
            extractors: Extractors to register (defaults to PDF, image and text)
        """
        self._supported_types = config.supported_types
        self._extractors: Dict[ExtractionCategory, BaseTextExtractor] = {}
        
        if extractors is None:
            extractors = [
                PDFExtractor(),
                ImageExtractor(lang=config.ocr_language),
                TextExtractor(),
            ]
        for extractor in extractors:
            self._register(extractor)
        
        logger.info(
            f"TextExtractorFactory initialized with {len(self._extractors)} extractors "
            f"for {len(self.get_supported_extensions())} extensions"
        )
    
    def _register(self, extractor: BaseTextExtractor):
        if extractor.category in self._extractors:
            logger.warning(f"Overriding existing extractor for {extractor.category.value}")
        self._extractors[extractor.category] = extractor
        logger.debug(f"Registered extractor for {extractor.category.value}: {extractor.format_name}")
    
    def get_category(self, file_name: str) -> ExtractionCategory:
        """
        Classify a file by its extension.
        
        Args:
            file_name: File name whose trailing extension decides the category
            
        Returns:
            Extraction category
            
        Raises:
            UnsupportedFileType: If no category recognises the extension
        """
        extension = file_extension(file_name)
        for category in CATEGORY_ORDER:
            if extension in self._supported_types.get(category.value, ()):
                return category
        logger.warning(f"Unsupported file type attempted: {file_name} (extension: {extension!r})")
        raise UnsupportedFileType(extension)
    
    def get_extractor(self, file_name: str) -> BaseTextExtractor:
        """
        Get the extractor for a file based on its extension.
        
        Raises:
            UnsupportedFileType: If the extension is not recognised or no
                extractor is registered for its category
        """
        category = self.get_category(file_name)
        extractor = self._extractors.get(category)
        if extractor is None:
            raise UnsupportedFileType(file_extension(file_name))
        return extractor
    
    def get_extractor_for_category(self, category: ExtractionCategory) -> BaseTextExtractor:
        return self._extractors[category]
    
    def is_supported(self, file_name: str) -> bool:
        """True if the file's extension appears in any category's extension set."""
        extension = file_extension(file_name)
        return any(extension in extensions for extensions in self._supported_types.values())
    
    def get_supported_types(self) -> Mapping[str, FrozenSet[str]]:
        """Read-only category -> extension set table."""
        return self._supported_types
    
    def get_supported_extensions(self) -> List[str]:
        return sorted({ext for extensions in self._supported_types.values() for ext in extensions})
    
    def get_unavailable_formats(self) -> List[str]:
        """Format names whose backing engine is missing."""
        return sorted(ext.format_name for ext in self._extractors.values() if not ext.is_available())
