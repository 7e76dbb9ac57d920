"""
Document Processor - the top-level extraction pipeline.

Download -> classify -> extract, returning one uniform ExtractionResult.
Holds only immutable collaborators, so any number of calls may run at once.
"""
import asyncio
from functools import partial
from typing import FrozenSet, Mapping, Optional

from .telegram_file_service import TelegramFileClient
from .text_extractors import TextExtractorFactory
from .text_extractors.image_extractor import ProgressCallback
from ..api.exceptions import DocumentProcessingError
from ..core.config import ProcessorConfig
from ..domain.entities import ExtractionResult
from ..domain.value_objects import ExtractionCategory, TELEGRAM_IMAGE_FILENAME
from ..core.logging_config import get_logger

logger = get_logger(__name__)


class DocumentProcessor:
    """
    Extracts text and basic metadata from files uploaded through the bot.
    """

    def __init__(
        self,
        config: ProcessorConfig,
        file_client: Optional[TelegramFileClient] = None,
        extractor_factory: Optional[TextExtractorFactory] = None
    ):
        """
        Initialize the processor.

        Args:
            config: Immutable processor configuration
            file_client: File fetcher (defaults to a TelegramFileClient for config)
            extractor_factory: Classifier/extractor registry (defaults to one built from config)
        """
        self.config = config
        self.file_client = file_client or TelegramFileClient(config)
        self.extractor_factory = extractor_factory or TextExtractorFactory(config)

    async def process_file(self, remote_path: str, file_name: str) -> ExtractionResult:
        """
        Download a file and extract its text.

        The file is downloaded before its extension is checked, so an
        unsupported extension is only reported after one download.

        Args:
            remote_path: Opaque file path on the hosting platform
            file_name: Caller-supplied name; its extension selects the extractor

        Returns:
            Extraction result for the file

        Raises:
            DownloadFailed, UnsupportedFileType, PdfProcessingFailed,
            OcrProcessingFailed, TextProcessingFailed
        """
        try:
            file_bytes = await self.file_client.download(remote_path)
            extractor = self.extractor_factory.get_extractor(file_name)
            return await self._run_extractor(extractor.extract, file_bytes, file_name)
        except DocumentProcessingError as e:
            logger.error(f"❌ File processing error for {file_name} ({remote_path}): {e}")
            raise

    async def process_telegram_image(
        self,
        remote_path: str,
        progress_callback: Optional[ProgressCallback] = None
    ) -> ExtractionResult:
        """
        OCR an inline photo upload that arrives without a file name.

        The result carries a fixed synthetic file name and a
        ``source: "telegram"`` metadata tag.
        """
        logger.info(f"🖼️ Processing Telegram image: {remote_path}")
        try:
            file_bytes = await self.file_client.download(remote_path)
            extractor = self.extractor_factory.get_extractor_for_category(ExtractionCategory.IMAGE)
            return await self._run_extractor(
                extractor.extract,
                file_bytes,
                TELEGRAM_IMAGE_FILENAME,
                progress_callback=progress_callback,
                source="telegram",
            )
        except DocumentProcessingError as e:
            logger.error(f"❌ Telegram image processing error ({remote_path}): {e}")
            raise

    async def _run_extractor(self, extract, file_bytes: bytes, file_name: str, **kwargs) -> ExtractionResult:
        # Parsing and OCR block; keep them off the event loop
        loop = asyncio.get_event_loop()
        result = await loop.run_in_executor(None, partial(extract, file_bytes, file_name, **kwargs))
        logger.info(
            f"✅ Extracted {result.word_count} words from {file_name} ({result.type.value})"
        )
        return result

    def is_supported(self, file_name: str) -> bool:
        return self.extractor_factory.is_supported(file_name)

    def get_supported_types(self) -> Mapping[str, FrozenSet[str]]:
        return self.extractor_factory.get_supported_types()
