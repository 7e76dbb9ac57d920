import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, FrozenSet
from dotenv import load_dotenv

from .logging_config import get_logger

logger = get_logger(__name__)

# Load environment variables (only in development)
# In containers, environment variables are set directly
if os.getenv("ENVIRONMENT") != "production":
    load_dotenv()

ENVIRONMENT = os.getenv("ENVIRONMENT", "development")

# Telegram file hosting
TELEGRAM_BOT_TOKEN = os.getenv("TELEGRAM_BOT_TOKEN", "")
TELEGRAM_API_BASE_URL = os.getenv("TELEGRAM_API_BASE_URL", "https://api.telegram.org")

# OCR engine language (tesseract language code)
OCR_LANGUAGE = os.getenv("OCR_LANGUAGE", "eng")

# Category -> recognised extensions. Checked in this order when dispatching.
SUPPORTED_TYPES = {
    "pdf": (".pdf",),
    "image": (".jpg", ".jpeg", ".png", ".webp", ".tiff"),
    "text": (".txt", ".md", ".csv"),
}


def _freeze_types(types: Mapping[str, "tuple[str, ...]"]) -> Mapping[str, FrozenSet[str]]:
    return MappingProxyType({
        category: frozenset(ext.lower() for ext in extensions)
        for category, extensions in types.items()
    })


@dataclass(frozen=True)
class ProcessorConfig:
    """
    Immutable configuration handed to the processor at construction time.

    Attributes:
        bot_token: Bot credential embedded in every download URL
        api_base_url: Fixed host serving the files
        supported_types: Read-only category -> extension set table
        ocr_language: Language code passed to the OCR engine
    """
    bot_token: str = ""
    api_base_url: str = "https://api.telegram.org"
    supported_types: Mapping[str, FrozenSet[str]] = field(
        default_factory=lambda: _freeze_types(SUPPORTED_TYPES)
    )
    ocr_language: str = "eng"

    def __post_init__(self):
        # Accept plain dicts/lists from callers and tests, store a frozen view
        object.__setattr__(self, "supported_types", _freeze_types(self.supported_types))
        object.__setattr__(self, "api_base_url", self.api_base_url.rstrip("/"))

    @property
    def has_token(self) -> bool:
        return bool(self.bot_token)


def load_config() -> ProcessorConfig:
    """Build the process-wide configuration from environment variables."""
    config = ProcessorConfig(
        bot_token=TELEGRAM_BOT_TOKEN,
        api_base_url=TELEGRAM_API_BASE_URL,
        supported_types=SUPPORTED_TYPES,
        ocr_language=OCR_LANGUAGE,
    )
    if not config.has_token:
        logger.warning("TELEGRAM_BOT_TOKEN is not set; file downloads will fail")
    return config
