"""
Shared dependencies for routers.
Provides processor initialization and lookup.
"""
from typing import Optional
from ..core.config import load_config
from ..services.document_processor import DocumentProcessor
from ..core.logging_config import get_logger

logger = get_logger(__name__)

# Global processor (initialized on startup, shared across all request handlers)
document_processor: Optional[DocumentProcessor] = None


def initialize_processor(processor: Optional[DocumentProcessor] = None) -> DocumentProcessor:
    """Create the shared processor from environment configuration unless one is supplied."""
    global document_processor
    
    document_processor = processor or DocumentProcessor(load_config())
    types = document_processor.get_supported_types()
    logger.info("Document processor initialized")
    logger.info(f"  → Supported categories: {', '.join(types)}")
    return document_processor


def get_document_processor() -> DocumentProcessor:
    """FastAPI dependency returning the shared processor."""
    if document_processor is None:
        return initialize_processor()
    return document_processor
