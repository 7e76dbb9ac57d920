"""
Data Transfer Objects (DTOs) for API layer.
Separates API contracts from domain entities.
"""
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional


class ProcessFileRequestDTO(BaseModel):
    """Request body for extracting a named upload."""
    file_path: str = Field(..., min_length=1, description="Remote file path reported by the bot platform")
    file_name: str = Field(..., min_length=1, description="Original file name; its extension selects the extractor")


class TelegramImageRequestDTO(BaseModel):
    """Request body for OCR of an inline photo upload."""
    file_path: str = Field(..., min_length=1)


class ExtractionResultDTO(BaseModel):
    """Extraction result in the camelCase shape chat handlers consume."""
    type: str
    fileName: str
    text: str
    metadata: Dict[str, Any]


class SupportCheckDTO(BaseModel):
    """Response DTO for a support check."""
    file_name: str
    supported: bool
    category: Optional[str] = None


class SupportedTypesDTO(BaseModel):
    """Category -> sorted extension list."""
    types: Dict[str, List[str]]


class ErrorResponseDTO(BaseModel):
    """Error response DTO."""
    error: str
    status_code: int
    path: Optional[str] = None
    request_id: Optional[str] = None
