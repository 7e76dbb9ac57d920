"""
Extraction Router - exposes the document processor over HTTP.

Domain errors propagate to ErrorHandlingMiddleware, which maps them to
status codes.
"""
from fastapi import APIRouter, Depends, Query

from .dependencies import get_document_processor
from ..api.dto import (
    ExtractionResultDTO,
    ProcessFileRequestDTO,
    SupportCheckDTO,
    SupportedTypesDTO,
    TelegramImageRequestDTO,
)
from ..api.exceptions import UnsupportedFileType
from ..api.mappers import to_result_dto, to_supported_types_dto
from ..services.document_processor import DocumentProcessor

router = APIRouter(prefix="/extraction")


@router.get("/supported-types", response_model=SupportedTypesDTO)
async def get_supported_types(processor: DocumentProcessor = Depends(get_document_processor)):
    """List the recognised extensions per extraction category."""
    return to_supported_types_dto(processor.get_supported_types())


@router.get("/supported", response_model=SupportCheckDTO)
async def check_supported(
    file_name: str = Query(..., min_length=1),
    processor: DocumentProcessor = Depends(get_document_processor)
):
    """Check whether a file name would be accepted."""
    try:
        category = processor.extractor_factory.get_category(file_name).value
    except UnsupportedFileType:
        category = None
    return SupportCheckDTO(
        file_name=file_name,
        supported=processor.is_supported(file_name),
        category=category,
    )


@router.post("/process", response_model=ExtractionResultDTO)
async def process_file(
    request: ProcessFileRequestDTO,
    processor: DocumentProcessor = Depends(get_document_processor)
):
    """Download an uploaded file and extract its text."""
    result = await processor.process_file(request.file_path, request.file_name)
    return to_result_dto(result)


@router.post("/telegram-image", response_model=ExtractionResultDTO)
async def process_telegram_image(
    request: TelegramImageRequestDTO,
    processor: DocumentProcessor = Depends(get_document_processor)
):
    """OCR an inline photo upload."""
    result = await processor.process_telegram_image(request.file_path)
    return to_result_dto(result)
