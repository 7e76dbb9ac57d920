"""
Custom exceptions for the extraction pipeline.
Separates business exceptions from HTTP exceptions.

Every stage logs the underlying library/network error where it happens and
raises one of these coarse, user-safe errors instead.
"""
from fastapi import HTTPException, status


class DocumentProcessingError(Exception):
    """Base class for all extraction pipeline failures."""
    message = "Failed to process file"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)


class UnsupportedFileType(DocumentProcessingError):
    """Raised when a file extension maps to no extraction category."""

    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f"Unsupported file type: {extension}")


class DownloadFailed(DocumentProcessingError):
    """Raised when the file bytes cannot be fetched from the hosting endpoint."""
    message = "Failed to download file from Telegram"


class PdfProcessingFailed(DocumentProcessingError):
    """Raised when the PDF library cannot parse the document."""
    message = "Failed to process PDF file"


class OcrProcessingFailed(DocumentProcessingError):
    """Raised when the OCR engine fails on an image."""
    message = "Failed to process image with OCR"


class TextProcessingFailed(DocumentProcessingError):
    """Raised when a text file cannot be decoded."""
    message = "Failed to process text file"


def handle_business_exception(e: Exception) -> HTTPException:
    """
    Convert business exceptions to HTTP exceptions.
    This keeps business logic clean of HTTP concerns.
    """
    if isinstance(e, UnsupportedFileType):
        return HTTPException(status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, detail=str(e))
    elif isinstance(e, DownloadFailed):
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
    elif isinstance(e, (PdfProcessingFailed, OcrProcessingFailed, TextProcessingFailed)):
        return HTTPException(status_code=422, detail=str(e))
    elif isinstance(e, DocumentProcessingError):
        return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    else:
        return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error")
