"""
Error Handling Middleware

Centralized error handling and response formatting.
"""
import traceback
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from fastapi import status
from ...core.config import ENVIRONMENT
from ...core.logging_config import get_logger
from ...api.exceptions import DocumentProcessingError, handle_business_exception

logger = get_logger(__name__)


def _error_body(request: Request, error: str, status_code: int) -> dict:
    return {
        "error": error,
        "status_code": status_code,
        "path": request.url.path,
        "request_id": getattr(request.state, "request_id", None)
    }


async def business_exception_handler(request: Request, exc: DocumentProcessingError) -> JSONResponse:
    """
    Render extraction pipeline errors.

    Only the user-safe message is returned; the underlying cause was
    already logged by the failing stage.
    """
    http_exception = handle_business_exception(exc)
    logger.warning(
        f"Business exception for {request.method} {request.url.path}: {http_exception.detail}"
    )
    return JSONResponse(
        status_code=http_exception.status_code,
        content=_error_body(request, http_exception.detail, http_exception.status_code)
    )


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Middleware that turns unexpected exceptions into a 500 JSON response.
    
    HTTP and validation errors are rendered by FastAPI itself; pipeline
    errors by business_exception_handler. Error detail and traceback are
    only included outside production.
    """
    
    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as e:
            is_development = ENVIRONMENT != "production"
            
            error_detail = str(e) if is_development else "Internal server error"
            error_traceback = traceback.format_exc() if is_development else None
            
            logger.error(f"Unexpected error for {request.method} {request.url.path}: {e}", exc_info=True)
            
            body = _error_body(request, error_detail, status.HTTP_500_INTERNAL_SERVER_ERROR)
            if error_traceback:
                body["traceback"] = error_traceback
            return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body)
