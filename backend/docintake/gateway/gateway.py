"""
API Gateway

Main gateway class that wires routing, middleware, and error handlers.
Acts as the single entry point for all API requests.
"""
import os
from typing import Optional, List
from fastapi import FastAPI, APIRouter, Depends
from fastapi.middleware.cors import CORSMiddleware

from ..api.exceptions import DocumentProcessingError
from ..core.config import ENVIRONMENT
from ..core.logging_config import get_logger
from ..routers.dependencies import get_document_processor
from ..services.document_processor import DocumentProcessor
from .middleware import (
    RequestIDMiddleware,
    RequestLoggingMiddleware,
    ErrorHandlingMiddleware,
    business_exception_handler
)

logger = get_logger(__name__)


class APIGateway:
    """
    API Gateway that manages routing and middleware.
    
    Responsibilities:
    - Initialize FastAPI application
    - Register middleware (CORS, request IDs, logging, error handling)
    - Register routers under a common prefix
    - Provide health check endpoints
    """
    
    def __init__(
        self,
        title: str = "Document Intake API",
        description: str = "Text extraction for files uploaded through the chat bot",
        version: str = "1.0.0",
        enable_docs: Optional[bool] = None
    ):
        """
        Initialize API Gateway.
        
        Args:
            title: API title
            description: API description
            version: API version
            enable_docs: Enable API docs (auto-detected from ENVIRONMENT if None)
        """
        self.title = title
        self.description = description
        self.version = version
        self.enable_docs = enable_docs if enable_docs is not None else (
            ENVIRONMENT != "production"
        )
        self.registered_prefixes: List[str] = []
        
        self.app = FastAPI(
            title=self.title,
            description=self.description,
            version=self.version,
            docs_url="/docs" if self.enable_docs else None,
            redoc_url="/redoc" if self.enable_docs else None
        )
        self.app.add_exception_handler(DocumentProcessingError, business_exception_handler)
        
        logger.info("API Gateway initialized")
    
    def setup_middleware(self):
        """Configure all middleware (last added runs first)."""
        logger.info("Setting up middleware...")
        
        # Innermost, so the request ID is already set when it renders errors
        self.app.add_middleware(ErrorHandlingMiddleware)
        logger.debug("  → Error handling middleware added")
        
        self.app.add_middleware(
            RequestLoggingMiddleware,
            skip_paths=["/health", "/docs", "/redoc", "/openapi.json"]
        )
        logger.debug("  → Request logging middleware added")
        
        self.app.add_middleware(RequestIDMiddleware)
        logger.debug("  → Request ID middleware added")
        
        cors_origins = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173").split(",")
        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
        logger.debug(f"  → CORS middleware added (origins: {', '.join(cors_origins)})")
        
        logger.info("✅ All middleware configured")
    
    def register_router(self, router: APIRouter, prefix: str = "", tags: Optional[List[str]] = None):
        """
        Register a router with the gateway.
        
        Args:
            router: FastAPI router instance
            prefix: URL prefix for the router (e.g., "/api/v1")
            tags: OpenAPI tags for documentation
        """
        self.app.include_router(router, prefix=prefix, tags=tags or [])
        self.registered_prefixes.append(f"{prefix}{router.prefix}")
        logger.info(f"Registered router at prefix '{prefix}{router.prefix}'")
    
    def register_health_endpoints(self):
        """Register health check endpoints."""
        
        @self.app.get("/")
        async def root():
            """Root endpoint - API information."""
            return {
                "message": f"{self.title} is running",
                "version": self.version,
                "status": "healthy",
                "routers": self.registered_prefixes
            }
        
        @self.app.get("/health")
        async def health_check(processor: DocumentProcessor = Depends(get_document_processor)):
            """
            Health check endpoint for container orchestration.
            
            Reports whether a bot token is configured and which extractors
            are missing their engine. Both are reported, not enforced.
            """
            return {
                "status": "healthy",
                "bot_token_configured": processor.config.has_token,
                "unavailable_extractors": processor.extractor_factory.get_unavailable_formats()
            }
        
        logger.info("Health check endpoints registered")
    
    def get_app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self.app
