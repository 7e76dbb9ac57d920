from .gateway import APIGateway
from .routers import extraction
from .routers.dependencies import get_document_processor
from .core.config import ENVIRONMENT
from .core.logging_config import setup_logging, get_logger

# Initialize logging
setup_logging()
logger = get_logger(__name__)


def create_app():
    """Build the FastAPI app with middleware, routers and health endpoints."""
    gateway = APIGateway()
    gateway.setup_middleware()
    gateway.register_router(extraction.router, prefix="/api/v1", tags=["Extraction"])
    gateway.register_health_endpoints()
    
    app = gateway.get_app()
    
    @app.on_event("startup")
    async def startup_event():
        """Initialize application on startup."""
        logger.info("=" * 60)
        logger.info("Starting Document Intake Backend...")
        logger.info("=" * 60)
        logger.info(f"  → Environment: {ENVIRONMENT}")
        logger.info(f"  → Docs URL: {app.docs_url if app.docs_url else 'Disabled (production)'}")
        get_document_processor()
        logger.info("✅ Document Intake Backend ready")
    
    return app


app = create_app()
