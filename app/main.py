# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging
import time

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Local application imports
from .api.v1 import post_router, health_router
from .application.services.sample_posts import seed_sample_posts
from .core.config import get_settings
from .core.exceptions import PersistenceError
from .core.logging import setup_logging
from .di.container import get_container, reset_container
from .domain.repositories.post_repository import PostRepository
from .infrastructure.db.mongo_connection import close_connection

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    Seeds the sample posts when enabled and closes the MongoDB client on
    shutdown.
    """
    settings = get_settings()
    
    if settings.seed_sample_posts:
        try:
            await seed_sample_posts(get_container().get(PostRepository))
        except PersistenceError as e:
            # Don't fail app startup if MongoDB is unavailable
            logger.error(f"Failed to seed sample posts: {e}", exc_info=True)
    
    logger.info("Application startup complete")
    
    yield
    
    close_connection()
    reset_container()
    logger.info("Application shutdown complete")


def register_error_handlers(application: FastAPI) -> None:
    """Register the global exception handlers"""
    
    @application.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Malformed request bodies answer 400, like missing fields do"""
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )
    
    @application.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError):
        """Database failures - never leaks driver details"""
        logger.error(
            f"Persistence error on {request.method} {request.url.path}: {exc.message}",
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": exc.user_message},
        )


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware and request logging
    - Error handlers
    - API route registration
    
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    
    settings = get_settings()
    setup_logging(settings.log_level)
    
    # Create FastAPI app
    application = FastAPI(
        title="Blog Posts API",
        version="1.0.0",
        description="CRUD API for blog posts backed by MongoDB",
        lifespan=lifespan
    )
    
    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    @application.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f}ms"
        )
        return response
    
    register_error_handlers(application)
    
    # Register API routers
    application.include_router(health_router)
    application.include_router(post_router, prefix="/posts")
    
    return application


# Create application instance
app = create_application()
