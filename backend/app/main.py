"""
FastAPI application entry point for the careers page builder.

This is the main app that:
- Initializes FastAPI with CORS
- Registers error handlers and all API routers
- Provides health check endpoint
- Sets up database connection lifecycle
"""
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app import database
from app.config import settings
from app.errors import register_error_handlers
from app.schemas.common import SECTIONS_VERSION_HEADER, VALIDATION_RESPONSES
# Import API routers
from app.api import auth, companies, sections, jobs

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    On startup: Database connection is already handled by engine
    On shutdown: Close database connections gracefully
    """
    # Startup
    logger.info("Starting Careers API...")
    logger.info(f"Database: {settings.database_url.split('@')[1] if '@' in settings.database_url else 'configured'}")
    logger.info(f"Debug mode: {settings.debug}")

    yield

    # Shutdown
    logger.info("Shutting down Careers API...")
    await database.engine.dispose()


# Initialize FastAPI app
app = FastAPI(
    title="Careers API",
    description="API for building and publishing company careers pages",
    version="1.0.0",
    debug=settings.debug,
    lifespan=lifespan,
)

# Configure CORS
# Set ALLOWED_ORIGINS environment variable with comma-separated domains
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[SECTIONS_VERSION_HEADER],
)

register_error_handlers(app)


# Health check endpoint
@app.get("/api/health")
async def health_check():
    """Simple health check endpoint."""
    return {
        "status": "ok",
        "service": "Careers API",
        "version": "1.0.0",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# Register API routers
app.include_router(auth.router, prefix="/api/auth", tags=["auth"], responses=VALIDATION_RESPONSES)
app.include_router(companies.router, prefix="/api/companies", tags=["companies"], responses=VALIDATION_RESPONSES)
app.include_router(sections.router, prefix="/api/sections", tags=["sections"], responses=VALIDATION_RESPONSES)
app.include_router(jobs.router, prefix="/api/jobs", tags=["jobs"], responses=VALIDATION_RESPONSES)
