"""
Shotify
FastAPI Main Application

Serves the template catalog and the user project store behind the
app-screenshot editor.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shotify.config import get_settings
from shotify.database import init_db, close_db, get_session
from shotify.errors import InvalidArgument, ShotifyError
from shotify.services.templates import TemplateCatalog

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Startup
    logger.info(f"Starting {settings.app_name} in {settings.app_env} mode")

    # Initialize database
    await init_db()
    logger.info("Database initialized")

    # Seed the template catalog once per process
    if settings.seed_templates_on_startup:
        async with get_session() as db:
            inserted = await TemplateCatalog(db).seed(force=settings.seed_force)
        logger.info(f"Template seed inserted {inserted} templates")

    yield

    # Shutdown
    logger.info("Shutting down application")
    await close_db()


# Create FastAPI app
settings = get_settings()
app = FastAPI(
    title=settings.app_name,
    description="Template catalog and project store for app store screenshot design",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/api/docs" if settings.debug else None,
    redoc_url="/api/redoc" if settings.debug else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# API Routes
# =============================================================================

@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "environment": settings.app_env,
    }


# =============================================================================
# Import and include API routers
# =============================================================================

from shotify.api import admin, projects, templates  # noqa: E402

app.include_router(templates.router, prefix="/api/templates", tags=["templates"])
app.include_router(projects.router, prefix="/api/projects", tags=["projects"])
app.include_router(admin.router, prefix="/api/admin/templates", tags=["admin"])


# =============================================================================
# Error Handlers
# =============================================================================

@app.exception_handler(ShotifyError)
async def domain_exception_handler(request: Request, exc: ShotifyError):
    """Map domain errors to their HTTP status."""
    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.code,
            "message": exc.message,
        },
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Missing or malformed request input is an invalid argument."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    error = InvalidArgument(f"{location}: {first.get('msg', 'invalid input')}" if location else "Invalid input")
    return await domain_exception_handler(request, error)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler."""
    logger.exception(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": str(exc) if settings.debug else "An unexpected error occurred",
        },
    )


# =============================================================================
# Development server entry point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "shotify.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="info",
    )
