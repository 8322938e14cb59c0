"""
FastAPI application entry point.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from category_tree import __version__
from category_tree.config import settings
from category_tree.api.router import api_router
from category_tree.database import init_db
from category_tree.exception_handlers import register_exception_handlers
from category_tree.logging_config import setup_logging

VERSION = __version__

logger = setup_logging(settings)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create missing tables before serving requests."""
    init_db()
    logger.info(f"{settings.app_name} {VERSION} started")
    yield


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=VERSION,
    description="Hierarchical category management with subtree queries and moves",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include API router
app.include_router(api_router, prefix="/api/v1")


@app.get("/")
def read_root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": VERSION,
        "status": "running"
    }


@app.get("/api/v1/health")
def health_check():
    """Health check endpoint."""
    return {
        "status": "ok",
        "app_name": settings.app_name
    }
