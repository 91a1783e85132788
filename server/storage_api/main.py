"""
Main FastAPI application factory
"""
import logging
from pathlib import Path
from typing import AbstractSet, Optional, Union

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config_loader import settings
from storage_api.api.routes import health, storage
from storage_api.core.errors import StorageError
from storage_api.models.schemas import ApiInfo

logger = logging.getLogger(__name__)


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def create_app(
    storage_dir: Optional[Union[str, Path]] = None,
    excluded: Optional[AbstractSet[str]] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application

    Args:
        storage_dir: Directory whose subdirectories are served, defaults to settings
        excluded: Entry names hidden from every listing, defaults to settings

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title=settings.API_NAME,
        description="Browse, search and stream media files from a directory tree",
        version=settings.API_VERSION
    )

    app.state.storage_dir = Path(storage_dir if storage_dir is not None else settings.STORAGE_DIR)
    app.state.excluded = frozenset(excluded if excluded is not None else settings.EXCLUDED_ENTRIES)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=settings.CORS_ALLOW_HEADERS,
    )

    app.add_exception_handler(StorageError, storage_error_handler)

    # Include routers
    app.include_router(storage.router)
    app.include_router(health.router)

    # Root endpoint
    @app.get("/", response_model=ApiInfo)
    async def root():
        return ApiInfo(
            name=settings.API_NAME,
            version=settings.API_VERSION,
            endpoints={
                "categories": "/api/categories",
                "allFiles": "/api/files",
                "categoryFiles": "/api/categories/:category/files",
                "getFile": "/api/files/:category/:filename",
                "downloadFile": "/api/download/:category/:filename",
                "search": "/api/search?q=query&type=image|video",
                "health": "/api/health"
            }
        )

    logger.info("Serving categories from %s", app.state.storage_dir.resolve())
    return app


# Create app instance
app = create_app()
