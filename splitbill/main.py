"""FastAPI application entry point"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from splitbill.api.deps import get_cache
from splitbill.api.v1.router import api_router
from splitbill.config import get_settings
from splitbill.core.exceptions import AppException
from splitbill.core.logging_config import configure_logging
from splitbill.database import Database
from splitbill.services.cache_service import CacheService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the database and cache handles for the life of the process"""
    settings = get_settings()
    configure_logging(settings.log_level)

    database = Database.from_settings(settings)
    await database.create_all()
    cache = CacheService.from_url(settings.redis_url)

    app.state.database = database
    app.state.cache = cache
    logger.info("%s started", settings.app_name)

    yield

    await cache.close()
    await database.dispose()


def create_app() -> FastAPI:
    """Build the application with routers and exception handlers"""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        description="Backend API for splitting restaurant bills",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    if settings.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.allowed_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        """Handle custom application exceptions"""
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": {
                    "message": exc.message,
                    "type": exc.error_type,
                    "path": str(request.url.path),
                }
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle all other exceptions"""
        logger.exception("Unhandled exception on %s", request.url.path)

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {"message": "Internal server error", "type": "InternalServerError"}
            },
        )

    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint - points to docs"""
        return {
            "message": f"Welcome to {settings.app_name}",
            "docs_url": "/docs",
            "version": "1.0.0",
        }

    @app.get("/health", tags=["Health"])
    async def health_check(cache: CacheService = Depends(get_cache)):
        """Health check endpoint; reports whether Redis answers"""
        return {
            "status": "healthy",
            "cache": "up" if await cache.health_check() else "down",
        }

    return app


app = create_app()
