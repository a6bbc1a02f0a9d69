# 📄 File: growtrack/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts GrowTrack's backend, connects the analytics
# endpoints, and makes sure errors come back to the web app in one consistent shape.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point with logging setup, middleware,
# router registration, rate limiting and exception handlers.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn
# - slowapi (export rate limiting)
# - growtrack.shared.config (settings, Supabase lifecycle)
# - growtrack.shared.core.exceptions, growtrack.shared.utils.logging
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - Tests (TestClient)

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from postgrest import APIError
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from growtrack.api.middleware.logging import RequestLoggingMiddleware
from growtrack.api.v1 import API_PREFIX, API_TAGS
from growtrack.api.v1.router import api_v1_router
from growtrack.modules.environmental_analytics.presentation.api.v1.environmental import limiter
from growtrack.shared.config.settings import get_settings
from growtrack.shared.config.supabase import cleanup_supabase
from growtrack.shared.core.exceptions import ExternalServiceError, GrowTrackException
from growtrack.shared.utils.logging import setup_logging

settings = get_settings()
setup_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    The Supabase client is created lazily on first use and dropped on shutdown.
    """
    logger.info(f"🌱 {settings.APP_NAME} starting up ({settings.ENVIRONMENT})")

    try:
        yield
    finally:
        logger.info(f"🔄 {settings.APP_NAME} shutting down...")
        await cleanup_supabase()
        logger.info("✅ Shutdown complete")


def _error_response(request: Request, exc: GrowTrackException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": {
                "code": exc.error_code,
                "message": exc.message,
                "details": exc.details,
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "request_id": getattr(request.state, "request_id", None),
            }
        },
    )


def create_application() -> FastAPI:
    """
    Application factory function.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        openapi_tags=API_TAGS,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )

    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================

    app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "Content-Disposition"],
    )

    # slowapi looks the limiter up on app.state
    app.state.limiter = limiter

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(api_v1_router, prefix=API_PREFIX)

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    @app.exception_handler(GrowTrackException)
    async def growtrack_exception_handler(request: Request, exc: GrowTrackException) -> JSONResponse:
        """Handle custom GrowTrack application exceptions."""
        if exc.status_code >= 500:
            logger.error(f"{exc.error_code}: {exc.message}")
        else:
            logger.info(f"{exc.error_code} on {request.url.path}: {exc.message}")
        return _error_response(request, exc)

    @app.exception_handler(APIError)
    async def row_store_error_handler(request: Request, exc: APIError) -> JSONResponse:
        """Render row store failures as 502 with the upstream message."""
        logger.error(f"Supabase query failed on {request.url.path}: {exc.message}")
        return _error_response(
            request,
            ExternalServiceError(
                message="Failed to load environmental data",
                service_name="supabase",
                service_error=exc.message,
            ),
        )

    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # =========================================================================
    # ROOT ENDPOINTS
    # =========================================================================

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "docs_url": "/docs" if settings.DEBUG else None,
            "health_check": f"{API_PREFIX}/health",
            "api_base": API_PREFIX,
        }

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        """Favicon endpoint to prevent 404 errors."""
        return Response(status_code=204)

    return app


# Create the FastAPI application
app = create_application()


def main():
    """Run the development server."""
    uvicorn.run(
        "growtrack.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
