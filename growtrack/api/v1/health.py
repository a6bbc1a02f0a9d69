# 📄 File: growtrack/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# Tells us whether GrowTrack is up and whether it can reach its database, like a quick
# checkup for load balancers and monitoring.
# 🧪 Purpose (Technical Summary):
# Health check endpoints: a cheap liveness status and a readiness check that queries
# the Supabase row store.
# 🔗 Dependencies:
# FastAPI, growtrack.shared.config (settings, Supabase manager)
# 🔄 Connected Modules / Calls From:
# growtrack.api.v1.router, monitoring systems, load balancers

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from growtrack.shared.config.settings import Settings, get_settings
from growtrack.shared.config.supabase import SupabaseManager, get_supabase_manager

logger = logging.getLogger(__name__)

# Create router for health endpoints
health_router = APIRouter()


@health_router.get("/health",
                   summary="Basic Health Check",
                   description="Basic health check endpoint for load balancers and monitoring")
async def health_check(settings: Settings = Depends(get_settings)) -> JSONResponse:
    """Return a simple OK status without touching external services."""
    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": "growtrack-api",
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
        }
    )


@health_router.get("/health/ready",
                   summary="Readiness Probe",
                   description="Checks that the Supabase row store answers queries")
async def readiness_probe(
    supabase_manager: SupabaseManager = Depends(get_supabase_manager),
) -> JSONResponse:
    """
    Readiness probe.

    Returns 200 when the row store is reachable and 503 otherwise.
    """
    supabase_health = await supabase_manager.health_check()

    if supabase_health["database_service"]:
        return JSONResponse(
            status_code=200,
            content={"status": "ready", "timestamp": datetime.now(timezone.utc).isoformat()}
        )

    logger.warning(f"Readiness probe failed: {supabase_health['error']}")
    return JSONResponse(
        status_code=503,
        content={
            "status": "not_ready",
            "reason": "supabase_unavailable",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
    )
