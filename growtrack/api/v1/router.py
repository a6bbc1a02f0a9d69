# 📄 File: growtrack/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# The traffic director for version 1 requests: health checks go one way, environmental
# analytics requests go another.
# 🧪 Purpose (Technical Summary):
# Main API v1 router aggregation combining the health router and module routers
# under their configured prefixes.
# 🔗 Dependencies:
# FastAPI, growtrack.api.v1.health, environmental analytics presentation router
# 🔄 Connected Modules / Calls From:
# growtrack.main

import logging

from fastapi import APIRouter

from growtrack.modules.environmental_analytics.presentation.api.v1.environmental import (
    environmental_router,
)

from . import ROUTE_PREFIXES, get_api_info
from .health import health_router

logger = logging.getLogger(__name__)

# Create main API v1 router
api_v1_router = APIRouter()

# Health routes carry their own /health paths
api_v1_router.include_router(
    health_router,
    tags=["Health Check"]
)

api_v1_router.include_router(
    environmental_router,
    prefix=ROUTE_PREFIXES["environmental_analytics"],
    tags=["Environmental Analytics"]
)


@api_v1_router.get("/",
                   summary="API v1 Information",
                   description="Get API v1 version information and available routes",
                   tags=["API Info"])
async def api_v1_info() -> dict:
    return get_api_info()
