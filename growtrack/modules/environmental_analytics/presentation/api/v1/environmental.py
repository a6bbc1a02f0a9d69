# 📄 File: growtrack/modules/environmental_analytics/presentation/api/v1/environmental.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints behind the environmental analytics tab: summary cards, the
# "what helps growth" panel, the chart data and the CSV download.
#
# 🧪 Purpose (Technical Summary):
# FastAPI routes for environmental statistics, impact, raw series and CSV export.
# Every route requires an authenticated caller on the analytics tier.
#
# 🔗 Dependencies:
# - FastAPI router, Query, Response
# - slowapi (export rate limiting)
# - growtrack.modules.environmental_analytics.presentation (schemas, dependencies)
# - growtrack.modules.environmental_analytics.application (EnvironmentalService, DTOs)
#
# 🔄 Connected Modules / Calls From:
# - growtrack.api.v1.router (mounted under /analytics/environmental)
# - Analytics dashboard (cards, charts, export button)

"""
Environmental Analytics API Endpoints

Endpoints:
- GET /stats: descriptive statistics
- GET /impact: correlations and optimal ranges
- GET /data: raw series for charting
- GET /data/export: raw series as a CSV download (rate limited)

Errors are raised as GrowTrack exceptions and rendered by the application handler.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, Response
from slowapi import Limiter
from slowapi.util import get_remote_address

from growtrack.shared.config.settings import get_settings
from growtrack.shared.core.dependencies import CurrentUser

from ....application.dto.environmental_data_dto import EnvironmentalDataPoint
from ....application.environmental_service import EnvironmentalService
from ....domain.models.scope import AnalyticsScope, TimeRange
from ...dependencies import get_environmental_service, get_time_range, require_analytics_tier
from ..schemas.environmental_schemas import EnvironmentalImpactResponse, EnvironmentalStatsResponse

logger = logging.getLogger(__name__)

# Rate limiting configuration
limiter = Limiter(key_func=get_remote_address)

environmental_router = APIRouter()

GROW_ID_QUERY = Query(None, description="Limit the analysis to one grow; omit for the whole account")

COMMON_RESPONSES = {
    401: {"description": "Authentication required"},
    402: {"description": "Subscription tier too low for analytics"},
}


def _export_rate_limit() -> str:
    return get_settings().EXPORT_RATE_LIMIT


@environmental_router.get(
    "/stats",
    response_model=EnvironmentalStatsResponse,
    response_model_exclude_none=True,
    summary="Environmental statistics",
    description="Averages, optimal-conditions share and stress events of the environmental readings",
    responses=COMMON_RESPONSES,
)
async def get_environmental_stats(
    grow_id: Optional[str] = GROW_ID_QUERY,
    current_user: CurrentUser = Depends(require_analytics_tier),
    service: EnvironmentalService = Depends(get_environmental_service),
) -> EnvironmentalStatsResponse:
    scope = AnalyticsScope(user_id=current_user.user_id, grow_id=grow_id)
    stats = await service.get_environmental_stats(scope)
    return EnvironmentalStatsResponse.from_domain(stats)


@environmental_router.get(
    "/impact",
    response_model=EnvironmentalImpactResponse,
    response_model_exclude_none=True,
    summary="Environmental impact on growth",
    description="Factor-vs-growth scores and the factor ranges seen during the best growth periods",
    responses=COMMON_RESPONSES,
)
async def get_environmental_impact(
    grow_id: Optional[str] = GROW_ID_QUERY,
    current_user: CurrentUser = Depends(require_analytics_tier),
    service: EnvironmentalService = Depends(get_environmental_service),
) -> EnvironmentalImpactResponse:
    scope = AnalyticsScope(user_id=current_user.user_id, grow_id=grow_id)
    impact = await service.get_environmental_impact(scope)
    return EnvironmentalImpactResponse.from_domain(impact)


@environmental_router.get(
    "/data",
    response_model=List[EnvironmentalDataPoint],
    response_model_exclude_none=True,
    summary="Environmental data series",
    description="Readings in ascending time order, optionally limited to a from/to window",
    responses={**COMMON_RESPONSES, 422: {"description": "Invalid time window"}},
)
async def get_environmental_data(
    grow_id: Optional[str] = GROW_ID_QUERY,
    time_range: Optional[TimeRange] = Depends(get_time_range),
    current_user: CurrentUser = Depends(require_analytics_tier),
    service: EnvironmentalService = Depends(get_environmental_service),
) -> List[EnvironmentalDataPoint]:
    scope = AnalyticsScope(user_id=current_user.user_id, grow_id=grow_id)
    return await service.get_environmental_data(scope, time_range)


@environmental_router.get(
    "/data/export",
    summary="Export environmental data as CSV",
    description="Download the environmental data series as a CSV file",
    response_class=Response,
    responses={
        **COMMON_RESPONSES,
        200: {"content": {"text/csv": {}}, "description": "CSV attachment"},
        422: {"description": "Invalid time window"},
        429: {"description": "Too many exports"},
    },
)
@limiter.limit(_export_rate_limit)
async def export_environmental_data(
    request: Request,
    grow_id: Optional[str] = GROW_ID_QUERY,
    time_range: Optional[TimeRange] = Depends(get_time_range),
    current_user: CurrentUser = Depends(require_analytics_tier),
    service: EnvironmentalService = Depends(get_environmental_service),
) -> Response:
    scope = AnalyticsScope(user_id=current_user.user_id, grow_id=grow_id)
    filename, content = await service.export_environmental_csv(scope, time_range)

    logger.info(f"Environmental CSV export for user {current_user.user_id}: {filename}")
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
