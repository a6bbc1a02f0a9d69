# 📄 File: growtrack/modules/environmental_analytics/application/environmental_service.py
# 🧭 Purpose (Layman Explanation):
# One front door to the environmental analytics: ask for stats, impact, raw data or a CSV
# and it routes the request to the right worker.
# 🧪 Purpose (Technical Summary):
# Per-request facade over the query handlers exposing the engine's public operations
# plus CSV export. Holds no state beyond its injected collaborators.
# 🔗 Dependencies:
# typing, domain models, application queries/handlers/dto
# 🔄 Connected Modules / Calls From:
# Presentation dependencies and routes, tests

from datetime import date
from typing import List, Optional, Tuple

from ..domain.models.analytics import EnvironmentalImpact, EnvironmentalStats
from ..domain.models.scope import AnalyticsScope, TimeRange
from ..domain.repositories.environmental_repository import EnvironmentalDataRepository
from ..domain.services.reading_matcher import ReadingMatchStrategy
from .dto.environmental_data_dto import (
    EnvironmentalDataPoint,
    build_environmental_csv,
    get_export_filename,
)
from .handlers.query_handlers import (
    GetEnvironmentalDataQueryHandler,
    GetEnvironmentalImpactQueryHandler,
    GetEnvironmentalStatsQueryHandler,
)
from .queries.get_environmental_data import GetEnvironmentalDataQuery
from .queries.get_environmental_impact import GetEnvironmentalImpactQuery
from .queries.get_environmental_stats import GetEnvironmentalStatsQuery


class EnvironmentalService:
    """
    Facade for environmental analytics operations.

    Build one per request (or per call) around a scoped repository.
    """

    def __init__(
        self,
        repository: EnvironmentalDataRepository,
        match_strategy: ReadingMatchStrategy = ReadingMatchStrategy.FIRST_MATCH,
    ):
        self._stats_handler = GetEnvironmentalStatsQueryHandler(repository)
        self._impact_handler = GetEnvironmentalImpactQueryHandler(repository, match_strategy)
        self._data_handler = GetEnvironmentalDataQueryHandler(repository)

    async def get_environmental_stats(self, scope: AnalyticsScope) -> EnvironmentalStats:
        return await self._stats_handler.handle(
            GetEnvironmentalStatsQuery(user_id=scope.user_id, grow_id=scope.grow_id)
        )

    async def get_environmental_impact(self, scope: AnalyticsScope) -> EnvironmentalImpact:
        return await self._impact_handler.handle(
            GetEnvironmentalImpactQuery(user_id=scope.user_id, grow_id=scope.grow_id)
        )

    async def get_environmental_data(
        self,
        scope: AnalyticsScope,
        time_range: Optional[TimeRange] = None,
    ) -> List[EnvironmentalDataPoint]:
        return await self._data_handler.handle(
            GetEnvironmentalDataQuery(
                user_id=scope.user_id,
                grow_id=scope.grow_id,
                time_range=time_range,
            )
        )

    async def export_environmental_csv(
        self,
        scope: AnalyticsScope,
        time_range: Optional[TimeRange] = None,
        on: Optional[date] = None,
    ) -> Tuple[str, str]:
        """
        Export the raw series as CSV.

        Returns:
            Tuple[str, str]: Download filename and CSV content
        """
        points = await self.get_environmental_data(scope, time_range)
        return get_export_filename(on=on), build_environmental_csv(points)
