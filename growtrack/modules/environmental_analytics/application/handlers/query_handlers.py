# 📄 File: growtrack/modules/environmental_analytics/application/handlers/query_handlers.py
# 🧭 Purpose (Layman Explanation):
# The workers behind each analytics request: they fetch the grower's data and hand it
# to the calculators that produce the dashboard numbers.
#
# 🧪 Purpose (Technical Summary):
# CQRS query handlers orchestrating the environmental data repository and the pure
# analytics services. Handlers are built per request with injected collaborators.
#
# 🔗 Dependencies:
# - asyncio (concurrent fetches)
# - growtrack.modules.environmental_analytics.application.queries (query definitions)
# - growtrack.modules.environmental_analytics.domain.services (analytics functions)
# - growtrack.modules.environmental_analytics.domain.repositories (repository interface)
# - growtrack.shared.utils.logging (call timing and failure logging)
#
# 🔄 Connected Modules / Calls From:
# - EnvironmentalService facade
# - growtrack.modules.environmental_analytics.presentation.api.v1 (through the facade)

"""
Environmental Analytics Query Handlers

- GetEnvironmentalStatsQueryHandler: readings -> EnvironmentalStats
- GetEnvironmentalImpactQueryHandler: readings + measurements -> EnvironmentalImpact
- GetEnvironmentalDataQueryHandler: readings -> charting data points

Fetch failures are logged and propagated unchanged; nothing is wrapped or retried.
Empty data is never an error, the analytics fall back to their zero/default values.
"""

import asyncio
import logging
from typing import List

from growtrack.shared.utils.logging import log_function_call

from ...domain.models.analytics import EnvironmentalImpact, EnvironmentalStats
from ...domain.repositories.environmental_repository import EnvironmentalDataRepository
from ...domain.services.correlation_estimator import compute_correlations
from ...domain.services.optimal_range_inferrer import infer_optimal_ranges
from ...domain.services.reading_matcher import ReadingMatchStrategy, get_reading_matcher
from ...domain.services.statistics_aggregator import compute_stats
from ..dto.environmental_data_dto import EnvironmentalDataPoint, to_data_points
from ..queries.get_environmental_data import GetEnvironmentalDataQuery
from ..queries.get_environmental_impact import GetEnvironmentalImpactQuery
from ..queries.get_environmental_stats import GetEnvironmentalStatsQuery

logger = logging.getLogger(__name__)


class GetEnvironmentalStatsQueryHandler:
    """Handler computing descriptive statistics over the scoped readings."""

    def __init__(self, repository: EnvironmentalDataRepository):
        self._repository = repository

    @log_function_call()
    async def handle(self, query: GetEnvironmentalStatsQuery) -> EnvironmentalStats:
        scope = query.to_scope()
        readings = await self._repository.get_readings(scope)

        stats = compute_stats(readings)
        logger.debug(
            f"Computed environmental stats over {stats.total_readings} readings "
            f"(grow_id={scope.grow_id})"
        )
        return stats


class GetEnvironmentalImpactQueryHandler:
    """
    Handler computing correlation scores and optimal ranges.

    Readings and measurements are fetched concurrently; the two snapshots may be
    slightly out of step with each other, which is accepted.
    """

    def __init__(
        self,
        repository: EnvironmentalDataRepository,
        match_strategy: ReadingMatchStrategy = ReadingMatchStrategy.FIRST_MATCH,
    ):
        """
        Initialize the impact query handler.

        Args:
            repository: Source of readings and measurements
            match_strategy: How a measurement is paired with a reading
        """
        self._repository = repository
        self._match_strategy = ReadingMatchStrategy(match_strategy)
        self._matcher = get_reading_matcher(self._match_strategy)

    @log_function_call()
    async def handle(self, query: GetEnvironmentalImpactQuery) -> EnvironmentalImpact:
        scope = query.to_scope()
        readings, measurements = await asyncio.gather(
            self._repository.get_readings(scope),
            self._repository.get_measurements(scope),
        )

        impact = EnvironmentalImpact(
            correlations=compute_correlations(readings, measurements, matcher=self._matcher),
            optimal_ranges=infer_optimal_ranges(readings, measurements, matcher=self._matcher),
        )
        logger.debug(
            f"Computed environmental impact from {len(readings)} readings and "
            f"{len(measurements)} measurements (strategy={self._match_strategy.value})"
        )
        return impact


class GetEnvironmentalDataQueryHandler:
    """Handler returning the raw reading series reshaped for charting."""

    def __init__(self, repository: EnvironmentalDataRepository):
        self._repository = repository

    @log_function_call()
    async def handle(self, query: GetEnvironmentalDataQuery) -> List[EnvironmentalDataPoint]:
        readings = await self._repository.get_readings(query.to_scope(), query.time_range)
        logger.debug(f"Fetched {len(readings)} environmental data points")
        return to_data_points(readings)
