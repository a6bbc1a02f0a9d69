# 📄 File: growtrack/modules/environmental_analytics/infrastructure/database/environmental_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Reads the grower's environment samples and plant growth samples from the Supabase
# database, making sure only their own data is ever returned.
#
# 🧪 Purpose (Technical Summary):
# Supabase PostgREST implementation of EnvironmentalDataRepository. Applies ownership,
# grow and time filters in the query, orders ascending and converts rows to domain types.
#
# 🔗 Dependencies:
# - supabase Client (PostgREST query builder)
# - asyncio.to_thread (the client is blocking; fetches overlap in worker threads)
# - growtrack.modules.environmental_analytics.domain (repository interface, value types)
#
# 🔄 Connected Modules / Calls From:
# - Presentation dependencies (per-request repository provider)
# - Application query handlers (through the repository interface)

"""
Supabase Environmental Data Repository

Tables:
- environmental_data: timestamp, temperature, humidity, light_intensity, co2_level, vpd, grow_id, user_id
- plant_measurements: measured_at, growth_rate, plant_id, user_id; grow via plants!inner(grow_id)

postgrest.APIError from a failed query propagates to the caller unchanged.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

from supabase import Client

from ...domain.models.readings import EnvironmentalReading, GrowthMeasurement
from ...domain.models.scope import AnalyticsScope, TimeRange
from ...domain.repositories.environmental_repository import EnvironmentalDataRepository

logger = logging.getLogger(__name__)

READINGS_TABLE = "environmental_data"
MEASUREMENTS_TABLE = "plant_measurements"

READING_COLUMNS = "timestamp, temperature, humidity, light_intensity, co2_level, vpd, grow_id"
MEASUREMENT_COLUMNS = "measured_at, growth_rate, plant_id, plants!inner(grow_id)"


class SupabaseEnvironmentalRepository(EnvironmentalDataRepository):
    """Supabase implementation of the EnvironmentalDataRepository interface."""

    def __init__(self, client: Client):
        """
        Initialize the repository.

        Args:
            client: Supabase client used for table queries
        """
        self._client = client

    async def get_readings(
        self,
        scope: AnalyticsScope,
        time_range: Optional[TimeRange] = None,
    ) -> List[EnvironmentalReading]:
        rows = await asyncio.to_thread(self._fetch_readings, scope, time_range)
        logger.debug(f"Fetched {len(rows)} environmental rows for user {scope.user_id}")
        return [self._row_to_reading(row) for row in rows]

    async def get_measurements(self, scope: AnalyticsScope) -> List[GrowthMeasurement]:
        rows = await asyncio.to_thread(self._fetch_measurements, scope)
        logger.debug(f"Fetched {len(rows)} measurement rows for user {scope.user_id}")
        return [self._row_to_measurement(row) for row in rows]

    def _fetch_readings(
        self,
        scope: AnalyticsScope,
        time_range: Optional[TimeRange],
    ) -> List[Dict[str, Any]]:
        query = (
            self._client.table(READINGS_TABLE)
            .select(READING_COLUMNS)
            .eq("user_id", scope.user_id)
        )
        if scope.grow_id:
            query = query.eq("grow_id", scope.grow_id)
        if time_range is not None:
            query = (
                query.gte("timestamp", time_range.from_.isoformat())
                .lte("timestamp", time_range.to.isoformat())
            )

        response = query.order("timestamp").execute()
        return response.data or []

    def _fetch_measurements(self, scope: AnalyticsScope) -> List[Dict[str, Any]]:
        query = (
            self._client.table(MEASUREMENTS_TABLE)
            .select(MEASUREMENT_COLUMNS)
            .eq("user_id", scope.user_id)
        )
        if scope.grow_id:
            query = query.eq("plants.grow_id", scope.grow_id)

        response = query.order("measured_at").execute()
        return response.data or []

    @staticmethod
    def _row_to_reading(row: Dict[str, Any]) -> EnvironmentalReading:
        return EnvironmentalReading(
            timestamp=row["timestamp"],
            temperature=row["temperature"],
            humidity=row["humidity"],
            light_intensity=row.get("light_intensity"),
            co2_level=row.get("co2_level"),
            vpd=row.get("vpd"),
            grow_id=row.get("grow_id"),
        )

    @staticmethod
    def _row_to_measurement(row: Dict[str, Any]) -> GrowthMeasurement:
        plant = row.get("plants") or {}
        return GrowthMeasurement(
            measured_at=row["measured_at"],
            growth_rate=row.get("growth_rate"),
            plant_id=row.get("plant_id"),
            grow_id=plant.get("grow_id"),
        )
