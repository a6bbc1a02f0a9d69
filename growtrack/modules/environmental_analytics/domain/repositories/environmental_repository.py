# 📄 File: growtrack/modules/environmental_analytics/domain/repositories/environmental_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how the analytics ask for a user's environment samples and plant growth samples,
# without caring which database they come from.
# 🧪 Purpose (Technical Summary):
# Repository interface for the analytics input data. Implementations apply ownership,
# grow and time filtering and return domain value types in ascending time order.
# 🔗 Dependencies:
# abc, typing, domain models (EnvironmentalReading, GrowthMeasurement, AnalyticsScope, TimeRange)
# 🔄 Connected Modules / Calls From:
# Application query handlers, Supabase implementation, test fakes

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.readings import EnvironmentalReading, GrowthMeasurement
from ..models.scope import AnalyticsScope, TimeRange


class EnvironmentalDataRepository(ABC):
    """
    Repository interface for environmental readings and growth measurements.

    Every call is scoped to ``scope.user_id``; with ``scope.grow_id`` set the
    results are narrowed to that grow. Rows of other users are never returned.
    """

    @abstractmethod
    async def get_readings(
        self,
        scope: AnalyticsScope,
        time_range: Optional[TimeRange] = None,
    ) -> List[EnvironmentalReading]:
        """
        Fetch environmental readings ordered by ascending timestamp.

        Args:
            scope: Owner and optional grow filter
            time_range: Inclusive timestamp window, or None for all readings

        Returns:
            List[EnvironmentalReading]: Readings in ascending timestamp order
        """
        pass

    @abstractmethod
    async def get_measurements(self, scope: AnalyticsScope) -> List[GrowthMeasurement]:
        """
        Fetch growth measurements ordered by ascending measurement time.

        Measurements belong to a grow through their plant.
        """
        pass
