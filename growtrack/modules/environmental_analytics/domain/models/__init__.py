"""
Environmental analytics domain models.

- readings: EnvironmentalReading, GrowthMeasurement (input boundary types)
- analytics: EnvironmentalStats, Correlations, OptimalRanges, EnvironmentalImpact
- scope: AnalyticsScope, TimeRange
- subscription: UserTier
"""

from .analytics import (
    DEFAULT_HUMIDITY_RANGE,
    DEFAULT_TEMPERATURE_RANGE,
    Correlations,
    EnvironmentalImpact,
    EnvironmentalStats,
    OptimalRanges,
    ValueRange,
)
from .readings import EnvironmentalReading, GrowthMeasurement
from .scope import AnalyticsScope, TimeRange
from .subscription import UserTier

__all__ = [
    "EnvironmentalReading",
    "GrowthMeasurement",
    "EnvironmentalStats",
    "Correlations",
    "OptimalRanges",
    "ValueRange",
    "EnvironmentalImpact",
    "DEFAULT_TEMPERATURE_RANGE",
    "DEFAULT_HUMIDITY_RANGE",
    "AnalyticsScope",
    "TimeRange",
    "UserTier",
]
