# 📄 File: growtrack/modules/environmental_analytics/domain/models/analytics.py
# 🧭 Purpose (Layman Explanation):
# The result cards the analytics produce: averages and stress counts, how strongly each
# environment factor goes together with growth, and the best ranges seen during top growth.
# 🧪 Purpose (Technical Summary):
# Frozen output value objects of the environmental analytics engine. Recomputed fresh
# per call and never mutated after construction.
# 🔗 Dependencies:
# pydantic, typing
# 🔄 Connected Modules / Calls From:
# statistics_aggregator, correlation_estimator, optimal_range_inferrer,
# query handlers, presentation schemas

from typing import Optional

from pydantic import BaseModel, ConfigDict


class ValueRange(BaseModel):
    """Closed ``[min, max]`` band for one environmental factor."""

    model_config = ConfigDict(frozen=True)

    min: float
    max: float


class EnvironmentalStats(BaseModel):
    """
    Descriptive statistics over a set of environmental readings.

    Optional averages are None when there is no data for the factor,
    and also when the average comes out as exactly zero.
    """

    model_config = ConfigDict(frozen=True)

    average_temperature: float = 0
    average_humidity: float = 0
    optimal_conditions_percentage: float = 0
    stress_events: int = 0
    average_light_intensity: Optional[float] = None
    average_co2: Optional[float] = None
    average_vpd: Optional[float] = None
    total_readings: int = 0


class Correlations(BaseModel):
    """
    Per-factor weighted-sum association score with growth rate.

    Not a normalized correlation coefficient: each score is the sum of
    ``factor * growth_rate`` divided by the number of measurements minus one.
    """

    model_config = ConfigDict(frozen=True)

    temperature_growth: float = 0
    humidity_growth: float = 0
    light_growth: Optional[float] = None
    co2_growth: Optional[float] = None
    vpd_growth: Optional[float] = None


# Fallback bands used when there is no growth data to learn from
DEFAULT_TEMPERATURE_RANGE = ValueRange(min=20, max=30)
DEFAULT_HUMIDITY_RANGE = ValueRange(min=40, max=70)


class OptimalRanges(BaseModel):
    """Observed factor bands during the top growth-rate periods."""

    model_config = ConfigDict(frozen=True)

    temperature: ValueRange = DEFAULT_TEMPERATURE_RANGE
    humidity: ValueRange = DEFAULT_HUMIDITY_RANGE
    light_intensity: Optional[ValueRange] = None
    co2: Optional[ValueRange] = None
    vpd: Optional[ValueRange] = None


class EnvironmentalImpact(BaseModel):
    """Correlation scores together with inferred optimal ranges."""

    model_config = ConfigDict(frozen=True)

    correlations: Correlations
    optimal_ranges: OptimalRanges
