# 📄 File: growtrack/modules/environmental_analytics/presentation/api/schemas/environmental_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes exactly what the analytics endpoints send back to the dashboard, using the
# field names the web app already understands.
#
# 🧪 Purpose (Technical Summary):
# Pydantic response schemas serializing the analytics value objects with camelCase
# aliases. Routes use response_model_exclude_none so unrecorded factors are omitted.
#
# 🔗 Dependencies:
# - pydantic (aliases, ConfigDict)
# - growtrack.modules.environmental_analytics.domain.models (value objects)
#
# 🔄 Connected Modules / Calls From:
# - growtrack.modules.environmental_analytics.presentation.api.v1.environmental (response models)

"""
Environmental Analytics API Schemas

- EnvironmentalStatsResponse
- CorrelationsResponse, OptimalRangesResponse, EnvironmentalImpactResponse
- ValueRangeResponse
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ....domain.models.analytics import (
    Correlations,
    EnvironmentalImpact,
    EnvironmentalStats,
    OptimalRanges,
    ValueRange,
)


class CamelModel(BaseModel):
    """Base schema emitting camelCase keys while accepting snake_case names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ValueRangeResponse(CamelModel):
    min: float = Field(..., description="Lower bound (inclusive)")
    max: float = Field(..., description="Upper bound (inclusive)")

    @classmethod
    def from_domain(cls, value_range: Optional[ValueRange]) -> Optional["ValueRangeResponse"]:
        if value_range is None:
            return None
        return cls(min=value_range.min, max=value_range.max)


class EnvironmentalStatsResponse(CamelModel):
    """Descriptive statistics of the environmental readings in scope."""

    average_temperature: float = Field(..., description="Mean temperature in degrees Celsius")
    average_humidity: float = Field(..., description="Mean relative humidity in percent")
    optimal_conditions_percentage: float = Field(
        ...,
        description="Percent of readings with temperature 22-28 C and humidity 45-65 %"
    )
    stress_events: int = Field(
        ...,
        description="Readings with temperature outside 20-30 C or humidity outside 40-70 %"
    )
    average_light_intensity: Optional[float] = None
    average_co2: Optional[float] = Field(None, alias="averageCO2")
    average_vpd: Optional[float] = Field(None, alias="averageVPD")
    total_readings: int = Field(..., description="Number of readings analysed")

    @classmethod
    def from_domain(cls, stats: EnvironmentalStats) -> "EnvironmentalStatsResponse":
        return cls(**stats.model_dump())


class CorrelationsResponse(CamelModel):
    """Weighted-sum association scores of each factor with growth rate."""

    temperature_growth: float
    humidity_growth: float
    light_growth: Optional[float] = None
    co2_growth: Optional[float] = None
    vpd_growth: Optional[float] = None

    @classmethod
    def from_domain(cls, correlations: Correlations) -> "CorrelationsResponse":
        return cls(**correlations.model_dump())


class OptimalRangesResponse(CamelModel):
    """Factor bands observed during the top growth-rate periods."""

    temperature: ValueRangeResponse
    humidity: ValueRangeResponse
    light_intensity: Optional[ValueRangeResponse] = None
    co2: Optional[ValueRangeResponse] = None
    vpd: Optional[ValueRangeResponse] = None

    @classmethod
    def from_domain(cls, ranges: OptimalRanges) -> "OptimalRangesResponse":
        return cls(
            temperature=ValueRangeResponse.from_domain(ranges.temperature),
            humidity=ValueRangeResponse.from_domain(ranges.humidity),
            light_intensity=ValueRangeResponse.from_domain(ranges.light_intensity),
            co2=ValueRangeResponse.from_domain(ranges.co2),
            vpd=ValueRangeResponse.from_domain(ranges.vpd),
        )


class EnvironmentalImpactResponse(CamelModel):
    """Correlation scores and optimal ranges."""

    correlations: CorrelationsResponse
    optimal_ranges: OptimalRangesResponse

    @classmethod
    def from_domain(cls, impact: EnvironmentalImpact) -> "EnvironmentalImpactResponse":
        return cls(
            correlations=CorrelationsResponse.from_domain(impact.correlations),
            optimal_ranges=OptimalRangesResponse.from_domain(impact.optimal_ranges),
        )
