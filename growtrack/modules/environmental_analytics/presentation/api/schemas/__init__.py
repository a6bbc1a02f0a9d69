"""
Environmental Analytics API Schemas
"""

from .environmental_schemas import (
    CorrelationsResponse,
    EnvironmentalImpactResponse,
    EnvironmentalStatsResponse,
    OptimalRangesResponse,
    ValueRangeResponse,
)

__all__ = [
    "EnvironmentalStatsResponse",
    "EnvironmentalImpactResponse",
    "CorrelationsResponse",
    "OptimalRangesResponse",
    "ValueRangeResponse",
]
