"""
Environmental Analytics Handlers
"""

from .query_handlers import (
    GetEnvironmentalDataQueryHandler,
    GetEnvironmentalImpactQueryHandler,
    GetEnvironmentalStatsQueryHandler,
)

__all__ = [
    "GetEnvironmentalStatsQueryHandler",
    "GetEnvironmentalImpactQueryHandler",
    "GetEnvironmentalDataQueryHandler",
]
