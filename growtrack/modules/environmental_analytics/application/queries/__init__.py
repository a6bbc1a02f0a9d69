"""
Environmental Analytics Queries

- GetEnvironmentalStatsQuery: descriptive statistics
- GetEnvironmentalImpactQuery: correlations and optimal ranges
- GetEnvironmentalDataQuery: raw series for charts and CSV export
"""

from .get_environmental_data import GetEnvironmentalDataQuery
from .get_environmental_impact import GetEnvironmentalImpactQuery
from .get_environmental_stats import GetEnvironmentalStatsQuery

__all__ = [
    "GetEnvironmentalStatsQuery",
    "GetEnvironmentalImpactQuery",
    "GetEnvironmentalDataQuery",
]
