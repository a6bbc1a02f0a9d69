# 📄 File: growtrack/modules/environmental_analytics/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Collects the calculators that turn raw environment and growth samples into insights.
# 🧪 Purpose (Technical Summary):
# Package initialization for the pure analytics functions (no I/O, no shared state).
# 🔗 Dependencies:
# statistics_aggregator, correlation_estimator, optimal_range_inferrer, reading_matcher
# 🔄 Connected Modules / Calls From:
# Application query handlers, tests

"""
Environmental Analytics Domain Services

- compute_stats: descriptive statistics and stress/optimal counts
- compute_correlations: factor-vs-growth association scores
- infer_optimal_ranges: factor bands during the top growth periods
- find_matching_reading / get_reading_matcher: measurement-to-reading pairing

All functions are deterministic and thread-safe; callers pass in already scoped data.
"""

from .correlation_estimator import compute_correlations
from .optimal_range_inferrer import infer_optimal_ranges, top_growth_measurements
from .reading_matcher import (
    ReadingMatcher,
    ReadingMatchStrategy,
    find_latest_reading_at_or_before,
    find_matching_reading,
    get_reading_matcher,
)
from .statistics_aggregator import compute_stats, is_optimal, is_stress_event

__all__ = [
    "compute_stats",
    "is_optimal",
    "is_stress_event",
    "compute_correlations",
    "infer_optimal_ranges",
    "top_growth_measurements",
    "ReadingMatcher",
    "ReadingMatchStrategy",
    "find_matching_reading",
    "find_latest_reading_at_or_before",
    "get_reading_matcher",
]
