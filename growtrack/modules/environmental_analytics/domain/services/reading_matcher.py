# 📄 File: growtrack/modules/environmental_analytics/domain/services/reading_matcher.py
# 🧭 Purpose (Layman Explanation):
# For a plant growth sample, picks which environment sample describes the conditions
# the plant was growing in.
# 🧪 Purpose (Technical Summary):
# Reading lookup shared by the correlation estimator and the optimal range inferrer,
# with the default first-match scan and an opt-in latest-at-or-before strategy.
# 🔗 Dependencies:
# datetime, enum, typing
# 🔄 Connected Modules / Calls From:
# correlation_estimator, optimal_range_inferrer, query handlers (strategy selection)

"""
Reading matching strategies.

The default, ``FIRST_MATCH``, walks the readings in the order they were given and
returns the first one taken at or before the measurement time. With readings in
ascending timestamp order (as the repositories return them) that is the *oldest*
qualifying reading, not the nearest preceding one. Results therefore depend on
input order; this is the established behaviour the dashboards are calibrated on.

``LATEST_AT_OR_BEFORE`` returns the reading with the greatest timestamp at or
before the measurement time, independent of input order. Selecting it changes
correlation scores and optimal ranges, so it is only used when configured.
"""

from datetime import datetime
from enum import Enum
from typing import Callable, Optional, Sequence

from ..models.readings import EnvironmentalReading

ReadingMatcher = Callable[[Sequence[EnvironmentalReading], datetime], Optional[EnvironmentalReading]]


class ReadingMatchStrategy(str, Enum):
    FIRST_MATCH = "first_match"
    LATEST_AT_OR_BEFORE = "latest_at_or_before"


def find_matching_reading(
    readings: Sequence[EnvironmentalReading],
    measured_at: datetime,
) -> Optional[EnvironmentalReading]:
    """Return the first reading, in iteration order, with ``timestamp <= measured_at``."""
    return next((r for r in readings if r.timestamp <= measured_at), None)


def find_latest_reading_at_or_before(
    readings: Sequence[EnvironmentalReading],
    measured_at: datetime,
) -> Optional[EnvironmentalReading]:
    """Return the reading with the greatest ``timestamp <= measured_at``; ties keep the earlier one."""
    best = None
    for reading in readings:
        if reading.timestamp <= measured_at and (best is None or reading.timestamp > best.timestamp):
            best = reading
    return best


_MATCHERS = {
    ReadingMatchStrategy.FIRST_MATCH: find_matching_reading,
    ReadingMatchStrategy.LATEST_AT_OR_BEFORE: find_latest_reading_at_or_before,
}


def get_reading_matcher(strategy: ReadingMatchStrategy = ReadingMatchStrategy.FIRST_MATCH) -> ReadingMatcher:
    return _MATCHERS[ReadingMatchStrategy(strategy)]
