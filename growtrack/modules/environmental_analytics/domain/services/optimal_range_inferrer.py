# 📄 File: growtrack/modules/environmental_analytics/domain/services/optimal_range_inferrer.py
# 🧭 Purpose (Layman Explanation):
# Looks at the moments the plants grew fastest and reports the temperature, humidity,
# light, CO2 and VPD ranges seen at those moments.
# 🧪 Purpose (Technical Summary):
# Infers per-factor min/max bands from the readings paired with the top 20% of
# measurements by growth rate, falling back to fixed defaults without data.
# 🔗 Dependencies:
# math, typing, domain models, reading_matcher
# 🔄 Connected Modules / Calls From:
# GetEnvironmentalImpactQueryHandler

import math
from typing import List, Optional, Sequence

from ..models.analytics import OptimalRanges, ValueRange
from ..models.readings import EnvironmentalReading, GrowthMeasurement
from .reading_matcher import ReadingMatcher, find_matching_reading

TOP_GROWTH_FRACTION = 0.2

# OptimalRanges field -> optional reading attribute
OPTIONAL_RANGE_FACTORS = {
    "light_intensity": "light_intensity",
    "co2": "co2_level",
    "vpd": "vpd",
}


def top_growth_measurements(measurements: Sequence[GrowthMeasurement]) -> List[GrowthMeasurement]:
    """
    Return the top ``ceil(20%)`` measurements by growth rate, highest first.

    Missing growth rates sort as zero; ties keep their input order.
    """
    ranked = sorted(measurements, key=lambda m: m.growth_rate or 0, reverse=True)
    return ranked[:math.ceil(len(measurements) * TOP_GROWTH_FRACTION)]


def _value_range(values: Sequence[float]) -> Optional[ValueRange]:
    if not values:
        return None
    return ValueRange(min=min(values), max=max(values))


def infer_optimal_ranges(
    readings: Sequence[EnvironmentalReading],
    measurements: Sequence[GrowthMeasurement],
    matcher: ReadingMatcher = find_matching_reading,
) -> OptimalRanges:
    """
    Infer factor bands from conditions during the best growth periods.

    Temperature and humidity bands replace the defaults outright once any top
    measurement pairs with a reading. Light, CO2 and VPD bands only cover paired
    readings that recorded a non-zero value and stay None otherwise.

    Args:
        readings: Environmental readings in fetch order
        measurements: Growth measurements
        matcher: Reading lookup for a measurement time

    Returns:
        OptimalRanges: The defaults when either input is empty or nothing pairs
    """
    if not readings or not measurements:
        return OptimalRanges()

    matched = [
        reading
        for reading in (matcher(readings, m.measured_at) for m in top_growth_measurements(measurements))
        if reading is not None
    ]
    if not matched:
        return OptimalRanges()

    optional_ranges = {
        name: _value_range([getattr(r, attribute) for r in matched if getattr(r, attribute)])
        for name, attribute in OPTIONAL_RANGE_FACTORS.items()
    }

    return OptimalRanges(
        temperature=_value_range([r.temperature for r in matched]),
        humidity=_value_range([r.humidity for r in matched]),
        **optional_ranges,
    )
