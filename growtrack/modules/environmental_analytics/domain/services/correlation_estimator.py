# 📄 File: growtrack/modules/environmental_analytics/domain/services/correlation_estimator.py
# 🧭 Purpose (Layman Explanation):
# Gives each environment factor a score for how much it shows up together with
# plant growth, so the dashboard can show which conditions matter.
# 🧪 Purpose (Technical Summary):
# Weighted-sum association score between environmental factors and growth rate,
# normalized by a fixed count of (measurements - 1). Intentionally not a Pearson
# coefficient; the charts expect this scale.
# 🔗 Dependencies:
# typing, domain models, reading_matcher
# 🔄 Connected Modules / Calls From:
# GetEnvironmentalImpactQueryHandler

from typing import Dict, Optional, Sequence

from ..models.analytics import Correlations
from ..models.readings import EnvironmentalReading, GrowthMeasurement
from .reading_matcher import ReadingMatcher, find_matching_reading

# Correlation field -> optional reading attribute
OPTIONAL_FACTORS = {
    "light_growth": "light_intensity",
    "co2_growth": "co2_level",
    "vpd_growth": "vpd",
}


def compute_correlations(
    readings: Sequence[EnvironmentalReading],
    measurements: Sequence[GrowthMeasurement],
    matcher: ReadingMatcher = find_matching_reading,
) -> Correlations:
    """
    Score how each environmental factor co-occurs with growth rate.

    The first measurement is skipped. Every later measurement with a growth rate
    is paired with a reading through ``matcher`` and adds ``factor * growth_rate``
    to each factor's sum. Optional factors only count when the paired reading
    recorded a non-zero value. Each sum is then divided by ``len(measurements) - 1``,
    including measurements that contributed nothing.

    Args:
        readings: Environmental readings in fetch order
        measurements: Growth measurements in chronological order
        matcher: Reading lookup for a measurement time

    Returns:
        Correlations: Zero required scores and None optional scores when either input is empty
    """
    if not readings or not measurements:
        return Correlations()

    temperature_growth = 0.0
    humidity_growth = 0.0
    optional: Dict[str, Optional[float]] = {name: None for name in OPTIONAL_FACTORS}

    for measurement in measurements[1:]:
        growth_rate = measurement.growth_rate
        if not growth_rate:
            continue

        reading = matcher(readings, measurement.measured_at)
        if reading is None:
            continue

        temperature_growth += reading.temperature * growth_rate
        humidity_growth += reading.humidity * growth_rate

        for name, attribute in OPTIONAL_FACTORS.items():
            value = getattr(reading, attribute)
            if value:
                optional[name] = (optional[name] or 0) + value * growth_rate

    total = len(measurements) - 1
    # a single measurement leaves nothing to normalize; its scores stay at zero
    if total > 0:
        temperature_growth /= total
        humidity_growth /= total
        optional = {
            name: (score / total if score is not None else None)
            for name, score in optional.items()
        }

    return Correlations(
        temperature_growth=temperature_growth,
        humidity_growth=humidity_growth,
        **optional,
    )
