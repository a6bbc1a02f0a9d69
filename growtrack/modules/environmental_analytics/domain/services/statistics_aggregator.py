# 📄 File: growtrack/modules/environmental_analytics/domain/services/statistics_aggregator.py
# 🧭 Purpose (Layman Explanation):
# Summarizes a pile of environment samples: average temperature and humidity, how often
# conditions were ideal, and how many samples show the plants under stress.
# 🧪 Purpose (Technical Summary):
# Single-pass reduction of environmental readings into EnvironmentalStats with a
# three-tier band (optimal inside acceptable, stress outside acceptable).
# 🔗 Dependencies:
# typing, domain models
# 🔄 Connected Modules / Calls From:
# GetEnvironmentalStatsQueryHandler

from typing import Iterable

from ..models.analytics import EnvironmentalStats
from ..models.readings import EnvironmentalReading

# Acceptable band; a reading outside it on either factor is a stress event
STRESS_TEMPERATURE_MIN = 20
STRESS_TEMPERATURE_MAX = 30
STRESS_HUMIDITY_MIN = 40
STRESS_HUMIDITY_MAX = 70

# Optimal band; both factors must be inside it (closed intervals)
OPTIMAL_TEMPERATURE_MIN = 22
OPTIMAL_TEMPERATURE_MAX = 28
OPTIMAL_HUMIDITY_MIN = 45
OPTIMAL_HUMIDITY_MAX = 65


def is_stress_event(reading: EnvironmentalReading) -> bool:
    return (
        reading.temperature < STRESS_TEMPERATURE_MIN
        or reading.temperature > STRESS_TEMPERATURE_MAX
        or reading.humidity < STRESS_HUMIDITY_MIN
        or reading.humidity > STRESS_HUMIDITY_MAX
    )


def is_optimal(reading: EnvironmentalReading) -> bool:
    return (
        OPTIMAL_TEMPERATURE_MIN <= reading.temperature <= OPTIMAL_TEMPERATURE_MAX
        and OPTIMAL_HUMIDITY_MIN <= reading.humidity <= OPTIMAL_HUMIDITY_MAX
    )


def compute_stats(readings: Iterable[EnvironmentalReading]) -> EnvironmentalStats:
    """
    Reduce readings into descriptive statistics.

    Optional-factor averages divide by the total reading count, with unrecorded
    values counted as zero. An average that comes out as exactly zero is reported
    as None, the same as no data.

    Args:
        readings: Environmental readings, already scoped by the caller; order is irrelevant

    Returns:
        EnvironmentalStats: All-zero stats with no optional averages for empty input
    """
    temp_sum = humidity_sum = light_sum = co2_sum = vpd_sum = 0.0
    count = stress_events = optimal_count = 0

    for reading in readings:
        temp_sum += reading.temperature
        humidity_sum += reading.humidity
        light_sum += reading.light_intensity or 0
        co2_sum += reading.co2_level or 0
        vpd_sum += reading.vpd or 0
        count += 1

        if is_stress_event(reading):
            stress_events += 1
        if is_optimal(reading):
            optimal_count += 1

    if count == 0:
        return EnvironmentalStats()

    return EnvironmentalStats(
        average_temperature=temp_sum / count,
        average_humidity=humidity_sum / count,
        optimal_conditions_percentage=(optimal_count / count) * 100,
        stress_events=stress_events,
        average_light_intensity=(light_sum / count) or None,
        average_co2=(co2_sum / count) or None,
        average_vpd=(vpd_sum / count) or None,
        total_readings=count,
    )
