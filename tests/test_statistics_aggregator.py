import pytest

from conftest import reading

from growtrack.modules.environmental_analytics.domain.models import EnvironmentalStats
from growtrack.modules.environmental_analytics.domain.services import (
    compute_stats,
    is_optimal,
    is_stress_event,
)


def test_empty_readings_return_zero_stats():
    stats = compute_stats([])

    assert stats == EnvironmentalStats()
    assert stats.total_readings == 0
    assert stats.average_temperature == 0
    assert stats.optimal_conditions_percentage == 0
    assert stats.stress_events == 0
    assert stats.average_light_intensity is None
    assert stats.average_co2 is None
    assert stats.average_vpd is None


def test_single_optimal_reading():
    stats = compute_stats([reading(0, temperature=24, humidity=50)])

    assert stats.average_temperature == 24
    assert stats.average_humidity == 50
    assert stats.optimal_conditions_percentage == 100
    assert stats.stress_events == 0
    assert stats.total_readings == 1


@pytest.mark.parametrize(
    "temperature, humidity, optimal, stress",
    [
        (25, 50, True, False),
        (31, 50, False, True),
        (29, 50, False, False),
        (22, 45, True, False),
        (28, 65, True, False),
        (20, 40, False, False),
        (30, 70, False, False),
        (19.9, 50, False, True),
        (25, 70.1, False, True),
        (15, 90, False, True),
    ],
)
def test_optimal_and_stress_bands(temperature, humidity, optimal, stress):
    r = reading(temperature=temperature, humidity=humidity)

    assert is_optimal(r) is optimal
    assert is_stress_event(r) is stress


def test_reading_breaking_both_bounds_counts_one_stress_event():
    stats = compute_stats([reading(temperature=35, humidity=90)])

    assert stats.stress_events == 1


def test_mixed_readings():
    readings = [
        reading(0, temperature=25, humidity=50),
        reading(1, temperature=31, humidity=50),
        reading(2, temperature=29, humidity=50),
        reading(3, temperature=23, humidity=55),
    ]

    stats = compute_stats(readings)

    assert stats.total_readings == 4
    assert stats.average_temperature == pytest.approx(27)
    assert stats.average_humidity == pytest.approx(51.25)
    assert stats.optimal_conditions_percentage == pytest.approx(50)
    assert stats.stress_events == 1


def test_optional_averages_divide_by_total_count():
    readings = [
        reading(0, light_intensity=400, co2_level=800, vpd=1.2),
        reading(1),
    ]

    stats = compute_stats(readings)

    assert stats.average_light_intensity == pytest.approx(200)
    assert stats.average_co2 == pytest.approx(400)
    assert stats.average_vpd == pytest.approx(0.6)


def test_zero_optional_average_is_reported_as_missing():
    readings = [reading(0, light_intensity=0), reading(1, light_intensity=0)]

    stats = compute_stats(readings)

    assert stats.average_light_intensity is None


def test_order_does_not_change_stats():
    readings = [
        reading(0, temperature=18, humidity=45, co2_level=600),
        reading(1, temperature=26, humidity=60),
        reading(2, temperature=32, humidity=75, vpd=1.1),
    ]

    assert compute_stats(readings) == compute_stats(list(reversed(readings)))


def test_negative_values_are_processed_like_any_other():
    stats = compute_stats([reading(temperature=-5, humidity=50)])

    assert stats.average_temperature == -5
    assert stats.stress_events == 1
