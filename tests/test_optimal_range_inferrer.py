import pytest

from conftest import measurement, reading

from growtrack.modules.environmental_analytics.domain.models import (
    DEFAULT_HUMIDITY_RANGE,
    DEFAULT_TEMPERATURE_RANGE,
    OptimalRanges,
    ValueRange,
)
from growtrack.modules.environmental_analytics.domain.services import (
    find_latest_reading_at_or_before,
    infer_optimal_ranges,
    top_growth_measurements,
)


def test_empty_inputs_return_defaults():
    readings = [reading(0)]
    measurements = [measurement(1, growth_rate=1)]

    for result in (infer_optimal_ranges([], measurements), infer_optimal_ranges(readings, [])):
        assert result == OptimalRanges()
        assert result.temperature == ValueRange(min=20, max=30)
        assert result.humidity == ValueRange(min=40, max=70)
        assert result.light_intensity is None
        assert result.co2 is None
        assert result.vpd is None


@pytest.mark.parametrize("count, expected", [(1, 1), (4, 1), (5, 1), (6, 2), (10, 2), (11, 3)])
def test_top_quantile_size(count, expected):
    measurements = [measurement(i, growth_rate=i) for i in range(count)]

    assert len(top_growth_measurements(measurements)) == expected


def test_top_quantile_sorts_missing_growth_rate_as_zero():
    measurements = [measurement(0), measurement(1, growth_rate=-1), measurement(2, growth_rate=0.5)]

    top = top_growth_measurements(measurements)

    assert top == [measurements[2]]


def test_four_measurements_consider_one_top_measurement():
    readings = [
        reading(0, temperature=21, humidity=41),
        reading(10, temperature=26, humidity=55),
    ]
    measurements = [
        measurement(1, growth_rate=1),
        measurement(11, growth_rate=5),
        measurement(12, growth_rate=2),
        measurement(13, growth_rate=3),
    ]

    result = infer_optimal_ranges(list(reversed(readings)), measurements)

    assert result.temperature == ValueRange(min=26, max=26)
    assert result.humidity == ValueRange(min=55, max=55)


def test_ranges_replace_defaults_instead_of_merging():
    readings = [reading(0, temperature=35, humidity=80)]
    measurements = [measurement(1, growth_rate=4)]

    result = infer_optimal_ranges(readings, measurements)

    assert result.temperature == ValueRange(min=35, max=35)
    assert result.humidity == ValueRange(min=80, max=80)


def test_no_matched_reading_keeps_defaults():
    readings = [reading(10)]
    measurements = [measurement(1, growth_rate=4), measurement(2, growth_rate=1)]

    result = infer_optimal_ranges(readings, measurements)

    assert result.temperature == DEFAULT_TEMPERATURE_RANGE
    assert result.humidity == DEFAULT_HUMIDITY_RANGE


def test_optional_ranges_only_over_readings_with_the_factor():
    readings = [
        reading(20, temperature=27, humidity=60, light_intensity=700),
        reading(10, temperature=25, humidity=50, light_intensity=300, vpd=0),
        reading(0, temperature=22, humidity=45),
    ]
    measurements = [measurement(i, growth_rate=i) for i in range(1, 11)]
    measurements[9] = measurement(25, growth_rate=50)
    measurements[8] = measurement(15, growth_rate=40)

    result = infer_optimal_ranges(readings, measurements)

    assert result.temperature == ValueRange(min=25, max=27)
    assert result.humidity == ValueRange(min=50, max=60)
    assert result.light_intensity == ValueRange(min=300, max=700)
    assert result.co2 is None
    assert result.vpd is None


def test_latest_at_or_before_strategy():
    readings = [reading(0, temperature=20), reading(5, temperature=29)]
    measurements = [measurement(6, growth_rate=2)]

    first = infer_optimal_ranges(readings, measurements)
    latest = infer_optimal_ranges(readings, measurements, matcher=find_latest_reading_at_or_before)

    assert first.temperature == ValueRange(min=20, max=20)
    assert latest.temperature == ValueRange(min=29, max=29)


def test_repeated_calls_are_identical():
    readings = [reading(i, temperature=20 + i, humidity=50, co2_level=700 + i) for i in range(8)]
    measurements = [measurement(i + 0.5, growth_rate=(i * 3) % 5) for i in range(8)]

    assert infer_optimal_ranges(readings, measurements) == infer_optimal_ranges(readings, measurements)
