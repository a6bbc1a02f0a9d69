import csv
import io
from datetime import date

import pytest

from conftest import PREMIUM_USER, reading

from growtrack.modules.environmental_analytics.application import EnvironmentalService
from growtrack.modules.environmental_analytics.application.dto import (
    CSV_COLUMNS,
    EnvironmentalDataPoint,
    build_environmental_csv,
    get_export_filename,
)
from growtrack.modules.environmental_analytics.domain.models import AnalyticsScope


def _rows(text):
    return list(csv.DictReader(io.StringIO(text)))


def test_csv_header_only_for_empty_series():
    assert build_environmental_csv([]) == ",".join(CSV_COLUMNS) + "\n"


def test_csv_flattens_data_points():
    points = [
        EnvironmentalDataPoint.from_reading(
            reading(0, temperature=24, humidity=55.5, light_intensity=450, co2_level=800, vpd=1.25)
        ),
        EnvironmentalDataPoint.from_reading(reading(30, temperature=22.5, humidity=60)),
    ]

    rows = _rows(build_environmental_csv(points))

    assert rows == [
        {
            "date": "2024-01-01",
            "temperature_celsius": "24",
            "humidity_percent": "55.5",
            "light_intensity": "450",
            "co2_level": "800",
            "vpd": "1.25",
        },
        {
            "date": "2024-01-02",
            "temperature_celsius": "22.5",
            "humidity_percent": "60",
            "light_intensity": "",
            "co2_level": "",
            "vpd": "",
        },
    ]


def test_csv_leaves_zero_optional_values_empty():
    point = EnvironmentalDataPoint.from_reading(reading(0, light_intensity=0, vpd=0))

    row = point.to_csv_row()

    assert row["light_intensity"] == ""
    assert row["vpd"] == ""


def test_export_filename():
    assert get_export_filename(on=date(2024, 3, 9)) == "environmental_analytics_2024-03-09.csv"
    assert get_export_filename("growth_analytics", on=date(2024, 3, 9)) == "growth_analytics_2024-03-09.csv"


def test_data_point_serializes_camel_case_without_missing_fields():
    point = EnvironmentalDataPoint.from_reading(reading(0, co2_level=750))

    payload = point.model_dump(by_alias=True, exclude_none=True, mode="json")

    assert payload == {
        "date": "2024-01-01T00:00:00Z",
        "temperature": 24.0,
        "humidity": 50.0,
        "co2Level": 750.0,
    }


@pytest.mark.asyncio
async def test_service_export(repository):
    repository.add_readings(PREMIUM_USER, reading(1, temperature=26), reading(0, temperature=23))
    service = EnvironmentalService(repository)

    filename, content = await service.export_environmental_csv(
        AnalyticsScope(user_id=PREMIUM_USER), on=date(2024, 1, 2)
    )

    assert filename == "environmental_analytics_2024-01-02.csv"
    assert [row["temperature_celsius"] for row in _rows(content)] == ["23", "26"]
