# 📄 File: growtrack/modules/environmental_analytics/application/dto/environmental_data_dto.py
# 🧭 Purpose (Layman Explanation):
# Shapes environment samples for the dashboard charts and turns them into a
# spreadsheet-friendly CSV file the grower can download.
# 🧪 Purpose (Technical Summary):
# Charting DTO for raw readings (camelCase on the wire, unrecorded factors omitted)
# and the CSV flattening used by the export endpoint.
# 🔗 Dependencies:
# pydantic, csv, io, datetime, domain readings model
# 🔄 Connected Modules / Calls From:
# GetEnvironmentalDataQueryHandler, EnvironmentalService, presentation routes (data and export)

"""
Environmental Data DTOs

- EnvironmentalDataPoint: one reading reshaped for charting
- build_environmental_csv: flattens a series into CSV text
- get_export_filename: dated download name for an export
"""

import csv
import io
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ...domain.models.readings import EnvironmentalReading

CSV_COLUMNS = [
    "date",
    "temperature_celsius",
    "humidity_percent",
    "light_intensity",
    "co2_level",
    "vpd",
]

EXPORT_FILENAME_PREFIX = "environmental_analytics"


class EnvironmentalDataPoint(BaseModel):
    """
    A single reading reshaped for charting.

    Pass-through of the stored values; no computation happens here.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: datetime = Field(..., description="Reading timestamp")
    temperature: float = Field(..., description="Temperature in degrees Celsius")
    humidity: float = Field(..., description="Relative humidity in percent")
    light_intensity: Optional[float] = Field(None, alias="lightIntensity")
    co2_level: Optional[float] = Field(None, alias="co2Level")
    vpd: Optional[float] = Field(None, description="Vapour pressure deficit")

    @classmethod
    def from_reading(cls, reading: EnvironmentalReading) -> "EnvironmentalDataPoint":
        return cls(
            date=reading.timestamp,
            temperature=reading.temperature,
            humidity=reading.humidity,
            light_intensity=reading.light_intensity,
            co2_level=reading.co2_level,
            vpd=reading.vpd,
        )

    def to_csv_row(self) -> Dict[str, Any]:
        """Flatten into an export row; unrecorded or zero optional values become empty cells."""
        return {
            "date": self.date.date().isoformat(),
            "temperature_celsius": _format_number(self.temperature),
            "humidity_percent": _format_number(self.humidity),
            "light_intensity": _format_number(self.light_intensity) if self.light_intensity else "",
            "co2_level": _format_number(self.co2_level) if self.co2_level else "",
            "vpd": _format_number(self.vpd) if self.vpd else "",
        }


def _format_number(value: float) -> Union[int, float]:
    # 24.0 -> 24 so whole-number sensor values read naturally in spreadsheets
    if float(value).is_integer():
        return int(value)
    return value


def build_environmental_csv(points: Iterable[EnvironmentalDataPoint]) -> str:
    """
    Render data points as CSV text with a header row.

    Args:
        points: Data points in the order they should appear

    Returns:
        str: CSV document; only the header when there are no points
    """
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=CSV_COLUMNS, lineterminator="\n")
    writer.writeheader()
    for point in points:
        writer.writerow(point.to_csv_row())
    return buffer.getvalue()


def get_export_filename(prefix: str = EXPORT_FILENAME_PREFIX, on: Optional[date] = None) -> str:
    """Build ``<prefix>_<YYYY-MM-DD>.csv``, dated today unless ``on`` is given."""
    on = on or date.today()
    return f"{prefix}_{on.isoformat()}.csv"


def to_data_points(readings: Iterable[EnvironmentalReading]) -> List[EnvironmentalDataPoint]:
    return [EnvironmentalDataPoint.from_reading(r) for r in readings]
