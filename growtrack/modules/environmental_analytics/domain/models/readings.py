# 📄 File: growtrack/modules/environmental_analytics/domain/models/readings.py
# 🧭 Purpose (Layman Explanation):
# Describes the two kinds of raw data the analytics look at: environment samples
# (temperature, humidity, light, CO2, VPD) and plant growth samples.
# 🧪 Purpose (Technical Summary):
# Immutable boundary value types for environmental readings and growth measurements.
# The storage layer must produce exactly these shapes; naive timestamps are read as UTC.
# 🔗 Dependencies:
# pydantic, datetime, typing
# 🔄 Connected Modules / Calls From:
# Domain services (statistics, correlation, optimal ranges), repositories,
# Supabase repository implementation, query handlers

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class EnvironmentalReading(BaseModel):
    """
    One timestamped environmental sample tied to a grow.

    Temperature (degrees Celsius) and humidity (percent RH) are always recorded;
    light intensity, CO2 level and VPD are None when the field was not recorded.
    """

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    temperature: float
    humidity: float
    light_intensity: Optional[float] = None
    co2_level: Optional[float] = None
    vpd: Optional[float] = None
    grow_id: Optional[str] = None

    @field_validator("timestamp")
    @classmethod
    def normalize_timestamp(cls, v: datetime) -> datetime:
        return _as_utc(v)


class GrowthMeasurement(BaseModel):
    """
    One timestamped plant growth sample.

    ``growth_rate`` is precomputed by the storage layer and is None for the
    first measurement of a plant.
    """

    model_config = ConfigDict(frozen=True)

    measured_at: datetime
    growth_rate: Optional[float] = None
    plant_id: Optional[str] = None
    grow_id: Optional[str] = None

    @field_validator("measured_at")
    @classmethod
    def normalize_measured_at(cls, v: datetime) -> datetime:
        return _as_utc(v)
