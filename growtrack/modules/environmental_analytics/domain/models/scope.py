# 📄 File: growtrack/modules/environmental_analytics/domain/models/scope.py
# 🧭 Purpose (Layman Explanation):
# Says whose data to look at (one grow, or everything the account owns) and
# optionally which stretch of time.
# 🧪 Purpose (Technical Summary):
# Request scoping value types applied by the data fetch before any analysis runs.
# The analytics services never filter by ownership themselves.
# 🔗 Dependencies:
# pydantic, datetime, growtrack.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# Repositories, query objects, presentation dependencies

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from growtrack.shared.core.exceptions import ValidationError
from .readings import _as_utc


class AnalyticsScope(BaseModel):
    """
    Data scope for one analytics call.

    With ``grow_id`` set, readings and measurements are narrowed to that grow
    (and its plants); without it, all data of the account is used.
    """

    model_config = ConfigDict(frozen=True)

    user_id: str
    grow_id: Optional[str] = None

    @property
    def is_account_wide(self) -> bool:
        return self.grow_id is None


class TimeRange(BaseModel):
    """Inclusive ``[from, to]`` window on reading timestamps."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_: datetime = Field(alias="from")
    to: datetime

    @field_validator("from_", "to")
    @classmethod
    def normalize_bounds(cls, v: datetime) -> datetime:
        return _as_utc(v)

    @model_validator(mode="after")
    def check_order(self) -> "TimeRange":
        # GrowTrack's ValidationError is not a ValueError, so pydantic lets it through
        if self.from_ > self.to:
            raise ValidationError(
                "Time range start must not be after its end",
                field="from",
                value=self.from_.isoformat(),
                constraint="from <= to",
            )
        return self
