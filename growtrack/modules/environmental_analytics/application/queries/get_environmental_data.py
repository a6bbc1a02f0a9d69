# 📄 File: growtrack/modules/environmental_analytics/application/queries/get_environmental_data.py
# 🧭 Purpose (Layman Explanation):
# The request "give me the raw environment samples for the chart (or the CSV download)".
# 🧪 Purpose (Technical Summary):
# CQRS query for the raw reading series with an optional inclusive time window.
# 🔗 Dependencies:
# pydantic, domain scope models
# 🔄 Connected Modules / Calls From:
# GetEnvironmentalDataQueryHandler, EnvironmentalService, presentation routes (data and export)

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ...domain.models.scope import AnalyticsScope, TimeRange


class GetEnvironmentalDataQuery(BaseModel):
    """Query for the charting series of environmental readings."""

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(..., min_length=1, description="Authenticated caller")
    grow_id: Optional[str] = Field(None, description="Narrow to a single grow")
    time_range: Optional[TimeRange] = Field(None, description="Inclusive timestamp window")

    def to_scope(self) -> AnalyticsScope:
        return AnalyticsScope(user_id=self.user_id, grow_id=self.grow_id)
