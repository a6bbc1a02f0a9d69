# 📄 File: growtrack/modules/environmental_analytics/application/queries/get_environmental_stats.py
# 🧭 Purpose (Layman Explanation):
# The request "summarize my grow room conditions", optionally for one grow only.
# 🧪 Purpose (Technical Summary):
# CQRS query carrying the caller and optional grow filter for descriptive statistics.
# 🔗 Dependencies:
# pydantic, domain scope model
# 🔄 Connected Modules / Calls From:
# GetEnvironmentalStatsQueryHandler, EnvironmentalService, presentation routes

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ...domain.models.scope import AnalyticsScope


class GetEnvironmentalStatsQuery(BaseModel):
    """Query for environmental statistics of an account or one grow."""

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(..., min_length=1, description="Authenticated caller")
    grow_id: Optional[str] = Field(None, description="Narrow to a single grow")

    def to_scope(self) -> AnalyticsScope:
        return AnalyticsScope(user_id=self.user_id, grow_id=self.grow_id)
