# 📄 File: growtrack/modules/environmental_analytics/application/queries/get_environmental_impact.py
# 🧭 Purpose (Layman Explanation):
# The request "which conditions helped my plants grow, and what ranges worked best".
# 🧪 Purpose (Technical Summary):
# CQRS query for correlation scores and inferred optimal ranges over a scope.
# 🔗 Dependencies:
# pydantic, domain scope model
# 🔄 Connected Modules / Calls From:
# GetEnvironmentalImpactQueryHandler, EnvironmentalService, presentation routes

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ...domain.models.scope import AnalyticsScope


class GetEnvironmentalImpactQuery(BaseModel):
    """Query for the environmental impact on growth."""

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(..., min_length=1, description="Authenticated caller")
    grow_id: Optional[str] = Field(None, description="Narrow to a single grow")

    def to_scope(self) -> AnalyticsScope:
        return AnalyticsScope(user_id=self.user_id, grow_id=self.grow_id)
