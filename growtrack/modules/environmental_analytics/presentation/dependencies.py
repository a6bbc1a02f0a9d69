# 📄 File: growtrack/modules/environmental_analytics/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# The checks and helpers every analytics request goes through: who is asking, are they
# on a plan that includes analytics, and which time window do they want.
# 🧪 Purpose (Technical Summary):
# Module-specific FastAPI dependencies: per-request repository and service providers,
# subscription tier gating and time range parsing.
# 🔗 Dependencies:
# FastAPI, growtrack.shared.core.*, growtrack.shared.config.settings, module application
# and infrastructure layers
# 🔄 Connected Modules / Calls From:
# growtrack.modules.environmental_analytics.presentation.api.v1.environmental

"""
Environmental Analytics Module Dependencies

- get_environmental_repository / get_subscription_repository: Supabase repositories
- get_environmental_service: per-request EnvironmentalService
- require_analytics_tier: rejects callers below the configured tier (402)
- get_time_range: optional ``from``/``to`` window, both or neither (422)
"""

import logging
from datetime import datetime
from typing import Optional

from fastapi import Depends, Query
from supabase import Client

from growtrack.shared.config.settings import Settings, get_settings
from growtrack.shared.core.dependencies import CurrentUser, get_current_user, get_supabase
from growtrack.shared.core.exceptions import SubscriptionError, ValidationError

from ..application.environmental_service import EnvironmentalService
from ..domain.models.scope import TimeRange
from ..domain.models.subscription import UserTier
from ..domain.repositories.environmental_repository import EnvironmentalDataRepository
from ..domain.repositories.subscription_repository import SubscriptionTierRepository
from ..domain.services.reading_matcher import ReadingMatchStrategy
from ..infrastructure.database.environmental_repository_impl import SupabaseEnvironmentalRepository
from ..infrastructure.database.subscription_repository_impl import SupabaseSubscriptionTierRepository

logger = logging.getLogger(__name__)

ANALYTICS_FEATURE = "environmental_analytics"


# =========================================================================
# REPOSITORY & SERVICE PROVIDERS
# =========================================================================

def get_environmental_repository(client: Client = Depends(get_supabase)) -> EnvironmentalDataRepository:
    return SupabaseEnvironmentalRepository(client)


def get_subscription_repository(client: Client = Depends(get_supabase)) -> SubscriptionTierRepository:
    return SupabaseSubscriptionTierRepository(client)


def get_environmental_service(
    repository: EnvironmentalDataRepository = Depends(get_environmental_repository),
    settings: Settings = Depends(get_settings),
) -> EnvironmentalService:
    """Build the analytics facade for this request."""
    return EnvironmentalService(
        repository,
        match_strategy=ReadingMatchStrategy(settings.ANALYTICS_READING_MATCH_STRATEGY),
    )


# =========================================================================
# SUBSCRIPTION GATING
# =========================================================================

async def require_analytics_tier(
    current_user: CurrentUser = Depends(get_current_user),
    tiers: SubscriptionTierRepository = Depends(get_subscription_repository),
    settings: Settings = Depends(get_settings),
) -> CurrentUser:
    """
    Require the configured subscription tier for analytics.

    Args:
        current_user: Authenticated caller
        tiers: Tier lookup
        settings: Application settings (ANALYTICS_REQUIRED_TIER)

    Returns:
        CurrentUser: The caller, when their tier is sufficient

    Raises:
        SubscriptionError: If the caller's tier is below the required one
    """
    required = UserTier(settings.ANALYTICS_REQUIRED_TIER)
    tier = await tiers.get_user_tier(current_user.user_id)

    if not tier.satisfies(required):
        logger.info(
            f"User {current_user.user_id} on {tier.value} tier denied {ANALYTICS_FEATURE}"
        )
        raise SubscriptionError(
            message=f"Environmental analytics require the {required.value} plan",
            feature=ANALYTICS_FEATURE,
            subscription_status=tier.value,
            required_plan=required.value,
        )

    return current_user


# =========================================================================
# QUERY PARAMETERS
# =========================================================================

def get_time_range(
    from_: Optional[datetime] = Query(None, alias="from", description="Window start (inclusive)"),
    to: Optional[datetime] = Query(None, description="Window end (inclusive)"),
) -> Optional[TimeRange]:
    """
    Parse the optional time window.

    Raises:
        ValidationError: If only one bound is given or ``from`` is after ``to``
    """
    if from_ is None and to is None:
        return None

    if from_ is None or to is None:
        raise ValidationError(
            "Both 'from' and 'to' must be provided for a time range",
            field="from" if from_ is None else "to",
            constraint="from and to together",
        )

    return TimeRange(from_=from_, to=to)
