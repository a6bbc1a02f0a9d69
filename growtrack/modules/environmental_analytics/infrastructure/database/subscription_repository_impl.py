# 📄 File: growtrack/modules/environmental_analytics/infrastructure/database/subscription_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Looks up the user's subscription level on their profile in the Supabase database.
# 🧪 Purpose (Technical Summary):
# Supabase implementation of SubscriptionTierRepository reading profiles.tier.
# Missing profiles and unknown tier values resolve to FREE.
# 🔗 Dependencies:
# supabase Client, asyncio.to_thread, UserTier domain model
# 🔄 Connected Modules / Calls From:
# Presentation dependencies (analytics tier gate)

import asyncio
import logging
from typing import Optional

from supabase import Client

from ...domain.models.subscription import UserTier
from ...domain.repositories.subscription_repository import SubscriptionTierRepository

logger = logging.getLogger(__name__)

PROFILES_TABLE = "profiles"


class SupabaseSubscriptionTierRepository(SubscriptionTierRepository):
    """Supabase implementation of the SubscriptionTierRepository interface."""

    def __init__(self, client: Client):
        self._client = client

    async def get_user_tier(self, user_id: str) -> UserTier:
        raw_tier = await asyncio.to_thread(self._fetch_tier, user_id)
        if raw_tier is None:
            logger.debug(f"No profile tier for user {user_id}, treating as free")
            return UserTier.FREE

        try:
            return UserTier(str(raw_tier).lower())
        except ValueError:
            logger.warning(f"Unknown subscription tier '{raw_tier}' for user {user_id}, treating as free")
            return UserTier.FREE

    def _fetch_tier(self, user_id: str) -> Optional[str]:
        response = (
            self._client.table(PROFILES_TABLE)
            .select("tier")
            .eq("id", user_id)
            .limit(1)
            .execute()
        )
        rows = response.data or []
        if not rows:
            return None
        return rows[0].get("tier")
