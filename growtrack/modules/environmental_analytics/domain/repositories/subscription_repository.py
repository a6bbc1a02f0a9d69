# 📄 File: growtrack/modules/environmental_analytics/domain/repositories/subscription_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how we look up which subscription level a user is on.
# 🧪 Purpose (Technical Summary):
# Abstract repository interface for subscription tier lookups used by feature gating.
# 🔗 Dependencies:
# abc, UserTier domain model
# 🔄 Connected Modules / Calls From:
# Presentation dependencies (tier gate), Supabase implementation, test fakes

from abc import ABC, abstractmethod

from ..models.subscription import UserTier


class SubscriptionTierRepository(ABC):
    """Abstract repository interface for subscription tier lookups."""

    @abstractmethod
    async def get_user_tier(self, user_id: str) -> UserTier:
        """Get the subscription tier of a user; users without a profile are FREE."""
        pass
