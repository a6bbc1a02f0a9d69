# 📄 File: growtrack/modules/environmental_analytics/domain/models/subscription.py
# 🧭 Purpose (Layman Explanation):
# Lists the subscription levels (free, premium, enterprise) and decides whether a
# user's level is high enough to open the analytics.
# 🧪 Purpose (Technical Summary):
# Subscription tier enumeration with an explicit hierarchy used for feature gating.
# 🔗 Dependencies:
# enum
# 🔄 Connected Modules / Calls From:
# subscription_repository, Supabase subscription repository, presentation dependencies

from enum import Enum


class UserTier(str, Enum):
    """Subscription tier stored on the user's profile."""
    FREE = "free"
    PREMIUM = "premium"
    ENTERPRISE = "enterprise"

    @property
    def rank(self) -> int:
        return _TIER_HIERARCHY[self]

    def satisfies(self, required: "UserTier") -> bool:
        """True when this tier is at or above ``required``."""
        return self.rank >= required.rank


_TIER_HIERARCHY = {
    UserTier.FREE: 0,
    UserTier.PREMIUM: 1,
    UserTier.ENTERPRISE: 2,
}
