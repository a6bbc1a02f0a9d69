"""
Environmental Analytics Database Repositories (Supabase)
"""

from .environmental_repository_impl import SupabaseEnvironmentalRepository
from .subscription_repository_impl import SupabaseSubscriptionTierRepository

__all__ = [
    "SupabaseEnvironmentalRepository",
    "SupabaseSubscriptionTierRepository",
]
