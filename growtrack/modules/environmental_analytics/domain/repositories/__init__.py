"""
Environmental Analytics Domain Repositories

Repository interfaces; concrete implementations live in the infrastructure layer.
"""

from .environmental_repository import EnvironmentalDataRepository
from .subscription_repository import SubscriptionTierRepository

__all__ = [
    "EnvironmentalDataRepository",
    "SubscriptionTierRepository",
]
