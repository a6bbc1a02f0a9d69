"""
Environmental Analytics Application Layer

Queries, handlers, DTOs and the EnvironmentalService facade.
"""

from .environmental_service import EnvironmentalService

__all__ = ["EnvironmentalService"]
