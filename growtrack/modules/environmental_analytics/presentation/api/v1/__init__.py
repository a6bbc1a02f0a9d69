"""
Environmental Analytics API v1
"""

from .environmental import environmental_router, limiter

__all__ = ["environmental_router", "limiter"]
