# 📄 File: growtrack/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes version 1 of the GrowTrack API so later versions can be added without
# breaking the web app.
# 🧪 Purpose (Technical Summary):
# Package initialization for API version 1 with route prefixes and OpenAPI tags.
# 🔗 Dependencies:
# typing
# 🔄 Connected Modules / Calls From:
# growtrack.api.v1.router, growtrack.main

"""
GrowTrack API Version 1

Structure:
    v1/
    ├── __init__.py   # This file
    ├── router.py     # Main v1 router aggregation
    └── health.py     # Health check endpoints

Module routers (environmental analytics) are mounted from their presentation layers.
"""

from typing import Any, Dict

__version__ = "1.0.0"
__api_version__ = "v1"

API_PREFIX = "/api/v1"

# API v1 route prefixes
ROUTE_PREFIXES = {
    "health": "/health",
    "environmental_analytics": "/analytics/environmental",
}

# API v1 tags for OpenAPI documentation
API_TAGS = [
    {
        "name": "Health Check",
        "description": "Service and row store status"
    },
    {
        "name": "Environmental Analytics",
        "description": "Environmental statistics, growth impact and data export (premium)"
    },
]


def get_api_info() -> Dict[str, Any]:
    """Get API v1 version information."""
    return {
        "version": __version__,
        "api_version": __api_version__,
        "routes": {name: f"{API_PREFIX}{prefix}" for name, prefix in ROUTE_PREFIXES.items()},
    }
