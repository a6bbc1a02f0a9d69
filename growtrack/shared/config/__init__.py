# 📄 File: growtrack/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Holds the settings that tell GrowTrack how to reach Supabase and how the
# analytics should behave.
#
# 🧪 Purpose (Technical Summary):
# Configuration package exporting the cached settings factory.
#
# 🔗 Dependencies:
# - settings.py (application settings)
#
# 🔄 Connected Modules / Calls From:
# - growtrack.main (application startup)
# - All modules requiring configuration

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
