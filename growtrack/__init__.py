# 📄 File: growtrack/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python this folder holds the GrowTrack backend and records its version
# and basic package information.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version info and package metadata
# for the GrowTrack FastAPI application.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - growtrack.main (application entry point)
# - growtrack.api (API metadata)

"""
GrowTrack - Cultivation Tracking Backend

Backend API for cultivation tracking: grows, plants, growth measurements
and environmental readings, with an environmental impact and growth
correlation engine behind a subscription gate.
"""

__version__ = "1.0.0"
__title__ = "GrowTrack Backend API"
__description__ = "Cultivation tracking and environmental analytics"
__author__ = "GrowTrack Team"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
    "__author__",
    "__license__",
]
