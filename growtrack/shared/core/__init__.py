# 📄 File: growtrack/shared/core/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# The core toolbox shared by every feature: error types, token checking and
# the "who is calling" helpers used by the web endpoints.
#
# 🧪 Purpose (Technical Summary):
# Core package exporting the exception hierarchy, token verification and
# FastAPI dependencies.
#
# 🔗 Dependencies:
# - exceptions.py, security.py, dependencies.py
#
# 🔄 Connected Modules / Calls From:
# - growtrack.main, growtrack.api, module presentation layers

from .exceptions import (
    GrowTrackException,
    AuthenticationError,
    AuthorizationError,
    ValidationError,
    NotFoundError,
    SubscriptionError,
    ExternalServiceError,
)
from .security import SecurityManager, TokenData, get_security_manager, verify_token

__all__ = [
    # Exceptions
    "GrowTrackException",
    "AuthenticationError",
    "AuthorizationError",
    "ValidationError",
    "NotFoundError",
    "SubscriptionError",
    "ExternalServiceError",

    # Security
    "SecurityManager",
    "TokenData",
    "get_security_manager",
    "verify_token",
]
