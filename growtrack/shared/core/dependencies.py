"""
Common FastAPI dependencies for GrowTrack.
Provides session-user authentication and Supabase client access.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from supabase import Client

from ..config.supabase import get_supabase_client
from ..utils.logging import user_id_var
from .exceptions import AuthenticationError
from .security import SecurityManager, get_security_manager

logger = logging.getLogger(__name__)

# Security scheme for OpenAPI documentation; missing headers are reported
# through AuthenticationError instead of FastAPI's default 403.
security = HTTPBearer(auto_error=False)


class CurrentUser:
    """User information extracted from the session token."""

    def __init__(
        self,
        user_id: str,
        email: Optional[str] = None,
        role: Optional[str] = None,
        token_payload: Optional[Dict[str, Any]] = None
    ):
        self.user_id = user_id
        self.email = email
        self.role = role or "authenticated"
        self.token_payload = token_payload or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert user info to dictionary."""
        return {
            "user_id": self.user_id,
            "email": self.email,
            "role": self.role,
        }


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    security_manager: SecurityManager = Depends(get_security_manager),
) -> CurrentUser:
    """
    Resolve the session user from the bearer token.

    Args:
        credentials: Parsed Authorization header
        security_manager: Token verifier

    Returns:
        CurrentUser: Current user information

    Raises:
        AuthenticationError: If no token is supplied or it fails verification
    """
    if credentials is None or not credentials.credentials:
        logger.warning("Request without bearer token")
        raise AuthenticationError("No authentication token provided")

    token_data = security_manager.verify_token(credentials.credentials)
    user_id_var.set(token_data.user_id)

    logger.debug(f"Current user retrieved: {token_data.user_id}")
    return CurrentUser(
        user_id=token_data.user_id,
        email=token_data.email,
        role=token_data.role,
        token_payload=token_data.model_dump(),
    )


def get_supabase() -> Client:
    """
    Dependency for the Supabase client.

    Returns:
        Client: Supabase client instance
    """
    return get_supabase_client()
