"""
Security utilities for validating access tokens issued by the auth provider.
GrowTrack never issues tokens itself; it only verifies Supabase session JWTs.
"""

import logging
from functools import lru_cache
from typing import Any, Dict, Optional

from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import BaseModel

from ..config.settings import get_settings
from .exceptions import AuthenticationError

logger = logging.getLogger(__name__)


class TokenData(BaseModel):
    """Token payload data structure"""
    user_id: str
    email: Optional[str] = None
    role: Optional[str] = None
    expires_at: Optional[int] = None


class SecurityManager:
    """
    Verifies bearer tokens and extracts the session user.
    """

    def __init__(self, secret_key: Optional[str] = None, algorithm: Optional[str] = None,
                 audience: Optional[str] = None):
        settings = get_settings()
        self.secret_key = secret_key or settings.SUPABASE_JWT_SECRET
        self.algorithm = algorithm or settings.JWT_ALGORITHM
        self.audience = audience or settings.JWT_AUDIENCE

    def decode_token(self, token: str) -> Dict[str, Any]:
        """
        Decode and verify JWT signature, expiry and audience.

        Raises:
            AuthenticationError: If token is invalid or expired
        """
        try:
            return jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                audience=self.audience,
            )
        except ExpiredSignatureError as e:
            logger.warning("Token has expired")
            raise AuthenticationError("Token expired") from e
        except JWTError as e:
            logger.warning(f"JWT validation failed: {e}")
            raise AuthenticationError("Could not validate credentials") from e

    def verify_token(self, token: str) -> TokenData:
        """
        Verify token and return the session user.

        Args:
            token: JWT access token

        Returns:
            TokenData: Session user extracted from the payload

        Raises:
            AuthenticationError: If token is invalid, expired or has no subject
        """
        payload = self.decode_token(token)

        user_id = payload.get("sub")
        if not user_id:
            logger.warning("Token missing subject (user_id)")
            raise AuthenticationError("Could not validate credentials")

        logger.debug(f"Token verified successfully for user: {user_id}")
        return TokenData(
            user_id=user_id,
            email=payload.get("email"),
            role=payload.get("role"),
            expires_at=payload.get("exp"),
        )


@lru_cache()
def get_security_manager() -> SecurityManager:
    """
    Get cached security manager instance.

    Returns:
        SecurityManager: Shared security manager
    """
    return SecurityManager()


def verify_token(token: str) -> TokenData:
    """Verify JWT access token."""
    return get_security_manager().verify_token(token)
