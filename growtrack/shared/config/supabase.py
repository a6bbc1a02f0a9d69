"""
Supabase client configuration for the row store behind GrowTrack.
Handles Supabase initialization with proper error handling and connection management.
"""

import logging
from functools import lru_cache
from typing import Optional

from postgrest import APIError
from supabase import create_client, Client
from supabase.lib.client_options import ClientOptions

from .settings import get_settings


logger = logging.getLogger(__name__)


class SupabaseManager:
    """
    Supabase client manager with lazy connection handling.
    Provides the PostgREST table client used by the repositories.
    """

    def __init__(self):
        self._client: Optional[Client] = None
        self.settings = get_settings()

    @property
    def client(self) -> Client:
        """Get or create Supabase client with lazy initialization."""
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def _create_client(self) -> Client:
        """Create Supabase client with proper configuration."""
        try:
            client_options = ClientOptions(
                schema="public",
                headers={
                    "User-Agent": f"GrowTrack/{self.settings.APP_VERSION}",
                },
                auto_refresh_token=False,
                persist_session=False,
            )

            client = create_client(
                supabase_url=self.settings.SUPABASE_URL,
                supabase_key=self.settings.SUPABASE_SERVICE_ROLE_KEY or self.settings.SUPABASE_ANON_KEY,
                options=client_options
            )

            logger.info("Supabase client initialized successfully")
            return client

        except Exception as e:
            logger.error(f"Failed to initialize Supabase client: {e}")
            raise ConnectionError(f"Supabase initialization failed: {e}") from e

    async def health_check(self) -> dict:
        """
        Perform health check on the Supabase row store.

        Returns:
            dict: Health status of Supabase services
        """
        health_status = {
            "supabase_connection": False,
            "database_service": False,
            "error": None
        }

        try:
            self.client.table("environmental_data").select("id").limit(1).execute()
            health_status["supabase_connection"] = True
            health_status["database_service"] = True
            logger.info("Supabase health check completed successfully")

        except APIError as e:
            error_msg = f"Supabase API error: {e}"
            logger.error(error_msg)
            health_status["error"] = error_msg

        except Exception as e:
            error_msg = f"Supabase health check failed: {e}"
            logger.error(error_msg)
            health_status["error"] = error_msg

        return health_status

    def close(self):
        """Drop the cached Supabase client."""
        if self._client:
            # Supabase client doesn't require explicit closing
            self._client = None
            logger.info("Supabase client connections closed")


@lru_cache()
def get_supabase_manager() -> SupabaseManager:
    """
    Get cached Supabase manager instance.

    Returns:
        SupabaseManager: Shared Supabase manager
    """
    return SupabaseManager()


def get_supabase_client() -> Client:
    """
    Get Supabase client for direct usage.

    Returns:
        Client: Supabase client instance
    """
    return get_supabase_manager().client


async def cleanup_supabase():
    """Cleanup Supabase connections on application shutdown."""
    get_supabase_manager().close()
    get_supabase_manager.cache_clear()
    logger.info("Supabase cleanup completed")
