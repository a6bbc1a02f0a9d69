# 📄 File: growtrack/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# The configuration center that reads all settings from environment variables
# and hands them to the rest of GrowTrack in an organized way.
#
# 🧪 Purpose (Technical Summary):
# Pydantic-based settings management with environment variable loading,
# validation, and type safety for all application configuration parameters.
#
# 🔗 Dependencies:
# - pydantic-settings for configuration management
# - python-dotenv for .env file loading (via pydantic-settings)
#
# 🔄 Connected Modules / Calls From:
# - growtrack.main (application startup)
# - growtrack.shared.config.supabase (client creation)
# - growtrack.shared.core.security (token verification)
# - Environmental analytics presentation dependencies

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses Pydantic for validation and type safety. Settings are loaded
    from environment variables with fallback to .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================

    APP_NAME: str = Field(default="GrowTrack API", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    APP_DESCRIPTION: str = Field(
        default="Cultivation tracking and environmental analytics",
        description="Application description"
    )
    ENVIRONMENT: str = Field(default="development", description="Runtime environment")
    DEBUG: bool = Field(default=True, description="Debug mode flag")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="json", description="Log output format (json/text)")

    # =========================================================================
    # SERVER CONFIGURATION
    # =========================================================================

    HOST: str = Field(default="0.0.0.0", description="Server host")
    PORT: int = Field(default=8000, description="Server port")
    RELOAD: bool = Field(default=True, description="Auto-reload on changes")

    # =========================================================================
    # SUPABASE CONFIGURATION
    # =========================================================================

    SUPABASE_URL: str = Field(..., description="Supabase project URL")
    SUPABASE_ANON_KEY: str = Field(..., description="Supabase anonymous key")
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = Field(
        default=None,
        description="Server-side key; repositories filter by user_id explicitly when it is used"
    )
    SUPABASE_JWT_SECRET: str = Field(..., description="Secret used to sign Supabase access tokens")

    # =========================================================================
    # SECURITY SETTINGS
    # =========================================================================

    JWT_ALGORITHM: str = Field(default="HS256", description="JWT algorithm")
    JWT_AUDIENCE: str = Field(default="authenticated", description="Expected JWT audience")

    CORS_ORIGINS: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        description="CORS allowed origins"
    )
    CORS_ALLOW_CREDENTIALS: bool = Field(default=True, description="CORS allow credentials")

    # =========================================================================
    # ANALYTICS
    # =========================================================================

    ANALYTICS_REQUIRED_TIER: str = Field(
        default="premium",
        description="Minimum subscription tier for analytics endpoints"
    )
    ANALYTICS_READING_MATCH_STRATEGY: str = Field(
        default="first_match",
        description="How a measurement is paired with a reading (first_match/latest_at_or_before)"
    )

    # =========================================================================
    # RATE LIMITING
    # =========================================================================

    EXPORT_RATE_LIMIT: str = Field(
        default="10/minute",
        description="CSV export rate limit in '<limit>/<period>' format"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed_environments = ["development", "staging", "production", "test"]
        if v.lower() not in allowed_environments:
            raise ValueError(f"Environment must be one of {allowed_environments}")
        return v.lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level value."""
        allowed_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed_levels:
            raise ValueError(f"Log level must be one of {allowed_levels}")
        return v.upper()

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v.lower() not in ("json", "text"):
            raise ValueError("Log format must be 'json' or 'text'")
        return v.lower()

    @field_validator("JWT_ALGORITHM")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        """Validate JWT algorithm."""
        allowed_algorithms = ["HS256", "HS384", "HS512"]
        if v not in allowed_algorithms:
            raise ValueError(f"JWT algorithm must be one of {allowed_algorithms}")
        return v

    @field_validator("CORS_ORIGINS")
    @classmethod
    def validate_cors_origins(cls, v: str) -> str:
        """Validate CORS origins format."""
        origins = [origin.strip() for origin in v.split(",")]
        for origin in origins:
            if not origin.startswith(("http://", "https://", "*")):
                raise ValueError(f"Invalid CORS origin format: {origin}")
        return v

    @field_validator("ANALYTICS_REQUIRED_TIER")
    @classmethod
    def validate_required_tier(cls, v: str) -> str:
        """Validate analytics tier name."""
        allowed_tiers = ["free", "premium", "enterprise"]
        if v.lower() not in allowed_tiers:
            raise ValueError(f"Analytics tier must be one of {allowed_tiers}")
        return v.lower()

    @field_validator("ANALYTICS_READING_MATCH_STRATEGY")
    @classmethod
    def validate_match_strategy(cls, v: str) -> str:
        """Validate reading match strategy."""
        allowed_strategies = ["first_match", "latest_at_or_before"]
        if v.lower() not in allowed_strategies:
            raise ValueError(f"Reading match strategy must be one of {allowed_strategies}")
        return v.lower()

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT == "production"

    @property
    def is_testing(self) -> bool:
        """Check if running in test environment."""
        return self.ENVIRONMENT == "test"

    @property
    def supabase_auth_url(self) -> str:
        """Get Supabase Auth URL."""
        return f"{self.SUPABASE_URL}/auth/v1"


# ============================================================================
# SETTINGS FACTORY
# ============================================================================

@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Uses lru_cache to ensure settings are loaded only once
    and reused throughout the application lifecycle.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
