"""Application configuration management using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.models.shipping import STATE_CODES


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings can be overridden via environment variables.
    Required settings will raise validation errors if not provided.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="lockpharma-backend", description="Application name")
    app_env: str = Field(default="development", description="Environment (development/staging/production)")
    debug: bool = Field(default=False, description="Enable debug mode")

    # Server
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=3001, description="Server port")
    max_request_body_size: int = Field(default=1_048_576, description="Maximum request body size in bytes")

    # CORS
    cors_origins: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        description="Comma-separated list of allowed CORS origins",
    )

    # Supabase
    supabase_url: str = Field(..., description="Supabase project URL")
    supabase_secret_key: str = Field(..., description="Supabase secret key for backend operations")

    # Admin auth
    admin_jwt_secret: str = Field(..., description="Secret used to verify admin bearer tokens")
    admin_jwt_algorithm: str = Field(default="HS256", description="Admin token signing algorithm")
    admin_token_ttl_hours: int = Field(default=24, description="Lifetime of issued admin tokens in hours")

    # Checkout
    default_shipping_state: str = Field(
        default="SP",
        description="State whose price is used when a shipping option has no entry for the buyer's state",
    )
    address_lookup_url: str = Field(
        default="https://viacep.com.br/ws",
        description="Base URL of the postal code lookup service",
    )

    @field_validator("default_shipping_state")
    @classmethod
    def normalize_state(cls, value: str) -> str:
        """Store the fallback state as an upper-case code.

        Raises:
            ValueError: If the code is not a Brazilian state.
        """
        code = value.strip().upper()
        if code not in STATE_CODES:
            raise ValueError(f"Unknown state code: {value!r}")
        return code

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins string into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings singleton.

    Returns:
        Settings: Application settings instance.

    Note:
        Settings are cached using lru_cache for performance.
        Call get_settings.cache_clear() to reload settings.
    """
    return Settings()
