"""
Application configuration using Pydantic Settings.
Loads environment variables and provides type-safe configuration.
"""

from typing import List, Literal, Optional
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, validator
from pathlib import Path

# Get the base directory
BASE_DIR = Path(__file__).resolve().parent.parent


DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://localhost:5173", "http://localhost:8080"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    environment: str = Field(default="development", description="Current environment")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO")

    # API Configuration
    api_title: str = Field(default="WorkPortal")
    api_version: str = Field(default="1.0.0")
    api_prefix: str = Field(default="/api/v1")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # Supabase Configuration
    supabase_url: str = Field(default="https://example.supabase.co", description="Supabase project URL")
    supabase_anon_key: str = Field(default="temp-key", description="Supabase anonymous key")
    supabase_service_key: str = Field(default="temp-key", description="Supabase service role key")
    supabase_jwt_secret: str = Field(
        default="development-secret-key-change-in-production",
        description="Secret used by Supabase Auth to sign access tokens"
    )
    jwt_algorithm: str = Field(default="HS256")

    # Storage backend: hosted PostgREST or a direct SQL connection
    storage_backend: Literal["supabase", "sqlalchemy"] = Field(default="supabase")
    database_url: Optional[str] = Field(default=None, description="Direct database URL")

    # Sign-up
    signup_redirect_url: str = Field(default="http://localhost:8080/dashboard")

    # CORS
    cors_origins: str | List[str] = Field(
        default="http://localhost:3000,http://localhost:5173,http://localhost:8080"
    )
    cors_allow_credentials: bool = Field(default=True)
    cors_allow_methods: List[str] = Field(default=["*"])
    cors_allow_headers: List[str] = Field(default=["*"])

    # Pagination
    default_page_size: int = Field(default=20)
    max_page_size: int = Field(default=100)

    # Messaging
    message_max_length: int = Field(default=5000)

    # Sentry (Optional)
    sentry_dsn: Optional[str] = Field(default=None)
    sentry_traces_sample_rate: float = Field(default=0.1)

    @validator("cors_origins", pre=True)
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string or list."""
        if isinstance(v, str):
            if not v or v.strip() == "":
                return list(DEFAULT_CORS_ORIGINS)
            return [origin.strip() for origin in v.split(",")]
        elif v is None:
            return list(DEFAULT_CORS_ORIGINS)
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def uses_sqlalchemy(self) -> bool:
        return self.storage_backend == "sqlalchemy"

    def validate_environment(self) -> None:
        """Validate that all required environment variables are set."""
        required_vars = [
            "supabase_url",
            "supabase_anon_key",
            "supabase_jwt_secret",
        ]
        if self.uses_sqlalchemy:
            required_vars.append("database_url")

        missing_vars = []
        for var in required_vars:
            if not getattr(self, var, None):
                missing_vars.append(var.upper())

        if missing_vars:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing_vars)}"
            )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Use this function to get settings throughout the application.
    """
    settings = Settings()

    if settings.is_production:
        settings.validate_environment()

    return settings


settings = get_settings()
