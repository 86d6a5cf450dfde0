"""
Centralized settings configuration using Pydantic BaseSettings.

All environment variables are defined here with types, defaults, and validation.
Use get_settings() for dependency injection compatibility in FastAPI.

Usage:
    from backend.settings import get_settings, Settings

    # In FastAPI endpoints (dependency injection)
    @app.get("/")
    def read_root(settings: Settings = Depends(get_settings)):
        return {"environment": settings.environment}

    # Direct access (module-level)
    settings = get_settings()
    print(settings.workouts_collection)
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Core Environment
    # -------------------------------------------------------------------------
    environment: str = Field(
        default="development",
        description="Runtime environment: development, staging, production",
    )

    # -------------------------------------------------------------------------
    # Supabase (record store + blob store)
    # -------------------------------------------------------------------------
    supabase_url: Optional[str] = Field(
        default=None,
        description="Supabase project URL",
    )
    supabase_service_role_key: Optional[str] = Field(
        default=None,
        description="Supabase service role key (full access)",
    )
    supabase_anon_key: Optional[str] = Field(
        default=None,
        description="Supabase anonymous key (limited access)",
    )

    @property
    def supabase_key(self) -> Optional[str]:
        """Get the best available Supabase key (service role preferred)."""
        return self.supabase_service_role_key or self.supabase_anon_key

    # -------------------------------------------------------------------------
    # Collections
    # -------------------------------------------------------------------------
    workouts_collection: str = Field(
        default="Workouts",
        description="Collection (table) holding one document per workout",
    )
    exercises_collection: str = Field(
        default="Exercises",
        description="Read-only collection of exercise reference data",
    )
    tools_collection: str = Field(
        default="Tools",
        description="Read-only collection of tool reference data",
    )

    # -------------------------------------------------------------------------
    # Image storage
    # -------------------------------------------------------------------------
    image_bucket: str = Field(
        default="workout-images",
        description="Public storage bucket for workout thumbnails",
    )
    image_path_prefix: str = Field(
        default="workout_image",
        description="Folder inside the bucket where thumbnails are uploaded",
    )

    # -------------------------------------------------------------------------
    # Admin UI behaviour
    # -------------------------------------------------------------------------
    default_page_size: int = Field(
        default=10,
        gt=0,
        description="Rows per page when the workout list is first shown",
    )
    page_size_options: str = Field(
        default="10,25,50",
        description="Comma-separated list of selectable page sizes",
    )
    notification_ttl_seconds: float = Field(
        default=2.0,
        ge=0,
        description="How long a notification stays visible before auto-dismiss",
    )
    save_close_delay_seconds: float = Field(
        default=2.0,
        ge=0,
        description="Delay between a successful save and the editor closing",
    )

    @property
    def page_size_options_list(self) -> list[int]:
        """Parse page size options into a list of ints."""
        return [int(v.strip()) for v in self.page_size_options.split(",") if v.strip()]

    # -------------------------------------------------------------------------
    # HTTP
    # -------------------------------------------------------------------------
    cors_allowed_origins: str = Field(
        default="",
        description="Comma-separated list of extra CORS origins",
    )

    @property
    def cors_allowed_origins_list(self) -> list[str]:
        """Parse CORS origins into a list."""
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]

    # -------------------------------------------------------------------------
    # Observability - Sentry
    # -------------------------------------------------------------------------
    sentry_dsn: Optional[str] = Field(
        default=None,
        description="Sentry DSN for error tracking",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is a valid value."""
        valid_environments = {"development", "staging", "production", "test"}
        if v.lower() not in valid_environments:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {valid_environments}"
            )
        return v.lower()

    @field_validator("page_size_options")
    @classmethod
    def validate_page_size_options(cls, v: str) -> str:
        """Page size options must be positive integers."""
        parts = [p.strip() for p in v.split(",") if p.strip()]
        if not parts:
            raise ValueError("page_size_options must list at least one size")
        for part in parts:
            if not part.isdigit() or int(part) <= 0:
                raise ValueError(f"Invalid page size '{part}'")
        return v

    @model_validator(mode="after")
    def validate_default_page_size(self) -> "Settings":
        """The default page size has to be one of the selectable options."""
        if self.default_page_size not in self.page_size_options_list:
            raise ValueError(
                f"default_page_size {self.default_page_size} is not one of "
                f"{self.page_size_options_list}"
            )
        return self

    # -------------------------------------------------------------------------
    # Helper Properties
    # -------------------------------------------------------------------------
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.environment == "test"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    For testing, you can clear the cache with get_settings.cache_clear().

    Returns:
        Settings: Application settings instance
    """
    return Settings()
