"""
Application settings using pydantic-settings for type-safe configuration.

Environment variables (or a .env file) override the defaults below.
Settings are loaded once at startup and cached.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from grouping.models import GroupingConfig


class Settings(BaseSettings):
    """
    API settings loaded from environment variables.

    The default group sizes are used when a request leaves them out.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    # === CORS Configuration ===
    # Note: Use str type for env var parsing, convert to list via property
    allowed_origins_str: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        alias="ALLOWED_ORIGINS",
        description="Allowed CORS origins (comma-separated)",
    )

    # === Server ===
    host: str = Field(default="127.0.0.1", description="Interface uvicorn binds to")
    port: int = Field(default=8000, description="Port uvicorn listens on")

    # === Grouping Defaults ===
    default_min_group_size: int = Field(default=3, description="Minimum group size when a request omits it")
    default_max_group_size: int = Field(default=5, description="Maximum group size when a request omits it")
    default_max_groups: int = Field(default=3, description="Target group count when a request omits it")

    @field_validator("default_min_group_size", "default_max_group_size", "default_max_groups", mode="after")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"Group size defaults must be greater than 0, got {v}")
        return v

    @property
    def allowed_origins(self) -> list[str]:
        """Parse comma-separated origins string into list."""
        return [origin.strip() for origin in self.allowed_origins_str.split(",") if origin.strip()]

    def grouping_config(
        self,
        min_group_size: int | None = None,
        max_group_size: int | None = None,
        max_groups: int | None = None,
    ) -> GroupingConfig:
        """Build a config, falling back to the defaults for missing values."""
        return GroupingConfig(
            min_group_size=self.default_min_group_size if min_group_size is None else min_group_size,
            max_group_size=self.default_max_group_size if max_group_size is None else max_group_size,
            max_groups=self.default_max_groups if max_groups is None else max_groups,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
