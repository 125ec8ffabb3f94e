"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Studio settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="STUDIO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # History
    max_history_size: int = Field(default=50, gt=0, description="Maximum undo snapshots kept")

    # Export
    export_preset: str = Field(default="plain", description="View-language import preset")
    indent_width: int | None = Field(
        default=None, gt=0, description="Spaces per nesting level in markup exports (target default when unset)"
    )

    # Caching
    enable_cache: bool = Field(default=True, description="Cache generated exports")
    cache_size: int = Field(default=32, gt=0, description="Export cache max size")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
