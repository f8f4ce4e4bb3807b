"""Configuration management using Pydantic Settings."""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support.

    All settings can be overridden using environment variables or .env file.
    """

    # Application Settings
    app_name: str = Field(
        default="Compass Pins",
        description="Application name"
    )
    app_version: str = Field(
        default="1.0.0",
        description="Application version"
    )
    debug: bool = Field(
        default=False,
        description="Debug mode flag, forces DEBUG logging"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Path to log file. If not set, logs go to stderr only"
    )

    # Pin encoding
    omit_absent_fields: bool = Field(
        default=True,
        description="Omit absent pin fields when encoding instead of writing null"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        # Allow extra fields from environment
        extra="ignore",
        json_schema_extra={
            "example": {
                "app_name": "Compass Pins",
                "debug": False,
                "log_level": "INFO",
                "log_file": "logs/compass.log",
                "omit_absent_fields": True
            }
        },
    )


# Create a singleton instance
settings = Settings()
