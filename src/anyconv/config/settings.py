"""Centralized anyconv configuration using Pydantic Settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AnyConvConfig(BaseSettings):
    """Configuration shared by the anyconv helpers."""

    model_config = SettingsConfigDict(
        env_prefix="ANYCONV_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    # Table rendering
    table_padding: int = Field(default=4, ge=0, description="Spaces between rendered table columns")

    # SQL helpers
    query_placeholder: str = Field(default="?", description="Prefix marking a named placeholder in query templates")
    clickhouse_date_format: str = "%Y%m%d"

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v):
        """Normalize log level names to upper case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("query_placeholder")
    @classmethod
    def validate_query_placeholder(cls, v: str) -> str:
        if not v:
            raise ValueError("query_placeholder must not be empty")
        return v


# Global configuration instance
config = AnyConvConfig()
