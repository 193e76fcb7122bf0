"""Configuration management for sandbox-guard."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GuardConfig(BaseSettings):
    """Sandbox security check configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SANDBOX_GUARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    resolve_symlinks: bool = Field(
        default=True,
        description=(
            "Resolve existing bind mount sources to their real path and re-check them "
            "against the denylist. Disable for I/O-free dry-run audits."
        ),
    )


class ServerConfig(BaseSettings):
    """Logging configuration for the CLI and embedding applications."""

    model_config = SettingsConfigDict(
        env_prefix="SANDBOX_GUARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_format: str = Field(
        default=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        description="Log format string for loguru",
    )
    json_logging: bool = Field(
        default=False,
        description="Enable JSON structured logging (for SIEM/production)",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, level: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        level_upper = level.upper()
        if level_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {level}. Must be one of {valid_levels}")
        return level_upper


class Config:
    """Main configuration container."""

    def __init__(self) -> None:
        """Initialize configuration from environment and .env file."""
        self.guard = GuardConfig()
        self.server = ServerConfig()

    def __repr__(self) -> str:
        """Return string representation of config."""
        return f"Config(guard={self.guard!r}, server={self.server!r})"
