"""Application settings with Pydantic validation.

The runtime environment (``ENV``) is read only through
:class:`dentalhub_bot.core.environment.Environment`.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BotSettings(BaseSettings):
    """Process-level settings read from the environment and `.env`."""

    log_level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    json_logging: bool = Field(default=True, description="Write the log file as JSON lines")
    logs_dir: str = Field(default="logs", description="Directory for log files")
    config_path: str = Field(
        default="config/config.yaml", description="Path to the YAML configuration file"
    )
    headless: Optional[bool] = Field(
        default=None, description="Override browser.headless from the YAML config"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f'LOG_LEVEL must be one of: {", ".join(allowed)}')
        return v_upper


# Singleton instance
_settings: Optional[BotSettings] = None


def get_settings() -> BotSettings:
    """
    Get application settings singleton.

    Returns:
        BotSettings instance
    """
    global _settings
    if _settings is None:
        _settings = BotSettings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None
