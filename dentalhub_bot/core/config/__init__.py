"""Configuration management module."""

from .config_loader import load_config, substitute_env_vars
from .config_models import (
    AppConfig,
    BookingConfig,
    BrowserConfig,
    IntakeDefaults,
    SiteConfig,
    ViewportConfig,
)
from .settings import BotSettings, get_settings, reset_settings

__all__ = [
    "load_config",
    "substitute_env_vars",
    "AppConfig",
    "SiteConfig",
    "BrowserConfig",
    "ViewportConfig",
    "IntakeDefaults",
    "BookingConfig",
    "BotSettings",
    "get_settings",
    "reset_settings",
]
