"""Pydantic configuration models for the YAML config file."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_START_URL = "https://uk.dentalhub.online/soe/new/Kilmarnock%20Smile%20Studio?pid=UKSHQ02"


class SiteConfig(BaseModel):
    """Booking site configuration."""

    start_url: str = Field(default=DEFAULT_START_URL)

    @field_validator("start_url")
    @classmethod
    def validate_https(cls, v: str) -> str:
        """Ensure URL is HTTPS and has valid structure."""
        if not v.startswith("https://"):
            raise ValueError("site.start_url must use HTTPS")
        from urllib.parse import urlparse

        if not urlparse(v).netloc:
            raise ValueError("site.start_url must have a valid domain")
        return v


class ViewportConfig(BaseModel):
    """Browser viewport size."""

    width: int = Field(default=1280, ge=320)
    height: int = Field(default=800, ge=240)


class BrowserConfig(BaseModel):
    """Browser launch configuration."""

    headless: bool = Field(default=False)
    executable_path: Optional[str] = Field(default=None)
    viewport: ViewportConfig = Field(default_factory=ViewportConfig)
    args: List[str] = Field(default_factory=lambda: ["--no-sandbox", "--disable-setuid-sandbox"])

    @field_validator("executable_path")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty executable path (e.g. unset ${VAR}) as the bundled browser."""
        return v or None


class IntakeDefaults(BaseModel):
    """Values used when the operator leaves a prompt empty."""

    first_name: str = Field(default="John")
    last_name: str = Field(default="Doe")
    appointment_type: str = Field(default="Air Polish")
    provider: str = Field(default="Any Provider")


class BookingConfig(BaseModel):
    """Booking flow configuration."""

    # Clinic-specific reason option used when no reason text matches.
    reason_fallback_value: Optional[str] = Field(default="0-54-418")
    screenshot_path: str = Field(default="error-screenshot.png")


class AppConfig(BaseModel):
    """Root configuration model."""

    site: SiteConfig = Field(default_factory=SiteConfig)
    browser: BrowserConfig = Field(default_factory=BrowserConfig)
    intake_defaults: IntakeDefaults = Field(default_factory=IntakeDefaults)
    booking: BookingConfig = Field(default_factory=BookingConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Create from a raw configuration dictionary."""
        return cls.model_validate(data)
