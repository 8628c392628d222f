"""Configuration management using Pydantic Settings."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class PricingConfig(BaseSettings):
    """Pricing configuration loaded from EQPRICING_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="EQPRICING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "console"] = "console"

    # Fixings: a fixing on the evaluation date must come from history
    enforce_todays_historic_fixings: bool = True

    # API
    api_title: str = "Equity Cash Flow Pricing API"


_config: PricingConfig | None = None


def get_config() -> PricingConfig:
    """Get or create the configuration instance."""
    global _config
    if _config is None:
        _config = PricingConfig()
    return _config


def reset_config() -> None:
    """Reset configuration (for testing)."""
    global _config
    _config = None
