"""Tests for configuration and logging setup."""

import structlog

from eqpricing.config import PricingConfig, get_config, reset_config
from eqpricing.logging_config import configure_logging
from eqpricing.settings import Settings


def test_defaults() -> None:
    config = PricingConfig()
    assert config.log_level == "INFO"
    assert config.log_format == "console"
    assert config.enforce_todays_historic_fixings is True


def test_environment_override(monkeypatch) -> None:
    monkeypatch.setenv("EQPRICING_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("EQPRICING_ENFORCE_TODAYS_HISTORIC_FIXINGS", "false")
    reset_config()
    config = get_config()
    assert config.log_level == "DEBUG"
    assert config.enforce_todays_historic_fixings is False
    assert get_config() is config
    assert Settings().enforces_todays_historic_fixings is False


def test_configure_logging_json(capsys) -> None:
    configure_logging(level="DEBUG", fmt="json")
    structlog.get_logger("test").info("hello", answer=42)
    out = capsys.readouterr().out
    assert '"event": "hello"' in out
    assert '"answer": 42' in out
    configure_logging()
