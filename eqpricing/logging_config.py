"""Structured logging setup (structlog)."""

from __future__ import annotations

import logging

import structlog

from eqpricing.config import get_config


def configure_logging(level: str | None = None, fmt: str | None = None) -> None:
    """
    Configure structlog for console or JSON output.

    Defaults come from `PricingConfig` (EQPRICING_LOG_LEVEL / EQPRICING_LOG_FORMAT).
    Safe to call more than once; the last call wins.
    """
    config = get_config()
    level = (level or config.log_level).upper()
    fmt = fmt or config.log_format

    renderer = (
        structlog.processors.JSONRenderer()
        if fmt == "json"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level)
        ),
        cache_logger_on_first_use=False,
    )
