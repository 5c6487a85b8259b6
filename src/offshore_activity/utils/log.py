"""Structured logging for the Offshore Activity Classification System."""

import logging

import structlog

from offshore_activity.config import get_settings

PACKAGE_LOGGER = "offshore_activity"


def configure_logging(level: str | None = None) -> None:
    """Configure structlog once and apply the log level.

    The level is set on the package logger on every call, so it takes
    effect even when the root logger already has handlers.

    Args:
        level: Log level name; defaults to the configured ``log_level``
    """
    level_name = (level or get_settings().log_level).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)
    logging.getLogger(PACKAGE_LOGGER).setLevel(numeric_level)
    if structlog.is_configured():
        return
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s")


def get_logger(name: str):
    """Return a structlog logger, configuring structlog on first call."""
    if not structlog.is_configured():
        configure_logging()
    return structlog.get_logger(name)
