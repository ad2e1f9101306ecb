"""
SCRIPTURA - Observability Package

Structured logging for SCRIPTURA: structlog over the stdlib logging module,
rendered as JSON or console output.

Usage:
    from observability import setup_observability, get_logger

    # Initialize at application startup
    setup_observability(log_level="DEBUG", json_logs=False)

    logger = get_logger(__name__)
    logger.info("catalog_loaded", books=66)
"""
from typing import Optional

from .logging import (
    LogContext,
    LoggingConfig,
    get_logger,
    is_configured,
    setup_logging,
    shutdown_logging,
)

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "is_configured",
    "LoggingConfig",
    "LogContext",
    "shutdown_logging",
    # Combined setup
    "setup_observability",
    "shutdown_observability",
]


def setup_observability(
    service_name: str = "scriptura",
    log_level: Optional[str] = None,
    json_logs: Optional[bool] = None,
    environment: Optional[str] = None,
) -> None:
    """
    Initialize logging for SCRIPTURA.

    Arguments left as None fall back to the environment
    (SCRIPTURA_LOG_LEVEL, SCRIPTURA_LOG_FORMAT, ENVIRONMENT). Replaces any
    earlier setup.

    Args:
        service_name: Name attached to every log event
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_logs: Render JSON instead of console output
        environment: Deployment environment (development, staging, production)
    """
    config = LoggingConfig(service_name=service_name)
    if log_level is not None:
        config.level = log_level.upper()
    if json_logs is not None:
        config.json_format = json_logs
    if environment is not None:
        config.environment = environment
    setup_logging(config)


def shutdown_observability() -> None:
    """Flush and close log handlers."""
    shutdown_logging()
