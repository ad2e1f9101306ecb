"""
SCRIPTURA - Structured Logging

Configures structlog on top of the standard library logging module so that
every log event carries key/value context.

Features:
- Structured JSON logging for log aggregation, or colored console output
- Configurable log levels and output formats
- Optional rotating log file
- Request context enrichment through contextvars

Usage:
    from observability.logging import setup_logging, get_logger

    # Setup at startup
    setup_logging(LoggingConfig(level="INFO", json_format=True))

    # Get logger
    logger = get_logger(__name__)
    logger.info("catalog_loaded", books=66, path="data/bible_counts.json")

Until setup_logging() runs, events are handed to the standard library logger
of the same name, and the host application's handlers and levels decide
what is written.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

import structlog
from structlog.types import EventDict, WrappedLogger

# Global state
_configured: bool = False
_installed_handlers: list[logging.Handler] = []


@dataclass
class LoggingConfig:
    """Configuration for structured logging."""

    service_name: str = "scriptura"
    level: str = field(
        default_factory=lambda: os.getenv("SCRIPTURA_LOG_LEVEL", "INFO").upper()
    )
    json_format: bool = field(
        default_factory=lambda: os.getenv("SCRIPTURA_LOG_FORMAT", "json").lower() == "json"
    )
    log_to_console: bool = True
    log_to_file: bool = field(
        default_factory=lambda: os.getenv("SCRIPTURA_LOG_TO_FILE", "false").lower() == "true"
    )
    log_file_path: Path = field(
        default_factory=lambda: Path(os.getenv("SCRIPTURA_LOG_FILE", "./logs/scriptura.log"))
    )
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5
    include_timestamp: bool = True
    environment: str = field(
        default_factory=lambda: os.getenv("ENVIRONMENT", "development")
    )


def add_service_context(
    service_name: str,
    environment: str,
) -> structlog.types.Processor:
    """
    Create a processor that adds service context to all log events.

    Args:
        service_name: Name of the service
        environment: Deployment environment
    """

    def processor(
        logger: WrappedLogger,
        method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        event_dict["service"] = service_name
        event_dict["environment"] = environment
        return event_dict

    return processor


def add_timestamp(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Add ISO8601 timestamp."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _route_to_stdlib() -> None:
    """
    Hand events to standard library loggers without configuring them.

    Used until setup_logging() runs. Events obey the level and handlers the
    host application set on its own loggers, and nothing is printed when it
    set none.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def setup_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    Configure structlog and the standard library root logger.

    This replaces the root logger's handlers, so it belongs to application
    startup. Called without a config after a successful setup it is a no-op;
    an explicit config always reconfigures.

    Args:
        config: Logging configuration. Uses defaults if not provided.

    Example:
        >>> setup_logging(LoggingConfig(level="DEBUG", json_format=False))
    """
    global _configured

    if _configured and config is None:
        return

    config = config or LoggingConfig()

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_service_context(config.service_name, config.environment),
    ]

    if config.include_timestamp:
        processors.append(add_timestamp)

    processors.extend([
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ])

    if config.json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    _configure_stdlib_logging(config)

    _configured = True


def _configure_stdlib_logging(config: LoggingConfig) -> None:
    """Configure Python standard library logging."""
    global _installed_handlers

    level = getattr(logging, config.level, logging.INFO)
    handlers: list[logging.Handler] = []

    if config.log_to_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        # structlog has already rendered the event; pass it through untouched
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(console_handler)

    if config.log_to_file:
        from logging.handlers import RotatingFileHandler

        config.log_file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            config.log_file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(_JsonFormatter())
        handlers.append(file_handler)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        if handler in _installed_handlers:
            handler.close()

    for handler in handlers:
        root_logger.addHandler(handler)
    _installed_handlers = handlers


class _JsonFormatter(logging.Formatter):
    """JSON formatter for records written to the log file."""

    def format(self, record: logging.LogRecord) -> str:
        log_record: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_record["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": self.formatException(record.exc_info),
            }

        return json.dumps(log_record, default=str)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structlog logger instance.

    Nothing is configured here; until setup_logging() runs, events go to the
    standard library logger of the same name.

    Args:
        name: Logger name, typically __name__

    Returns:
        Bound logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("book_lookup_miss", key="judas")
    """
    return structlog.get_logger(name)


def is_configured() -> bool:
    """Whether setup_logging() has run since the last shutdown."""
    return _configured


def shutdown_logging() -> None:
    """
    Undo setup_logging(): flush and remove the handlers it installed and
    route events back to the standard library loggers.
    """
    global _configured, _installed_handlers

    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        handler.flush()
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers = []

    structlog.reset_defaults()
    _route_to_stdlib()
    _configured = False


class LogContext:
    """
    Context manager for adding contextual information to all logs.

    Example:
        >>> with LogContext(reference="Genesis 1:1"):
        ...     logger.info("validating")
        ...     # All logs will include reference
    """

    def __init__(self, **kwargs: Any):
        self.context = kwargs

    def __enter__(self) -> "LogContext":
        structlog.contextvars.bind_contextvars(**self.context)
        return self

    def __exit__(self, *args: Any) -> None:
        structlog.contextvars.unbind_contextvars(*self.context.keys())


if not structlog.is_configured():
    _route_to_stdlib()
