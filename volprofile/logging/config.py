"""
Centralized logging configuration for the volume profile engine.

This module provides standardized logging configuration using structlog
for all components. Profile loading, validation warnings and query results
are all emitted as structured events through this configuration.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_loader_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for profile fallback-chain events.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for profile loading
    """
    logger = get_logger(name)

    return logger.bind(subsystem="profile_loader")


def log_source_failure(
    logger: FilteringBoundLogger,
    origin: str,
    path: str,
    error: Exception,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a failed attempt to load a profile source with standardized format.

    Args:
        logger: Structlog logger instance
        origin: Position of the source in the fallback chain
        path: Path of the source that failed
        error: The load error raised for the source
        context: Additional context data
    """
    bound_logger = logger.bind(
        origin=origin,
        path=path,
        error_type=type(error).__name__,
        reason=str(error),
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if getattr(error, "recoverable", False):
        bound_logger.warning("Profile source rejected")
    else:
        bound_logger.error("Profile source failed")
