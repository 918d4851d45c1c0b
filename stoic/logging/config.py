"""
Centralized logging configuration for the Stoic sanitizer.

This module provides standardized logging configuration using structlog.
Diagnostic events raised during traversal (circular or shared references,
rejected values) are logged through the diagnostics logger so a host
application can route them to its own sink.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger

from ..config.defaults import LoggingParams


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the host application.

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
        format="%(message)s"  # structlog will handle formatting
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(log_level)

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
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging_from(params: LoggingParams, **kwargs: Any) -> None:
    """
    Configure structlog from the ``logging`` section of a loaded config.

    Args:
        params: Level and output format from stoic.yaml or defaults
        **kwargs: Further ``configure_logging`` options (timestamps, caller info)
    """
    configure_logging(level=params.level, format_json=params.format_json, **kwargs)


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_diagnostics_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for traversal diagnostics.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger bound to the sanitizer subsystem
    """
    logger = get_logger(name)

    return logger.bind(
        subsystem="sanitizer",
        diagnostic=True
    )


def log_cycle_detected(
    logger: FilteringBoundLogger,
    current_path: tuple,
    original_path: tuple,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a detected circular or shared reference with standardized format.

    Args:
        logger: Structlog logger instance
        current_path: Path at which the reference was reached again
        original_path: Path at which the reference was first visited
        context: Additional context data
    """
    bound_logger = logger.bind(
        current_path=list(current_path),
        original_path=list(original_path),
        diagnostic_kind="cycle_detected"
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.warning("Circular reference omitted")


def log_value_rejected(
    logger: FilteringBoundLogger,
    type_name: str,
    reason: str,
    path: tuple
) -> None:
    """
    Log a value the sanitizer refused to convert.

    Args:
        logger: Structlog logger instance
        type_name: Name of the rejected value's type
        reason: Classifier reason for the rejection
        path: Path at which the value was found
    """
    logger.debug(
        "Unsupported value rejected",
        type_name=type_name,
        reason=reason,
        path=list(path),
        diagnostic_kind="value_rejected"
    )
