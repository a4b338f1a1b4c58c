"""
Centralized logging configuration for indicator evaluation.

This module provides standardized logging configuration using structlog.
Formula code never logs; the registry and the engine log through loggers
obtained here.
"""
import logging
import sys
from decimal import Decimal
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
        format="%(message)s"  # structlog will handle formatting
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
        # Decimals are not JSON serializable, render them as strings
        processors.append(structlog.processors.JSONRenderer(default=str))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

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


def get_engine_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound to the indicator engine subsystem."""
    return structlog.get_logger(name, subsystem="indicator_engine")


def log_indicator_result(
    logger: FilteringBoundLogger,
    name: str,
    indicator: str,
    value: Optional[Decimal] = None,
    error: Optional[Exception] = None,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of one indicator evaluation with standardized format.

    Args:
        logger: Structlog logger instance
        name: User-chosen name of the indicator
        indicator: Indicator kind tag
        value: Calculated value, if any
        error: Failure raised by the calculation, if any
        context: Additional context data
    """
    bound_logger = logger.bind(
        indicator_name=name,
        indicator=indicator,
        result="FAIL" if error is not None else "OK",
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if error is not None:
        bound_logger.warning(
            "Indicator calculation failed",
            error_type=type(error).__name__,
            error=str(error),
        )
    else:
        bound_logger.debug("Indicator calculated", value=str(value))
