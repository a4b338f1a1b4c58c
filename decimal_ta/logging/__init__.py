"""
Logging configuration and utilities for indicator evaluation.
"""
from .config import configure_logging, get_engine_logger, get_logger, log_indicator_result

__all__ = ["configure_logging", "get_logger", "get_engine_logger", "log_indicator_result"]
