"""Configuration management: defaults, YAML loading and validation"""

from .context import decimal_context, quantize_result
from .defaults import DecimalParams, DefaultConfig, LoggingParams, OutputParams, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "ConfigLoader",
    "ConfigValidator",
    "ValidationError",
    "DefaultConfig",
    "DecimalParams",
    "OutputParams",
    "LoggingParams",
    "get_default_config",
    "decimal_context",
    "quantize_result",
]
