"""
Error classification for indicator configuration and calculation.

Every failure is an ordinary reportable exception. Errors raised by an
embedded indicator propagate unchanged through the composite that holds it.
"""

from .base import IndicatorError
from .calculation import (
    InvalidCandleCountError,
    MalformedPriceError,
    UndefinedResultError,
)
from .configuration import (
    IndicatorNotSetError,
    InvalidConfigError,
    InvalidLengthError,
    InvalidTypeError,
    MalformedDefinitionError,
)

__all__ = [
    "IndicatorError",
    # Configuration Errors
    "InvalidLengthError",
    "InvalidTypeError",
    "IndicatorNotSetError",
    "MalformedDefinitionError",
    "InvalidConfigError",
    # Calculation Errors
    "InvalidCandleCountError",
    "MalformedPriceError",
    "UndefinedResultError",
]
