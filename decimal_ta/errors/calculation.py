"""
Calculation error classifications.

Raised while an indicator consumes a price sequence.
"""

from typing import Any, Optional

from .base import IndicatorError


class InvalidCandleCountError(IndicatorError):
    """Price sequence is shorter than the indicator's required count."""

    def __init__(self, message: str = "invalid candle count", required_count: Optional[int] = None,
                 available_count: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.required_count = required_count
        self.available_count = available_count


class MalformedPriceError(IndicatorError):
    """Price sample cannot be represented as a finite decimal."""

    def __init__(self, message: str, value: Any = None, position: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.value = value
        self.position = position


class UndefinedResultError(IndicatorError):
    """Formula divides by zero for the given window."""

    def __init__(self, message: str, indicator: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.indicator = indicator
