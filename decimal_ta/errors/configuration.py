"""
Configuration error classifications for indicator settings.

These exceptions are raised by ``validate()`` and by the definition decoder
before any price data is touched.
"""

from typing import Any, Optional, Sequence

from .base import IndicatorError


class InvalidLengthError(IndicatorError):
    """Configured window length is less than 1."""

    def __init__(self, message: str = "invalid length", length: Optional[int] = None,
                 indicator: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.length = length
        self.indicator = indicator


class InvalidTypeError(IndicatorError):
    """Categorical parameter is not one of its recognized values."""

    def __init__(self, message: str = "invalid type", value: Any = None,
                 allowed: Optional[Sequence[str]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.value = value
        self.allowed = list(allowed or [])


class IndicatorNotSetError(IndicatorError):
    """Embedded indicator is absent or a definition names an unknown kind."""

    def __init__(self, message: str = "indicator not set", field: Optional[str] = None,
                 name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.name = name


class MalformedDefinitionError(IndicatorError):
    """Serialized indicator definition has the wrong shape."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 field: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.field = field


class InvalidConfigError(IndicatorError):
    """Merged settings failed validation."""

    def __init__(self, message: str = "invalid configuration",
                 errors: Optional[Sequence[Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = list(errors or [])
