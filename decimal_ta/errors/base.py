"""
Base error class for indicator configuration and calculation failures.
"""

from typing import Any, Dict, Optional


class IndicatorError(Exception):
    """Base class for reportable indicator failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.recoverable = True
