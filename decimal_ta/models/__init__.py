"""
Result models for indicator evaluation.
"""
from .readings import IndicatorReading, IndicatorSnapshot

__all__ = ["IndicatorReading", "IndicatorSnapshot"]
