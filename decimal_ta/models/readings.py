"""Data models for indicator evaluation results"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from ..errors import IndicatorError


@dataclass(frozen=True)
class IndicatorReading:
    """Outcome of evaluating one named indicator"""
    name: str
    indicator: str                                   # Kind tag, e.g. 'ema'
    value: Optional[Decimal] = None
    error: Optional[IndicatorError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class IndicatorSnapshot:
    """All readings calculated over one price sequence"""
    sample_count: int
    readings: dict[str, IndicatorReading] = field(default_factory=dict)

    def __getitem__(self, name: str) -> IndicatorReading:
        return self.readings[name]

    def __contains__(self, name: str) -> bool:
        return name in self.readings

    def values(self) -> dict[str, Decimal]:
        """Values of successful readings keyed by indicator name"""
        return {
            name: reading.value
            for name, reading in self.readings.items()
            if reading.ok and reading.value is not None
        }

    def failed(self) -> dict[str, IndicatorError]:
        """Errors of failed readings keyed by indicator name"""
        return {
            name: reading.error
            for name, reading in self.readings.items()
            if reading.error is not None
        }

    def has_failures(self) -> bool:
        return any(not reading.ok for reading in self.readings.values())
