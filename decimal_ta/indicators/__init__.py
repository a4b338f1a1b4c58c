"""Indicator formulas and the capability contract they share"""

from .base import Indicator
from .moving_average import DEMA, EMA, HMA, SMA, WMA
from .oscillator import CCI, MACD, ROC, RSI, Aroon, Stoch, Trend
from .registry import INDICATOR_TYPES, from_dict, from_json, register_indicator, to_dict, to_json

__all__ = [
    "Indicator",
    # Moving averages
    "SMA",
    "WMA",
    "EMA",
    "DEMA",
    "HMA",
    # Oscillators
    "ROC",
    "RSI",
    "Stoch",
    "Aroon",
    "Trend",
    "MACD",
    "CCI",
    # Registry
    "INDICATOR_TYPES",
    "register_indicator",
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
]
