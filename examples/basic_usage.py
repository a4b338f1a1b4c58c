#!/usr/bin/env python3
"""
Basic Usage Example - Decimal TA

This script demonstrates:
- Function-style shortcuts for single indicators
- Composite indicators embedding other indicators
- Decoding indicator definitions
- Evaluating a named indicator set with the engine

Run: python examples/basic_usage.py
"""

from decimal import Decimal

from decimal_ta import (
    CCI,
    EMA,
    MACD,
    SMA,
    InvalidCandleCountError,
    calc_rsi,
    calc_sma,
    count_ema,
    from_json,
)
from decimal_ta.engine import IndicatorEngine
from decimal_ta.logging import configure_logging

PRICES = [
    "44.34", "44.09", "44.15", "43.61", "44.33", "44.83", "45.10",
    "45.42", "45.84", "46.08", "45.89", "46.03", "45.61", "46.28",
    "46.28", "46.00", "46.03", "46.41", "46.22", "45.64",
]


def function_shortcuts() -> None:
    """Single indicators through the function shortcuts."""
    print("📊 Function shortcuts")
    print(f"  SMA(5)  = {calc_sma(PRICES, 5)}")
    print(f"  RSI(14) = {calc_rsi(PRICES, 14).quantize(Decimal('0.00000001'))}")
    print(f"  EMA(10) needs {count_ema(10)} samples")

    try:
        calc_rsi(PRICES[:3], 14)
    except InvalidCandleCountError as e:
        print(f"  RSI(14) on 3 samples: {e}")


def composites() -> None:
    """Composite indicators built from other indicators."""
    print("\n🧩 Composites")
    macd = MACD(indicator1=EMA(length=3), indicator2=SMA(length=8))
    macd.validate()
    print(f"  MACD(EMA3, SMA8) = {macd.calc(PRICES)}")

    cci = CCI(indicator=SMA(length=10))
    cci.validate()
    print(f"  CCI(SMA10) = {cci.calc(PRICES)}")


def definitions() -> None:
    """Indicators decoded from tagged JSON definitions."""
    print("\n📋 Definitions")
    indicator = from_json('{"name": "hma", "wma": {"length": 9}}')
    indicator.validate()
    print(f"  {indicator.to_dict()} -> {indicator.calc(PRICES)}")


def engine() -> None:
    """Named indicator set evaluated in one pass."""
    print("\n⚙️  Engine")
    indicator_engine = IndicatorEngine({
        "sma_5": SMA(length=5),
        "ema_5": EMA(length=5),
        "rsi_30": from_json('{"name": "rsi", "length": 30}'),
    })

    snapshot = indicator_engine.calculate_all(PRICES)
    for name, value in snapshot.values().items():
        print(f"  {name}: {value}")
    for name, error in snapshot.failed().items():
        print(f"  {name}: {type(error).__name__}")


if __name__ == "__main__":
    configure_logging(level="WARNING")
    function_shortcuts()
    composites()
    definitions()
    engine()
