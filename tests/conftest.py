"""Pytest configuration and shared fixtures."""

from decimal import Decimal

import pytest


@pytest.fixture
def rsi_prices() -> list[Decimal]:
    """Fourteen closing prices from the classic RSI worked example."""
    return [Decimal(p) for p in (
        "44.34", "44.09", "44.15", "43.61", "44.33", "44.83", "45.10",
        "45.42", "45.84", "46.08", "45.89", "46.03", "45.61", "46.28",
    )]


@pytest.fixture
def linear_prices() -> list[Decimal]:
    """Prices 1 through 20."""
    return [Decimal(i) for i in range(1, 21)]


@pytest.fixture
def indicator_definitions() -> dict:
    """Named indicator definitions as they appear in indicators.yaml."""
    return {
        "sma_3": {"name": "sma", "length": 3},
        "ema_3": {"name": "ema", "length": 3},
        "macd": {
            "name": "macd",
            "indicator1": {"name": "sma", "length": 2},
            "indicator2": {"name": "sma", "length": 4},
        },
    }
