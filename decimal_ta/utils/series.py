"""
Price series windowing and dispersion helpers.

``resize`` is the single admission gate for every formula: it returns the
most recent ``n`` samples as a fresh list of decimals, or raises
``InvalidCandleCountError`` when the history is too short.
"""

from decimal import Decimal
from typing import Any, Sequence

from ..errors import InvalidCandleCountError, MalformedPriceError


def as_decimal(value: Any, position: int = -1) -> Decimal:
    """
    Convert a single price sample to ``Decimal``.

    Floats go through their shortest ``repr`` so ``44.34`` becomes
    ``Decimal("44.34")`` rather than its binary expansion.

    Args:
        value: Price sample (Decimal, int, str or float)
        position: Index of the sample, used for error reporting only

    Returns:
        Finite decimal value

    Raises:
        MalformedPriceError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise MalformedPriceError(f"Invalid price type: {type(value).__name__}",
                                  value=value, position=position)

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except ArithmeticError:
            raise MalformedPriceError(f"Invalid price value: {value!r}",
                                      value=value, position=position)
    else:
        raise MalformedPriceError(f"Invalid price type: {type(value).__name__}",
                                  value=value, position=position)

    if not result.is_finite():
        raise MalformedPriceError(f"Invalid price value: {value}", value=value, position=position)

    return result


def to_decimals(values: Sequence[Any]) -> list[Decimal]:
    """Convert every sample of a sequence to ``Decimal``."""
    return [as_decimal(value, i) for i, value in enumerate(values)]


def resize(prices: Sequence[Any], n: int) -> list[Decimal]:
    """
    Take the trailing window of a price sequence.

    Args:
        prices: Price samples, oldest first
        n: Required window length

    Returns:
        New list with the last ``n`` samples in original order

    Raises:
        InvalidCandleCountError: If fewer than ``n`` samples are available
    """
    if n <= 0:
        return []

    available = len(prices)
    if available < n:
        raise InvalidCandleCountError(
            f"Insufficient price data: {n} required, {available} available",
            required_count=n,
            available_count=available,
        )

    start = available - n
    return [as_decimal(prices[i], i) for i in range(start, available)]


def mean_deviation(prices: Sequence[Decimal]) -> Decimal:
    """
    Mean absolute deviation of samples around their arithmetic mean.

    Must not be called with an empty sequence.
    """
    count = Decimal(len(prices))
    mean = sum(prices, Decimal(0)) / count

    total = Decimal(0)
    for price in prices:
        total += abs(price - mean)

    return total / count
