"""Oscillator formulas: ROC, RSI, Stochastic, Aroon and the MACD/CCI composites."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar, Optional, Sequence, Union

from ..errors import InvalidTypeError, UndefinedResultError
from ..utils.series import mean_deviation, resize
from .base import Indicator, check_length, require_indicator

HUNDRED = Decimal(100)
CCI_CONSTANT = Decimal("0.015")


class Trend(str, Enum):
    """Aroon trend direction."""
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class ROC(Indicator):
    """Rate of change between the first and last window samples, in percent."""

    name: ClassVar[str] = "roc"

    length: int = 0

    def validate(self) -> None:
        check_length(self.length, self.name)

    def calc(self, prices: Sequence[Any]) -> Decimal:
        window = resize(prices, self.count())
        first = window[0]
        last = window[-1]

        if first == 0:
            raise UndefinedResultError("ROC is undefined for a zero first sample", indicator=self.name)

        return (last - first) / first * HUNDRED

    def count(self) -> int:
        return self.length

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "length": self.length}


@dataclass(frozen=True)
class RSI(Indicator):
    """
    Relative strength index.

    Gains and losses between successive window samples are summed and
    averaged over ``length``. A window without losses yields 100.
    """

    name: ClassVar[str] = "rsi"

    length: int = 0

    def validate(self) -> None:
        check_length(self.length, self.name)

    def calc(self, prices: Sequence[Any]) -> Decimal:
        window = resize(prices, self.count())

        gain = Decimal(0)
        loss = Decimal(0)
        for previous, current in zip(window, window[1:]):
            delta = current - previous
            if delta < 0:
                loss += abs(delta)
            else:
                gain += delta

        average_gain = gain / self.length
        average_loss = loss / self.length

        if average_loss == 0:
            return HUNDRED

        return HUNDRED - HUNDRED / (1 + average_gain / average_loss)

    def count(self) -> int:
        return self.length

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "length": self.length}


@dataclass(frozen=True)
class Stoch(Indicator):
    """Stochastic oscillator: position of the last sample in the window range."""

    name: ClassVar[str] = "stoch"

    length: int = 0

    def validate(self) -> None:
        check_length(self.length, self.name)

    def calc(self, prices: Sequence[Any]) -> Decimal:
        window = resize(prices, self.count())
        low = min(window)
        high = max(window)

        if high == low:
            raise UndefinedResultError("Stochastic is undefined for a flat window", indicator=self.name)

        return (window[-1] - low) / (high - low) * HUNDRED

    def count(self) -> int:
        return self.length

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "length": self.length}


@dataclass(frozen=True)
class Aroon(Indicator):
    """
    Aroon up/down.

    Measures how recently the window reached its high (``up``) or low
    (``down``). Ties resolve to the most recent sample.
    """

    name: ClassVar[str] = "aroon"

    trend: Union[Trend, str] = ""
    length: int = 0

    def validate(self) -> None:
        self._trend()
        check_length(self.length, self.name)

    def calc(self, prices: Sequence[Any]) -> Decimal:
        window = resize(prices, self.count())
        trend = self._trend()

        extreme = None
        distance = 0
        for i, price in enumerate(window):
            if (extreme is None
                    or trend is Trend.UP and extreme <= price
                    or trend is Trend.DOWN and not extreme < price):
                extreme = price
                distance = self.length - i - 1

        return Decimal(self.length - distance) * HUNDRED / Decimal(self.length)

    def count(self) -> int:
        return self.length

    def to_dict(self) -> dict[str, Any]:
        trend = self.trend.value if isinstance(self.trend, Trend) else self.trend
        return {"name": self.name, "trend": trend, "length": self.length}

    def _trend(self) -> Trend:
        try:
            return Trend(self.trend)
        except ValueError:
            raise InvalidTypeError(
                f"Aroon trend must be 'up' or 'down', got {self.trend!r}",
                value=self.trend,
                allowed=[trend.value for trend in Trend],
            )


@dataclass(frozen=True)
class MACD(Indicator):
    """Difference between two embedded indicators over a shared window."""

    name: ClassVar[str] = "macd"

    indicator1: Optional[Indicator] = None
    indicator2: Optional[Indicator] = None

    def validate(self) -> None:
        first = require_indicator(self.indicator1, "indicator1")
        second = require_indicator(self.indicator2, "indicator2")

        first.validate()
        second.validate()

    def calc(self, prices: Sequence[Any]) -> Decimal:
        window = resize(prices, self.count())

        first = require_indicator(self.indicator1, "indicator1").calc(window)
        second = require_indicator(self.indicator2, "indicator2").calc(window)

        return first - second

    def count(self) -> int:
        first = require_indicator(self.indicator1, "indicator1")
        second = require_indicator(self.indicator2, "indicator2")
        return max(first.count(), second.count())

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "indicator1": require_indicator(self.indicator1, "indicator1").to_dict(),
            "indicator2": require_indicator(self.indicator2, "indicator2").to_dict(),
        }


@dataclass(frozen=True)
class CCI(Indicator):
    """
    Commodity channel index.

    ``(last - MA) / (0.015 * mean deviation)`` where MA is any embedded
    indicator, usually a moving average.
    """

    name: ClassVar[str] = "cci"

    indicator: Optional[Indicator] = None

    def validate(self) -> None:
        require_indicator(self.indicator, "indicator").validate()

    def calc(self, prices: Sequence[Any]) -> Decimal:
        window = resize(prices, self.count())

        average = require_indicator(self.indicator, "indicator").calc(window)
        deviation = mean_deviation(window)

        if deviation == 0:
            raise UndefinedResultError("CCI is undefined for zero mean deviation", indicator=self.name)

        return (window[-1] - average) / (CCI_CONSTANT * deviation)

    def count(self) -> int:
        return require_indicator(self.indicator, "indicator").count()

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "indicator": require_indicator(self.indicator, "indicator").to_dict()}
