"""Moving average formulas: SMA, WMA, EMA and the DEMA/HMA composites."""

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, ClassVar, Optional, Sequence

from ..errors import IndicatorNotSetError, InvalidTypeError
from ..utils.series import resize
from .base import Indicator, check_length


@dataclass(frozen=True)
class SMA(Indicator):
    """Simple moving average: arithmetic mean of the window."""

    name: ClassVar[str] = "sma"

    length: int = 0

    def validate(self) -> None:
        check_length(self.length, self.name)

    def calc(self, prices: Sequence[Any]) -> Decimal:
        window = resize(prices, self.count())
        return sum(window, Decimal(0)) / Decimal(self.length)

    def count(self) -> int:
        return self.length

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "length": self.length}


@dataclass(frozen=True)
class WMA(Indicator):
    """
    Weighted moving average.

    The i-th sample of the window (1-indexed, oldest first) is weighted
    ``i / (length * (length + 1) / 2)``.
    """

    name: ClassVar[str] = "wma"

    length: int = 0

    def validate(self) -> None:
        check_length(self.length, self.name)

    def calc(self, prices: Sequence[Any]) -> Decimal:
        window = resize(prices, self.count())
        divisor = Decimal(self.length * (self.length + 1) // 2)

        total = Decimal(0)
        for i, price in enumerate(window, start=1):
            total += price * i

        return total / divisor

    def count(self) -> int:
        return self.length

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "length": self.length}


@dataclass(frozen=True)
class EMA(Indicator):
    """
    Exponential moving average.

    Seeded with the SMA of the first ``length`` window samples, then every
    remaining sample is folded in with multiplier ``2 / (length + 1)``.
    """

    name: ClassVar[str] = "ema"

    length: int = 0

    def validate(self) -> None:
        check_length(self.length, self.name)

    def calc(self, prices: Sequence[Any]) -> Decimal:
        window = resize(prices, self.count())

        result = SMA(length=self.length).calc(window[:self.length])
        for price in window[self.length:]:
            result = self.calc_next(result, price)

        return result

    def calc_next(self, previous: Decimal, sample: Decimal) -> Decimal:
        """
        Fold one more sample into a previously calculated EMA value.

        Args:
            previous: Last EMA value
            sample: Newest price sample

        Returns:
            Next EMA value
        """
        multiplier = self.multiplier()
        return sample * multiplier + previous * (1 - multiplier)

    def multiplier(self) -> Decimal:
        """Smoothing factor ``2 / (length + 1)``."""
        return Decimal(2) / Decimal(self.length + 1)

    def count(self) -> int:
        return self.length * 2 - 1

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "length": self.length}


@dataclass(frozen=True)
class DEMA(Indicator):
    """
    Double exponential moving average.

    A first EMA pass over the window produces ``length`` intermediate values;
    a second EMA pass seeded with the first intermediate value smooths them
    again.
    """

    name: ClassVar[str] = "dema"

    length: int = 0

    def validate(self) -> None:
        check_length(self.length, self.name)

    def calc(self, prices: Sequence[Any]) -> Decimal:
        window = resize(prices, self.count())
        ema = EMA(length=self.length)

        smoothed = [SMA(length=self.length).calc(window[:self.length])]
        for price in window[self.length:]:
            smoothed.append(ema.calc_next(smoothed[-1], price))

        result = smoothed[0]
        for value in smoothed:
            result = ema.calc_next(result, value)

        return result

    def count(self) -> int:
        return self.length * 2 - 1

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "length": self.length}


@dataclass(frozen=True)
class HMA(Indicator):
    """
    Hull moving average built on a base WMA of length ``L``.

    For ``h = floor(sqrt(L))`` growing trailing windows the series
    ``2 * WMA(L / 2) - WMA(L)`` is built, and ``WMA(h)`` of that series is
    the result.
    """

    name: ClassVar[str] = "hma"

    wma: Optional[WMA] = None

    def validate(self) -> None:
        if self.wma is None:
            raise IndicatorNotSetError("Base WMA is not set", field="wma")

        if not isinstance(self.wma, WMA):
            raise InvalidTypeError(
                f"HMA base must be a WMA, got {type(self.wma).__name__}",
                value=getattr(self.wma, "name", type(self.wma).__name__),
                allowed=[WMA.name],
            )

        self.wma.validate()

    def calc(self, prices: Sequence[Any]) -> Decimal:
        window = resize(prices, self.count())

        base = self._base()
        sqrt_length = math.isqrt(base.count())
        half = WMA(length=max(base.count() // 2, 1))

        series = []
        for i in range(sqrt_length):
            end = len(window) - sqrt_length + i + 1
            half_value = half.calc(window[:end])
            full_value = base.calc(window[:end])
            series.append(half_value * 2 - full_value)

        return WMA(length=sqrt_length).calc(series)

    def count(self) -> int:
        return self._base().count() * 2 - 1

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "wma": self._base().to_dict()}

    def _base(self) -> WMA:
        if self.wma is None:
            raise IndicatorNotSetError("Base WMA is not set", field="wma")
        return self.wma
