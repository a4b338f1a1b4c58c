"""Tests for the shared validate/calc/count contract across every indicator"""

import dataclasses
from decimal import Decimal
from typing import Any, ClassVar, Sequence

import pytest

from decimal_ta.errors import InvalidCandleCountError, InvalidLengthError
from decimal_ta.indicators import (
    CCI, DEMA, EMA, HMA, MACD, ROC, RSI, SMA, WMA,
    Aroon, Indicator, Stoch,
)
from decimal_ta.utils.series import resize

LENGTH_INDICATORS = [
    lambda length: SMA(length=length),
    lambda length: WMA(length=length),
    lambda length: EMA(length=length),
    lambda length: DEMA(length=length),
    lambda length: ROC(length=length),
    lambda length: RSI(length=length),
    lambda length: Stoch(length=length),
    lambda length: Aroon(trend="up", length=length),
    lambda length: HMA(wma=WMA(length=length)),
    lambda length: MACD(indicator1=SMA(length=length), indicator2=EMA(length=2)),
    lambda length: CCI(indicator=SMA(length=length)),
]

CONFIGURED_INDICATORS = [
    SMA(length=3),
    WMA(length=3),
    EMA(length=3),
    DEMA(length=3),
    HMA(wma=WMA(length=4)),
    ROC(length=3),
    RSI(length=3),
    Stoch(length=3),
    Aroon(trend="up", length=3),
    Aroon(trend="down", length=3),
    MACD(indicator1=EMA(length=3), indicator2=SMA(length=2)),
    CCI(indicator=SMA(length=3)),
]


class TestValidationContract:
    """Length validation behaves the same for every indicator"""

    @pytest.mark.parametrize("factory", LENGTH_INDICATORS)
    @pytest.mark.parametrize("length", [0, -1])
    def test_non_positive_length_fails(self, factory, length):
        with pytest.raises(InvalidLengthError):
            factory(length).validate()

    @pytest.mark.parametrize("factory", LENGTH_INDICATORS)
    def test_positive_length_passes(self, factory):
        factory(1).validate()
        factory(14).validate()

    @pytest.mark.parametrize("factory", LENGTH_INDICATORS)
    def test_validation_is_idempotent(self, factory):
        indicator = factory(5)
        indicator.validate()
        indicator.validate()


class TestCountContract:
    """``calc`` succeeds with exactly ``count()`` samples and fails with fewer"""

    @pytest.mark.parametrize("indicator", CONFIGURED_INDICATORS, ids=lambda i: i.name)
    def test_exact_count_succeeds(self, indicator, linear_prices):
        indicator.validate()
        prices = linear_prices[:indicator.count()]
        assert isinstance(indicator.calc(prices), Decimal)

    @pytest.mark.parametrize("indicator", CONFIGURED_INDICATORS, ids=lambda i: i.name)
    def test_one_short_fails(self, indicator, linear_prices):
        prices = linear_prices[:indicator.count() - 1]
        with pytest.raises(InvalidCandleCountError):
            indicator.calc(prices)

    @pytest.mark.parametrize("indicator", CONFIGURED_INDICATORS, ids=lambda i: i.name)
    def test_only_trailing_window_matters(self, indicator, linear_prices):
        """Older history beyond count() does not change the result"""
        window = linear_prices[-indicator.count():]
        assert indicator.calc(linear_prices) == indicator.calc(window)

    def test_count_depends_on_configuration_only(self, linear_prices):
        first = MACD(indicator1=EMA(length=6), indicator2=SMA(length=4))
        second = MACD(indicator1=EMA(length=6), indicator2=SMA(length=4))

        first.calc(linear_prices)
        assert first.count() == second.count() == 11

    def test_caller_prices_untouched(self, linear_prices):
        snapshot = list(linear_prices)
        for indicator in CONFIGURED_INDICATORS:
            indicator.calc(linear_prices)
        assert linear_prices == snapshot


class TestImmutability:
    """Configurations are immutable value types"""

    def test_cannot_reassign_parameters(self):
        sma = SMA(length=3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            sma.length = 5  # type: ignore[misc]

    def test_equal_parameters_compare_equal(self):
        assert MACD(indicator1=SMA(length=2), indicator2=EMA(length=3)) == \
            MACD(indicator1=SMA(length=2), indicator2=EMA(length=3))
        assert SMA(length=3) != WMA(length=3)


@dataclasses.dataclass(frozen=True)
class LastSample(Indicator):
    """Minimal indicator defined outside the package"""

    name: ClassVar[str] = "last"

    def validate(self) -> None:
        pass

    def calc(self, prices: Sequence[Any]) -> Decimal:
        return resize(prices, self.count())[-1]

    def count(self) -> int:
        return 1

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name}


class TestPolymorphicEmbedding:
    """Composites accept any indicator satisfying the contract"""

    def test_macd_with_custom_indicator(self):
        macd = MACD(indicator1=LastSample(), indicator2=SMA(length=4))
        macd.validate()
        # 5 - SMA(2, 3, 4, 5)
        assert macd.calc([1, 2, 3, 4, 5]) == Decimal("1.5")

    def test_cci_with_composite_indicator(self, linear_prices):
        cci = CCI(indicator=MACD(indicator1=SMA(length=2), indicator2=SMA(length=4)))
        cci.validate()
        assert cci.count() == 4
        assert isinstance(cci.calc(linear_prices), Decimal)
