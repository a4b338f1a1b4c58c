"""Unit tests for the named indicator engine."""

from decimal import Decimal
from unittest.mock import patch

import pytest
import yaml

from decimal_ta.config.defaults import DefaultConfig, DecimalParams, LoggingParams, OutputParams
from decimal_ta.config.loader import ConfigLoader
from decimal_ta.engine import IndicatorEngine
from decimal_ta.errors import InvalidCandleCountError, InvalidConfigError, InvalidLengthError, UndefinedResultError
from decimal_ta.indicators import EMA, MACD, ROC, RSI, SMA, Stoch


def make_config(result_places=None, precision=28) -> DefaultConfig:
    return DefaultConfig(
        decimal=DecimalParams(precision=precision),
        output=OutputParams(result_places=result_places),
        logging=LoggingParams(),
    )


class TestEngineSetup:
    """Test engine construction and registration"""

    def test_indicators_validated_on_construction(self):
        with pytest.raises(InvalidLengthError):
            IndicatorEngine({"sma": SMA(length=0)})

    def test_add_and_remove(self):
        engine = IndicatorEngine()
        engine.add("sma_3", SMA(length=3))
        engine.add("ema_3", EMA(length=3))
        assert engine.names() == ["sma_3", "ema_3"]
        assert engine.get("sma_3") == SMA(length=3)

        engine.remove("sma_3")
        assert engine.names() == ["ema_3"]

    def test_add_rejects_invalid_indicator(self):
        engine = IndicatorEngine()
        with pytest.raises(InvalidLengthError):
            engine.add("bad", RSI(length=-2))
        assert engine.names() == []

    def test_warmup_period(self):
        engine = IndicatorEngine({
            "sma": SMA(length=10),
            "macd": MACD(indicator1=EMA(length=12), indicator2=EMA(length=26)),
        })
        assert engine.get_warmup_period() == 51
        assert not engine.is_warmed_up([Decimal(1)] * 50)
        assert engine.is_warmed_up([Decimal(1)] * 51)

    def test_empty_engine_warmup(self):
        assert IndicatorEngine().get_warmup_period() == 0

    def test_from_config(self, tmp_path, indicator_definitions):
        with open(tmp_path / "indicators.yaml", "w") as f:
            yaml.safe_dump({"indicators": indicator_definitions}, f)
        with open(tmp_path / "settings.yaml", "w") as f:
            yaml.safe_dump({"output": {"result_places": 3}}, f)

        with patch("decimal_ta.engine.configure_logging"):
            engine = IndicatorEngine.from_config(ConfigLoader.create(tmp_path))

        assert sorted(engine.names()) == ["ema_3", "macd", "sma_3"]
        assert engine.config.output.result_places == 3

    def test_from_config_applies_logging_settings(self, tmp_path):
        with open(tmp_path / "settings.yaml", "w") as f:
            yaml.safe_dump({"logging": {"level": "DEBUG", "format_json": True}}, f)

        with patch("decimal_ta.engine.configure_logging") as configure:
            IndicatorEngine.from_config(ConfigLoader.create(tmp_path))

        configure.assert_called_once_with(level="DEBUG", format_json=True)

    @pytest.mark.parametrize("settings,field", [
        ({"decimal": {"rounding": "HALF_UP"}}, "rounding"),
        ({"decimal": {"precison": 10}}, "decimal.precison"),
        ({"output": None}, "output"),
    ])
    def test_from_config_rejects_invalid_settings(self, tmp_path, settings, field):
        with open(tmp_path / "settings.yaml", "w") as f:
            yaml.safe_dump(settings, f)

        with patch("decimal_ta.engine.configure_logging") as configure:
            with pytest.raises(InvalidConfigError) as exc_info:
                IndicatorEngine.from_config(ConfigLoader.create(tmp_path))

        assert [error.field for error in exc_info.value.errors] == [field]
        configure.assert_not_called()


class TestEngineCalculation:
    """Test single and batch calculation"""

    def test_calculate_single(self, linear_prices):
        engine = IndicatorEngine({"sma_4": SMA(length=4)})
        assert engine.calculate("sma_4", linear_prices) == Decimal("18.5")

    def test_calculate_single_raises(self):
        engine = IndicatorEngine({"rsi": RSI(length=14)})
        with pytest.raises(InvalidCandleCountError):
            engine.calculate("rsi", [1, 2, 3])

    def test_calculate_unknown_name(self, linear_prices):
        with pytest.raises(KeyError):
            IndicatorEngine().calculate("missing", linear_prices)

    def test_result_places(self):
        engine = IndicatorEngine({"roc": ROC(length=5)}, config=make_config(result_places=8))
        assert str(engine.calculate("roc", [7, 420, 420, 420, 10])) == "42.85714286"

    def test_result_places_beyond_precision(self):
        """Quantizing needs more digits than the configured precision holds"""
        engine = IndicatorEngine({"sma": SMA(length=3)}, config=make_config(result_places=8, precision=10))

        snapshot = engine.calculate_all([100, 200, 300])

        assert not snapshot.has_failures()
        assert str(snapshot["sma"].value) == "200.00000000"

    def test_precision(self):
        engine = IndicatorEngine({"sma": SMA(length=3)}, config=make_config(precision=4))
        assert engine.calculate("sma", [1, 1, 2]) == Decimal("1.333")

    def test_calculate_all(self, linear_prices):
        engine = IndicatorEngine({
            "sma_4": SMA(length=4),
            "ema_3": EMA(length=3),
            "rsi_30": RSI(length=30),
        })

        snapshot = engine.calculate_all(linear_prices)

        assert snapshot.sample_count == 20
        assert snapshot.values() == {"sma_4": Decimal("18.5"), "ema_3": Decimal(19)}
        assert snapshot.has_failures()
        assert isinstance(snapshot.failed()["rsi_30"], InvalidCandleCountError)
        assert "rsi_30" in snapshot
        assert not snapshot["rsi_30"].ok
        assert snapshot["rsi_30"].indicator == "rsi"

    def test_calculate_all_records_undefined_results(self):
        engine = IndicatorEngine({"stoch": Stoch(length=3), "sma": SMA(length=3)})

        snapshot = engine.calculate_all([5, 5, 5])

        assert isinstance(snapshot["stoch"].error, UndefinedResultError)
        assert snapshot["sma"].value == Decimal(5)

    def test_calculate_all_logs_each_reading(self, linear_prices):
        engine = IndicatorEngine({"sma_4": SMA(length=4), "rsi_30": RSI(length=30)})

        with patch("decimal_ta.engine.log_indicator_result") as log_result:
            engine.calculate_all(linear_prices)

        assert log_result.call_count == 2
        failed_call = log_result.call_args_list[1]
        assert failed_call.args[1] == "rsi_30"
        assert isinstance(failed_call.kwargs["error"], InvalidCandleCountError)
