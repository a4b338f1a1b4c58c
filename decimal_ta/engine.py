"""
Named indicator evaluation engine.

Holds a set of validated, named indicator configurations and evaluates all
of them over a price sequence under the configured decimal context.
"""

from decimal import Decimal
from typing import Any, Mapping, Optional, Sequence

from .config.context import decimal_context, quantize_result
from .config.defaults import DefaultConfig, get_default_config
from .config.loader import ConfigLoader
from .errors import IndicatorError
from .indicators.base import Indicator
from .logging.config import configure_logging, get_engine_logger, log_indicator_result
from .models.readings import IndicatorReading, IndicatorSnapshot

logger = get_engine_logger(__name__)


class IndicatorEngine:
    """
    Evaluates a set of named indicators over shared price history.

    Every indicator is validated when it is added, so ``calculate`` only has
    to deal with price-dependent failures.
    """

    def __init__(self, indicators: Optional[Mapping[str, Indicator]] = None,
                 config: Optional[DefaultConfig] = None):
        self.config = config or get_default_config()
        self._indicators: dict[str, Indicator] = {}

        for name, indicator in (indicators or {}).items():
            self.add(name, indicator)

    @classmethod
    def from_config(cls, loader: Optional[ConfigLoader] = None,
                    overrides: Optional[dict[str, Any]] = None) -> "IndicatorEngine":
        """
        Create an engine from settings.yaml and indicators.yaml.

        The logging section of the merged settings is applied to structlog.

        Raises:
            InvalidConfigError: If the merged settings fail validation
        """
        loader = loader or ConfigLoader.create()
        config = loader.build_config(overrides)
        configure_logging(level=config.logging.level, format_json=config.logging.format_json)

        engine = cls(loader.load_indicators(), config)

        logger.info("Indicator engine loaded",
                    config_dir=str(loader.config_dir),
                    indicators=engine.names())
        return engine

    def add(self, name: str, indicator: Indicator) -> None:
        """
        Validate and register an indicator under ``name``.

        Raises:
            IndicatorError: Validation failure, unchanged
        """
        indicator.validate()
        self._indicators[name] = indicator
        logger.debug("Indicator added", indicator_name=name, indicator=indicator.name,
                     count=indicator.count())

    def remove(self, name: str) -> None:
        """Remove a named indicator"""
        del self._indicators[name]

    def names(self) -> list[str]:
        return list(self._indicators)

    def get(self, name: str) -> Indicator:
        return self._indicators[name]

    def get_warmup_period(self) -> int:
        """Get the minimum number of samples needed for every indicator"""
        return max((indicator.count() for indicator in self._indicators.values()), default=0)

    def is_warmed_up(self, prices: Sequence[Any]) -> bool:
        """Check if the price history is long enough for every indicator"""
        return len(prices) >= self.get_warmup_period()

    def calculate(self, name: str, prices: Sequence[Any]) -> Decimal:
        """
        Calculate a single named indicator.

        Raises:
            KeyError: If no indicator is registered under ``name``
            IndicatorError: Calculation failure, unchanged
        """
        indicator = self._indicators[name]

        with decimal_context(self.config.decimal):
            value = indicator.calc(prices)
            return quantize_result(value, self.config.output.result_places)

    def calculate_all(self, prices: Sequence[Any]) -> IndicatorSnapshot:
        """
        Calculate every registered indicator.

        Failures are recorded per reading instead of aborting the batch.

        Args:
            prices: Price samples, oldest first

        Returns:
            IndicatorSnapshot with one reading per indicator
        """
        snapshot = IndicatorSnapshot(sample_count=len(prices))

        for name, indicator in self._indicators.items():
            try:
                value = self.calculate(name, prices)
            except IndicatorError as e:
                snapshot.readings[name] = IndicatorReading(name=name, indicator=indicator.name, error=e)
                log_indicator_result(logger, name, indicator.name, error=e,
                                     context={"sample_count": len(prices)})
            else:
                snapshot.readings[name] = IndicatorReading(name=name, indicator=indicator.name, value=value)
                log_indicator_result(logger, name, indicator.name, value=value)

        return snapshot
