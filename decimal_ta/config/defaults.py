"""Default configuration parameters for indicator evaluation."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DecimalParams:
    """Decimal arithmetic context parameters."""
    precision: int = 28                              # Significant digits
    rounding: str = "ROUND_HALF_EVEN"                # decimal module rounding mode


@dataclass(frozen=True)
class OutputParams:
    """Result presentation parameters."""
    result_places: Optional[int] = None              # Quantize results, None keeps full precision


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    decimal: DecimalParams
    output: OutputParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        decimal=DecimalParams(),
        output=OutputParams(),
        logging=LoggingParams(),
    )
