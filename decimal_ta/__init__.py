"""
Decimal TA - Technical Analysis Indicators on Exact Decimals

Moving averages and oscillators computed over price series with
``decimal.Decimal`` arithmetic. Every indicator shares one contract
(``validate``, ``calc``, ``count``) so composite indicators can embed any
other indicator.
"""

from .errors import (
    IndicatorError,
    IndicatorNotSetError,
    InvalidConfigError,
    InvalidCandleCountError,
    InvalidLengthError,
    InvalidTypeError,
    MalformedDefinitionError,
    MalformedPriceError,
    UndefinedResultError,
)
from .functions import (
    calc_aroon, calc_cci, calc_dema, calc_ema, calc_ema_next, calc_hma, calc_macd,
    calc_roc, calc_rsi, calc_sma, calc_stoch, calc_wma,
    count_aroon, count_cci, count_dema, count_ema, count_hma, count_macd,
    count_roc, count_rsi, count_sma, count_stoch, count_wma,
    validate_aroon, validate_cci, validate_dema, validate_ema, validate_hma, validate_macd,
    validate_roc, validate_rsi, validate_sma, validate_stoch, validate_wma,
)
from .indicators import (
    CCI, DEMA, EMA, HMA, MACD, ROC, RSI, SMA, WMA,
    Aroon, Indicator, Stoch, Trend,
    from_dict, from_json, to_dict, to_json,
)

__version__ = "0.1.0"
__author__ = "Decimal TA Team"
