"""
Function-style shortcuts for every indicator.

``calc_*`` builds the configuration, validates it and calculates.
``validate_*`` and ``count_*`` build the configuration and delegate.
"""

from decimal import Decimal
from typing import Any, Optional, Sequence, Union

from .indicators.base import Indicator
from .indicators.moving_average import DEMA, EMA, HMA, SMA, WMA
from .indicators.oscillator import CCI, MACD, ROC, RSI, Aroon, Stoch, Trend
from .utils.series import as_decimal


def _calc(indicator: Indicator, prices: Sequence[Any]) -> Decimal:
    indicator.validate()
    return indicator.calc(prices)


# Aroon

def calc_aroon(prices: Sequence[Any], trend: Union[Trend, str], length: int) -> Decimal:
    return _calc(Aroon(trend=trend, length=length), prices)


def validate_aroon(trend: Union[Trend, str], length: int) -> None:
    Aroon(trend=trend, length=length).validate()


def count_aroon(trend: Union[Trend, str], length: int) -> int:
    return Aroon(trend=trend, length=length).count()


# CCI

def calc_cci(prices: Sequence[Any], indicator: Optional[Indicator]) -> Decimal:
    return _calc(CCI(indicator=indicator), prices)


def validate_cci(indicator: Optional[Indicator]) -> None:
    CCI(indicator=indicator).validate()


def count_cci(indicator: Optional[Indicator]) -> int:
    return CCI(indicator=indicator).count()


# DEMA

def calc_dema(prices: Sequence[Any], length: int) -> Decimal:
    return _calc(DEMA(length=length), prices)


def validate_dema(length: int) -> None:
    DEMA(length=length).validate()


def count_dema(length: int) -> int:
    return DEMA(length=length).count()


# EMA

def calc_ema(prices: Sequence[Any], length: int) -> Decimal:
    return _calc(EMA(length=length), prices)


def calc_ema_next(previous: Any, sample: Any, length: int) -> Decimal:
    """Fold one sample into a previous EMA value."""
    ema = EMA(length=length)
    ema.validate()
    return ema.calc_next(as_decimal(previous), as_decimal(sample))


def validate_ema(length: int) -> None:
    EMA(length=length).validate()


def count_ema(length: int) -> int:
    return EMA(length=length).count()


# HMA

def calc_hma(prices: Sequence[Any], wma: Optional[WMA]) -> Decimal:
    return _calc(HMA(wma=wma), prices)


def validate_hma(wma: Optional[WMA]) -> None:
    HMA(wma=wma).validate()


def count_hma(wma: Optional[WMA]) -> int:
    return HMA(wma=wma).count()


# MACD

def calc_macd(prices: Sequence[Any], indicator1: Optional[Indicator],
              indicator2: Optional[Indicator]) -> Decimal:
    return _calc(MACD(indicator1=indicator1, indicator2=indicator2), prices)


def validate_macd(indicator1: Optional[Indicator], indicator2: Optional[Indicator]) -> None:
    MACD(indicator1=indicator1, indicator2=indicator2).validate()


def count_macd(indicator1: Optional[Indicator], indicator2: Optional[Indicator]) -> int:
    return MACD(indicator1=indicator1, indicator2=indicator2).count()


# ROC

def calc_roc(prices: Sequence[Any], length: int) -> Decimal:
    return _calc(ROC(length=length), prices)


def validate_roc(length: int) -> None:
    ROC(length=length).validate()


def count_roc(length: int) -> int:
    return ROC(length=length).count()


# RSI

def calc_rsi(prices: Sequence[Any], length: int) -> Decimal:
    return _calc(RSI(length=length), prices)


def validate_rsi(length: int) -> None:
    RSI(length=length).validate()


def count_rsi(length: int) -> int:
    return RSI(length=length).count()


# SMA

def calc_sma(prices: Sequence[Any], length: int) -> Decimal:
    return _calc(SMA(length=length), prices)


def validate_sma(length: int) -> None:
    SMA(length=length).validate()


def count_sma(length: int) -> int:
    return SMA(length=length).count()


# Stochastic

def calc_stoch(prices: Sequence[Any], length: int) -> Decimal:
    return _calc(Stoch(length=length), prices)


def validate_stoch(length: int) -> None:
    Stoch(length=length).validate()


def count_stoch(length: int) -> int:
    return Stoch(length=length).count()


# WMA

def calc_wma(prices: Sequence[Any], length: int) -> Decimal:
    return _calc(WMA(length=length), prices)


def validate_wma(length: int) -> None:
    WMA(length=length).validate()


def count_wma(length: int) -> int:
    return WMA(length=length).count()
