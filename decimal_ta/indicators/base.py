"""Indicator capability contract shared by simple and composite formulas."""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, ClassVar, Optional, Sequence

from ..errors import IndicatorNotSetError, InvalidLengthError


class Indicator(ABC):
    """
    Base class for every indicator configuration.

    Implementations are immutable descriptors: they hold parameters only and
    compute from whatever price sequence is passed to ``calc``. Composite
    indicators embed other ``Indicator`` values and never depend on their
    concrete kind.
    """

    name: ClassVar[str] = ""

    @abstractmethod
    def validate(self) -> None:
        """
        Check configuration without touching price data.

        Raises:
            IndicatorError: Specific subclass per violated requirement
        """
        pass

    @abstractmethod
    def calc(self, prices: Sequence[Any]) -> Decimal:
        """
        Calculate the indicator value over the trailing ``count()`` samples.

        Args:
            prices: Price samples, oldest first

        Returns:
            Indicator value
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Minimum number of trailing samples ``calc`` requires."""
        pass

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Tagged serialized form of this configuration."""
        pass


def require_indicator(indicator: Optional[Indicator], field: str) -> Indicator:
    """Return an embedded indicator or raise if the slot is empty."""
    if indicator is None:
        raise IndicatorNotSetError(f"Embedded indicator '{field}' is not set", field=field)
    return indicator


def check_length(length: int, indicator: str) -> None:
    """Raise ``InvalidLengthError`` unless ``length`` is a positive integer."""
    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        raise InvalidLengthError(
            f"{indicator} length must be a positive integer, got {length!r}",
            length=length,
            indicator=indicator,
        )
