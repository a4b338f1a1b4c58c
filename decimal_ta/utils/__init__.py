"""
Utility functions module.

Price series helpers shared by every indicator:
- Prices are always consumed as ``decimal.Decimal``, never binary floats
- Formulas never compute on a caller-supplied sequence directly; they take
  the trailing window produced by ``resize``
"""

from .series import as_decimal, mean_deviation, resize, to_decimals

__all__ = ["as_decimal", "mean_deviation", "resize", "to_decimals"]
