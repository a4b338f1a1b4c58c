"""Decimal context handling for indicator computations."""

import decimal
from contextlib import contextmanager
from decimal import Decimal
from typing import Iterator, Optional

from .defaults import DecimalParams


@contextmanager
def decimal_context(params: Optional[DecimalParams] = None) -> Iterator[decimal.Context]:
    """
    Apply precision and rounding for the duration of a computation.

    Contexts are thread-local, so concurrent evaluations do not interfere.
    """
    params = params or DecimalParams()

    with decimal.localcontext() as ctx:
        ctx.prec = params.precision
        ctx.rounding = getattr(decimal, params.rounding)
        yield ctx


def quantize_result(value: Decimal, places: Optional[int]) -> Decimal:
    """
    Round a result to a fixed number of decimal places.

    The current rounding mode applies. Precision is widened when the result
    needs more digits than the context holds, so large values never fail.
    """
    if places is None:
        return value

    with decimal.localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + places + 1)
        return value.quantize(Decimal(1).scaleb(-places))
