"""
Money rounding for report output.

Python's built-in `round()` rounds half to even on the binary float value, so
`round(2.675, 2)` gives 2.67. Reports instead round half away from zero on the
float's shortest decimal representation: `round_money(2.675) == 2.68` and
`round_money(-0.125) == -0.13`.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext


def round_money(value: float, decimals: int = 2) -> float:
    """Round half away from zero to `decimals` places and return a float."""
    value = float(value)
    if not math.isfinite(value):
        return value
    exact = Decimal(repr(value))
    quantum = Decimal(1).scaleb(-decimals)
    with localcontext() as ctx:
        # enough digits for the integer part plus the kept decimals
        ctx.prec = max(exact.adjusted(), 0) + decimals + 2
        rounded = exact.quantize(quantum, rounding=ROUND_HALF_UP)
    # normalize -0.0 from tiny negative values
    return float(rounded) + 0.0


__all__ = ["round_money"]
