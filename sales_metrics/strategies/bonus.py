"""
Built-in bonus strategy: rank-based tiers over the profit-sorted sellers.

| rank        | rate |
|-------------|------|
| 0 (top)     | 0.15 |
| 1, 2        | 0.10 |
| last        | 0.00 |
| any other   | 0.05 |

Rules are checked top to bottom, so a lone seller is "top" and not "last".
"""

from __future__ import annotations

from sales_metrics.domain.accumulator import SellerAccumulator

TOP_RATE = 0.15
RUNNER_UP_RATE = 0.10
LAST_RATE = 0.0
DEFAULT_RATE = 0.05


def calculate_bonus_by_profit(index: int, total: int, seller: SellerAccumulator) -> float:
    del seller  # rate depends on rank only
    if index == 0:
        return TOP_RATE
    if index in (1, 2):
        return RUNNER_UP_RATE
    if index == total - 1:
        return LAST_RATE
    return DEFAULT_RATE


__all__ = [
    "DEFAULT_RATE",
    "LAST_RATE",
    "RUNNER_UP_RATE",
    "TOP_RATE",
    "calculate_bonus_by_profit",
]
