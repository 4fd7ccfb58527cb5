"""
Strategies package for seller sales metrics.

This module re-exports the calculation interfaces, the built-in strategies and
the name registry so downstream code can import from `sales_metrics.strategies`
directly.
"""

from sales_metrics.strategies.abstract import BonusStrategy, RevenueStrategy
from sales_metrics.strategies.bonus import calculate_bonus_by_profit
from sales_metrics.strategies.registry import (
    available_bonus_strategies,
    available_revenue_strategies,
    resolve_bonus_strategy,
    resolve_revenue_strategy,
)
from sales_metrics.strategies.revenue import calculate_simple_revenue

__all__ = [
    # Interfaces
    "BonusStrategy",
    "RevenueStrategy",
    # Built-ins
    "calculate_bonus_by_profit",
    "calculate_simple_revenue",
    # Registry
    "available_bonus_strategies",
    "available_revenue_strategies",
    "resolve_bonus_strategy",
    "resolve_revenue_strategy",
]
