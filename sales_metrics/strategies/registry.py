"""
Name-based registry of the built-in strategies.

The CLI and settings refer to strategies by name; the analyzer resolves a
name through this registry or accepts a callable directly.
"""

from __future__ import annotations

from typing import Dict, List

from sales_metrics.exceptions import InvalidInputError
from sales_metrics.strategies.abstract import BonusStrategy, RevenueStrategy
from sales_metrics.strategies.bonus import calculate_bonus_by_profit
from sales_metrics.strategies.revenue import calculate_simple_revenue


def _revenue_strategies() -> Dict[str, RevenueStrategy]:
    """Registry of available revenue strategies."""
    return {
        "simple": calculate_simple_revenue,
    }


def _bonus_strategies() -> Dict[str, BonusStrategy]:
    """Registry of available bonus strategies."""
    return {
        "by_profit": calculate_bonus_by_profit,
    }


def available_revenue_strategies() -> List[str]:
    """List available revenue strategy names."""
    return sorted(_revenue_strategies().keys())


def available_bonus_strategies() -> List[str]:
    """List available bonus strategy names."""
    return sorted(_bonus_strategies().keys())


def resolve_revenue_strategy(name: str) -> RevenueStrategy:
    strategies = _revenue_strategies()
    if name not in strategies:
        raise InvalidInputError(
            f"Unknown revenue strategy '{name}'. Available: {', '.join(strategies)}"
        )
    return strategies[name]


def resolve_bonus_strategy(name: str) -> BonusStrategy:
    strategies = _bonus_strategies()
    if name not in strategies:
        raise InvalidInputError(
            f"Unknown bonus strategy '{name}'. Available: {', '.join(strategies)}"
        )
    return strategies[name]


__all__ = [
    "available_bonus_strategies",
    "available_revenue_strategies",
    "resolve_bonus_strategy",
    "resolve_revenue_strategy",
]
