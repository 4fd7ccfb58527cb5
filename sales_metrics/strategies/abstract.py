"""
Pluggable calculation interfaces for the sales aggregator.

Two strategies drive the numbers the analyzer produces:

- a revenue strategy returns the net contribution (profit) of one purchase
  line given the matching product card;
- a bonus strategy returns the bonus *rate* for a seller given its 0-based
  rank in the profit-sorted list and the number of ranked sellers.

Plain functions satisfy these protocols; nothing needs to subclass them.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from sales_metrics.domain.accumulator import SellerAccumulator
from sales_metrics.domain.models import Item, Product


@runtime_checkable
class RevenueStrategy(Protocol):
    """
    Compute the profit contribution of a single purchase line.

    Parameters
    ----------
    item : Item
        The purchase line (sale price, quantity, discount percentage).
    product : Product
        The product card matched by sku (purchase price).

    Returns
    -------
    float
        Unrounded line profit; the analyzer sums these per seller.
    """

    def __call__(self, item: Item, product: Product) -> float: ...


@runtime_checkable
class BonusStrategy(Protocol):
    """
    Compute the bonus rate for a ranked seller.

    Parameters
    ----------
    index : int
        0-based rank in the profit-descending list.
    total : int
        Number of ranked sellers (sellers with at least one sale).
    seller : SellerAccumulator
        The seller's accumulated totals.

    Returns
    -------
    float
        Fractional rate (0.15 means 15%) applied to the seller's profit.
    """

    def __call__(self, index: int, total: int, seller: SellerAccumulator) -> float: ...


__all__ = [
    "BonusStrategy",
    "RevenueStrategy",
]
