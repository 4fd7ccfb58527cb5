"""
Mutable per-seller running totals.

An accumulator is created for every seller while indexing, mutated only
during the single aggregation pass, and read-only once sellers are ranked.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from sales_metrics.domain.models import Seller


@dataclass
class SellerAccumulator:
    """
    Running totals for one seller.

    `products_sold` maps sku -> quantity and preserves first-seen sku order,
    which is the tie-break for top products.
    """

    seller: Seller
    revenue: float = field(default=0.0)
    profit: float = field(default=0.0)
    sales_count: int = field(default=0)
    products_sold: Dict[str, int] = field(default_factory=dict)

    @property
    def seller_id(self) -> str:
        return self.seller.id

    def add_quantity(self, sku: str, quantity: int) -> None:
        self.products_sold[sku] = self.products_sold.get(sku, 0) + quantity


__all__ = ["SellerAccumulator"]
