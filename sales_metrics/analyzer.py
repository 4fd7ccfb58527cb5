"""
Seller sales aggregation: index, accumulate, rank, assign bonuses, report.

Usage:
    from sales_metrics.analyzer import AnalysisOptions, analyze_sales_data

    reports = analyze_sales_data(data)
    reports = analyze_sales_data(data, AnalysisOptions(top_products_limit=5))

Policies:
- Revenue is the sum of each matched record's `total_amount`. It is never
  recomputed from the record's items.
- A record whose `seller_id` is unknown, or an item whose `sku` is unknown,
  is skipped without raising. Skips are counted and logged at DEBUG.
- Sellers are ranked by unrounded profit, descending. Ties keep the order of
  the input sellers list.
- Rounding (see `round_money`) happens only when building the reports.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from sales_metrics.domain.accumulator import SellerAccumulator
from sales_metrics.domain.models import Product, SalesData, SellerReport, TopProduct
from sales_metrics.exceptions import InvalidInputError
from sales_metrics.strategies.abstract import BonusStrategy, RevenueStrategy
from sales_metrics.strategies.registry import resolve_bonus_strategy, resolve_revenue_strategy
from sales_metrics.utils.logging import get_logger
from sales_metrics.utils.numbers import round_money

log = get_logger(__name__)

REQUIRED_COLLECTIONS = ("sellers", "products", "purchase_records")
DEFAULT_TOP_PRODUCTS_LIMIT = 10


@dataclass(frozen=True)
class AnalysisOptions:
    """
    Optional knobs for `analyze_sales_data`.

    Strategies may be given as a callable or as a registered name
    (see `sales_metrics.strategies.registry`).
    """

    calculate_revenue: Union[RevenueStrategy, str] = "simple"
    calculate_bonus: Union[BonusStrategy, str] = "by_profit"
    top_products_limit: int = DEFAULT_TOP_PRODUCTS_LIMIT


@dataclass(frozen=True)
class _ResolvedOptions:
    calculate_revenue: RevenueStrategy
    calculate_bonus: BonusStrategy
    top_products_limit: int


def _coerce_data(data: Any) -> SalesData:
    if isinstance(data, SalesData):
        sales_data = data
    elif isinstance(data, Mapping):
        try:
            sales_data = SalesData.model_validate(dict(data))
        except ValidationError as exc:
            raise InvalidInputError(f"Invalid input data: {exc}") from exc
    else:
        raise InvalidInputError(
            f"Invalid input data: expected a mapping or SalesData, got {type(data).__name__}"
        )

    for name in REQUIRED_COLLECTIONS:
        if not getattr(sales_data, name):
            raise InvalidInputError(f"Invalid input data: '{name}' must be a non-empty list")
    return sales_data


def _coerce_options(options: Any) -> AnalysisOptions:
    if options is None:
        return AnalysisOptions()
    if isinstance(options, AnalysisOptions):
        return options
    if isinstance(options, Mapping):
        known = {f.name for f in fields(AnalysisOptions)}
        unknown = sorted(map(repr, set(options) - known))
        if unknown:
            raise InvalidInputError(f"Invalid options: unknown keys {', '.join(unknown)}")
        return AnalysisOptions(**options)
    raise InvalidInputError(
        f"Invalid options: expected a mapping or AnalysisOptions, got {type(options).__name__}"
    )


def _resolve_options(options: AnalysisOptions) -> _ResolvedOptions:
    revenue = options.calculate_revenue
    if isinstance(revenue, str):
        revenue = resolve_revenue_strategy(revenue)
    elif not callable(revenue):
        raise InvalidInputError("Invalid options: 'calculate_revenue' must be callable")

    bonus = options.calculate_bonus
    if isinstance(bonus, str):
        bonus = resolve_bonus_strategy(bonus)
    elif not callable(bonus):
        raise InvalidInputError("Invalid options: 'calculate_bonus' must be callable")

    limit = options.top_products_limit
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise InvalidInputError("Invalid options: 'top_products_limit' must be a positive int")

    return _ResolvedOptions(
        calculate_revenue=revenue, calculate_bonus=bonus, top_products_limit=limit
    )


def _accumulate(
    data: SalesData, calculate_revenue: RevenueStrategy
) -> List[SellerAccumulator]:
    """
    Single pass over purchase records in input order.

    Returns accumulators in sellers-list order; a duplicated seller id keeps
    the position of its first occurrence and the card of its last.
    """
    product_index: Dict[str, Product] = {product.sku: product for product in data.products}
    seller_index: Dict[str, SellerAccumulator] = {
        seller.id: SellerAccumulator(seller=seller) for seller in data.sellers
    }

    skipped_records = 0
    skipped_items = 0
    for record in data.purchase_records:
        accumulator = seller_index.get(record.seller_id)
        if accumulator is None:
            skipped_records += 1
            log.debug(
                "Skipping record for unknown seller", extra={"seller_id": record.seller_id}
            )
            continue

        accumulator.sales_count += 1
        accumulator.revenue += record.total_amount

        for item in record.items:
            product = product_index.get(item.sku)
            if product is None:
                skipped_items += 1
                log.debug(
                    "Skipping item for unknown sku",
                    extra={"seller_id": record.seller_id, "sku": item.sku},
                )
                continue
            accumulator.profit += calculate_revenue(item, product)
            accumulator.add_quantity(item.sku, item.quantity)

    log.info(
        "Purchase records accumulated",
        extra={
            "records": len(data.purchase_records),
            "skipped_records": skipped_records,
            "skipped_items": skipped_items,
        },
    )
    return list(seller_index.values())


def rank_sellers(accumulators: List[SellerAccumulator]) -> List[SellerAccumulator]:
    """Sellers with at least one sale, profit descending; ties keep input order."""
    active = [acc for acc in accumulators if acc.sales_count > 0]
    return sorted(active, key=lambda acc: acc.profit, reverse=True)


def top_products(
    products_sold: Dict[str, int], limit: int = DEFAULT_TOP_PRODUCTS_LIMIT
) -> List[TopProduct]:
    """Top skus by quantity sold; ties keep first-seen order."""
    ordered = sorted(products_sold.items(), key=lambda entry: entry[1], reverse=True)
    return [TopProduct(sku=sku, quantity=quantity) for sku, quantity in ordered[:limit]]


def _build_report(accumulator: SellerAccumulator, bonus_rate: float, limit: int) -> SellerReport:
    return SellerReport(
        seller_id=accumulator.seller_id,
        name=accumulator.seller.full_name,
        revenue=round_money(accumulator.revenue),
        profit=round_money(accumulator.profit),
        sales_count=accumulator.sales_count,
        top_products=top_products(accumulator.products_sold, limit),
        bonus=round_money(bonus_rate * accumulator.profit),
    )


def analyze_sales_data(
    data: Union[SalesData, Mapping[str, Any]],
    options: Optional[Union[AnalysisOptions, Mapping[str, Any]]] = None,
) -> List[SellerReport]:
    """
    Compute per-seller revenue, profit, bonus and top products.

    Parameters
    ----------
    data : SalesData | Mapping
        Object with non-empty `sellers`, `products` and `purchase_records`.
    options : AnalysisOptions | Mapping | None
        Strategy overrides and top products limit.

    Returns
    -------
    List[SellerReport]
        One report per seller with at least one sale, profit descending.

    Raises
    ------
    InvalidInputError
        If a collection is missing or empty, the data fails validation, or the
        options are malformed. Raised before any aggregation happens.
    """
    sales_data = _coerce_data(data)
    resolved = _resolve_options(_coerce_options(options))

    accumulators = _accumulate(sales_data, resolved.calculate_revenue)
    ranked = rank_sellers(accumulators)

    total = len(ranked)
    reports = [
        _build_report(
            accumulator,
            resolved.calculate_bonus(index, total, accumulator),
            resolved.top_products_limit,
        )
        for index, accumulator in enumerate(ranked)
    ]

    log.info("Sellers ranked", extra={"sellers": len(accumulators), "ranked": total})
    return reports


__all__ = [
    "AnalysisOptions",
    "analyze_sales_data",
    "rank_sellers",
    "top_products",
]
