from __future__ import annotations

import logging
from typing import Any, Dict, List

import pytest

from sales_metrics.analyzer import AnalysisOptions, analyze_sales_data, top_products
from sales_metrics.domain.models import SalesData, SellerReport

# Worked example: (20 * 1 - 5) * 5
EXPECTED_SINGLE_PROFIT = 75.0
EXPECTED_SINGLE_BONUS = 11.25
EXPECTED_SINGLE_REVENUE = 100.0

RANKED_ORDER = ["s2", "s3", "s4", "s5", "s1"]
RANKED_PROFITS = [50.0, 40.0, 30.0, 20.0, 10.0]
RANKED_BONUSES = [7.5, 4.0, 3.0, 1.0, 0.0]
TOP_PRODUCTS_LIMIT = 10


def _seller(seller_id: str) -> Dict[str, str]:
    return {"id": seller_id, "first_name": seller_id.upper(), "last_name": "Test"}


def _sale(seller_id: str, sku: str, sale_price: float, quantity: int = 1) -> Dict[str, Any]:
    return {
        "seller_id": seller_id,
        "total_amount": sale_price * quantity,
        "items": [{"sku": sku, "sale_price": sale_price, "quantity": quantity}],
    }


def _rates(reports: List[SellerReport]) -> List[float]:
    return [round(r.bonus / r.profit, 2) for r in reports]


def test_single_seller_worked_example(single_sale_data):
    reports = analyze_sales_data(single_sale_data)

    assert len(reports) == 1
    report = reports[0]
    assert report.seller_id == "s1"
    assert report.name == "A B"
    assert report.revenue == EXPECTED_SINGLE_REVENUE
    assert report.profit == EXPECTED_SINGLE_PROFIT
    assert report.sales_count == 1
    assert report.bonus == EXPECTED_SINGLE_BONUS
    assert [p.model_dump() for p in report.top_products] == [{"sku": "p1", "quantity": 5}]


def test_accepts_validated_sales_data(single_sale_data):
    data = SalesData.model_validate(single_sale_data)

    reports = analyze_sales_data(data)

    assert reports[0].profit == EXPECTED_SINGLE_PROFIT


def test_reports_ranked_by_profit_with_bonus_tiers(ranked_data):
    reports = analyze_sales_data(ranked_data)

    assert [r.seller_id for r in reports] == RANKED_ORDER
    assert [r.profit for r in reports] == RANKED_PROFITS
    assert [r.bonus for r in reports] == RANKED_BONUSES


def test_sellers_without_sales_are_excluded(ranked_data):
    reports = analyze_sales_data(ranked_data)

    assert "s6" not in {r.seller_id for r in reports}
    assert len(reports) <= len(ranked_data["sellers"])


def test_unknown_seller_record_is_dropped_without_side_effects(ranked_data):
    baseline = analyze_sales_data(
        {
            **ranked_data,
            "purchase_records": [
                r for r in ranked_data["purchase_records"] if r["seller_id"] != "unknown"
            ],
        }
    )

    reports = analyze_sales_data(ranked_data)

    assert [r.model_dump() for r in reports] == [r.model_dump() for r in baseline]
    matched = [r for r in ranked_data["purchase_records"] if r["seller_id"] != "unknown"]
    assert sum(r.sales_count for r in reports) == len(matched)


def test_unknown_seller_is_logged_at_debug(ranked_data, caplog):
    with caplog.at_level(logging.DEBUG, logger="sales_metrics.analyzer"):
        analyze_sales_data(ranked_data)

    skipped = [r for r in caplog.records if r.getMessage() == "Skipping record for unknown seller"]
    assert len(skipped) == 1
    assert skipped[0].seller_id == "unknown"


def test_unknown_sku_item_is_skipped_but_record_still_counts():
    data = {
        "sellers": [_seller("s1")],
        "products": [{"sku": "p1", "purchase_price": 2}],
        "purchase_records": [
            {
                "seller_id": "s1",
                "total_amount": 50,
                "items": [
                    {"sku": "missing", "sale_price": 100, "quantity": 3},
                    {"sku": "p1", "sale_price": 4, "quantity": 5},
                ],
            },
            {
                "seller_id": "s1",
                "total_amount": 30,
                "items": [{"sku": "missing", "sale_price": 30, "quantity": 1}],
            },
        ],
    }

    (report,) = analyze_sales_data(data)

    assert report.sales_count == 2
    assert report.revenue == 80.0
    assert report.profit == 10.0
    assert [p.sku for p in report.top_products] == ["p1"]


def test_revenue_uses_total_amount_not_items():
    data = {
        "sellers": [_seller("s1")],
        "products": [{"sku": "p1", "purchase_price": 1}],
        "purchase_records": [
            {
                "seller_id": "s1",
                "total_amount": 123.456,
                "items": [{"sku": "p1", "sale_price": 10, "quantity": 2, "discount": 50}],
            }
        ],
    }

    (report,) = analyze_sales_data(data)

    assert report.revenue == 123.46
    assert report.profit == 8.0


def test_discount_applies_and_null_discount_is_zero():
    data = {
        "sellers": [_seller("s1"), _seller("s2")],
        "products": [{"sku": "p1", "purchase_price": 50}],
        "purchase_records": [
            {
                "seller_id": "s1",
                "total_amount": 150,
                "items": [{"sku": "p1", "sale_price": 100, "quantity": 2, "discount": 25}],
            },
            {
                "seller_id": "s2",
                "total_amount": 100,
                "items": [{"sku": "p1", "sale_price": 100, "quantity": 1, "discount": None}],
            },
        ],
    }

    reports = {r.seller_id: r for r in analyze_sales_data(data)}

    assert reports["s1"].profit == 50.0
    assert reports["s2"].profit == 50.0


def test_single_qualifying_seller_gets_top_rate(single_sale_data):
    single_sale_data["sellers"].append(_seller("idle"))

    (report,) = analyze_sales_data(single_sale_data)

    assert report.bonus == round(EXPECTED_SINGLE_PROFIT * 0.15, 2)


@pytest.mark.parametrize(
    ("seller_count", "expected_rates"),
    [
        (2, [0.15, 0.10]),
        (3, [0.15, 0.10, 0.10]),
        (4, [0.15, 0.10, 0.10, 0.0]),
        (6, [0.15, 0.10, 0.10, 0.05, 0.05, 0.0]),
    ],
)
def test_bonus_rates_by_rank(seller_count, expected_rates):
    seller_ids = [f"s{i}" for i in range(seller_count)]
    data = {
        "sellers": [_seller(s) for s in seller_ids],
        "products": [{"sku": "p1", "purchase_price": 0}],
        # profit descends with the seller index: 100, 90, 80, ...
        "purchase_records": [_sale(s, "p1", 100 - 10 * i) for i, s in enumerate(seller_ids)],
    }

    reports = analyze_sales_data(data)

    assert [r.seller_id for r in reports] == seller_ids
    assert _rates(reports) == expected_rates


def test_profit_ties_keep_seller_input_order():
    products = [{"sku": "p1", "purchase_price": 0}]
    records = [_sale("b", "p1", 10), _sale("a", "p1", 10)]

    forward = analyze_sales_data(
        {"sellers": [_seller("a"), _seller("b")], "products": products, "purchase_records": records}
    )
    backward = analyze_sales_data(
        {"sellers": [_seller("b"), _seller("a")], "products": products, "purchase_records": records}
    )

    assert [r.seller_id for r in forward] == ["a", "b"]
    assert [r.seller_id for r in backward] == ["b", "a"]


def test_ranking_uses_unrounded_profit():
    data = {
        "sellers": [_seller("low"), _seller("high")],
        "products": [{"sku": "p1", "purchase_price": 0}],
        "purchase_records": [_sale("low", "p1", 10.001), _sale("high", "p1", 10.004)],
    }

    reports = analyze_sales_data(data)

    assert [r.seller_id for r in reports] == ["high", "low"]
    assert reports[0].profit == reports[1].profit == 10.0


def test_top_products_limited_sorted_and_ties_in_first_seen_order():
    quantities = [1, 5, 5, 3, 7, 2, 2, 9, 4, 6, 8, 1]
    skus = [f"p{i:02d}" for i in range(1, len(quantities) + 1)]
    data = {
        "sellers": [_seller("s1")],
        "products": [{"sku": sku, "purchase_price": 0} for sku in skus],
        "purchase_records": [
            {
                "seller_id": "s1",
                "total_amount": 0,
                "items": [
                    {"sku": sku, "sale_price": 1, "quantity": qty}
                    for sku, qty in zip(skus, quantities)
                ],
            },
            {
                "seller_id": "s1",
                "total_amount": 0,
                "items": [{"sku": "p01", "sale_price": 1, "quantity": 10}],
            },
        ],
    }

    (report,) = analyze_sales_data(data)

    assert len(report.top_products) == TOP_PRODUCTS_LIMIT
    assert [p.sku for p in report.top_products] == [
        "p01", "p08", "p11", "p05", "p10", "p02", "p03", "p09", "p04", "p06",
    ]
    assert report.top_products[0].quantity == 11
    sold = [p.quantity for p in report.top_products]
    assert sold == sorted(sold, reverse=True)


def test_top_products_limit_option(ranked_data):
    ranked_data["purchase_records"].append(_sale("s2", "p2", 6, 3))

    reports = analyze_sales_data(ranked_data, AnalysisOptions(top_products_limit=1))

    top = next(r for r in reports if r.seller_id == "s2")
    assert [p.model_dump() for p in top.top_products] == [{"sku": "p2", "quantity": 3}]


def test_top_products_helper_keeps_insertion_order_on_ties():
    result = top_products({"x": 2, "y": 3, "z": 2}, limit=3)

    assert [(p.sku, p.quantity) for p in result] == [("y", 3), ("x", 2), ("z", 2)]


def test_negative_profit_yields_negative_bonus():
    data = {
        "sellers": [_seller("s1")],
        "products": [{"sku": "p1", "purchase_price": 30}],
        "purchase_records": [_sale("s1", "p1", 10, 2)],
    }

    (report,) = analyze_sales_data(data)

    assert report.profit == -40.0
    assert report.bonus == -6.0


def test_input_is_not_mutated(ranked_data):
    before = repr(ranked_data)

    analyze_sales_data(ranked_data)

    assert repr(ranked_data) == before


def test_huge_amounts_are_reported_without_error(single_sale_data):
    single_sale_data["purchase_records"][0]["total_amount"] = 1e27

    (report,) = analyze_sales_data(single_sale_data)

    assert report.revenue == 1e27
    assert report.profit == EXPECTED_SINGLE_PROFIT
