"""
Synthetic dataset generator for seller sales metrics.

Emits a deterministic JSON document (sellers, products, purchase_records) that
`sales-metrics analyze` can read. A small share of records and items point at
unknown sellers/skus so the skip policy is exercised on realistic data.
"""

from __future__ import annotations

import json
import random
import sys
import time
from pathlib import Path
from typing import Any, Dict, List

import typer

app = typer.Typer(help="Generate a synthetic sales dataset as JSON.")

FIRST_NAMES = ["Alexey", "Maria", "Ivan", "Olga", "Dmitry", "Elena", "Sergey", "Anna"]
LAST_NAMES = ["Petrov", "Ivanova", "Smirnov", "Kuznetsova", "Popov", "Sokolova"]
MAX_ITEMS_PER_RECORD = 5
ORPHAN_RATE = 0.02


def _generate_dataset(
    sellers: int, products: int, records: int, seed: int
) -> Dict[str, List[Dict[str, Any]]]:
    rng = random.Random(seed)

    seller_rows = [
        {
            "id": f"seller_{i}",
            "first_name": rng.choice(FIRST_NAMES),
            "last_name": rng.choice(LAST_NAMES),
        }
        for i in range(1, sellers + 1)
    ]
    product_rows = [
        {
            "sku": f"SKU_{i:03d}",
            "purchase_price": round(rng.uniform(1, 500), 2),
        }
        for i in range(1, products + 1)
    ]

    record_rows: List[Dict[str, Any]] = []
    for _ in range(records):
        if rng.random() < ORPHAN_RATE:
            seller_id = "seller_unknown"
        else:
            seller_id = rng.choice(seller_rows)["id"]

        items: List[Dict[str, Any]] = []
        total_amount = 0.0
        for _ in range(rng.randint(1, MAX_ITEMS_PER_RECORD)):
            if rng.random() < ORPHAN_RATE:
                sku, cost = "SKU_UNKNOWN", 0.0
            else:
                product = rng.choice(product_rows)
                sku, cost = product["sku"], product["purchase_price"]
            sale_price = round(cost * rng.uniform(0.9, 2.0) + 1, 2)
            quantity = rng.randint(1, 10)
            discount = rng.choice([0, 0, 0, 5, 10, 25])
            total_amount += sale_price * quantity * (1 - discount / 100)
            items.append(
                {
                    "sku": sku,
                    "sale_price": sale_price,
                    "quantity": quantity,
                    "discount": discount,
                }
            )

        record_rows.append(
            {
                "seller_id": seller_id,
                "total_amount": round(total_amount, 2),
                "items": items,
            }
        )

    return {"sellers": seller_rows, "products": product_rows, "purchase_records": record_rows}


def _write_dataset(path: Path, dataset: Dict[str, List[Dict[str, Any]]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(dataset, f, indent=2, ensure_ascii=False)


@app.command()
def main(
    sellers: int = typer.Option(5, "--sellers", min=1, help="Number of sellers."),
    products: int = typer.Option(20, "--products", min=1, help="Number of products."),
    records: int = typer.Option(
        1_000,
        "--records",
        "-r",
        min=1,
        help="Number of purchase records.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path = typer.Option(
        Path("data/dataset.json"),
        "--output",
        "-o",
        help="JSON output path.",
    ),
) -> None:
    """
    Generate a synthetic dataset and write it as JSON.
    """
    start = time.perf_counter()
    typer.echo(
        f"Generating {records:,} records for {sellers} sellers / {products} products "
        f"-> {output} (seed={seed})"
    )
    dataset = _generate_dataset(sellers=sellers, products=products, records=records, seed=seed)
    _write_dataset(output, dataset)
    typer.echo(f"Dataset written in {time.perf_counter() - start:.2f}s.")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
