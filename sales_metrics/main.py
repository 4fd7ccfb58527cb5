from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import typer

from sales_metrics.analyzer import AnalysisOptions, analyze_sales_data
from sales_metrics.config import get_settings
from sales_metrics.exceptions import InvalidInputError
from sales_metrics.loader import load_sales_data
from sales_metrics.reporter import print_reports
from sales_metrics.strategies import available_bonus_strategies, available_revenue_strategies
from sales_metrics.utils.logging import configure_logging, get_logger
from sales_metrics.utils.profiler import profile_block

app = typer.Typer(help="Seller sales metrics CLI.")
log = get_logger(__name__)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} json_logs={settings.log_json} | "
        f"top_products={settings.top_products_limit} revenue={settings.revenue_strategy} "
        f"bonus={settings.bonus_strategy}"
    )


@app.command()
def strategies() -> None:
    """
    List registered revenue and bonus strategies.
    """
    typer.echo("Revenue strategies: " + ", ".join(available_revenue_strategies()))
    typer.echo("Bonus strategies: " + ", ".join(available_bonus_strategies()))


@app.command()
def analyze(
    path: Path = typer.Argument(
        ...,
        help="JSON dataset with sellers, products and purchase_records.",
    ),
    top: Optional[int] = typer.Option(
        None,
        "--top",
        "-t",
        min=1,
        help="Number of top products per seller (default from settings).",
    ),
    revenue_strategy: Optional[str] = typer.Option(
        None,
        "--revenue-strategy",
        help="Registered revenue strategy name (default from settings).",
    ),
    bonus_strategy: Optional[str] = typer.Option(
        None,
        "--bonus-strategy",
        help="Registered bonus strategy name (default from settings).",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print reports as JSON instead of a table.",
    ),
) -> None:
    """
    Load a dataset, rank sellers by profit and print their reports.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    options = AnalysisOptions(
        calculate_revenue=revenue_strategy or settings.revenue_strategy,
        calculate_bonus=bonus_strategy or settings.bonus_strategy,
        top_products_limit=top or settings.top_products_limit,
    )

    try:
        data = load_sales_data(path)
        with profile_block("analyze") as stats:
            reports = analyze_sales_data(data, options)
    except InvalidInputError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    log.info("Analysis profiled", extra=stats.as_dict())

    if as_json:
        typer.echo(json.dumps([report.model_dump() for report in reports], indent=2))
    else:
        print_reports(reports, stats=stats)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
