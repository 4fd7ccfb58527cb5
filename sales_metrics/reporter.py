from __future__ import annotations

from typing import List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from sales_metrics.domain.models import SellerReport
from sales_metrics.utils.profiler import ProfileStats

TOP_PRODUCTS_SHOWN = 3


def _format_top_products(report: SellerReport) -> str:
    shown = report.top_products[:TOP_PRODUCTS_SHOWN]
    text = ", ".join(f"{p.sku} ×{p.quantity}" for p in shown)
    hidden = len(report.top_products) - len(shown)
    if hidden > 0:
        text = f"{text} [dim](+{hidden} more)[/dim]"
    return text


def print_reports(
    reports: List[SellerReport],
    stats: Optional[ProfileStats] = None,
    console: Optional[Console] = None,
) -> None:
    """
    Render seller reports as a rich table.

    Rows keep the analyzer's ranking (profit descending). When profiling stats
    are given, the analysis duration is shown in the caption.
    """
    console = console or Console()

    if not reports:
        console.print("[yellow]No sellers with sales to display.[/yellow]")
        return

    caption = "Ranked by profit (descending)"
    if stats is not None:
        caption = f"{caption} │ analyzed in {stats.duration_seconds * 1000:.1f} ms"

    table = Table(
        title="Seller Performance",
        box=box.ROUNDED,
        caption=caption,
    )

    table.add_column("#", justify="right", style="dim")
    table.add_column("Seller", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Sales", justify="right", style="magenta")
    table.add_column("Revenue", justify="right", style="green")
    table.add_column("Profit", justify="right", style="bold green")
    table.add_column("Bonus", justify="right", style="yellow")
    table.add_column("Top products")

    for rank, report in enumerate(reports, start=1):
        table.add_row(
            str(rank),
            report.seller_id,
            report.name,
            f"{report.sales_count:,}",
            f"{report.revenue:,.2f}",
            f"{report.profit:,.2f}",
            f"{report.bonus:,.2f}",
            _format_top_products(report),
        )

    console.print(table)


__all__ = ["print_reports"]
