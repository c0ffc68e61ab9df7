#!/usr/bin/env python3
"""
Low-selling products: items whose total sales fall below a threshold.

Every record with an item code is mapped, zero sales included, so products
that never sold still show up. Transactions only count positive sales.

Urgency tiers (t = threshold):
- URGENT: total == 0
- HIGH:   0 < total < 0.2 t
- MEDIUM: 0.2 t <= total < 0.6 t
- LOW:    0.6 t <= total < t

Run:
  low-selling-products [THRESHOLD]
"""
from __future__ import annotations

import argparse
import math
from typing import Dict, Optional

import pandas as pd

from salesmr.analyses.base import run_analysis
from salesmr.mapreduce import COUNT_POSITIVE, Emitter, MapReduceJob, column, non_blank
from salesmr.ranking import Order, below_threshold, rank, top_n
from salesmr.reporting import Report, money, percent, ratio
from salesmr.utils.config import AppConfig

TITLE = "Low-Selling Products"
DEFAULT_THRESHOLD = 100.0

JOB = MapReduceJob(
    name="low_selling_products",
    emitters=(
        Emitter(
            key=column("item_code"),
            value=column("total_sales"),
            include=lambda sales, keys, values: non_blank(keys),
        ),
    ),
    count_policy=COUNT_POSITIVE,
    metadata=("item_description", "item_type", "supplier"),
)


def threshold_value(text: str) -> float:
    """argparse type for the threshold argument; nan and inf are rejected."""
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid threshold: {text!r}") from None
    if not math.isfinite(value):
        raise argparse.ArgumentTypeError(f"threshold must be a finite number: {text!r}")
    return value


def summarize(sales: pd.DataFrame, threshold: float = DEFAULT_THRESHOLD) -> tuple[pd.DataFrame, pd.DataFrame]:
    """Return (all products, low-selling products sorted ascending by total)."""
    products = JOB.run(sales)
    low = rank(below_threshold(products, threshold), Order.TOTAL_ASC)
    return products, low


def urgency_tiers(low: pd.DataFrame, threshold: float) -> Dict[str, pd.DataFrame]:
    totals = low["total_sales"]
    return {
        "urgent": low[totals == 0],
        "high": low[(totals > 0) & (totals < threshold * 0.2)],
        "medium": low[(totals >= threshold * 0.2) & (totals < threshold * 0.6)],
        "low": low[totals >= threshold * 0.6],
    }


def _breakdown(low: pd.DataFrame, column_name: str) -> pd.DataFrame:
    if low.empty:
        return pd.DataFrame(columns=["count", "total_sales"])
    labels = low[column_name].where(low[column_name] != "", "Unknown")
    grouped = low.assign(_label=labels).groupby("_label", sort=False).agg(
        count=("total_sales", "size"), total_sales=("total_sales", "sum")
    )
    return grouped.sort_values("count", ascending=False, kind="stable")


def build_report(sales: pd.DataFrame, threshold: float = DEFAULT_THRESHOLD, display_rows: int = 20) -> str:
    products, low = summarize(sales, threshold)
    report = Report()

    report.section(f"LOW-SELLING PRODUCTS (< {money(threshold)})")
    report.line(f"Found {len(low)} products that need marketing attention")
    report.line()
    report.table(
        "Rank | Item Code | Total Sales | Transactions | Item Type | Description",
        (
            f"{idx:>4} | {code:<9} | {money(row.total_sales):<11} | {int(row.transaction_count):<12} | "
            f"{row.item_type or 'N/A':<9} | {row.item_description or 'No description'}"
            for idx, (code, row) in enumerate(top_n(low, display_rows).iterrows(), start=1)
        ),
    )
    if len(low) > display_rows:
        report.line(f"... and {len(low) - display_rows} more products")

    tiers = urgency_tiers(low, threshold)
    report.line()
    report.line(f"🚨 CRITICAL: {len(tiers['urgent'])} products with ZERO sales need immediate attention!")

    report.section("LOW-SELLING PRODUCTS BY CATEGORY")
    for category, row in _breakdown(low, "item_type").iterrows():
        report.line(f"{category}: {int(row['count'])} products, avg {money(ratio(row['total_sales'], row['count']))} sales")

    report.section("SUPPLIERS WITH MOST LOW-SELLING PRODUCTS")
    suppliers = top_n(_breakdown(low, "supplier"), 10)
    for idx, (supplier, row) in enumerate(suppliers.iterrows(), start=1):
        report.line(
            f"{idx}. {supplier}: {int(row['count'])} low-selling products, "
            f"avg {money(ratio(row['total_sales'], row['count']))}"
        )

    totals = low["total_sales"]
    report.section("MARKETING RECOMMENDATIONS")
    report.line("🎯 IMMEDIATE ACTION NEEDED:")
    if len(tiers["urgent"]):
        report.line(f"   • {len(tiers['urgent'])} products with zero sales - consider discontinuation or aggressive promotion")
    very_low = int(((totals > 0) & (totals < threshold * 0.1)).sum())
    if very_low:
        report.line(f"   • {very_low} products with sales < ${threshold * 0.1:.0f} - urgent marketing push needed")
    moderate = int(((totals >= threshold * 0.1) & (totals < threshold)).sum())
    if moderate:
        report.line(f"   • {moderate} products with moderate low sales - targeted campaigns recommended")

    report.line()
    report.line("📊 STRATEGIC INSIGHTS:")
    report.line(f"   • {percent(len(low), len(products)):.1f}% of products are underperforming")
    revenue_share = percent(totals.sum(), products["total_sales"].sum())
    report.line(f"   • Low-selling products represent {revenue_share:.2f}% of total revenue")

    report.section("PRODUCTS THAT NEED A MARKETING PUSH")
    report.line(f"{len(low)} products identified for marketing intervention:")
    report.line(f"🔴 URGENT ({len(tiers['urgent'])}): Zero sales products")
    report.line(f"🟠 HIGH ({len(tiers['high'])}): Very low sales (< ${threshold * 0.2:.0f})")
    report.line(f"🟡 MEDIUM ({len(tiers['medium'])}): Low sales (${threshold * 0.2:.0f} - ${threshold * 0.6:.0f})")
    report.line(
        f"🟢 LOW ({len(tiers['low'])}): Below threshold but showing activity "
        f"(${threshold * 0.6:.0f} - ${threshold:g})"
    )
    return report.render()


def build(sales: pd.DataFrame, config: AppConfig, threshold: Optional[float] = None) -> str:
    if threshold is None:
        threshold = config.reports.low_selling_threshold
    return build_report(sales, threshold, config.reports.low_selling_display_rows)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Products selling below a threshold.")
    parser.add_argument(
        "threshold",
        nargs="?",
        type=threshold_value,
        default=None,
        help="Sales threshold (defaults to reports.low_selling_threshold, 100)",
    )
    args = parser.parse_args(argv)
    return run_analysis(TITLE, lambda sales, config: build(sales, config, args.threshold))


if __name__ == "__main__":
    raise SystemExit(main())
