#!/usr/bin/env python3
"""
Monthly sales trends: total sales per (YEAR, MONTH), reported chronologically
with month-over-month growth, best/worst months and a seasonal breakdown.

Run:
  monthly-sales-trends
"""
from __future__ import annotations

import argparse
from typing import Dict, List, Optional

import pandas as pd

from salesmr.analyses.base import run_analysis
from salesmr.mapreduce import Emitter, MapReduceJob, column
from salesmr.ranking import Order, rank
from salesmr.reporting import Report, growth, money, ratio, units
from salesmr.utils.config import AppConfig

TITLE = "Monthly Sales Trends"

MONTH_NAMES = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
SEASONS = {3: "Spring", 4: "Spring", 5: "Spring", 6: "Summer", 7: "Summer", 8: "Summer",
           9: "Fall", 10: "Fall", 11: "Fall"}


def month_key(sales: pd.DataFrame) -> pd.Series:
    return sales["year"] + "-" + sales["month"].str.rjust(2, "0")


JOB = MapReduceJob(
    name="monthly_sales_trends",
    emitters=(
        Emitter(
            key=month_key,
            value=column("total_sales"),
            include=lambda sales, keys, values: (values > 0) & (sales["year"] != "") & (sales["month"] != ""),
        ),
    ),
)


def _month_number(month: str) -> Optional[int]:
    try:
        return int(month)
    except ValueError:
        return None


def month_name(month: str) -> str:
    number = _month_number(month)
    if number is not None and 1 <= number <= 12:
        return MONTH_NAMES[number - 1]
    return month


def season(month: str) -> str:
    # Anything outside Mar-Nov, unparseable months included, counts as Winter.
    return SEASONS.get(_month_number(month) or 0, "Winter")


def summarize(sales: pd.DataFrame) -> pd.DataFrame:
    return rank(JOB.run(sales), Order.CHRONOLOGICAL)


def growth_labels(totals: pd.Series) -> List[str]:
    labels: List[str] = []
    previous: Optional[float] = None
    for total in totals:
        labels.append(growth(total, previous))
        previous = total
    return labels


def build_report(sales: pd.DataFrame) -> str:
    months = summarize(sales)
    report = Report()

    rows = []
    for (key, row), growth_str in zip(months.iterrows(), growth_labels(months["total_sales"])):
        year, _, month = key.partition("-")
        rows.append(
            f"{year}-{month_name(month):<3} | {money(row.total_sales):<14} | "
            f"{int(row.transaction_count):<12} | {money(row.average_sale):<8} | {growth_str}"
        )
    report.section("MONTHLY SALES TRENDS")
    report.table("Month    | Total Sales    | Transactions | Avg Sale | Growth", rows)

    report.section("FORMATTED OUTPUT")
    for key, row in months.iterrows():
        report.line(f"{key} → {units(row.total_sales)} units")

    total_revenue = months["total_sales"].sum()
    total_transactions = int(months["transaction_count"].sum())
    report.section("SUMMARY STATISTICS")
    report.line(f"Total months analyzed: {len(months)}")
    report.line(f"Total revenue across all months: {money(total_revenue)}")
    report.line(f"Average monthly revenue: {money(ratio(total_revenue, len(months)))}")
    report.line(f"Total transactions: {total_transactions:,}")

    if not months.empty:
        # idxmax/idxmin return the first occurrence, so ties go to the earlier month.
        best = months["total_sales"].idxmax()
        worst = months["total_sales"].idxmin()
        report.line()
        report.line(f"🏆 Best month: {best} with {money(months.at[best, 'total_sales'])}")
        report.line(f"📉 Worst month: {worst} with {money(months.at[worst, 'total_sales'])}")

    seasonal: Dict[str, Dict[str, float]] = {}
    for key, row in months.iterrows():
        bucket = seasonal.setdefault(season(key.partition("-")[2]), {"total_sales": 0.0, "months": 0})
        bucket["total_sales"] += row.total_sales
        bucket["months"] += 1
    report.section("SEASONAL ANALYSIS")
    for name, data in sorted(seasonal.items(), key=lambda item: item[1]["total_sales"], reverse=True):
        report.line(
            f"{name}: {money(data['total_sales'])} total, "
            f"{money(ratio(data['total_sales'], data['months']))} avg/month"
        )
    return report.render()


def build(sales: pd.DataFrame, config: AppConfig) -> str:
    return build_report(sales)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Monthly sales trends with growth and seasonality.")
    parser.parse_args(argv)
    return run_analysis(TITLE, build)


if __name__ == "__main__":
    raise SystemExit(main())
