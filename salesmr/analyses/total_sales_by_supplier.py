#!/usr/bin/env python3
"""
Total sales by supplier, with revenue concentration of the top suppliers.

Run:
  total-sales-by-supplier
"""
from __future__ import annotations

import argparse

import pandas as pd

from salesmr.analyses.base import run_analysis
from salesmr.mapreduce import Emitter, MapReduceJob, column, non_blank
from salesmr.ranking import Order, rank, top_n
from salesmr.reporting import Report, money, percent, ratio, units
from salesmr.utils.config import AppConfig

TITLE = "Total Sales by Supplier"

JOB = MapReduceJob(
    name="total_sales_by_supplier",
    emitters=(
        Emitter(
            key=column("supplier"),
            value=column("total_sales"),
            include=lambda sales, keys, values: non_blank(keys) & (values > 0),
        ),
    ),
)


def summarize(sales: pd.DataFrame) -> pd.DataFrame:
    return rank(JOB.run(sales), Order.TOTAL_DESC)


def build_report(sales: pd.DataFrame, limit: int = 15, formatted_rows: int = 10) -> str:
    ranked = summarize(sales)
    top = top_n(ranked, limit)
    report = Report()

    report.section("TOP SUPPLIERS BY TOTAL SALES")
    report.table(
        "Rank | Supplier Name                           | Total Sales",
        (
            f"{idx:>4} | {supplier:<39} | {money(row.total_sales)}"
            for idx, (supplier, row) in enumerate(top.iterrows(), start=1)
        ),
    )

    report.section("FORMATTED OUTPUT")
    for supplier, row in top_n(top, formatted_rows).iterrows():
        report.line(f"{supplier} → {units(row.total_sales)} units")

    total_revenue = ranked["total_sales"].sum()
    report.section("SUMMARY STATISTICS")
    report.line(f"Total suppliers: {len(ranked)}")
    report.line(f"Total revenue across all suppliers: {money(total_revenue)}")
    report.line(f"Average sales per supplier: {money(ratio(total_revenue, len(ranked)))}")
    for n in (10, 5):
        top_revenue = top_n(ranked, n)["total_sales"].sum()
        report.line(f"Top {n} suppliers contribute: {percent(top_revenue, total_revenue):.2f}% of total revenue")
    return report.render()


def build(sales: pd.DataFrame, config: AppConfig) -> str:
    return build_report(sales, config.reports.top_suppliers, config.reports.supplier_formatted_rows)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Suppliers ranked by total sales.")
    parser.parse_args(argv)
    return run_analysis(TITLE, build)


if __name__ == "__main__":
    raise SystemExit(main())
