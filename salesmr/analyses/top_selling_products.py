#!/usr/bin/env python3
"""
Top selling products: total retail + warehouse sales per ITEM CODE.

Run:
  top-selling-products
"""
from __future__ import annotations

import argparse

import pandas as pd

from salesmr.analyses.base import run_analysis
from salesmr.mapreduce import Emitter, MapReduceJob, column, non_blank
from salesmr.ranking import Order, rank, top_n
from salesmr.reporting import Report, money, percent, ratio
from salesmr.utils.config import AppConfig

TITLE = "Top Selling Products"

JOB = MapReduceJob(
    name="top_selling_products",
    emitters=(
        Emitter(
            key=column("item_code"),
            value=column("total_sales"),
            include=lambda sales, keys, values: non_blank(keys) & (values > 0),
        ),
    ),
    metadata=("item_description",),
)


def summarize(sales: pd.DataFrame) -> pd.DataFrame:
    return rank(JOB.run(sales), Order.TOTAL_DESC)


def build_report(sales: pd.DataFrame, limit: int = 10) -> str:
    ranked = summarize(sales)
    top = top_n(ranked, limit)
    report = Report()

    report.section(f"TOP {limit} SELLING PRODUCTS")
    report.table(
        "Rank | Item Code | Total Sales (Retail + Warehouse) | Description",
        (
            f"{idx:>4} | {code:<9} | {money(row.total_sales):<32} | {row.item_description or 'No description'}"
            for idx, (code, row) in enumerate(top.iterrows(), start=1)
        ),
    )

    total_revenue = ranked["total_sales"].sum()
    top_revenue = top["total_sales"].sum()
    report.section("SUMMARY STATISTICS")
    report.line(f"Total unique products: {len(ranked)}")
    report.line(f"Total revenue: {money(total_revenue)}")
    report.line(f"Average sales per product: {money(ratio(total_revenue, len(ranked)))}")
    report.line(f"Top {limit} products contribute: {percent(top_revenue, total_revenue):.2f}% of total revenue")
    return report.render()


def build(sales: pd.DataFrame, config: AppConfig) -> str:
    return build_report(sales, config.reports.top_products)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Top selling products by total sales.")
    parser.parse_args(argv)
    return run_analysis(TITLE, build)


if __name__ == "__main__":
    raise SystemExit(main())
