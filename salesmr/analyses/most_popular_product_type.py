#!/usr/bin/env python3
"""
Most popular product type: total sales per ITEM TYPE with market share.

Run:
  most-popular-product-type
"""
from __future__ import annotations

import argparse

import pandas as pd

from salesmr.analyses.base import run_analysis
from salesmr.mapreduce import Emitter, MapReduceJob, column, non_blank
from salesmr.ranking import Order, rank, share
from salesmr.reporting import Report, money, ratio, units
from salesmr.utils.config import AppConfig

TITLE = "Most Popular Product Type"

JOB = MapReduceJob(
    name="most_popular_product_type",
    emitters=(
        Emitter(
            key=column("item_type"),
            value=column("total_sales"),
            include=lambda sales, keys, values: non_blank(keys) & (values > 0),
        ),
    ),
)


def summarize(sales: pd.DataFrame) -> pd.DataFrame:
    return rank(JOB.run(sales), Order.TOTAL_DESC)


def build_report(sales: pd.DataFrame) -> str:
    types = summarize(sales)
    report = Report()

    report.section("PRODUCT TYPES BY TOTAL SALES")
    report.table(
        "Rank | Item Type      | Total Sales    | Transactions | Avg Sale",
        (
            f"{idx:>4} | {item_type:<14} | {money(row.total_sales):<14} | "
            f"{int(row.transaction_count):<12} | {money(row.average_sale)}"
            for idx, (item_type, row) in enumerate(types.iterrows(), start=1)
        ),
    )

    report.section("FORMATTED OUTPUT")
    for item_type, row in types.iterrows():
        report.line(f"{item_type} → {units(row.total_sales)} units")

    total_revenue = types["total_sales"].sum()
    total_transactions = int(types["transaction_count"].sum())
    report.section("SUMMARY STATISTICS")
    report.line(f"Total product types: {len(types)}")
    report.line(f"Total revenue across all types: {money(total_revenue)}")
    report.line(f"Total transactions: {total_transactions:,}")
    report.line(f"Overall average sale: {money(ratio(total_revenue, total_transactions))}")

    revenue_share = share(types["total_sales"])
    transaction_share = share(types["transaction_count"].astype(float))
    report.section("MARKET SHARE ANALYSIS")
    for item_type in types.index:
        report.line(
            f"{item_type}: {revenue_share[item_type]:.1f}% of revenue, "
            f"{transaction_share[item_type]:.1f}% of transactions"
        )

    if not types.empty:
        winner = types.index[0]
        report.line()
        report.line(
            f"🏆 WINNER: {winner} is the most popular product type with "
            f"{units(types.iloc[0]['total_sales'])} units sold!"
        )
    return report.render()


def build(sales: pd.DataFrame, config: AppConfig) -> str:
    return build_report(sales)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Product types ranked by total sales.")
    parser.parse_args(argv)
    return run_analysis(TITLE, build)


if __name__ == "__main__":
    raise SystemExit(main())
