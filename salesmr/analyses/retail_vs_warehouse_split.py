#!/usr/bin/env python3
"""
Retail vs warehouse sales split.

Each record emits ("retail", RETAIL SALES) and ("warehouse", WAREHOUSE SALES);
only strictly positive amounts are counted as transactions of that channel.

Run:
  retail-vs-warehouse-split
"""
from __future__ import annotations

import argparse

import pandas as pd

from salesmr.analyses.base import run_analysis
from salesmr.mapreduce import Emitter, MapReduceJob, column, constant
from salesmr.ranking import Order, market_share, rank
from salesmr.reporting import Report, money, percent, ratio, units
from salesmr.utils.config import AppConfig

TITLE = "Retail vs Warehouse Sales Split"

RETAIL = "retail"
WAREHOUSE = "warehouse"
DOMINANCE_PCT = 70.0

JOB = MapReduceJob(
    name="retail_vs_warehouse_split",
    emitters=(
        Emitter(key=constant(RETAIL), value=column("retail_sales"), include=lambda sales, keys, values: values > 0),
        Emitter(key=constant(WAREHOUSE), value=column("warehouse_sales"), include=lambda sales, keys, values: values > 0),
    ),
)


def summarize(sales: pd.DataFrame) -> pd.DataFrame:
    return rank(JOB.run(sales), Order.TOTAL_DESC)


def business_model(retail_share: float, warehouse_share: float) -> str:
    if retail_share > DOMINANCE_PCT:
        return "📊 Retail-dominant business model - focus on consumer sales"
    if warehouse_share > DOMINANCE_PCT:
        return "📊 Wholesale-dominant business model - focus on B2B sales"
    return "📊 Balanced distribution model - diversified sales channels"


def pricing(retail_avg: float, warehouse_avg: float) -> str:
    if retail_avg > warehouse_avg * 2:
        return "💰 Retail commands premium pricing"
    if warehouse_avg > retail_avg * 2:
        return "💰 Warehouse sales involve larger volume transactions"
    return "💰 Similar pricing structure across channels"


def build_report(sales: pd.DataFrame) -> str:
    channels = summarize(sales)
    shares = market_share(channels)
    report = Report()

    report.section("RETAIL VS WAREHOUSE SALES SPLIT")
    report.table(
        "Channel   | Total Sales    | Transactions | Avg Sale   | Market Share",
        (
            f"{channel:<9} | {money(row.total_sales):<14} | {int(row.transaction_count):<12} | "
            f"{money(row.average_sale):<10} | {shares[channel]:.1f}%"
            for channel, row in channels.iterrows()
        ),
    )

    report.section("FORMATTED OUTPUT")
    for channel in (RETAIL, WAREHOUSE):
        total = channels.at[channel, "total_sales"] if channel in channels.index else 0.0
        report.line(f"{channel.capitalize()} = {units(total)} units")

    total_revenue = channels["total_sales"].sum()
    total_transactions = int(channels["transaction_count"].sum())
    report.section("DETAILED ANALYSIS")
    report.line(f"Total combined revenue: {money(total_revenue)}")
    report.line(f"Total combined transactions: {total_transactions:,}")
    report.line(f"Overall average sale: {money(ratio(total_revenue, total_transactions))}")

    if RETAIL not in channels.index or WAREHOUSE not in channels.index:
        return report.render()

    retail = channels.loc[RETAIL]
    warehouse = channels.loc[WAREHOUSE]
    retail_share = shares[RETAIL]
    warehouse_share = shares[WAREHOUSE]
    dominant = "Retail" if retail_share > warehouse_share else "Warehouse"
    leader_share, other_share = max(retail_share, warehouse_share), min(retail_share, warehouse_share)

    report.section("COMPARATIVE INSIGHTS")
    report.line(f"Dominant channel: {dominant} ({leader_share:.1f}% vs {other_share:.1f}%)")
    report.line(
        f"Retail dominance: {'YES' if retail_share > warehouse_share else 'NO'} "
        f"({retail_share:.1f}% vs {warehouse_share:.1f}%)"
    )
    report.line(f"Retail avg sale vs Warehouse: {money(retail.average_sale)} vs {money(warehouse.average_sale)}")
    report.line(
        f"Transaction distribution: Retail {percent(retail.transaction_count, total_transactions):.1f}%, "
        f"Warehouse {percent(warehouse.transaction_count, total_transactions):.1f}%"
    )
    more_efficient = "Retail" if retail.average_sale > warehouse.average_sale else "Warehouse"
    difference = abs(retail.average_sale - warehouse.average_sale)
    report.line(f"More efficient channel: {more_efficient} ({difference:.2f} higher avg sale)")

    report.section("BUSINESS INSIGHTS")
    report.line(business_model(retail_share, warehouse_share))
    report.line(pricing(retail.average_sale, warehouse.average_sale))
    return report.render()


def build(sales: pd.DataFrame, config: AppConfig) -> str:
    return build_report(sales)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Retail vs warehouse sales split.")
    parser.parse_args(argv)
    return run_analysis(TITLE, build)


if __name__ == "__main__":
    raise SystemExit(main())
