from __future__ import annotations

from enum import Enum

import pandas as pd


class Order(str, Enum):
    CHRONOLOGICAL = "chronological"
    TOTAL_DESC = "total_desc"
    TOTAL_ASC = "total_asc"


def rank(summary: pd.DataFrame, order: Order) -> pd.DataFrame:
    """Canonical report order. Stable: ties keep first-seen key order."""
    if order is Order.CHRONOLOGICAL:
        return summary.sort_index(kind="stable")
    ascending = order is Order.TOTAL_ASC
    return summary.sort_values("total_sales", ascending=ascending, kind="stable")


def top_n(ranked: pd.DataFrame, n: int) -> pd.DataFrame:
    if n < 0:
        raise ValueError(f"top_n expects a non-negative count, got {n}")
    return ranked.head(n)


def below_threshold(summary: pd.DataFrame, threshold: float) -> pd.DataFrame:
    return summary[summary["total_sales"] < threshold]


def share(values: pd.Series) -> pd.Series:
    """Percentage of the grand total per row; 0.0 everywhere when the total is 0."""
    total = values.sum()
    if total == 0:
        return pd.Series(0.0, index=values.index)
    return values / total * 100


def market_share(summary: pd.DataFrame) -> pd.Series:
    return share(summary["total_sales"])
