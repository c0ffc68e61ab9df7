"""
Configurable map/reduce engine shared by every analysis.

A job is described by one or more emitters (key, value, inclusion predicate),
a transaction count policy and the metadata columns to carry along. The map
phase turns normalized sales into an ordered frame of emitted (key, value)
pairs; the reduce phase collapses each key into total, count and average.

Group order is first-seen order in the input and contributions keep input
order, so downstream stable sorts break ties deterministically.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

import pandas as pd

logger = logging.getLogger(__name__)

Extractor = Callable[[pd.DataFrame], pd.Series]
Predicate = Callable[[pd.DataFrame, pd.Series, pd.Series], pd.Series]

COUNT_ALL = "all"
COUNT_POSITIVE = "positive"

SUMMARY_COLUMNS = ["total_sales", "transaction_count", "average_sale"]


def column(name: str) -> Extractor:
    return lambda sales: sales[name]


def constant(value: str) -> Extractor:
    return lambda sales: pd.Series(value, index=sales.index, dtype=object)


def non_blank(keys: pd.Series) -> pd.Series:
    return keys.astype(str).str.strip() != ""


@dataclass(frozen=True)
class Emitter:
    key: Extractor
    value: Extractor
    include: Optional[Predicate] = None

    def emit(self, sales: pd.DataFrame, metadata: Tuple[str, ...]) -> pd.DataFrame:
        keys = self.key(sales)
        values = self.value(sales).astype(float)
        emitted = pd.DataFrame({"key": keys, "value": values}, index=sales.index)
        for name in metadata:
            emitted[name] = sales[name]
        if self.include is not None:
            mask = self.include(sales, keys, values).astype(bool)
            emitted = emitted[mask]
        return emitted


@dataclass(frozen=True)
class MapReduceJob:
    name: str
    emitters: Tuple[Emitter, ...]
    count_policy: str = COUNT_ALL
    metadata: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.emitters:
            raise ValueError(f"{self.name}: at least one emitter is required")
        if self.count_policy not in (COUNT_ALL, COUNT_POSITIVE):
            raise ValueError(f"{self.name}: unknown count policy {self.count_policy!r}")

    def map(self, sales: pd.DataFrame) -> pd.DataFrame:
        """Emit (key, value, *metadata) rows in input order."""
        frames = [emitter.emit(sales, self.metadata) for emitter in self.emitters]
        if len(frames) == 1:
            mapped = frames[0]
        else:
            # Interleave by record position; emitter order breaks ties.
            mapped = pd.concat(frames).sort_index(kind="stable")
        return mapped.reset_index(drop=True)

    def reduce(self, mapped: pd.DataFrame) -> pd.DataFrame:
        """Collapse each key into total_sales, transaction_count, average_sale."""
        columns = SUMMARY_COLUMNS + list(self.metadata)
        if mapped.empty:
            empty = pd.DataFrame(columns=columns, index=pd.Index([], name="key", dtype=object))
            return empty.astype({"total_sales": float, "transaction_count": int, "average_sale": float})

        counted = mapped.assign(_counted=mapped["value"] > 0 if self.count_policy == COUNT_POSITIVE else True)
        aggregations = {
            "total_sales": ("value", "sum"),
            "transaction_count": ("_counted", "sum"),
        }
        for name in self.metadata:
            aggregations[name] = (name, "first")
        summary = counted.groupby("key", sort=False).agg(**aggregations)
        summary["transaction_count"] = summary["transaction_count"].astype(int)
        counts = summary["transaction_count"]
        summary["average_sale"] = (summary["total_sales"] / counts.where(counts > 0)).fillna(0.0)
        return summary[columns]

    def run(self, sales: pd.DataFrame) -> pd.DataFrame:
        mapped = self.map(sales)
        logger.info("%s: map phase completed, %d unique keys", self.name, mapped["key"].nunique())
        summary = self.reduce(mapped)
        logger.info("%s: reduce phase completed", self.name)
        return summary


def groups(mapped: pd.DataFrame) -> Dict[str, List[float]]:
    """Contribution lists per key, in first-seen key order."""
    out: Dict[str, List[float]] = {}
    for key, value in zip(mapped["key"], mapped["value"]):
        out.setdefault(key, []).append(float(value))
    return out
