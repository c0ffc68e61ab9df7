from __future__ import annotations

import math
from typing import Dict

import pandas as pd

TEXT_FIELDS: Dict[str, str] = {
    "ITEM CODE": "item_code",
    "ITEM DESCRIPTION": "item_description",
    "ITEM TYPE": "item_type",
    "SUPPLIER": "supplier",
    "YEAR": "year",
    "MONTH": "month",
}
AMOUNT_FIELDS: Dict[str, str] = {
    "RETAIL SALES": "retail_sales",
    "WAREHOUSE SALES": "warehouse_sales",
}

SALES_COLUMNS = [*TEXT_FIELDS.values(), *AMOUNT_FIELDS.values(), "total_sales"]


def to_amount(series: pd.Series) -> pd.Series:
    """Parse raw sales values; anything unparseable or non-finite is 0.0."""
    values = pd.to_numeric(series.astype(str).str.strip(), errors="coerce").astype(float)
    values = values.where(values.abs() != math.inf)
    return values.fillna(0.0)


def normalize_sales(records: pd.DataFrame) -> pd.DataFrame:
    """Build the normalized sales frame from raw string records.

    Columns absent from the header come out as "" (text) or 0.0 (amounts).
    `total_sales` is always `retail_sales + warehouse_sales`.
    """
    out = pd.DataFrame(index=records.index)
    for raw, name in TEXT_FIELDS.items():
        if raw in records.columns:
            out[name] = records[raw].astype(str)
        else:
            out[name] = ""
    for raw, name in AMOUNT_FIELDS.items():
        if raw in records.columns:
            out[name] = to_amount(records[raw])
        else:
            out[name] = 0.0
    out["total_sales"] = out["retail_sales"] + out["warehouse_sales"]
    return out[SALES_COLUMNS]
