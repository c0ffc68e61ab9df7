from __future__ import annotations

import pandas as pd

from salesmr.ingest import normalize_sales, parse_csv

HEADER = "YEAR,MONTH,SUPPLIER,ITEM CODE,ITEM DESCRIPTION,ITEM TYPE,RETAIL SALES,RETAIL TRANSFERS,WAREHOUSE SALES"


def row(
    code: str = "A001",
    retail: str = "0",
    warehouse: str = "0",
    year: str = "2020",
    month: str = "1",
    supplier: str = "ACME",
    description: str = "WIDGET",
    item_type: str = "WINE",
) -> str:
    return f"{year},{month},{supplier},{code},{description},{item_type},{retail},0,{warehouse}"


def csv_text(*rows: str) -> str:
    return "\n".join([HEADER, *rows]) + "\n"


def sales_frame(*rows: str) -> pd.DataFrame:
    return normalize_sales(parse_csv(csv_text(*rows)))
