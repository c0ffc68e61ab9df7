"""
Ingestion helpers: read the sales CSV and normalize its amount fields.
"""

from .csv_reader import DatasetError, parse_csv, read_dataset, to_records
from .normalizer import SALES_COLUMNS, normalize_sales

__all__ = [
    "DatasetError",
    "SALES_COLUMNS",
    "normalize_sales",
    "parse_csv",
    "read_dataset",
    "to_records",
]
