"""
CSV reader for the sales dataset.

The whole file is loaded into a string-typed DataFrame, one row per record,
columns named after the header row. Parsing is lenient on column count:
short rows are padded with "" and extra trailing fields are dropped.
"""
from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Dict, List, Union

import pandas as pd

logger = logging.getLogger(__name__)


class DatasetError(ValueError):
    """Raised when the dataset exists but cannot be parsed into records."""


def _read(source: Union[Path, io.StringIO], encoding: str) -> pd.DataFrame:
    try:
        header = pd.read_csv(source, nrows=0, dtype=str, encoding=encoding)
    except pd.errors.EmptyDataError as exc:
        raise DatasetError("Dataset has no header row") from exc
    except UnicodeDecodeError as exc:
        raise DatasetError(f"Dataset is not valid {encoding}: {exc}") from exc
    width = len(header.columns)
    truncated = 0

    def _truncate(bad_line: List[str]) -> List[str]:
        nonlocal truncated
        truncated += 1
        return bad_line[:width]

    if isinstance(source, io.StringIO):
        source.seek(0)
    try:
        df = pd.read_csv(
            source,
            dtype=str,
            encoding=encoding,
            keep_default_na=False,
            skip_blank_lines=True,
            index_col=False,
            engine="python",
            on_bad_lines=_truncate,
        )
    except (pd.errors.ParserError, UnicodeDecodeError) as exc:
        raise DatasetError(f"Unable to parse dataset: {exc}") from exc

    if truncated:
        logger.warning("Dropped extra trailing fields on %d rows", truncated)
    df.columns = [str(c).strip().lstrip("\ufeff") for c in df.columns]
    return df.fillna("").reset_index(drop=True)


def parse_csv(content: str) -> pd.DataFrame:
    """Parse raw CSV text (header row first) into a string DataFrame."""
    if not content.strip():
        raise DatasetError("Dataset has no header row")
    return _read(io.StringIO(content.strip()), encoding="utf-8")


def read_dataset(path: Union[str, Path], encoding: str = "utf-8") -> pd.DataFrame:
    csv_path = Path(path)
    if not csv_path.is_file():
        raise FileNotFoundError(f"Dataset not found: {csv_path}")
    return _read(csv_path, encoding=encoding)


def to_records(df: pd.DataFrame) -> List[Dict[str, str]]:
    return df.to_dict(orient="records")
