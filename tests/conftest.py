from __future__ import annotations

from pathlib import Path

import pytest

from factories import csv_text
from salesmr.utils.config import load_config


@pytest.fixture
def write_dataset(tmp_path: Path):
    def _write(*rows: str) -> Path:
        path = tmp_path / "dataset.csv"
        path.write_text(csv_text(*rows), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    for var in ("SALES_DATASET", "LOW_SALES_THRESHOLD", "SALESMR_CONFIG"):
        monkeypatch.delenv(var, raising=False)
    load_config.cache_clear()
    yield
    load_config.cache_clear()
